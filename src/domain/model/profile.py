# domain/model/profile.py

import uuid
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone


SOCIAL_PLATFORMS = ('youtube', 'twitter', 'facebook', 'linkedin', 'instagram')


# ── Value Objects ────────────────────────────────────────


@dataclass(frozen=True)
class SocialLinks:
    """Platform name → URL. Every platform is optional."""
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @classmethod
    def from_supplied(cls, **links: str | None) -> 'SocialLinks':
        """Build from whatever subset was supplied; blank values stay unset."""
        return cls(**{k: v for k, v in links.items() if k in SOCIAL_PLATFORMS and v})

    def as_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class ProfileUpdate:
    """Top-level profile fields supplied by the owner on upsert.

    None means "not supplied": the stored value is left as it is.
    `social` is always assembled, so it replaces the stored links as a whole.
    """
    status: str
    skills: list[str]
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: SocialLinks = field(default_factory=SocialLinks)

    def supplied_fields(self) -> dict:
        """Fields to write, keyed by Profile attribute name."""
        fields = {
            'status': self.status,
            'skills': list(self.skills),
            'company': self.company,
            'website': self.website,
            'location': self.location,
            'bio': self.bio,
            'github_username': self.github_username,
        }
        fields = {k: v for k, v in fields.items() if v is not None}
        fields['social'] = self.social
        return fields


# ── Nested entries ───────────────────────────────────────


@dataclass
class Experience:
    """A single position in the owner's career history."""
    id: str
    title: str
    company: str
    from_date: date
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None

    @staticmethod
    def create(
        title: str,
        company: str,
        from_date: date,
        location: str | None = None,
        to_date: date | None = None,
        current: bool = False,
        description: str | None = None,
    ) -> 'Experience':
        return Experience(
            id=uuid.uuid4().hex,
            title=title,
            company=company,
            from_date=from_date,
            location=location,
            to_date=to_date,
            current=current,
            description=description,
        )


@dataclass
class Education:
    """A single school entry in the owner's education history."""
    id: str
    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None

    @staticmethod
    def create(
        school: str,
        degree: str,
        field_of_study: str,
        from_date: date,
        to_date: date | None = None,
        current: bool = False,
        description: str | None = None,
    ) -> 'Education':
        return Education(
            id=uuid.uuid4().hex,
            school=school,
            degree=degree,
            field_of_study=field_of_study,
            from_date=from_date,
            to_date=to_date,
            current=current,
            description=description,
        )


def _remove_by_id(entries: list, entry_id: str) -> bool:
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            del entries[index]
            return True
    return False


# ── Profile Domain Model ─────────────────────────────────


@dataclass
class Profile:
    """One profile per user, keyed by the owning user's id."""
    id: str
    user_id: str
    status: str
    created_at: datetime
    updated_at: datetime
    skills: list[str] = field(default_factory=list)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)

    # ── factory ───────────────────────────────────────────

    @staticmethod
    def create(user_id: str, update: ProfileUpdate) -> 'Profile':
        now = datetime.now(timezone.utc)
        profile = Profile(
            id=uuid.uuid4().hex,
            user_id=user_id,
            status=update.status,
            created_at=now,
            updated_at=now,
        )
        profile.apply(update)
        return profile

    # ── mutations ─────────────────────────────────────────

    def apply(self, update: ProfileUpdate) -> None:
        """Replace the supplied top-level fields; nested lists are untouched."""
        for name, value in update.supplied_fields().items():
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)

    def add_experience(self, entry: Experience) -> None:
        """Insert at the head (most recent first)."""
        self.experience.insert(0, entry)
        self.updated_at = datetime.now(timezone.utc)

    def remove_experience(self, entry_id: str) -> bool:
        """Remove the entry with this id. Returns False (no-op) if absent."""
        removed = _remove_by_id(self.experience, entry_id)
        if removed:
            self.updated_at = datetime.now(timezone.utc)
        return removed

    def add_education(self, entry: Education) -> None:
        """Insert at the head (most recent first)."""
        self.education.insert(0, entry)
        self.updated_at = datetime.now(timezone.utc)

    def remove_education(self, entry_id: str) -> bool:
        """Remove the entry with this id. Returns False (no-op) if absent."""
        removed = _remove_by_id(self.education, entry_id)
        if removed:
            self.updated_at = datetime.now(timezone.utc)
        return removed
