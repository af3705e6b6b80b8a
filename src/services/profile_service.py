"""Profile service: business logic for the one-per-user profile document.

Top-level fields are written with a single atomic upsert. Experience and
education edits go through fetch → edit in memory → whole-document save,
so two concurrent nested edits on the same profile can lose one update.
"""

import logging

from domain.model.errors import NotFoundError
from domain.model.profile import Education, Experience, Profile, ProfileUpdate
from domain.model.user import User
from port.profile_repository import ProfileRepository
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def parse_skills(raw: str) -> list[str]:
    """'go, rust, c++' → ['go', 'rust', 'c++'] (order kept, blanks dropped)."""
    return [skill.strip() for skill in raw.split(',') if skill.strip()]


# ── reads ────────────────────────────────────────────────


def get_own(repo: ProfileRepository, user_id: str) -> Profile:
    profile = repo.get_by_user(user_id)
    if not profile:
        raise NotFoundError("There is no profile for this user")
    return profile


def get_by_user(repo: ProfileRepository, user_id: str) -> Profile:
    profile = repo.get_by_user(user_id)
    if not profile:
        raise NotFoundError("Profile not found")
    return profile


def get_all(repo: ProfileRepository) -> list[Profile]:
    return repo.find_all()


def owners_of(user_repo: UserRepository, profiles: list[Profile]) -> dict[str, User]:
    """Owning users keyed by id, for embedding name/avatar in responses."""
    return user_repo.get_by_ids([p.user_id for p in profiles])


# ── writes ───────────────────────────────────────────────


def upsert(repo: ProfileRepository, user_id: str, update: ProfileUpdate) -> Profile:
    """Create the caller's profile or replace its supplied top-level fields."""
    profile = repo.upsert(user_id, update)
    logger.info("Profile saved", extra={"userId": user_id, "profileId": profile.id})
    return profile


def add_experience(repo: ProfileRepository, user_id: str, entry: Experience) -> Profile:
    profile = get_own(repo, user_id)
    profile.add_experience(entry)
    repo.save(profile)
    logger.info("Experience added", extra={"userId": user_id, "experienceId": entry.id})
    return profile


def remove_experience(repo: ProfileRepository, user_id: str, entry_id: str) -> Profile:
    """Remove by entry id; an unknown id leaves the profile unchanged."""
    profile = get_own(repo, user_id)
    if profile.remove_experience(entry_id):
        repo.save(profile)
        logger.info("Experience removed", extra={"userId": user_id, "experienceId": entry_id})
    return profile


def add_education(repo: ProfileRepository, user_id: str, entry: Education) -> Profile:
    profile = get_own(repo, user_id)
    profile.add_education(entry)
    repo.save(profile)
    logger.info("Education added", extra={"userId": user_id, "educationId": entry.id})
    return profile


def remove_education(repo: ProfileRepository, user_id: str, entry_id: str) -> Profile:
    """Remove by entry id; an unknown id leaves the profile unchanged."""
    profile = get_own(repo, user_id)
    if profile.remove_education(entry_id):
        repo.save(profile)
        logger.info("Education removed", extra={"userId": user_id, "educationId": entry_id})
    return profile


def delete_own(
    repo: ProfileRepository,
    user_repo: UserRepository,
    user_id: str,
) -> None:
    """Delete the caller's profile and account.

    The caller's posts are kept.
    """
    # TODO: decide whether account deletion should also remove the user's posts and comments
    repo.delete_by_user(user_id)
    user_repo.delete(user_id)
    logger.info("Account deleted", extra={"userId": user_id})
