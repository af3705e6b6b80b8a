"""Pydantic models for API request/response."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


# Attribute names that clients send under a different JSON key
FIELD_ALIASES = {"from_date": "from", "to_date": "to"}


def _required(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    """Blank optional fields count as not supplied."""
    if value is None or not value.strip():
        return None
    return value.strip()


# ── Accounts ─────────────────────────────────────────────


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    name: Optional[str] = Field(None, validate_default=True)
    email: EmailStr
    password: Optional[str] = Field(None, validate_default=True)

    @field_validator('name')
    @classmethod
    def name_required(cls, v):
        return _required(v, "Name is required")

    @field_validator('password')
    @classmethod
    def password_length(cls, v):
        if v is None or len(v) < 6:
            raise ValueError("Please enter a password with 6 or more characters")
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Please enter a password of at most 72 bytes")
        return v


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: EmailStr
    password: Optional[str] = Field(None, validate_default=True)

    @field_validator('password')
    @classmethod
    def password_required(cls, v):
        return _required(v, "Password is required")


class TokenResponse(BaseModel):
    token: str


class UserResponse(BaseModel):
    """Account as returned to its owner (credential never included)."""
    id: str
    name: str
    email: str
    avatar: str
    created_at: datetime


class OwnerSummary(BaseModel):
    id: str
    name: str
    avatar: str


class MessageResponse(BaseModel):
    message: str


# ── Profiles ─────────────────────────────────────────────


class ProfileRequest(BaseModel):
    """Create-or-update payload. `skills` is a comma-separated string."""
    status: Optional[str] = Field(None, validate_default=True)
    skills: Optional[str] = Field(None, validate_default=True)
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator('status')
    @classmethod
    def status_required(cls, v):
        return _required(v, "Status is required")

    @field_validator('skills')
    @classmethod
    def skills_required(cls, v):
        return _required(v, "Skills is required")

    @field_validator(
        'company', 'website', 'location', 'bio', 'github_username',
        'youtube', 'twitter', 'facebook', 'linkedin', 'instagram',
    )
    @classmethod
    def blank_is_unset(cls, v):
        return _blank_to_none(v)


class ExperienceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, validate_default=True)
    company: Optional[str] = Field(None, validate_default=True)
    from_date: Optional[date] = Field(None, alias="from", validate_default=True)
    to_date: Optional[date] = Field(None, alias="to")
    location: Optional[str] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def title_required(cls, v):
        return _required(v, "Title is required")

    @field_validator('company')
    @classmethod
    def company_required(cls, v):
        return _required(v, "Company is required")

    @field_validator('from_date')
    @classmethod
    def from_required(cls, v):
        if v is None:
            raise ValueError("From date is required")
        return v


class EducationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: Optional[str] = Field(None, validate_default=True)
    degree: Optional[str] = Field(None, validate_default=True)
    field_of_study: Optional[str] = Field(None, validate_default=True)
    from_date: Optional[date] = Field(None, alias="from", validate_default=True)
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @field_validator('school')
    @classmethod
    def school_required(cls, v):
        return _required(v, "School is required")

    @field_validator('degree')
    @classmethod
    def degree_required(cls, v):
        return _required(v, "Degree is required")

    @field_validator('field_of_study')
    @classmethod
    def field_of_study_required(cls, v):
        return _required(v, "Field of study is required")

    @field_validator('from_date')
    @classmethod
    def from_required(cls, v):
        if v is None:
            raise ValueError("From date is required")
        return v


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(..., alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    field_of_study: str
    from_date: date = Field(..., alias="from")
    to_date: Optional[date] = Field(None, alias="to")
    current: bool = False
    description: Optional[str] = None


class ProfileResponse(BaseModel):
    id: str
    user: Optional[OwnerSummary] = Field(None, description="Owner name/avatar (None if the account is gone)")
    status: str
    skills: list[str]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: dict[str, str] = Field(default_factory=dict)
    experience: list[ExperienceResponse] = Field(default_factory=list)
    education: list[EducationResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


# ── Posts ────────────────────────────────────────────────


class TextRequest(BaseModel):
    """Body for creating a post or a comment."""
    text: Optional[str] = Field(None, validate_default=True)

    @field_validator('text')
    @classmethod
    def text_required(cls, v):
        return _required(v, "Text is required")


class LikeResponse(BaseModel):
    user_id: str


class CommentResponse(BaseModel):
    id: str
    user_id: str
    text: str
    name: str
    avatar: str
    created_at: datetime


class PostResponse(BaseModel):
    id: str
    user_id: str = Field(..., description="Author ID")
    text: str
    name: str = Field(..., description="Author name at the time of posting")
    avatar: str = Field(..., description="Author avatar at the time of posting")
    likes: list[LikeResponse] = Field(default_factory=list)
    comments: list[CommentResponse] = Field(default_factory=list)
    created_at: datetime
