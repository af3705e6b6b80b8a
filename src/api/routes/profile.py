"""Profile routes.

Endpoints:
- GET /profile/me: Caller's profile
- POST /profile: Create or update caller's profile
- GET /profile: All profiles (public)
- GET /profile/user/{user_id}: Profile by owner (public)
- DELETE /profile: Delete caller's profile and account
- PUT /profile/experience, DELETE /profile/experience/{experience_id}
- PUT /profile/education, DELETE /profile/education/{education_id}
- GET /profile/github/{username}: Latest public GitHub repositories (public)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_profile_repo, get_repository_host, get_user_repo
from api.models import (
    EducationRequest,
    EducationResponse,
    ExperienceRequest,
    ExperienceResponse,
    MessageResponse,
    OwnerSummary,
    ProfileRequest,
    ProfileResponse,
)
from api.security import get_current_user_id
from domain.model.errors import NotFoundError
from domain.model.profile import Education, Experience, Profile, ProfileUpdate, SocialLinks
from domain.model.user import User
from port.profile_repository import ProfileRepository
from port.repository_host import RepositoryHostPort
from port.user_repository import UserRepository
from services import profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


def _to_response(profile: Profile, owner: User | None) -> ProfileResponse:
    """Convert domain Profile (+ owning User) to API ProfileResponse."""
    return ProfileResponse(
        id=profile.id,
        user=OwnerSummary(**owner.summary) if owner else None,
        status=profile.status,
        skills=profile.skills,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        github_username=profile.github_username,
        social=profile.social.as_dict(),
        experience=[
            ExperienceResponse(
                id=e.id,
                title=e.title,
                company=e.company,
                location=e.location,
                from_date=e.from_date,
                to_date=e.to_date,
                current=e.current,
                description=e.description,
            )
            for e in profile.experience
        ],
        education=[
            EducationResponse(
                id=e.id,
                school=e.school,
                degree=e.degree,
                field_of_study=e.field_of_study,
                from_date=e.from_date,
                to_date=e.to_date,
                current=e.current,
                description=e.description,
            )
            for e in profile.education
        ],
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def _respond(profile: Profile, user_repo: UserRepository) -> ProfileResponse:
    return _to_response(profile, user_repo.get_by_id(profile.user_id))


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    user_id: str = Depends(get_current_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    try:
        profile = profile_service.get_own(repo, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(profile, user_repo)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    request: ProfileRequest,
    user_id: str = Depends(get_current_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    """Create the caller's profile, or replace the fields supplied."""
    update = ProfileUpdate(
        status=request.status,
        skills=profile_service.parse_skills(request.skills),
        company=request.company,
        website=request.website,
        location=request.location,
        bio=request.bio,
        github_username=request.github_username,
        social=SocialLinks.from_supplied(
            youtube=request.youtube,
            twitter=request.twitter,
            facebook=request.facebook,
            linkedin=request.linkedin,
            instagram=request.instagram,
        ),
    )
    profile = profile_service.upsert(repo, user_id, update)
    return _respond(profile, user_repo)


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    profiles = profile_service.get_all(repo)
    owners = profile_service.owners_of(user_repo, profiles)
    return [_to_response(p, owners.get(p.user_id)) for p in profiles]


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(
    user_id: str,
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    try:
        profile = profile_service.get_by_user(repo, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(profile, user_repo)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    user_id: str = Depends(get_current_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    """Delete the caller's profile and account. Their posts are kept."""
    profile_service.delete_own(repo, user_repo, user_id)
    return MessageResponse(message="User deleted")


# ── experience ───────────────────────────────────────────


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    request: ExperienceRequest,
    user_id: str = Depends(get_current_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    entry = Experience.create(
        title=request.title,
        company=request.company,
        from_date=request.from_date,
        location=request.location,
        to_date=request.to_date,
        current=request.current,
        description=request.description,
    )
    try:
        profile = profile_service.add_experience(repo, user_id, entry)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(profile, user_repo)


@router.delete("/experience/{experience_id}", response_model=ProfileResponse)
async def remove_experience(
    experience_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    try:
        profile = profile_service.remove_experience(repo, user_id, experience_id)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(profile, user_repo)


# ── education ────────────────────────────────────────────


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    request: EducationRequest,
    user_id: str = Depends(get_current_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    entry = Education.create(
        school=request.school,
        degree=request.degree,
        field_of_study=request.field_of_study,
        from_date=request.from_date,
        to_date=request.to_date,
        current=request.current,
        description=request.description,
    )
    try:
        profile = profile_service.add_education(repo, user_id, entry)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(profile, user_repo)


@router.delete("/education/{education_id}", response_model=ProfileResponse)
async def remove_education(
    education_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: ProfileRepository = Depends(get_profile_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    try:
        profile = profile_service.remove_education(repo, user_id, education_id)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(profile, user_repo)


# ── github ───────────────────────────────────────────────


@router.get("/github/{username}")
async def get_github_repos(
    username: str,
    host: RepositoryHostPort = Depends(get_repository_host),
):
    repos = await host.list_repositories(username)
    if repos is None:
        raise HTTPException(status_code=404, detail="No GitHub profile found")
    return repos
