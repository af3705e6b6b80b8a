"""Authentication routes (sign in, current account)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_token_service, get_user_repo
from api.models import LoginRequest, TokenResponse, UserResponse
from api.security import get_current_user_id
from domain.model.errors import NotFoundError
from port.token_service import TokenServicePort
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenServicePort = Depends(get_token_service),
):
    """Exchange email/password for a token.

    Unknown email and wrong password both yield 400 "Invalid credentials".
    """
    _, token = auth_service.authenticate(repo, tokens, email=request.email, password=request.password)
    return TokenResponse(token=token)


@router.get("", response_model=UserResponse)
async def get_me(
    user_id: str = Depends(get_current_user_id),
    repo: UserRepository = Depends(get_user_repo),
):
    """Current account, without the password hash."""
    try:
        user = auth_service.get_account(repo, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        created_at=user.created_at,
    )
