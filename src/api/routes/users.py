"""Account registration route."""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_token_service, get_user_repo
from api.models import RegisterRequest, TokenResponse
from port.token_service import TokenServicePort
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=TokenResponse)
async def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenServicePort = Depends(get_token_service),
):
    """Register a new user and return a token.

    EmailAlreadyExistsError and ValidationError are rendered as 400
    error lists by the application's exception handlers.
    """
    _, token = auth_service.register(
        repo, tokens, name=request.name, email=request.email, password=request.password,
    )
    return TokenResponse(token=token)
