"""Access gate: resolves the caller's identity from the token header."""

import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

from api.dependencies import get_token_service
from domain.model.errors import AuthError
from port.token_service import TokenServicePort

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-auth-token"

token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def get_current_user_id(
    request: Request,
    token: str | None = Depends(token_header),
    tokens: TokenServicePort = Depends(get_token_service),
) -> str:
    """Get the authenticated user's id (required). Raises 401 otherwise.

    The resolved id is also left on request.state.user_id.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )

    try:
        user_id = tokens.verify(token)
    except AuthError as e:
        logger.debug("Rejected token", extra={"reason": type(e).__name__})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
        )

    request.state.user_id = user_id
    return user_id
