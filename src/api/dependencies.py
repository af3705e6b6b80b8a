import os
from datetime import timedelta
from functools import lru_cache

from fastapi import HTTPException

from adapter.external.github import GitHubAdapter
from adapter.jwt.token_service import JoseTokenService
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.post_repository import MongoPostRepository
from adapter.mongodb.profile_repository import MongoProfileRepository
from adapter.mongodb.user_repository import MongoUserRepository
from port.post_repository import PostRepository
from port.profile_repository import ProfileRepository
from port.repository_host import RepositoryHostPort
from port.token_service import TokenServicePort
from port.user_repository import UserRepository


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


def get_profile_repo() -> ProfileRepository:
    return MongoProfileRepository(_get_db())


def get_post_repo() -> PostRepository:
    return MongoPostRepository(_get_db())


@lru_cache(maxsize=1)
def get_token_service() -> TokenServicePort:
    """Process-wide token service built once from configuration."""
    secret_key = os.getenv("JWT_SECRET_KEY")
    if not secret_key:
        raise ValueError(
            "JWT_SECRET_KEY environment variable is required. "
            "Generate a secure key with: openssl rand -hex 32"
        )
    hours = int(os.getenv("JWT_EXPIRATION_HOURS", "10"))
    return JoseTokenService(secret_key, expires_in=timedelta(hours=hours))


def get_repository_host() -> RepositoryHostPort:
    return GitHubAdapter()
