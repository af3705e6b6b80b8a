"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Must run before modules that read env vars at import time
load_dotenv()

# main.py is at src/api/main.py; src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.dependencies import get_token_service
from api.models import FIELD_ALIASES
from api.routes import auth, health, posts, profile, users
from utils.logging import setup_structured_logging
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.indexes import ensure_all_indexes
from domain.model.errors import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    ValidationError,
)

setup_structured_logging()

logger = logging.getLogger(__name__)

# pyproject.toml is the single source of truth for the version
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "DevConnect API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    # Fail fast on a missing signing key
    get_token_service()

    client = get_mongodb_client()
    if client:
        if ensure_all_indexes(client[DATABASE_NAME]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Developer profiles, posts, likes and comments",
    version=VERSION,
    lifespan=lifespan,
)

# Wildcard origins cannot be combined with credentials in browsers
cors_origins_env = os.getenv("CORS_ORIGINS", "*")
if cors_origins_env == "*":
    cors_origins = "*"
    allow_credentials = False
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
    )
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── error rendering ──────────────────────────────────────


def _error_list(errors: list[dict]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Body/param validation failures → 400 {"errors": [{"msg", "param"}]}."""
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        param = str(loc[-1]) if loc else None
        errors.append({
            "msg": err.get("msg", "").removeprefix("Value error, "),
            "param": FIELD_ALIASES.get(param, param),
        })
    return _error_list(errors)


@app.exception_handler(ValidationError)
async def domain_validation_handler(request: Request, exc: ValidationError):
    return _error_list([{"msg": str(exc), "param": exc.param}])


@app.exception_handler(EmailAlreadyExistsError)
@app.exception_handler(InvalidCredentialsError)
async def credential_error_handler(request: Request, exc: Exception):
    return _error_list([{"msg": str(exc)}])


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Anything unexpected: full detail to the log, generic message to the client."""
    logger.exception("Unhandled error", extra={"path": request.url.path, "method": request.method})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server Error"},
    )


app.include_router(users.router)
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(posts.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Structured app logs replace uvicorn's access log
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
