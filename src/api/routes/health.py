"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from adapter.mongodb.connection import get_mongodb_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    """Health check endpoint with document store status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    try:
        mongo_client = get_mongodb_client()
        if mongo_client:
            mongo_client.admin.command('ping')
            mongodb = {"status": "healthy", "message": "Connection successful"}
        else:
            mongodb = {"status": "unhealthy", "message": "Connection failed or not configured"}
    except Exception as e:
        mongodb = {"status": "unhealthy", "message": f"Connection error: {str(e)[:200]}"}

    health_status["services"]["mongodb"] = mongodb
    overall_healthy = mongodb["status"] == "healthy"
    if not overall_healthy:
        health_status["status"] = "degraded"

    return JSONResponse(
        content=health_status,
        status_code=status.HTTP_200_OK if overall_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
