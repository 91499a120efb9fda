"""Health check endpoint."""

from fastapi import APIRouter, Request
from datetime import datetime

from .. import __version__

router = APIRouter()


@router.get("/")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "service": "image-studio",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Ready once the lifespan has wired the orchestrator."""
    return {
        "ready": getattr(request.app.state, "orchestrator", None) is not None,
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }
