"""Health check endpoint for API v1."""

from typing import Dict

from fastapi import APIRouter

from order_management_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    """Report that the service is up.  Does not require authentication."""
    return {"status": "ok", "version": settings.api_version}
