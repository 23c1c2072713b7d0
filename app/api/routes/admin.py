"""Admin API routes for service status."""

import logging
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.config import Settings, get_settings
from app.core.security import ApiKeyDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    jira_configured: bool
    anthropic_configured: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check service health and which upstreams are configured."""
    return HealthResponse(
        status="healthy",
        jira_configured=bool(settings.jira_base_url and settings.jira_api_token),
        anthropic_configured=bool(settings.anthropic_api_key),
    )


@router.get("/config")
async def get_config(
    _api_key: ApiKeyDep,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Dict[str, Any]:
    """Get current configuration (non-sensitive values only)."""
    return {
        "app_name": settings.app_name,
        "debug": settings.debug,
        "log_level": settings.log_level,
        "require_api_key": settings.require_api_key,
        "jira_base_url": settings.jira_base_url or "(not configured)",
        "jira_email": settings.jira_email or "(not configured)",
        "anthropic_model": settings.anthropic_model,
        "anthropic_api_version": settings.anthropic_api_version,
        "summary_max_tokens": settings.summary_max_tokens,
        "request_timeout_seconds": settings.request_timeout_seconds,
        "jira_configured": bool(settings.jira_api_token),
        "anthropic_configured": bool(settings.anthropic_api_key),
    }
