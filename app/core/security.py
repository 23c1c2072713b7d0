"""API key authentication for the issue routes."""

import logging
import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(
    api_key: Annotated[str | None, Security(API_KEY_HEADER)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Validate the caller's API key.

    Returns the key, or an empty string when authentication is disabled.

    Raises:
        HTTPException: 401 if the key is missing or unknown while
            ``require_api_key`` is on.
    """
    if not settings.require_api_key:
        return ""

    if not api_key:
        logger.warning("Request without API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Include X-API-Key header.",
        )

    if not any(secrets.compare_digest(api_key, known) for known in settings.api_keys):
        logger.warning("Request with unknown API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )

    return api_key


ApiKeyDep = Annotated[str, Depends(verify_api_key)]
