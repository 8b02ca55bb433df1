import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException, status

from src.config import settings

logger = logging.getLogger(__name__)


def get_api_key_source(api_key: str) -> Optional[str]:
    """Name of the integration that owns this key, or None if unknown."""
    for source, key in settings.WEBHOOK_API_KEYS.items():
        if hmac.compare_digest(key.encode("utf-8"), api_key.encode("utf-8")):
            return source
    return None


async def verify_api_key(x_api_key: Optional[str] = Header(default=None)) -> str:
    """FastAPI dependency guarding webhook endpoints.

    Returns the source name of the presented key. A missing key is a 401,
    an unknown key a 403.
    """
    if not x_api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "message": "API key is required",
                "error": "Unauthorized",
                "details": "Please provide your API key in the X-API-Key header",
            },
        )

    source = get_api_key_source(x_api_key)
    if source is None:
        logger.warning("Rejected webhook call with an unknown API key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={
                "message": "Invalid API key",
                "error": "Forbidden",
                "details": "The provided API key is not valid or has been revoked",
            },
        )
    return source
