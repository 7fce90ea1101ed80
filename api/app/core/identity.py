"""
Identity resolution for incoming requests.

Credentials are checked by the authenticating proxy in front of the API, which
forwards the resolved user identifier in a trusted header. The identifier is
opaque here and only used as a partition key.
"""
import logging
from fastapi import Request

from app.core.config import settings
from app.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def get_current_user_id(request: Request) -> str:
    """Dependency returning the caller's user id, or rejecting the request."""
    user_id = request.headers.get(settings.identity_header, "").strip()
    if not user_id:
        logger.info(f"Rejected unauthenticated {request.method} {request.url.path}")
        raise AuthenticationError("Unauthorized")
    return user_id
