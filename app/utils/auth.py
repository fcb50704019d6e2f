"""Shared-token authentication for the translate endpoint.

The token travels in the request body ('auth_token') and is compared
against AUTH_TOKEN from the environment. An empty AUTH_TOKEN means the
deployment is open and every request is allowed.
"""

import hmac
import logging

from app.errors import Unauthorized

logger = logging.getLogger(__name__)


def authenticate(supplied_token: str | None, configured_token: str | None) -> bool:
    """Return True if the supplied token may use the service."""
    if not configured_token:
        return True
    if supplied_token is None:
        return False
    return hmac.compare_digest(
        supplied_token.encode('utf-8'),
        configured_token.encode('utf-8')
    )


def require_token(supplied_token: str | None, configured_token: str | None):
    """Raise Unauthorized unless authenticate() allows the token."""
    if not authenticate(supplied_token, configured_token):
        # Never log the supplied token itself
        logger.warning("Unauthorized translation request rejected")
        raise Unauthorized()
