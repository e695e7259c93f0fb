"""
Demo-only admin password check.

The admin dashboard sends the configured password as a bearer token.
There is no session, hashing, expiry or rate limiting.
"""

import hmac
import logging
from typing import Optional

from booking_timeline.config import AdminConfig, settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AdminAuthError(Exception):
    """Raised when an admin request is not authenticated."""


def check_password(password: Optional[str], admin: Optional[AdminConfig] = None) -> bool:
    """Compare a submitted password with the configured one."""
    admin = admin or settings.admin
    if admin.uses_default_password:
        logger.warning("ADMIN_PASSWORD not set, using the demo default password")
    if not password:
        return False
    return hmac.compare_digest(password.encode(), admin.password.encode())


def authorize(authorization: Optional[str], admin: Optional[AdminConfig] = None) -> bool:
    """Accept an ``Authorization: Bearer <password>`` header value."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return False
    return check_password(authorization[len(BEARER_PREFIX):], admin)


def require_admin(authorization: Optional[str], admin: Optional[AdminConfig] = None) -> None:
    """Raise AdminAuthError unless the header carries the admin password."""
    if not authorization:
        raise AdminAuthError("Authentication required")
    if not authorize(authorization, admin):
        logger.info("Rejected admin request with invalid token")
        raise AdminAuthError("Invalid authentication token")
