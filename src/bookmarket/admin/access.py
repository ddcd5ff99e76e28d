"""Admin credentials and the token that guards admin routes.

There is a single admin account, configured through the environment. Login
hands back the configured token; every other admin route expects it in the
``X-Admin-Token`` header.
"""

import hmac

from bookmarket import settings
from bookmarket.exceptions import Unauthorized


def authenticate_admin(username: str, password: str) -> str:
    """Return the admin token for valid credentials."""
    valid_user = hmac.compare_digest(username or "", settings.admin_username())
    valid_password = hmac.compare_digest(password or "", settings.admin_password())
    if not (valid_user and valid_password):
        raise Unauthorized({"credentials": ["Invalid credentials"]})
    return settings.admin_token()


def require_admin(token: str | None) -> None:
    if not token or not hmac.compare_digest(token, settings.admin_token()):
        raise Unauthorized({"admin": ["Admin token missing or invalid"]})
