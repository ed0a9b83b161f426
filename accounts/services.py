import hmac
import logging

from django.conf import settings
from django.contrib.auth.hashers import check_password

from .sessions import ADMIN_ROLE, SessionUser

logger = logging.getLogger(__name__)


def _same(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def check_admin_credentials(username: str, password: str) -> bool:
    """
    Compare submitted credentials with the configured admin account.

    ``ADMIN_PASSWORD_HASH`` (Django hasher format) wins over a plain
    ``ADMIN_PASSWORD``. With neither configured, every login fails.
    """
    username_ok = _same(username, settings.ADMIN_USERNAME)

    if settings.ADMIN_PASSWORD_HASH:
        password_ok = check_password(password, settings.ADMIN_PASSWORD_HASH)
    elif settings.ADMIN_PASSWORD:
        password_ok = _same(password, settings.ADMIN_PASSWORD)
    else:
        logger.warning("Admin login attempted but no admin password is configured")
        password_ok = False

    return username_ok and password_ok


def build_admin_user(username: str) -> SessionUser:
    profile = settings.ADMIN_PROFILE
    return SessionUser(
        id="1",
        username=username,
        role=ADMIN_ROLE,
        email=profile.get("email", ""),
        first_name=profile.get("firstName", ""),
        last_name=profile.get("lastName", ""),
    )
