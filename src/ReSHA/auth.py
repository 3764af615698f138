"""Building AuthConfig values from user-supplied credentials."""

from __future__ import annotations

from ReSHA.models import AuthConfig


def auth_from_credentials(
    token: str = "", username: str = "", password: str = ""
) -> AuthConfig:
    """Pick the auth method from whichever credentials are present.

    A token wins over username/password; a username without a password
    (or the reverse) means no authentication.
    """
    # strip whitespace left over from copy-paste
    token = (token or "").strip()
    username = (username or "").strip()
    password = password or ""

    if token:
        return AuthConfig.token_auth(token)
    if username and password:
        return AuthConfig.basic(username, password)
    return AuthConfig.none()
