"""Key derivation shared by both handlers.

User names follow the ``{environment}-{userId}`` convention (``dev-user1``).
Email parameters live under a single path prefix and are always derived from
the lower-cased user name, whichever handler is reading or writing them.
"""

from __future__ import annotations

from onboarding.exceptions import ValidationError

EMAIL_PARAMETER_PREFIX = "/user/emails/"
USER_NAME_SEPARATOR = "-"


def derive_user_id(user_name: str) -> str:
    """Return the trailing segment of a user name.

    Args:
        user_name: IAM user name, e.g. ``dev-user1``

    Returns:
        The substring after the last separator (``user1``), or the whole
        name when it contains no separator.

    Raises:
        ValidationError: If the user name is blank
    """
    if not user_name or not user_name.strip():
        raise ValidationError("User name must not be empty", field="userName")
    return user_name.rsplit(USER_NAME_SEPARATOR, 1)[-1]


def compose_user_name(environment: str, user_id: str) -> str:
    """Build the user name for a user ID in an environment."""
    if not user_id:
        raise ValidationError("User ID must not be empty", field="userId")
    return f"{environment}{USER_NAME_SEPARATOR}{user_id}"


def email_parameter_name(user_name: str) -> str:
    """Return the parameter path holding a user's email address.

    Args:
        user_name: Full user name (``dev-user1``)

    Returns:
        Parameter path, e.g. ``/user/emails/dev-user1``
    """
    if not user_name or not user_name.strip():
        raise ValidationError("User name must not be empty", field="userName")
    return f"{EMAIL_PARAMETER_PREFIX}{user_name.lower()}"
