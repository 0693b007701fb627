"""Onboarding exceptions.

All exceptions inherit from OnboardingError for easy catching. Each carries the
HTTP-style status code a handler reports when it converts the error into a
response.
"""

from __future__ import annotations


class OnboardingError(Exception):
    """Base exception for onboarding errors."""

    status_code = 500

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigurationError(OnboardingError):
    """Raised when required handler configuration is missing or invalid."""

    def __init__(self, setting: str, message: str | None = None):
        super().__init__(
            message=message or f"Missing or invalid configuration value '{setting}'",
            code="CONFIGURATION_ERROR",
        )
        self.setting = setting


# ==================== Request Errors ====================


class ValidationError(OnboardingError):
    """Raised when a request or event is missing required input."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class UserNotFoundError(OnboardingError):
    """Raised when no user record exists for a user ID."""

    status_code = 404

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User '{user_id}' not found",
            code="USER_NOT_FOUND",
        )
        self.user_id = user_id


class InternalError(OnboardingError):
    """Raised for unexpected failures that are reported as 500."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message, code="INTERNAL_ERROR")


# ==================== Upstream Errors ====================


class UpstreamError(OnboardingError):
    """Raised when a call to a backing store fails."""

    status_code = 502

    def __init__(self, message: str, operation: str, code: str = "UPSTREAM_ERROR"):
        super().__init__(message=message, code=code)
        self.operation = operation


class ParameterNotFoundError(UpstreamError):
    """Raised when a parameter does not exist in the parameter store."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Parameter '{name}' not found",
            operation="get_parameter",
            code="PARAMETER_NOT_FOUND",
        )
        self.name = name


class SecretNotFoundError(UpstreamError):
    """Raised when a secret does not exist in the secret store."""

    def __init__(self, secret_id: str):
        super().__init__(
            message=f"Secret '{secret_id}' not found",
            operation="get_secret_value",
            code="SECRET_NOT_FOUND",
        )
        self.secret_id = secret_id


class MalformedSecretError(UpstreamError):
    """Raised when a secret value cannot be parsed into a credential."""

    def __init__(self, secret_id: str, reason: str):
        super().__init__(
            message=f"Secret '{secret_id}' is malformed: {reason}",
            operation="get_secret_value",
            code="MALFORMED_SECRET",
        )
        self.secret_id = secret_id
        self.reason = reason
