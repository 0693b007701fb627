"""Handler configuration read from the Lambda environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from onboarding.exceptions import ConfigurationError

ENVIRONMENTS = ("dev", "test", "prod")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_TABLE_NAME = "UserEmailTable"
DEFAULT_ENVIRONMENT = "dev"
DEFAULT_REGION = "us-east-1"


def default_secret_name(environment: str) -> str:
    """Name of the one-time password secret for an environment."""
    return f"{environment}-OneTimePassword"


@dataclass
class HandlerConfig:
    """Configuration shared by both Lambda handlers.

    Attributes:
        table_name: DynamoDB table holding user records
        secret_name: Secrets Manager secret with the one-time password
        environment: Environment label (dev, test or prod)
        region: AWS region for all clients
        endpoint_url: Optional endpoint for LocalStack testing
        log_level: structlog filtering level
    """

    table_name: str = DEFAULT_TABLE_NAME
    secret_name: Optional[str] = None
    environment: str = DEFAULT_ENVIRONMENT
    region: str = DEFAULT_REGION
    endpoint_url: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.environment not in ENVIRONMENTS:
            raise ConfigurationError(
                "ENVIRONMENT",
                f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, "
                f"got '{self.environment}'",
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                "LOG_LEVEL", f"Unknown log level '{self.log_level}'"
            )
        if not self.table_name:
            raise ConfigurationError("TABLE_NAME")
        if not self.secret_name:
            self.secret_name = default_secret_name(self.environment)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HandlerConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Raises:
            ConfigurationError: If a value is invalid
        """
        env = os.environ if environ is None else environ
        return cls(
            table_name=env.get("TABLE_NAME", DEFAULT_TABLE_NAME),
            secret_name=env.get("SECRET_NAME") or None,
            environment=env.get("ENVIRONMENT", DEFAULT_ENVIRONMENT),
            region=env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION") or DEFAULT_REGION,
            endpoint_url=env.get("AWS_ENDPOINT_URL") or None,
            log_level=env.get("LOG_LEVEL", "INFO"),
        )
