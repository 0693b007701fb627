"""Onboarding - IAM user onboarding and email update handlers.

Onboarding records newly created IAM users together with their email address
and one-time password, and lets their email address be changed later.

Features:
- Onboarding notifier for IAM CreateUser events
- Email updater with best-effort parameter mirroring
- DynamoDB, SSM Parameter Store and Secrets Manager backed stores
- In-memory stores for testing without AWS
"""

from onboarding.config import HandlerConfig
from onboarding.core.factory import StoreFactory, create_factory
from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.core.secret_store import SecretStore
from onboarding.factories import AWSFactory, MockFactory
from onboarding.handlers import EmailUpdater, OnboardingNotifier
from onboarding.keys import compose_user_name, derive_user_id, email_parameter_name
from onboarding.stores import (
    DynamoDBRecordStore,
    MockParameterStore,
    MockRecordStore,
    MockSecretStore,
    SSMParameterStore,
    SecretsManagerSecretStore,
)
from onboarding.exceptions import (
    ConfigurationError,
    InternalError,
    MalformedSecretError,
    OnboardingError,
    ParameterNotFoundError,
    SecretNotFoundError,
    UpstreamError,
    UserNotFoundError,
    ValidationError,
)
from onboarding.models import (
    CreateUserEvent,
    EmailUpdateRequest,
    EmailUpdateResult,
    HandlerResponse,
    MirrorResult,
    OnboardingResult,
    OneTimeCredential,
    UserRecord,
)

__version__ = "0.1.0"

__all__ = [
    # Core interfaces
    "ParameterStore",
    "RecordStore",
    "SecretStore",
    # Factory (recommended entry point)
    "create_factory",
    "StoreFactory",
    "AWSFactory",
    "MockFactory",
    # Handlers
    "EmailUpdater",
    "OnboardingNotifier",
    "HandlerConfig",
    # Keys
    "compose_user_name",
    "derive_user_id",
    "email_parameter_name",
    # Models
    "CreateUserEvent",
    "EmailUpdateRequest",
    "EmailUpdateResult",
    "HandlerResponse",
    "MirrorResult",
    "OnboardingResult",
    "OneTimeCredential",
    "UserRecord",
    # Exceptions - Base
    "OnboardingError",
    "ConfigurationError",
    "InternalError",
    # Exceptions - Request
    "ValidationError",
    "UserNotFoundError",
    # Exceptions - Upstream
    "UpstreamError",
    "ParameterNotFoundError",
    "SecretNotFoundError",
    "MalformedSecretError",
    # Stores
    "DynamoDBRecordStore",
    "SSMParameterStore",
    "SecretsManagerSecretStore",
    "MockParameterStore",
    "MockRecordStore",
    "MockSecretStore",
]
