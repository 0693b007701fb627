"""Onboarding notifier for newly created IAM users.

Triggered by the IAM ``CreateUser`` CloudTrail event. Reads the user's email
address from the parameter store and the generated one-time password from the
secret store, then records the user in the record store.

Failures are not wrapped: they propagate to the invoking platform, which owns
retry and failure reporting. Steps completed before a failure are not undone.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

import structlog

from onboarding.config import HandlerConfig
from onboarding.core.factory import StoreFactory
from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.core.secret_store import SecretStore
from onboarding.keys import derive_user_id, email_parameter_name
from onboarding.models import (
    CreateUserEvent,
    HandlerResponse,
    OnboardingResult,
    UserRecord,
    utc_now_iso,
)

log = structlog.get_logger()


class OnboardingNotifier:
    """Records a newly created user and surfaces their one-time password.

    Example:
        >>> notifier = OnboardingNotifier(
        ...     parameter_store=MockParameterStore(),
        ...     secret_store=MockSecretStore(),
        ...     record_store=MockRecordStore(),
        ...     secret_name="dev-OneTimePassword",
        ... )
        >>> result = notifier.onboard("dev-user1")
        >>> result.user_id
        'user1'
    """

    def __init__(
        self,
        parameter_store: ParameterStore,
        secret_store: SecretStore,
        record_store: RecordStore,
        secret_name: str,
        clock: Callable[[], str] = utc_now_iso,
    ):
        """Initialize the notifier.

        Args:
            parameter_store: Source of the user's email address
            secret_store: Source of the one-time password
            record_store: Destination of the user record
            secret_name: Name of the one-time password secret
            clock: Returns the current ISO-8601 timestamp
        """
        self._parameters = parameter_store
        self._secrets = secret_store
        self._records = record_store
        self._secret_name = secret_name
        self._clock = clock

    @classmethod
    def from_config(
        cls, config: HandlerConfig, factory: StoreFactory
    ) -> "OnboardingNotifier":
        """Build a notifier wired to the stores of a factory."""
        return cls(
            parameter_store=factory.create_parameter_store(),
            secret_store=factory.create_secret_store(),
            record_store=factory.create_record_store(config.table_name),
            secret_name=config.secret_name,
        )

    def onboard(self, user_name: str) -> OnboardingResult:
        """Onboard a user by name.

        Args:
            user_name: IAM user name from the CreateUser event

        Returns:
            OnboardingResult with the stored email and the one-time password

        Raises:
            ValidationError: If the user name is blank
            ParameterNotFoundError: If no email parameter exists for the user
            SecretNotFoundError: If the one-time password secret is missing
            MalformedSecretError: If the secret has no password field
            UpstreamError: On any other store error
        """
        parameter_name = email_parameter_name(user_name)
        log.info("Onboarding user", user_name=user_name, parameter_name=parameter_name)

        try:
            email = self._parameters.get_parameter(parameter_name)
            credential = self._secrets.get_credential(self._secret_name)

            user_id = derive_user_id(user_name)
            created_at = self._clock()
            self._records.put_user(
                UserRecord(user_id=user_id, email=email, created_at=created_at)
            )
        except Exception as e:
            log.error("Onboarding failed", user_name=user_name, error=str(e))
            raise

        log.info("User onboarded", user_name=user_name, user_id=user_id, email=email)
        return OnboardingResult(
            user_name=user_name,
            user_id=user_id,
            email=email,
            password=credential.password,
            created_at=created_at,
        )

    def handle(self, event: Mapping[str, Any], context: Optional[Any] = None) -> dict[str, Any]:
        """Handle an EventBridge CreateUser event.

        Returns:
            ``{"statusCode": 200, "body": "{userName, email, password}"}``
        """
        create_event = CreateUserEvent.from_event(event)
        log.info(
            "Received user creation event",
            user_name=create_event.user_name,
            event_name=create_event.event_name,
            event_source=create_event.event_source,
        )
        result = self.onboard(create_event.user_name)
        return HandlerResponse(status_code=200, body=result.to_body()).to_dict()
