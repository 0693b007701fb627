"""Email updater for onboarded users.

The record store is the source of truth. After a successful record update the
new address is mirrored to the parameter store on a best-effort basis: a
failed mirror write is logged and reported in the result, but never fails the
update or rolls back the record.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import structlog

from onboarding.config import HandlerConfig
from onboarding.core.factory import StoreFactory
from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.exceptions import InternalError, UserNotFoundError, ValidationError
from onboarding.keys import compose_user_name, email_parameter_name
from onboarding.models import (
    EmailUpdateRequest,
    EmailUpdateResult,
    HandlerResponse,
    MirrorResult,
    UserRecord,
    utc_now_iso,
)

log = structlog.get_logger()

MISSING_USER_ID_MESSAGE = "Missing userId in request"
USER_NOT_FOUND_MESSAGE = "User not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class EmailUpdater:
    """Reads and updates the email address stored for a user."""

    def __init__(
        self,
        record_store: RecordStore,
        parameter_store: ParameterStore,
        environment: str,
        clock: Callable[[], str] = utc_now_iso,
    ):
        """Initialize the updater.

        Args:
            record_store: Store holding user records
            parameter_store: Store receiving the mirrored email
            environment: Environment label used to build parameter names
            clock: Returns the current ISO-8601 timestamp
        """
        self._records = record_store
        self._parameters = parameter_store
        self._environment = environment
        self._clock = clock

    @classmethod
    def from_config(cls, config: HandlerConfig, factory: StoreFactory) -> "EmailUpdater":
        """Build an updater wired to the stores of a factory."""
        return cls(
            record_store=factory.create_record_store(config.table_name),
            parameter_store=factory.create_parameter_store(),
            environment=config.environment,
        )

    def get_user(self, user_id: Optional[str]) -> UserRecord:
        """Get the current record for a user.

        Raises:
            ValidationError: If user_id is empty
            UserNotFoundError: If no record exists
        """
        if not user_id:
            raise ValidationError(MISSING_USER_ID_MESSAGE, field="userId")

        record = self._records.get_user(user_id)
        if record is None:
            log.info("User not found", user_id=user_id)
            raise UserNotFoundError(user_id)

        log.info("Current email for user", user_id=user_id, email=record.email)
        return record

    def update_email(self, user_id: Optional[str], new_email: str) -> EmailUpdateResult:
        """Replace a user's email and mirror it to the parameter store.

        Args:
            user_id: The user identifier
            new_email: The new email address

        Returns:
            EmailUpdateResult with previous and new email and the mirror outcome

        Raises:
            ValidationError: If user_id or new_email is empty
            UserNotFoundError: If no record exists
            UpstreamError: If the record store update fails
        """
        record = self.get_user(user_id)
        if not new_email:
            raise ValidationError("Missing newEmail in request", field="newEmail")

        updated_at = self._clock()
        self._records.update_email(record.user_id, new_email, updated_at)
        mirror = self._mirror_email(record.user_id, new_email)

        log.info(
            "Updated email for user",
            user_id=record.user_id,
            previous_email=record.email,
            new_email=new_email,
            mirrored=mirror.succeeded,
        )
        return EmailUpdateResult(
            user_id=record.user_id,
            previous_email=record.email,
            new_email=new_email,
            updated_at=updated_at,
            mirror=mirror,
        )

    def _mirror_email(self, user_id: str, email: str) -> MirrorResult:
        parameter_name = email_parameter_name(compose_user_name(self._environment, user_id))
        try:
            self._parameters.put_parameter(parameter_name, email, overwrite=True)
        except Exception as e:
            log.warning(
                "Could not update email parameter",
                parameter_name=parameter_name,
                error=str(e),
            )
            return MirrorResult(parameter_name=parameter_name, succeeded=False, error=str(e))

        log.info("Updated email parameter", parameter_name=parameter_name)
        return MirrorResult(parameter_name=parameter_name, succeeded=True)

    def handle(self, event: Any, context: Optional[Any] = None) -> dict[str, Any]:
        """Handle a direct invocation ``{"userId": ..., "newEmail": ...}``.

        Every outcome is returned as a response; nothing is raised.

        Returns:
            Response dict with statusCode 200, 400, 404 or 500 and a JSON body
        """
        return self.respond(EmailUpdateRequest.from_event(event)).to_dict()

    def respond(self, request: EmailUpdateRequest) -> HandlerResponse:
        if not request.user_id:
            return HandlerResponse(ValidationError.status_code, {"error": MISSING_USER_ID_MESSAGE})

        try:
            if not request.new_email:
                record = self.get_user(request.user_id)
                return HandlerResponse(200, {"userId": record.user_id, "email": record.email})

            result = self.update_email(request.user_id, request.new_email)
            return HandlerResponse(200, result.to_body())
        except UserNotFoundError as e:
            return HandlerResponse(e.status_code, {"error": USER_NOT_FOUND_MESSAGE})
        except Exception as e:
            log.error("Email update failed", user_id=request.user_id, error=str(e))
            error = InternalError(getattr(e, "message", str(e)))
            return HandlerResponse(
                error.status_code, {"error": INTERNAL_ERROR_MESSAGE, "message": error.message}
            )
