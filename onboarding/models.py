"""Onboarding models - store-agnostic data structures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from onboarding.exceptions import ValidationError


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision (``...000Z``)."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class UserRecord:
    """One row of the user email table, keyed by user_id."""

    user_id: str
    email: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_item(self) -> dict[str, str]:
        """Convert to the attribute names stored in the table."""
        item = {"userId": self.user_id, "email": self.email}
        if self.created_at is not None:
            item["createdAt"] = self.created_at
        if self.updated_at is not None:
            item["updatedAt"] = self.updated_at
        return item

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "UserRecord":
        return cls(
            user_id=item["userId"],
            email=item.get("email", ""),
            created_at=item.get("createdAt"),
            updated_at=item.get("updatedAt"),
        )


@dataclass
class OneTimeCredential:
    """Generated one-time password read from the secret store."""

    username: Optional[str]
    password: str = field(repr=False)


# ==================== Requests ====================


@dataclass
class CreateUserEvent:
    """IAM CreateUser event as delivered by EventBridge from CloudTrail."""

    user_name: str
    event_name: Optional[str] = None
    event_source: Optional[str] = None

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "CreateUserEvent":
        """Parse an EventBridge event.

        Args:
            event: Event with ``detail.requestParameters.userName``

        Returns:
            CreateUserEvent

        Raises:
            ValidationError: If the user name is missing
        """
        detail = event.get("detail") or {}
        params = detail.get("requestParameters") or {}
        user_name = params.get("userName")
        if not user_name or not isinstance(user_name, str):
            raise ValidationError(
                "Missing detail.requestParameters.userName in event",
                field="userName",
            )
        return cls(
            user_name=user_name,
            event_name=detail.get("eventName"),
            event_source=detail.get("eventSource"),
        )


@dataclass
class EmailUpdateRequest:
    """Direct invocation payload for the email updater."""

    user_id: Optional[str] = None
    new_email: Optional[str] = None

    @classmethod
    def from_event(cls, event: Any) -> "EmailUpdateRequest":
        # Payloads that are not JSON objects carry no fields
        if not isinstance(event, Mapping):
            event = {}
        # Empty strings are treated the same as missing values
        return cls(
            user_id=event.get("userId") or None,
            new_email=event.get("newEmail") or None,
        )


# ==================== Results ====================


@dataclass
class OnboardingResult:
    """Outcome of onboarding a newly created user."""

    user_name: str
    user_id: str
    email: str
    password: str = field(repr=False)
    created_at: Optional[str] = None

    def to_body(self) -> dict[str, str]:
        return {
            "userName": self.user_name,
            "email": self.email,
            "password": self.password,
        }


@dataclass
class MirrorResult:
    """Outcome of the best-effort parameter mirror write."""

    parameter_name: str
    succeeded: bool
    error: Optional[str] = None


@dataclass
class EmailUpdateResult:
    """Outcome of an email update."""

    user_id: str
    previous_email: str
    new_email: str
    updated_at: Optional[str] = None
    mirror: Optional[MirrorResult] = None
    status: str = "updated"

    def to_body(self) -> dict[str, str]:
        return {
            "userId": self.user_id,
            "previousEmail": self.previous_email,
            "newEmail": self.new_email,
            "status": self.status,
        }


@dataclass
class HandlerResponse:
    """Lambda response with a JSON-encoded body."""

    status_code: int
    body: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "body": json.dumps(self.body)}
