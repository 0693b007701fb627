"""In-memory store implementations for testing.

No AWS credentials or network access required. Every store records the calls
made to it in ``calls`` as ``(method, key)`` tuples so tests can assert which
backends a handler touched.
"""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.core.secret_store import SecretStore
from onboarding.exceptions import (
    ParameterNotFoundError,
    SecretNotFoundError,
    UpstreamError,
)
from onboarding.models import UserRecord

SEED_USER_NAME = "dev-user1"
SEED_EMAIL = "user1@example.com"
SEED_SECRET_NAME = "dev-OneTimePassword"
SEED_SECRET_USERNAME = "test-user"
SEED_PASSWORD = "Mock-Pa55word"


def _default_parameters() -> Dict[str, str]:
    return {f"/user/emails/{SEED_USER_NAME}": SEED_EMAIL}


def _default_secrets() -> Dict[str, str]:
    return {
        SEED_SECRET_NAME: json.dumps(
            {"username": SEED_SECRET_USERNAME, "password": SEED_PASSWORD}
        )
    }


class MockRecordStore(RecordStore):
    """In-memory record store keyed by user ID.

    Example:
        >>> store = MockRecordStore()
        >>> store.put_user(UserRecord(user_id="user1", email="a@b.com"))
        >>> store.get_user("user1").email
        'a@b.com'
    """

    def __init__(
        self,
        records: Dict[str, UserRecord] | None = None,
        fail_with: Optional[Exception] = None,
    ):
        """Initialize with optional records.

        Args:
            records: Initial records keyed by user ID
            fail_with: Exception raised by every call, simulating an
                unavailable store
        """
        self._records: Dict[str, UserRecord] = dict(records or {})
        self._fail_with = fail_with
        self.calls: List[Tuple[str, str]] = []

    def _check_available(self) -> None:
        if self._fail_with is not None:
            raise self._fail_with

    @property
    def records(self) -> Dict[str, UserRecord]:
        return dict(self._records)

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        self.calls.append(("get_user", user_id))
        self._check_available()
        record = self._records.get(user_id)
        return replace(record) if record else None

    def put_user(self, record: UserRecord) -> None:
        self.calls.append(("put_user", record.user_id))
        self._check_available()
        self._records[record.user_id] = replace(record)

    def update_email(self, user_id: str, email: str, updated_at: str) -> UserRecord:
        self.calls.append(("update_email", user_id))
        self._check_available()
        existing = self._records.get(user_id) or UserRecord(user_id=user_id, email=email)
        updated = replace(existing, email=email, updated_at=updated_at)
        self._records[user_id] = updated
        return replace(updated)


class MockParameterStore(ParameterStore):
    """In-memory parameter store.

    Comes pre-configured with the seed user's email parameter
    (``/user/emails/dev-user1``).
    """

    def __init__(
        self,
        parameters: Dict[str, str] | None = None,
        fail_writes: bool = False,
    ):
        """Initialize with optional parameters.

        Args:
            parameters: Initial parameters keyed by path. If not provided,
                uses the seed user's parameter.
            fail_writes: Raise UpstreamError on every write
        """
        if parameters is not None:
            self._parameters = dict(parameters)
        else:
            self._parameters = _default_parameters()
        self.fail_writes = fail_writes
        self.calls: List[Tuple[str, str]] = []

    @property
    def parameters(self) -> Dict[str, str]:
        return dict(self._parameters)

    def get_parameter(self, name: str) -> str:
        self.calls.append(("get_parameter", name))
        if name not in self._parameters:
            raise ParameterNotFoundError(name)
        return self._parameters[name]

    def put_parameter(self, name: str, value: str, overwrite: bool = True) -> None:
        self.calls.append(("put_parameter", name))
        if self.fail_writes:
            raise UpstreamError(
                f"Mock parameter store rejected write to '{name}'",
                operation="put_parameter",
            )
        if name in self._parameters and not overwrite:
            raise UpstreamError(
                f"Parameter '{name}' already exists", operation="put_parameter"
            )
        self._parameters[name] = value


class MockSecretStore(SecretStore):
    """In-memory secret store.

    Comes pre-configured with the ``dev-OneTimePassword`` secret.
    """

    def __init__(self, secrets: Dict[str, str] | None = None):
        if secrets is not None:
            self._secrets = dict(secrets)
        else:
            self._secrets = _default_secrets()
        self.calls: List[Tuple[str, str]] = []

    def add_secret(self, secret_id: str, value: str) -> None:
        self._secrets[secret_id] = value

    def get_secret_string(self, secret_id: str) -> str:
        self.calls.append(("get_secret_string", secret_id))
        if secret_id not in self._secrets:
            raise SecretNotFoundError(secret_id)
        return self._secrets[secret_id]
