"""Abstract interface for the secret store."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod

from onboarding.exceptions import MalformedSecretError
from onboarding.models import OneTimeCredential

PASSWORD_KEY = "password"
USERNAME_KEY = "username"


class SecretStore(ABC):
    """Read-only access to generated secrets.

    Secrets are created and generated outside this package; handlers only
    consume their current value.

    Implementations:
        - SecretsManagerSecretStore: AWS Secrets Manager
        - MockSecretStore: In-memory for testing
    """

    @abstractmethod
    def get_secret_string(self, secret_id: str) -> str:
        """Read the current string value of a secret.

        Args:
            secret_id: Secret name or ARN

        Returns:
            The raw secret string

        Raises:
            SecretNotFoundError: If the secret does not exist
            UpstreamError: On store errors
        """

    def get_credential(self, secret_id: str) -> OneTimeCredential:
        """Read a secret and parse it as a generated credential.

        The secret string must be a JSON object with a ``password`` field and
        optionally a ``username`` field.

        Args:
            secret_id: Secret name or ARN

        Returns:
            OneTimeCredential with the generated password

        Raises:
            SecretNotFoundError: If the secret does not exist
            MalformedSecretError: If the value is not JSON or has no password
        """
        raw = self.get_secret_string(secret_id)
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise MalformedSecretError(secret_id, "value is not valid JSON") from e

        if not isinstance(data, dict):
            raise MalformedSecretError(secret_id, "value is not a JSON object")
        password = data.get(PASSWORD_KEY)
        if not isinstance(password, str) or not password:
            raise MalformedSecretError(secret_id, f"missing '{PASSWORD_KEY}' field")

        return OneTimeCredential(username=data.get(USERNAME_KEY), password=password)
