"""Secrets Manager implementation of SecretStore."""

from __future__ import annotations

from typing import Any, Optional

import boto3
import structlog
from botocore.exceptions import ClientError

from onboarding.core.secret_store import SecretStore
from onboarding.exceptions import MalformedSecretError, SecretNotFoundError, UpstreamError

log = structlog.get_logger()


class SecretsManagerSecretStore(SecretStore):
    """AWS Secrets Manager secret store.

    Reads the ``SecretString`` of a secret. Binary secrets are not supported.
    """

    def __init__(
        self,
        region: str,
        endpoint_url: Optional[str] = None,
        client: Any = None,
    ):
        self.region = region
        self._client = client or boto3.client(
            "secretsmanager", region_name=region, endpoint_url=endpoint_url
        )

    def get_secret_string(self, secret_id: str) -> str:
        try:
            response = self._client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            if error_code == "ResourceNotFoundException":
                log.warning("Secret not found", secret_id=secret_id)
                raise SecretNotFoundError(secret_id) from e
            log.error("Secrets Manager get_secret_value failed", secret_id=secret_id, error=str(e))
            raise UpstreamError(
                f"Failed to read secret '{secret_id}': {e}",
                operation="get_secret_value",
            ) from e

        if "SecretString" not in response:
            raise MalformedSecretError(secret_id, "secret has no string value")
        return response["SecretString"]
