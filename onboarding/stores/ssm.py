"""SSM Parameter Store implementation of ParameterStore."""

from __future__ import annotations

from typing import Any, Optional

import boto3
import structlog
from botocore.exceptions import ClientError

from onboarding.core.parameter_store import ParameterStore
from onboarding.exceptions import ParameterNotFoundError, UpstreamError

log = structlog.get_logger()


class SSMParameterStore(ParameterStore):
    """AWS Systems Manager Parameter Store.

    Only plain ``String`` parameters are read and written.
    """

    def __init__(
        self,
        region: str,
        endpoint_url: Optional[str] = None,
        client: Any = None,
    ):
        self.region = region
        self._client = client or boto3.client(
            "ssm", region_name=region, endpoint_url=endpoint_url
        )

    def get_parameter(self, name: str) -> str:
        try:
            response = self._client.get_parameter(Name=name, WithDecryption=False)
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            if error_code == "ParameterNotFound":
                log.warning("Parameter not found", parameter_name=name)
                raise ParameterNotFoundError(name) from e
            log.error("SSM get_parameter failed", parameter_name=name, error=str(e))
            raise UpstreamError(
                f"Failed to read parameter '{name}': {e}", operation="get_parameter"
            ) from e

        return response["Parameter"]["Value"]

    def put_parameter(self, name: str, value: str, overwrite: bool = True) -> None:
        try:
            self._client.put_parameter(
                Name=name,
                Value=value,
                Type="String",
                Overwrite=overwrite,
            )
        except ClientError as e:
            log.error("SSM put_parameter failed", parameter_name=name, error=str(e))
            raise UpstreamError(
                f"Failed to write parameter '{name}': {e}", operation="put_parameter"
            ) from e

        log.info("Wrote parameter", parameter_name=name)
