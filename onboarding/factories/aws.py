"""Factory for AWS-backed stores."""

from typing import Dict, Optional

from onboarding.core.factory import StoreFactory
from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.core.secret_store import SecretStore


class AWSFactory(StoreFactory):
    """Factory for DynamoDB, SSM Parameter Store and Secrets Manager stores.

    Args:
        region: AWS region where the table, parameters and secret live.
            Examples: "us-east-1", "eu-west-1"

        endpoint_url: Optional custom endpoint URL for testing with LocalStack
            or other AWS-compatible services. If not specified, uses the
            standard AWS endpoints.
            Example: "http://localhost:4566" for LocalStack

    Examples:
        Basic usage in a Lambda function:
            >>> factory = AWSFactory(region="us-east-1")
            >>> records = factory.create_record_store("UserEmailTable")
            >>> params = factory.create_parameter_store()

        Using with LocalStack for local testing:
            >>> factory = AWSFactory(
            ...     region="us-east-1",
            ...     endpoint_url="http://localhost:4566"
            ... )

    Note:
        - Stores are cached; a Lambda container reuses its boto3 clients
          across invocations.
        - AWS credentials must be configured via environment variables, AWS
          config files, or IAM roles.
    """

    def __init__(self, region: str, endpoint_url: Optional[str] = None):
        self.region = region
        self.endpoint_url = endpoint_url
        self._record_stores: Dict[str, RecordStore] = {}
        self._parameter_store: Optional[ParameterStore] = None
        self._secret_store: Optional[SecretStore] = None

    def create_record_store(self, table_name: str) -> RecordStore:
        if table_name not in self._record_stores:
            from onboarding.stores.dynamodb import DynamoDBRecordStore

            self._record_stores[table_name] = DynamoDBRecordStore(
                table_name=table_name,
                region=self.region,
                endpoint_url=self.endpoint_url,
            )
        return self._record_stores[table_name]

    def create_parameter_store(self) -> ParameterStore:
        if self._parameter_store is None:
            from onboarding.stores.ssm import SSMParameterStore

            self._parameter_store = SSMParameterStore(
                region=self.region, endpoint_url=self.endpoint_url
            )
        return self._parameter_store

    def create_secret_store(self) -> SecretStore:
        if self._secret_store is None:
            from onboarding.stores.secrets_manager import SecretsManagerSecretStore

            self._secret_store = SecretsManagerSecretStore(
                region=self.region, endpoint_url=self.endpoint_url
            )
        return self._secret_store
