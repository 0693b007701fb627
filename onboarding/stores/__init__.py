"""Store implementations backing the onboarding handlers."""

from onboarding.stores.dynamodb import DynamoDBRecordStore
from onboarding.stores.mock import MockParameterStore, MockRecordStore, MockSecretStore
from onboarding.stores.secrets_manager import SecretsManagerSecretStore
from onboarding.stores.ssm import SSMParameterStore

__all__ = [
    "DynamoDBRecordStore",
    "MockParameterStore",
    "MockRecordStore",
    "MockSecretStore",
    "SSMParameterStore",
    "SecretsManagerSecretStore",
]
