"""Abstract factory for creating store components."""

from abc import ABC, abstractmethod

from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.core.secret_store import SecretStore


class StoreFactory(ABC):
    """Abstract factory for creating the stores the handlers depend on.

    Implementations provide backend-specific instances of the record,
    parameter and secret stores. Once configured for a backend (AWS or mock)
    the factory can create any store the handlers need, and it caches what it
    creates so repeated calls during one Lambda container's lifetime reuse the
    same clients.

    Usage:
        Do not instantiate this class directly. Use create_factory() instead:

        >>> from onboarding import create_factory
        >>> factory = create_factory("aws", region="us-east-1")

    See Also:
        - create_factory(): Main entry point for creating factories
        - AWSFactory: DynamoDB, SSM and Secrets Manager implementation
        - MockFactory: In-memory implementation for testing
    """

    @abstractmethod
    def create_record_store(self, table_name: str) -> RecordStore:
        """Create a record store for a table.

        Args:
            table_name: Name of the table holding user records

        Returns:
            RecordStore: A backend-specific record store. Calling again with
                the same table name returns the cached instance.
        """

    @abstractmethod
    def create_parameter_store(self) -> ParameterStore:
        """Create a parameter store.

        Returns:
            ParameterStore: A backend-specific parameter store.
        """

    @abstractmethod
    def create_secret_store(self) -> SecretStore:
        """Create a secret store.

        Returns:
            SecretStore: A backend-specific secret store.
        """


def create_factory(provider_type: str, **kwargs) -> StoreFactory:
    """Create a factory for the specified backend.

    Args:
        provider_type: The backend to use.
            Valid values: "aws", "mock"

        **kwargs: Backend-specific configuration arguments.

            For provider_type="aws":
                region (str, required): AWS region of the table, parameters
                    and secret. Example: "us-east-1"
                endpoint_url (str, optional): Custom endpoint URL for testing
                    with LocalStack. Example: "http://localhost:4566"

            For provider_type="mock":
                No additional arguments required.

    Returns:
        StoreFactory: A configured factory instance.

    Raises:
        ValueError: If provider_type is unknown or required arguments are missing.

    Examples:
        >>> factory = create_factory("aws", region="us-east-1")
        >>> records = factory.create_record_store("UserEmailTable")

        >>> factory = create_factory("mock")
        >>> params = factory.create_parameter_store()
    """
    if provider_type == "aws":
        from onboarding.factories.aws import AWSFactory

        if "region" not in kwargs:
            raise ValueError(
                "Missing required argument 'region' for provider_type='aws'. "
                "Example: create_factory('aws', region='us-east-1')"
            )
        return AWSFactory(**kwargs)
    elif provider_type == "mock":
        from onboarding.factories.mock import MockFactory

        if kwargs:
            raise ValueError(
                f"MockFactory does not accept arguments, but got: {list(kwargs.keys())}. "
                f"Use: create_factory('mock')"
            )
        return MockFactory()
    else:
        raise ValueError(
            f"Unknown provider type: '{provider_type}'. "
            f"Valid types: 'aws', 'mock'. "
            f"Example: create_factory('aws', region='us-east-1')"
        )
