"""Factory for mock/testing stores."""

from typing import Dict, Optional

from onboarding.core.factory import StoreFactory
from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.core.secret_store import SecretStore


class MockFactory(StoreFactory):
    """Factory for in-memory stores.

    Creates MockRecordStore, MockParameterStore and MockSecretStore instances
    for testing and local development. The parameter and secret stores come
    pre-seeded with the ``dev-user1`` email parameter and the
    ``dev-OneTimePassword`` secret.

    Args:
        None. MockFactory does not accept any configuration arguments.

    Examples:
        >>> factory = MockFactory()
        >>> records = factory.create_record_store("UserEmailTable")
        >>> params = factory.create_parameter_store()
        >>> params.get_parameter("/user/emails/dev-user1")
        'user1@example.com'

    Note:
        - All data is stored in memory and lost when the process exits
        - Stores are cached so handlers built from one factory share state
    """

    def __init__(self) -> None:
        self._record_stores: Dict[str, RecordStore] = {}
        self._parameter_store: Optional[ParameterStore] = None
        self._secret_store: Optional[SecretStore] = None

    def create_record_store(self, table_name: str) -> RecordStore:
        if table_name not in self._record_stores:
            from onboarding.stores.mock import MockRecordStore

            self._record_stores[table_name] = MockRecordStore()
        return self._record_stores[table_name]

    def create_parameter_store(self) -> ParameterStore:
        if self._parameter_store is None:
            from onboarding.stores.mock import MockParameterStore

            self._parameter_store = MockParameterStore()
        return self._parameter_store

    def create_secret_store(self) -> SecretStore:
        if self._secret_store is None:
            from onboarding.stores.mock import MockSecretStore

            self._secret_store = MockSecretStore()
        return self._secret_store
