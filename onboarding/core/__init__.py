"""Core abstractions for the onboarding stores."""

from onboarding.core.factory import StoreFactory, create_factory
from onboarding.core.parameter_store import ParameterStore
from onboarding.core.record_store import RecordStore
from onboarding.core.secret_store import SecretStore

__all__ = [
    "ParameterStore",
    "RecordStore",
    "SecretStore",
    "StoreFactory",
    "create_factory",
]
