"""Factory implementations for creating onboarding stores."""

from onboarding.factories.aws import AWSFactory
from onboarding.factories.mock import MockFactory

__all__ = [
    "AWSFactory",
    "MockFactory",
]
