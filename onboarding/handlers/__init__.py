"""Request handlers invoked by the Lambda entry points."""

from onboarding.handlers.email_updater import EmailUpdater
from onboarding.handlers.notifier import OnboardingNotifier

__all__ = [
    "EmailUpdater",
    "OnboardingNotifier",
]
