"""AWS Lambda handler for the IAM CreateUser onboarding notifier.

Triggered by an EventBridge rule matching CloudTrail ``CreateUser`` calls
(source ``aws.iam``). Records the new user's email in DynamoDB and returns the
generated one-time password.

Environment Variables:
    TABLE_NAME: DynamoDB table holding user records (default "UserEmailTable")
    SECRET_NAME: Secrets Manager secret with the one-time password
        (default "{ENVIRONMENT}-OneTimePassword")
    ENVIRONMENT: Environment label, one of dev, test, prod (default "dev")
    AWS_ENDPOINT_URL: Optional endpoint for LocalStack
    LOG_LEVEL: Minimum log level (default "INFO")

Deployment:
    Handler: onboarding_notifier_handler.handler
    Package this file together with the onboarding package.
"""

from typing import Optional

import structlog

from onboarding import HandlerConfig, OnboardingNotifier, create_factory
from onboarding.logging_config import configure_logging

_notifier: Optional[OnboardingNotifier] = None


def get_notifier() -> OnboardingNotifier:
    """Build the notifier on first use and reuse it for warm invocations."""
    global _notifier
    if _notifier is None:
        config = HandlerConfig.from_env()
        configure_logging(config.log_level)
        factory = create_factory(
            "aws", region=config.region, endpoint_url=config.endpoint_url
        )
        _notifier = OnboardingNotifier.from_config(config, factory)
    return _notifier


def handler(event, context):
    """Handle an IAM CreateUser event.

    Args:
        event: EventBridge event with ``detail.requestParameters.userName``
        context: Lambda execution context

    Returns:
        ``{"statusCode": 200, "body": "{\\"userName\\", \\"email\\", \\"password\\"}"}``

    Raises:
        Any store or validation error, so the platform records the failure.
    """
    notifier = get_notifier()
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=getattr(context, "aws_request_id", None),
        handler="onboarding_notifier",
    )
    return notifier.handle(event, context)
