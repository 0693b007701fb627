"""AWS Lambda handler for updating a user's email address.

Invoked directly, e.g.:

    aws lambda invoke --function-name <UpdateEmailLambda> \
        --payload '{"userId":"user1","newEmail":"newemail@example.com"}' response.json

Environment Variables:
    TABLE_NAME: DynamoDB table holding user records (default "UserEmailTable")
    ENVIRONMENT: Environment label used in parameter names (default "dev")
    AWS_ENDPOINT_URL: Optional endpoint for LocalStack
    LOG_LEVEL: Minimum log level (default "INFO")

An invalid configuration (e.g. ENVIRONMENT=staging) is reported as a 500
response like any other internal failure.
"""

from typing import Optional

import structlog

from onboarding import (
    ConfigurationError,
    EmailUpdater,
    HandlerConfig,
    HandlerResponse,
    create_factory,
)
from onboarding.logging_config import configure_logging

log = structlog.get_logger()

_updater: Optional[EmailUpdater] = None


def get_updater() -> EmailUpdater:
    global _updater
    if _updater is None:
        config = HandlerConfig.from_env()
        configure_logging(config.log_level)
        factory = create_factory(
            "aws", region=config.region, endpoint_url=config.endpoint_url
        )
        _updater = EmailUpdater.from_config(config, factory)
    return _updater


def handler(event, context):
    """Handle an email update request.

    Args:
        event: ``{"userId": str, "newEmail": str (optional)}``
        context: Lambda execution context

    Returns:
        Response dict with statusCode 200, 400, 404 or 500
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=getattr(context, "aws_request_id", None),
        handler="update_email",
    )
    try:
        updater = get_updater()
    except ConfigurationError as e:
        log.error("Invalid handler configuration", setting=e.setting, error=e.message)
        return HandlerResponse(
            e.status_code, {"error": "Internal server error", "message": e.message}
        ).to_dict()
    return updater.handle(event, context)
