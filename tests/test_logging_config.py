"""Tests for structlog configuration."""

import json

import structlog

from onboarding.logging_config import REDACTED, configure_logging, redact_secrets


def test_redact_secrets_masks_sensitive_keys():
    event_dict = {"event": "Onboarding user", "password": "hunter2", "secret": "s3cr3t"}

    result = redact_secrets(None, "info", event_dict)

    assert result["password"] == REDACTED
    assert result["secret"] == REDACTED
    assert result["event"] == "Onboarding user"


def test_redact_secrets_leaves_other_keys():
    event_dict = {"event": "User onboarded", "email": "user1@example.com"}
    assert redact_secrets(None, "info", dict(event_dict)) == event_dict


def test_configure_logging_renders_json_without_password(capsys):
    configure_logging("INFO")
    log = structlog.get_logger()

    log.info("User onboarded", user_id="user1", password="hunter2")

    line = capsys.readouterr().out.strip()
    entry = json.loads(line)
    assert entry["event"] == "User onboarded"
    assert entry["level"] == "info"
    assert entry["password"] == REDACTED
    assert "hunter2" not in line
    assert "timestamp" in entry


def test_configure_logging_filters_below_level(capsys):
    configure_logging("WARNING")
    log = structlog.get_logger()

    log.info("hidden")
    log.warning("shown")

    output = capsys.readouterr().out
    assert "hidden" not in output
    assert "shown" in output
