"""Tests for onboarding models."""

import json
import re

import pytest

from onboarding.exceptions import ValidationError
from onboarding.models import (
    CreateUserEvent,
    EmailUpdateRequest,
    EmailUpdateResult,
    HandlerResponse,
    MirrorResult,
    OnboardingResult,
    OneTimeCredential,
    UserRecord,
    utc_now_iso,
)


def _create_user_event(user_name="dev-user1"):
    return {
        "source": "aws.iam",
        "detail-type": "AWS API Call via CloudTrail",
        "detail": {
            "eventSource": "iam.amazonaws.com",
            "eventName": "CreateUser",
            "requestParameters": {"userName": user_name},
        },
    }


def test_utc_now_iso_format():
    """Test timestamps use millisecond precision and a Z suffix."""
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())


# ==================== UserRecord ====================


def test_user_record_to_item_skips_missing_timestamps():
    record = UserRecord(user_id="user1", email="a@b.com", created_at="2024-01-01T00:00:00.000Z")
    assert record.to_item() == {
        "userId": "user1",
        "email": "a@b.com",
        "createdAt": "2024-01-01T00:00:00.000Z",
    }


def test_user_record_from_item():
    record = UserRecord.from_item(
        {"userId": "user1", "email": "a@b.com", "updatedAt": "2024-01-02T00:00:00.000Z"}
    )
    assert record.user_id == "user1"
    assert record.email == "a@b.com"
    assert record.created_at is None
    assert record.updated_at == "2024-01-02T00:00:00.000Z"


def test_credential_repr_hides_password():
    credential = OneTimeCredential(username="test-user", password="hunter2")
    assert "hunter2" not in repr(credential)


# ==================== Requests ====================


def test_create_user_event_from_event():
    event = CreateUserEvent.from_event(_create_user_event())
    assert event.user_name == "dev-user1"
    assert event.event_name == "CreateUser"
    assert event.event_source == "iam.amazonaws.com"


@pytest.mark.parametrize(
    "event",
    [
        {},
        {"detail": {}},
        {"detail": {"requestParameters": {}}},
        {"detail": {"requestParameters": {"userName": ""}}},
        {"detail": {"requestParameters": None}},
    ],
)
def test_create_user_event_requires_user_name(event):
    with pytest.raises(ValidationError):
        CreateUserEvent.from_event(event)


def test_email_update_request_treats_empty_strings_as_missing():
    request = EmailUpdateRequest.from_event({"userId": "", "newEmail": ""})
    assert request.user_id is None
    assert request.new_email is None


def test_email_update_request_from_none():
    assert EmailUpdateRequest.from_event(None) == EmailUpdateRequest()


@pytest.mark.parametrize("event", ["user1", ["x"], 42])
def test_email_update_request_from_non_object(event):
    assert EmailUpdateRequest.from_event(event) == EmailUpdateRequest()


# ==================== Results ====================


def test_onboarding_result_body():
    result = OnboardingResult(
        user_name="dev-user1", user_id="user1", email="a@b.com", password="pw"
    )
    assert result.to_body() == {"userName": "dev-user1", "email": "a@b.com", "password": "pw"}
    assert "pw" not in repr(result)


def test_email_update_result_body():
    result = EmailUpdateResult(
        user_id="user1",
        previous_email="old@x.com",
        new_email="a@b.com",
        mirror=MirrorResult(parameter_name="/user/emails/dev-user1", succeeded=False, error="boom"),
    )
    assert result.to_body() == {
        "userId": "user1",
        "previousEmail": "old@x.com",
        "newEmail": "a@b.com",
        "status": "updated",
    }


def test_handler_response_serializes_body():
    response = HandlerResponse(status_code=404, body={"error": "User not found"}).to_dict()
    assert response["statusCode"] == 404
    assert json.loads(response["body"]) == {"error": "User not found"}
