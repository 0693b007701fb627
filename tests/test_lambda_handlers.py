"""End-to-end tests for the Lambda entry points using moto."""

import json
from types import SimpleNamespace

import boto3
import pytest

from onboarding.exceptions import ParameterNotFoundError

TABLE_NAME = "UserEmailTable"
SECRET_NAME = "dev-OneTimePassword"


@pytest.fixture
def lambda_env(monkeypatch):
    monkeypatch.setenv("TABLE_NAME", TABLE_NAME)
    monkeypatch.setenv("SECRET_NAME", SECRET_NAME)
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)


@pytest.fixture
def provisioned(mock_services, lambda_env, region):
    """Create the table, seed parameter and secret the handlers expect."""
    dynamodb = boto3.client("dynamodb", region_name=region)
    dynamodb.create_table(
        TableName=TABLE_NAME,
        BillingMode="PAY_PER_REQUEST",
        AttributeDefinitions=[{"AttributeName": "userId", "AttributeType": "S"}],
        KeySchema=[{"AttributeName": "userId", "KeyType": "HASH"}],
    )
    ssm = boto3.client("ssm", region_name=region)
    ssm.put_parameter(
        Name="/user/emails/dev-user1", Value="user1@example.com", Type="String"
    )
    boto3.client("secretsmanager", region_name=region).create_secret(
        Name=SECRET_NAME,
        SecretString=json.dumps({"username": "test-user", "password": "Gen3rated"}),
    )
    return SimpleNamespace(dynamodb=dynamodb, ssm=ssm)


@pytest.fixture
def context():
    return SimpleNamespace(aws_request_id="req-123", function_name="test")


def _create_user_event(user_name):
    return {
        "source": "aws.iam",
        "detail-type": "AWS API Call via CloudTrail",
        "detail": {
            "eventSource": "iam.amazonaws.com",
            "eventName": "CreateUser",
            "requestParameters": {"userName": user_name},
        },
    }


def test_notifier_onboards_user(provisioned, load_lambda_module, context):
    module = load_lambda_module("onboarding_notifier_handler.py")

    response = module.handler(_create_user_event("dev-user1"), context)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {
        "userName": "dev-user1",
        "email": "user1@example.com",
        "password": "Gen3rated",
    }
    item = provisioned.dynamodb.get_item(
        TableName=TABLE_NAME, Key={"userId": {"S": "user1"}}
    )["Item"]
    assert item["email"]["S"] == "user1@example.com"
    assert item["createdAt"]["S"].endswith("Z")


def test_notifier_reuses_handler_between_invocations(provisioned, load_lambda_module, context):
    module = load_lambda_module("onboarding_notifier_handler.py")

    module.handler(_create_user_event("dev-user1"), context)
    first = module.get_notifier()
    module.handler(_create_user_event("dev-user1"), context)

    assert module.get_notifier() is first


def test_notifier_propagates_missing_parameter(provisioned, load_lambda_module, context):
    module = load_lambda_module("onboarding_notifier_handler.py")

    with pytest.raises(ParameterNotFoundError):
        module.handler(_create_user_event("dev-user2"), context)

    response = provisioned.dynamodb.get_item(
        TableName=TABLE_NAME, Key={"userId": {"S": "user2"}}
    )
    assert "Item" not in response


def test_update_email_flow(provisioned, load_lambda_module, context):
    """Test onboarding followed by an email update mirrors to SSM."""
    notifier = load_lambda_module("onboarding_notifier_handler.py")
    updater = load_lambda_module("update_email_handler.py")
    notifier.handler(_create_user_event("dev-user1"), context)

    response = updater.handler({"userId": "user1", "newEmail": "newemail@example.com"}, context)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {
        "userId": "user1",
        "previousEmail": "user1@example.com",
        "newEmail": "newemail@example.com",
        "status": "updated",
    }
    parameter = provisioned.ssm.get_parameter(Name="/user/emails/dev-user1")["Parameter"]
    assert parameter["Value"] == "newemail@example.com"

    read_back = updater.handler({"userId": "user1"}, context)
    assert json.loads(read_back["body"]) == {"userId": "user1", "email": "newemail@example.com"}


def test_update_email_status_codes(provisioned, load_lambda_module, context):
    updater = load_lambda_module("update_email_handler.py")

    assert updater.handler({}, context)["statusCode"] == 400
    assert updater.handler({"userId": "ghost"}, context)["statusCode"] == 404


def test_update_email_missing_table_returns_500(mock_services, lambda_env, load_lambda_module, context):
    updater = load_lambda_module("update_email_handler.py")

    response = updater.handler({"userId": "user1", "newEmail": "a@b.com"}, context)

    assert response["statusCode"] == 500
    body = json.loads(response["body"])
    assert body["error"] == "Internal server error"
    assert body["message"]


def test_update_email_invalid_configuration_returns_500(
    mock_services, lambda_env, monkeypatch, load_lambda_module, context
):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    updater = load_lambda_module("update_email_handler.py")

    response = updater.handler({"userId": "user1"}, context)

    assert response["statusCode"] == 500
    body = json.loads(response["body"])
    assert body["error"] == "Internal server error"
    assert "staging" in body["message"]
    assert updater._updater is None
