"""Shared pytest fixtures for onboarding tests."""

import importlib.util
import os
import sys
import uuid
from pathlib import Path

import pytest
import structlog
from moto import mock_aws

from onboarding.stores.mock import MockParameterStore, MockRecordStore, MockSecretStore

LAMBDA_DIR = Path(__file__).resolve().parent.parent / "lambda"
FIXED_NOW = "2024-05-01T12:00:00.000Z"


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for testing."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def mock_services(aws_credentials):
    """Mock DynamoDB, SSM and Secrets Manager."""
    with mock_aws():
        yield


@pytest.fixture
def region():
    """AWS region for tests."""
    return "us-east-1"


@pytest.fixture
def clock():
    """Clock returning a fixed timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def record_store():
    return MockRecordStore()


@pytest.fixture
def parameter_store():
    return MockParameterStore()


@pytest.fixture
def secret_store():
    return MockSecretStore()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration made by a test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def load_lambda_module():
    """Load a module from the lambda/ directory under a fresh name.

    The directory name is a Python keyword, so entry points are loaded by
    path. Each load gets its own module object so cached handlers never leak
    between tests.
    """
    loaded = []

    def _load(filename: str):
        name = f"lambda_{Path(filename).stem}_{uuid.uuid4().hex}"
        spec = importlib.util.spec_from_file_location(name, LAMBDA_DIR / filename)
        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        spec.loader.exec_module(module)
        loaded.append(name)
        return module

    yield _load

    for name in loaded:
        sys.modules.pop(name, None)
