"""Global test configuration and fixtures."""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from cognito_client.config.manager import ConfigurationManager
from cognito_client.domain.base.ports import LoggingPort
from cognito_client.providers.aws.infrastructure.aws_client import AWSClient
from cognito_client.providers.aws.infrastructure.handlers.user_pool_client_handler import (
    UserPoolClientHandler,
)
from cognito_client.resource.user_pool_client import UserPoolClientResource

TEST_REGION = "us-east-1"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    for name in ("AWS_PROFILE", "AWS_ENDPOINT_URL", "COGNITO_CLIENT_CONFIG", "AWS_REGION"):
        os.environ.pop(name, None)

    os.environ.update(
        {
            "AWS_DEFAULT_REGION": TEST_REGION,
            "AWS_ACCESS_KEY_ID": "testing",
            "AWS_SECRET_ACCESS_KEY": "testing",
            "AWS_SECURITY_TOKEN": "testing",
            "AWS_SESSION_TOKEN": "testing",
            "LOG_LEVEL": "DEBUG",
            "LOG_CONSOLE_ENABLED": "true",
        }
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def logger() -> Mock:
    """Mock logger."""
    return Mock(spec=LoggingPort)


@pytest.fixture
def config_manager() -> ConfigurationManager:
    """Configuration pinned to the test region."""
    return ConfigurationManager(overrides={"aws": {"region": TEST_REGION}})


@pytest.fixture
def aws_mocks():
    """Activate moto for the duration of a test."""
    with mock_aws():
        yield


@pytest.fixture
def cognito_idp(aws_mocks):
    """Create a mocked cognito-idp client."""
    return boto3.client("cognito-idp", region_name=TEST_REGION)


@pytest.fixture
def user_pool_id(cognito_idp) -> str:
    """Create a user pool to own test clients."""
    return cognito_idp.create_user_pool(PoolName="test-pool")["UserPool"]["Id"]


@pytest.fixture
def aws_client(aws_mocks, config_manager, logger) -> AWSClient:
    """AWS client wrapper bound to moto."""
    return AWSClient(config_manager, logger)


@pytest.fixture
def handler(aws_client, logger) -> UserPoolClientHandler:
    """User pool client API handler bound to moto."""
    return UserPoolClientHandler(aws_client, logger)


@pytest.fixture
def resource(handler, logger) -> UserPoolClientResource:
    """User pool client resource adapter bound to moto."""
    return UserPoolClientResource(handler, logger)


@pytest.fixture
def client_config(user_pool_id) -> dict[str, Any]:
    """Declared configuration exercising every field."""
    return {
        "name": "web-client",
        "user_pool_id": user_pool_id,
        "generate_secret": True,
        "explicit_auth_flows": ["ADMIN_NO_SRP_AUTH"],
        "read_attributes": ["email", "name"],
        "write_attributes": ["name"],
        "refresh_token_validity": 300,
        "allowed_oauth_flows": ["code", "implicit"],
        "allowed_oauth_flows_user_pool_client": True,
        "allowed_oauth_scopes": ["openid", "email"],
        "callback_urls": ["https://www.example.com/callback"],
        "default_redirect_uri": "https://www.example.com/callback",
        "logout_urls": ["https://www.example.com/logout"],
        "supported_identity_providers": ["COGNITO"],
    }
