# ABOUTME: Shared fixtures for Cognito developer authentication tests
# ABOUTME: Provides stubbed Cognito Identity clients and a fake liveness endpoint

from datetime import datetime, timezone
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.stub import Stubber

ENDPOINT_URL = "https://cognito-identity.us-east-1.amazonaws.com"


@pytest.fixture
def options():
    return {
        "identity_pool_id": "us-east-1:abc",
        "developer_provider_name": "com.example.app",
        "token_duration_seconds": 3600,
        "region": "us-east-1",
    }


@pytest.fixture
def http_session():
    """requests.Session double answering /ping with 'healthy'."""
    session = MagicMock()
    session.get.return_value.text = "healthy"
    return session


@pytest.fixture
def mock_client():
    """cognito-identity client double that records calls."""
    client = MagicMock()
    client.meta.endpoint_url = ENDPOINT_URL
    return client


@pytest.fixture
def cognito_client():
    return boto3.client(
        "cognito-identity",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(cognito_client):
    with Stubber(cognito_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def expiration():
    return datetime(2030, 1, 1, tzinfo=timezone.utc)
