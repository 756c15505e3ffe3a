"""
Pytest Configuration and Shared Fixtures

Provides moto AWS mocking, API Gateway events, and test utilities.
"""

import base64
import json
import os
from typing import Any, Callable
from unittest.mock import MagicMock

import boto3
import pytest
from moto import mock_aws

# Set test environment before importing application modules
os.environ["AWS_REGION"] = "ap-southeast-2"
os.environ["AWS_DEFAULT_REGION"] = "ap-southeast-2"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["EMAIL_BUCKET"] = "test-email-attachments"
os.environ["SIGN"] = "Kind regards,<br/>The Team"
os.environ["LOGO"] = "https://cdn.example.com/logo.png"

TEST_BUCKET = "test-email-attachments"
TEST_REGION = "ap-southeast-2"


# --- Cache Fixtures ---


@pytest.fixture(autouse=True)
def clear_cached_clients():
    """Drop cached settings and AWS clients between tests."""
    from mailer.config import get_settings
    from mailer.tools.email import get_email_dispatcher
    from mailer.tools.s3 import get_object_reader

    get_settings.cache_clear()
    get_object_reader.cache_clear()
    get_email_dispatcher.cache_clear()
    yield
    get_settings.cache_clear()
    get_object_reader.cache_clear()
    get_email_dispatcher.cache_clear()


# --- Settings Fixtures ---


@pytest.fixture
def settings():
    """Settings built from the test environment."""
    from mailer.config import Settings

    return Settings(
        email_bucket=TEST_BUCKET,
        sign="Kind regards,<br/>The Team",
        logo="https://cdn.example.com/logo.png",
        aws_region=TEST_REGION,
    )


# --- AWS Mocking Fixtures ---


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    return {
        "aws_access_key_id": "testing",
        "aws_secret_access_key": "testing",
        "region_name": TEST_REGION,
    }


@pytest.fixture
def mock_s3(aws_credentials):
    """Create a mocked attachments bucket with a couple of objects."""
    with mock_aws():
        s3 = boto3.client("s3", **aws_credentials)
        s3.create_bucket(
            Bucket=TEST_BUCKET,
            CreateBucketConfiguration={"LocationConstraint": TEST_REGION},
        )
        s3.put_object(
            Bucket=TEST_BUCKET,
            Key="invoices/inv-001.pdf",
            Body=b"%PDF-1.4 invoice",
            ContentType="application/pdf",
        )
        s3.put_object(
            Bucket=TEST_BUCKET,
            Key="reports/summary.csv",
            Body=b"id,total\n1,42\n",
            ContentType="text/csv",
        )
        yield s3


@pytest.fixture
def mock_ses(aws_credentials):
    """Create a mocked SES client with a verified sending domain."""
    with mock_aws():
        ses = boto3.client("ses", **aws_credentials)
        ses.verify_domain_identity(Domain="example.com")
        yield ses


@pytest.fixture
def mock_aws_all(aws_credentials):
    """Mock S3 and SES together for end-to-end flows."""
    with mock_aws():
        s3 = boto3.client("s3", **aws_credentials)
        s3.create_bucket(
            Bucket=TEST_BUCKET,
            CreateBucketConfiguration={"LocationConstraint": TEST_REGION},
        )
        s3.put_object(
            Bucket=TEST_BUCKET,
            Key="invoices/inv-001.pdf",
            Body=b"%PDF-1.4 invoice",
            ContentType="application/pdf",
        )

        ses = boto3.client("ses", **aws_credentials)
        ses.verify_domain_identity(Domain="example.com")

        yield {"s3": s3, "ses": ses}


# --- Collaborator Fixtures ---


@pytest.fixture
def mock_reader():
    """Object reader stub; configure get_object per test."""
    return MagicMock()


@pytest.fixture
def mock_dispatcher():
    """Dispatcher stub returning a queued message ID."""
    dispatcher = MagicMock()
    dispatcher.send.return_value = "queued-id-1"
    return dispatcher


# --- Event Fixtures ---


@pytest.fixture
def email_payload() -> dict[str, Any]:
    """Minimal valid send-email request."""
    return {
        "from": "a@example.com",
        "to": "b@example.com",
        "subject": "Hi",
        "body": "Hello",
    }


@pytest.fixture
def api_event() -> Callable[..., dict[str, Any]]:
    """Factory for API Gateway proxy events."""

    def _make(payload: Any = None, *, raw: str | None = None, base64_encoded: bool = False):
        if raw is None:
            raw = json.dumps(payload) if payload is not None else None
        if raw is not None and base64_encoded:
            raw = base64.b64encode(raw.encode("utf-8")).decode("ascii")
        return {
            "resource": "/send-email",
            "path": "/send-email",
            "httpMethod": "POST",
            "headers": {"Content-Type": "application/json"},
            "requestContext": {"requestId": "req-123", "stage": "test"},
            "body": raw,
            "isBase64Encoded": base64_encoded,
        }

    return _make


@pytest.fixture
def lambda_context():
    """Minimal Lambda context object."""
    context = MagicMock()
    context.aws_request_id = "test-request-id"
    context.function_name = "send-email"
    return context
