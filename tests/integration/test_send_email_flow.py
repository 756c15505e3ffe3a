"""
End-to-end tests for the SendEmail Lambda.

Runs lambda_handler against moto-backed S3 and SES using the
process-wide collaborators, exactly as deployed.
"""

import json
from email import message_from_string
from email.policy import default as default_policy

from moto.core import DEFAULT_ACCOUNT_ID
from moto.ses.models import ses_backends

from lambdas.send_email.handler import lambda_handler
from lambdas.send_email.template import render_general_template


def _sent_messages() -> list:
    """Raw messages accepted by the mocked SES backend."""
    return ses_backends[DEFAULT_ACCOUNT_ID]["ap-southeast-2"].sent_messages


class TestSendEmailFlow:
    """Full API Gateway → S3 → SES flow."""

    def test_send_without_attachments(self, mock_aws_all, api_event, lambda_context):
        response = lambda_handler(
            api_event({
                "from": "a@example.com",
                "to": "b@example.com",
                "subject": "Hi",
                "body": "Hello",
            }),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        body = json.loads(response["body"])
        assert body["res"]
        assert body["html"] == render_general_template(
            "Hello",
            "Kind regards,<br/>The Team",
            "https://cdn.example.com/logo.png",
        )

    def test_send_with_attachments_and_missing_object(
        self, mock_aws_all, api_event, lambda_context
    ):
        response = lambda_handler(
            api_event({
                "from": "Accounts <accounts@example.com>",
                "to": ["b@example.com"],
                "cc": "c@example.com",
                "bcc": "d@example.com",
                "subject": "Your invoice",
                "body": "<p>Please find your invoice attached.</p>",
                "attachments": [
                    {"folder": "invoices", "filename": "inv-001.pdf", "original": "Invoice.pdf"},
                    {"folder": "invoices", "filename": "gone.pdf", "original": "Gone.pdf"},
                ],
            }),
            lambda_context,
        )

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["res"]
        assert "<p>Please find your invoice attached.</p>" in body["html"]

        sent = _sent_messages()
        assert len(sent) == 1
        assert sorted(sent[0].destinations) == [
            "b@example.com",
            "c@example.com",
            "d@example.com",
        ]

        raw = sent[0].raw_data
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        parsed = message_from_string(raw, policy=default_policy)
        assert parsed["Subject"] == "Your invoice"
        assert parsed["Bcc"] is None

        attachments = list(parsed.iter_attachments())
        assert len(attachments) == 1
        assert attachments[0].get_filename() == "Invoice.pdf"
        assert attachments[0].get_content_type() == "application/pdf"
        assert attachments[0].get_content() == b"%PDF-1.4 invoice"

    def test_unverified_sender_returns_failed(self, mock_aws_all, api_event, lambda_context):
        response = lambda_handler(
            api_event({
                "from": "someone@unverified.test",
                "to": "b@example.com",
                "subject": "Hi",
                "body": "Hello",
            }),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {"failed": True}

    def test_missing_fields_short_circuits(self, mock_aws_all, api_event, lambda_context):
        response = lambda_handler(
            api_event({"subject": "Hi", "body": "Hello"}),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {
            "error": "Missing required fields: from, to, subject, or body"
        }
