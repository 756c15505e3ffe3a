"""
SendEmail Lambda

Sends templated HTML emails through SES, with optional attachments read
from the attachments bucket.

Flow:
    Client (browser)
    → API Gateway
    → This Lambda
    → S3 (attachments) + SES (SendRawEmail)
"""

from lambdas.send_email.attachment_resolver import (
    resolve_attachment,
    resolve_attachments,
)
from lambdas.send_email.handler import handle_send_email, lambda_handler
from lambdas.send_email.template import render_general_template

__all__ = [
    "handle_send_email",
    "lambda_handler",
    "render_general_template",
    "resolve_attachment",
    "resolve_attachments",
]
