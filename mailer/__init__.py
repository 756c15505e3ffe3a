# Shared Infrastructure for the send-email Lambda
"""
Shared infrastructure components.

This package provides:
- Pydantic request models and dispatch value objects
- Tool implementations for S3 and SES
- Configuration management
- Custom exceptions
"""

from mailer.config import Settings, get_settings
from mailer.exceptions import MailerError, S3Error, SESError
from mailer.models import (
    AttachmentRef,
    DispatchResult,
    EmailRequest,
    FetchedObject,
    RenderedMessage,
    ResolvedAttachment,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "MailerError",
    "S3Error",
    "SESError",
    # Models
    "AttachmentRef",
    "DispatchResult",
    "EmailRequest",
    "FetchedObject",
    "RenderedMessage",
    "ResolvedAttachment",
]
