"""
Custom Exceptions for the send-email Lambda

Each error carries the bucket/key or recipients involved so failures can
be logged with enough context to trace the request.
"""

from dataclasses import dataclass
from typing import Any


class MailerError(Exception):
    """Base exception for the mailer."""
    
    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)
    
    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


@dataclass
class S3Error(MailerError):
    """Attachment object could not be read from S3."""
    
    bucket: str
    key: str
    error_code: str | None = None
    
    def __init__(
        self,
        bucket: str,
        key: str,
        *,
        error_code: str | None = None,
        error_message: str | None = None,
    ) -> None:
        self.bucket = bucket
        self.key = key
        self.error_code = error_code
        super().__init__(
            f"Could not read s3://{bucket}/{key}: {error_message or 'Unknown error'}",
            error_code=error_code,
        )


@dataclass
class SESError(MailerError):
    """Message could not be handed to SES."""
    
    stage: str  # "build" before the SES call, "send_raw" for the call itself
    recipients: tuple[str, ...]
    error_code: str | None = None
    
    def __init__(
        self,
        stage: str,
        recipients: tuple[str, ...] | list[str],
        *,
        error_code: str | None = None,
        error_message: str | None = None,
    ) -> None:
        self.stage = stage
        self.recipients = tuple(recipients)
        self.error_code = error_code
        super().__init__(
            f"SES {stage} failed for {len(self.recipients)} recipient(s): "
            f"{error_message or 'Unknown error'}",
            recipients=self.recipients,
            error_code=error_code,
        )
