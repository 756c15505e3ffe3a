# Shared Tools
"""
AWS tool implementations used by the send-email Lambda.
"""

from mailer.tools.email import (
    SESEmailDispatcher,
    build_mime_message,
    get_email_dispatcher,
)
from mailer.tools.s3 import (
    S3ObjectReader,
    get_object_reader,
)

__all__ = [
    # Email tools
    "SESEmailDispatcher",
    "build_mime_message",
    "get_email_dispatcher",
    # S3 tools
    "S3ObjectReader",
    "get_object_reader",
]
