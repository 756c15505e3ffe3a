"""
Email Tools

MIME assembly and SES raw-email dispatch for rendered messages.
"""

from email.message import EmailMessage
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from mailer.config import get_settings
from mailer.exceptions import SESError
from mailer.models import RenderedMessage

log = structlog.get_logger()


def _get_client():
    """Get SES client."""
    settings = get_settings()
    return boto3.client("ses", **settings.ses_config)


def build_mime_message(message: RenderedMessage) -> EmailMessage:
    """
    Build the MIME representation of a rendered message.
    
    Bcc recipients are deliberately left out of the headers; they only
    appear in the SES envelope destinations.
    """
    mime = EmailMessage()
    mime["From"] = message.sender
    mime["To"] = ", ".join(message.to)
    if message.cc:
        mime["Cc"] = ", ".join(message.cc)
    mime["Subject"] = message.subject
    mime.set_content(message.html, subtype="html")
    
    for attachment in message.attachments:
        maintype, _, subtype = attachment.content_type.partition("/")
        mime.add_attachment(
            attachment.content,
            maintype=maintype,
            subtype=subtype or "octet-stream",
            filename=attachment.filename,
        )
    
    return mime


class SESEmailDispatcher:
    """Submits rendered messages to SES. One attempt per message, no retries."""
    
    def __init__(self, client=None, *, configuration_set: str | None = None) -> None:
        self._client = client or _get_client()
        self._configuration_set = configuration_set
    
    def send(self, message: RenderedMessage) -> str:
        """
        Send a rendered message via SES SendRawEmail.
        
        Args:
            message: Fully assembled outbound message
            
        Returns:
            SES message ID
            
        Raises:
            SESError: If the message cannot be encoded, SES rejects it,
                or the transport fails
        """
        recipients = message.destinations
        
        try:
            raw_message = build_mime_message(message).as_bytes()
        except (ValueError, TypeError) as e:
            log.error(
                "mime_build_failed",
                to=list(message.to),
                error=str(e),
            )
            raise SESError(
                "build",
                recipients,
                error_message=str(e),
            ) from e
        
        send_params = {
            "Source": message.sender,
            "Destinations": recipients,
            "RawMessage": {"Data": raw_message},
        }
        
        if self._configuration_set:
            send_params["ConfigurationSetName"] = self._configuration_set
        
        log.info(
            "sending_raw_email",
            to=list(message.to),
            cc_count=len(message.cc),
            bcc_count=len(message.bcc),
            subject=message.subject[:50],
            attachment_count=len(message.attachments),
        )
        
        try:
            response = self._client.send_raw_email(**send_params)
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            error_message = e.response["Error"]["Message"]
            
            log.error(
                "ses_send_failed",
                to=list(message.to),
                error_code=error_code,
                error_message=error_message,
            )
            
            raise SESError(
                "send_raw",
                recipients,
                error_code=error_code,
                error_message=f"{error_code}: {error_message}",
            ) from e
        except BotoCoreError as e:
            log.error("ses_send_failed", to=list(message.to), error=str(e))
            raise SESError("send_raw", recipients, error_message=str(e)) from e
        
        message_id = response["MessageId"]
        
        log.info("ses_email_sent", message_id=message_id, to=list(message.to))
        
        return message_id


@lru_cache(maxsize=1)
def get_email_dispatcher() -> SESEmailDispatcher:
    """Process-wide dispatcher, created on first use and reused across invocations."""
    settings = get_settings()
    return SESEmailDispatcher(configuration_set=settings.ses_configuration_set)
