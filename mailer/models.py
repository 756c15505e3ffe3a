"""
Email Models

Request models parsed from the inbound API Gateway event body, and the
request-scoped value objects that flow from attachment resolution through
to SES dispatch.
"""

import mimetypes
from dataclasses import dataclass, field
from email.utils import formataddr, getaddresses, parseaddr
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONTENT_TYPE = "application/octet-stream"

REQUIRED_FIELDS = ("from", "to", "subject", "body")


def split_recipients(value: str | list[str] | None) -> list[str]:
    """
    Normalise a recipient field into a flat list of addresses.
    
    Accepts a single address, a comma-separated address list, or a list of
    either. Display names are preserved ("Jane <jane@example.com>").
    """
    if not value:
        return []
    
    values = [value] if isinstance(value, str) else value
    
    return [
        formataddr((name, address))
        for name, address in getaddresses(values)
        if address
    ]


def missing_required_fields(payload: dict[str, Any]) -> list[str]:
    """
    Names of required fields that are absent or empty in a raw request body.
    
    Runs before model validation, so a request missing "from" is reported as
    such even when another field has the wrong type. Recipient fields count
    as empty when they hold no address.
    """
    missing = []
    for name in REQUIRED_FIELDS:
        value = payload.get(name)
        if name == "to" and _is_address_value(value):
            present = bool(split_recipients(value))
        else:
            present = bool(value)
        if not present:
            missing.append(name)
    return missing


def _is_address_value(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


class AttachmentRef(BaseModel):
    """Reference to an attachment object stored in the attachments bucket."""
    
    model_config = ConfigDict(frozen=True)
    
    folder: str = Field(..., description="Folder (key prefix) holding the object")
    filename: str = Field(..., description="Object name within the folder")
    original: str = Field(..., description="Filename presented to the recipient")
    
    @property
    def key(self) -> str:
        """S3 object key."""
        return f"{self.folder}/{self.filename}"


class EmailRequest(BaseModel):
    """
    Send-email request carried in the event body.
    
    Required fields are optional at the model level so the handler can report
    missing fields with a single, stable error message.
    """
    
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    from_address: str | None = Field(default=None, alias="from")
    to: str | list[str] | None = None
    cc: str | list[str] | None = None
    bcc: str | list[str] | None = None
    subject: str | None = None
    body: str | None = None
    attachments: list[AttachmentRef] | None = None
    
    def recipients(self, field_name: str) -> list[str]:
        """Normalised addresses for "to", "cc" or "bcc"."""
        return split_recipients(getattr(self, field_name))
    


@dataclass(frozen=True)
class FetchedObject:
    """Object payload read from S3."""
    
    content: bytes
    content_type: str | None = None


@dataclass(frozen=True)
class ResolvedAttachment:
    """Attachment ready to be added to the outbound message."""
    
    filename: str
    content: bytes
    content_type: str
    
    @classmethod
    def from_fetched(cls, ref: AttachmentRef, fetched: FetchedObject) -> "ResolvedAttachment":
        """Build from a reference and its fetched object."""
        content_type = fetched.content_type
        if not content_type:
            content_type, _ = mimetypes.guess_type(ref.original)
        return cls(
            filename=ref.original,
            content=fetched.content,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
        )
    
    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class RenderedMessage:
    """Fully assembled outbound email."""
    
    sender: str
    to: tuple[str, ...]
    subject: str
    html: str
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()
    attachments: tuple[ResolvedAttachment, ...] = field(default_factory=tuple)
    
    @property
    def destinations(self) -> list[str]:
        """Bare envelope addresses for every recipient, including Bcc."""
        return [parseaddr(addr)[1] for addr in (*self.to, *self.cc, *self.bcc)]


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a dispatch attempt, shaped for the HTTP response body."""
    
    response: str | None = None
    html: str | None = None
    
    @property
    def failed(self) -> bool:
        return self.response is None
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the response payload."""
        if self.failed:
            return {"failed": True}
        return {"res": self.response, "html": self.html}
