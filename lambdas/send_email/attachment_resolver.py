"""
Attachment Resolver Module

Fetches the attachments referenced by a send-email request from S3.
Failed attachments are logged and skipped; the email is still sent with
whatever could be resolved.
"""

from typing import Protocol

import structlog

from mailer.models import AttachmentRef, FetchedObject, ResolvedAttachment

log = structlog.get_logger()


class ObjectReader(Protocol):
    def get_object(self, bucket: str, key: str) -> FetchedObject: ...


def resolve_attachment(
    ref: AttachmentRef,
    bucket: str,
    reader: ObjectReader,
) -> ResolvedAttachment:
    """
    Fetch a single attachment.

    Raises:
        S3Error: If the object cannot be read
    """
    log.info(
        "resolving_attachment",
        bucket=bucket,
        key=ref.key,
        original=ref.original,
    )

    fetched = reader.get_object(bucket, ref.key)
    attachment = ResolvedAttachment.from_fetched(ref, fetched)

    log.info(
        "attachment_resolved",
        key=ref.key,
        content_type=attachment.content_type,
        size_bytes=attachment.size_bytes,
    )

    return attachment


def resolve_attachments(
    refs: list[AttachmentRef],
    bucket: str,
    reader: ObjectReader,
) -> tuple[list[ResolvedAttachment], list[tuple[str, Exception]]]:
    """
    Resolve every attachment reference, one at a time.

    Args:
        refs: Attachment references from the request
        bucket: Attachments bucket name
        reader: Object store reader

    Returns:
        Tuple of (resolved attachments in request order, failed (key, exception) list)
    """
    resolved: list[ResolvedAttachment] = []
    failed: list[tuple[str, Exception]] = []

    for ref in refs:
        try:
            resolved.append(resolve_attachment(ref, bucket, reader))
        except Exception as e:
            log.error(
                "attachment_fetch_failed",
                bucket=bucket,
                key=ref.key,
                error=str(e),
            )
            failed.append((ref.key, e))

    log.info(
        "attachments_resolved",
        resolved_count=len(resolved),
        failed_count=len(failed),
    )

    return resolved, failed
