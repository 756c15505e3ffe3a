"""
SendEmail Lambda Handler

Main entry point for sending templated emails with optional S3 attachments.

Trigger: API Gateway (proxy integration)
Output: SES raw email

Flow:
1. Validate the request body and configuration
2. Render the HTML body from the general template
3. Fetch attachments from S3 (failures are skipped)
4. Send the email via SES, exactly once
5. Map the outcome to an HTTP response
"""

import base64
import binascii
import json
import logging
from typing import Any, Protocol

import structlog
from pydantic import ValidationError

from lambdas.send_email.attachment_resolver import ObjectReader, resolve_attachments
from lambdas.send_email.template import render_general_template
from mailer.config import Settings
from mailer.models import (
    DispatchResult,
    EmailRequest,
    RenderedMessage,
    ResolvedAttachment,
    missing_required_fields,
)
from mailer.tools.email import get_email_dispatcher
from mailer.tools.s3 import get_object_reader

# Configure structured logging
logging.basicConfig(format="%(message)s")
logging.getLogger().setLevel(Settings().log_level)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

log = structlog.get_logger()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Content-Type": "application/json",
}

ERROR_NO_BODY = "No body provided"
ERROR_INVALID_JSON = "Invalid JSON body"
ERROR_INVALID_REQUEST = "Invalid request body"
ERROR_MISSING_FIELDS = "Missing required fields: from, to, subject, or body"
ERROR_BUCKET_NOT_SET = "EMAIL_BUCKET environment variable is not set"
ERROR_INTERNAL = "Internal server error"


class EmailDispatcher(Protocol):
    def send(self, message: RenderedMessage) -> str: ...


def _response(status_code: int, payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(payload),
    }


def _read_body(event: dict[str, Any]) -> str | None:
    """Return the raw request body, decoding API Gateway base64 payloads."""
    body = event.get("body")
    if not body:
        return None

    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            log.warning("base64_body_decode_failed")
            return None

    return body or None


def _build_message(
    request: EmailRequest,
    html: str,
    attachments: list[ResolvedAttachment],
) -> RenderedMessage:
    return RenderedMessage(
        sender=request.from_address,
        to=tuple(request.recipients("to")),
        cc=tuple(request.recipients("cc")),
        bcc=tuple(request.recipients("bcc")),
        subject=request.subject,
        html=html,
        attachments=tuple(attachments),
    )


def handle_send_email(
    event: dict[str, Any],
    *,
    settings: Settings,
    reader: ObjectReader,
    dispatcher: EmailDispatcher,
) -> dict[str, Any]:
    """
    Process one send-email request.

    Args:
        event: API Gateway proxy event
        settings: Configuration for this invocation
        reader: Object store reader for attachments
        dispatcher: Email dispatcher exposing send(RenderedMessage) -> str

    Returns:
        API Gateway proxy response
    """
    raw_body = _read_body(event)
    if raw_body is None:
        log.warning("request_body_missing")
        return _response(400, {"error": ERROR_NO_BODY})

    try:
        payload = json.loads(raw_body)
    except json.JSONDecodeError as e:
        log.warning("request_body_not_json", error=str(e))
        return _response(400, {"error": ERROR_INVALID_JSON})

    if not isinstance(payload, dict):
        log.warning("request_body_not_object", body_type=type(payload).__name__)
        return _response(400, {"error": ERROR_INVALID_JSON})

    missing = missing_required_fields(payload)
    if missing:
        log.warning("required_fields_missing", missing=missing)
        return _response(400, {"error": ERROR_MISSING_FIELDS})

    try:
        request = EmailRequest.model_validate(payload)
    except ValidationError as e:
        details = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        log.warning("request_body_invalid", errors=details)
        return _response(400, {"error": ERROR_INVALID_REQUEST, "details": details})

    # Checked even when the request has no attachments
    if not settings.email_bucket:
        log.error("email_bucket_not_configured")
        return _response(500, {"error": ERROR_BUCKET_NOT_SET})

    html = render_general_template(request.body, settings.sign, settings.logo)

    attachments = []
    refs = request.attachments or []
    if refs:
        attachments, failed = resolve_attachments(refs, settings.email_bucket, reader)
        if failed:
            log.warning(
                "some_attachments_skipped",
                failed_count=len(failed),
                failed_keys=[key for key, _ in failed],
            )

    message = _build_message(request, html, attachments)

    result = DispatchResult()
    try:
        message_id = dispatcher.send(message)
        result = DispatchResult(response=message_id, html=html)
    except Exception as e:
        # Dispatch failures are logged only; the caller still gets a 200
        log.error(
            "email_dispatch_failed",
            error=str(e),
            error_type=type(e).__name__,
        )

    log.info(
        "send_email_completed",
        failed=result.failed,
        message_id=result.response,
        attachment_count=len(attachments),
    )

    return _response(200, result.to_dict())


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    AWS Lambda handler for sending emails.

    Args:
        event: API Gateway proxy event with a JSON body
        context: Lambda context

    Returns:
        Response dict with statusCode, CORS headers and JSON body
    """
    request_id = getattr(context, "aws_request_id", "local")

    log.info("processing_send_email", request_id=request_id)

    try:
        return handle_send_email(
            event,
            settings=Settings(),
            reader=get_object_reader(),
            dispatcher=get_email_dispatcher(),
        )
    except Exception as e:
        log.error("lambda_handler_failed", request_id=request_id, error=str(e), exc_info=True)
        return _response(500, {"error": ERROR_INTERNAL})
