"""Helpers for mapping IMAP fetch records into preview and message values."""

from __future__ import annotations

from email import policy
from email.errors import MessageError
from email.message import EmailMessage
from email.parser import BytesParser

import structlog

from mailproto.codec import address_to_string, bytes_to_string
from mailproto.exceptions import ErrorKind, MailError
from mailproto.imap.records import Envelope, EnvelopeAddress, FetchRecord
from mailproto.models import Address, Content, Message, Preview

logger = structlog.get_logger()

_EMPTY_ENVELOPE = Envelope()


def _parse_uid(uid: int | None) -> str:
    if uid is None:
        raise MailError(ErrorKind.UNSUPPORTED, "Message must have a unique identifier")
    return str(uid)


def _parse_sent(record: FetchRecord) -> int | None:
    if record.internal_date is None:
        return None
    return int(record.internal_date.timestamp())


def _to_addresses(addresses: tuple[EnvelopeAddress, ...] | None) -> tuple[Address, ...]:
    if not addresses:
        return ()
    return tuple(
        Address(
            display_name=bytes_to_string(a.name),
            address=address_to_string(a.mailbox, a.host),
        )
        for a in addresses
    )


def _decode_part(part: EmailMessage) -> str:
    try:
        return part.get_content()
    except (LookupError, ValueError, MessageError) as exc:
        logger.warning("imap_mime_part_undecodable", content_type=part.get_content_type(), error=str(exc))
        raise MailError(ErrorKind.INVALID_RESPONSE, f"Failed to decode message part: {exc}") from exc


def parse_content(body: bytes) -> Content:
    """Select the text and HTML bodies from a raw RFC 822 message.

    Every MIME part is visited in document order. A part whose Content-Type
    starts with ``text/plain`` or ``text/html`` replaces any earlier part of
    the same type, so the last one wins.

    Args:
        body: The raw message bytes (``BODY[]``).

    Returns:
        Content: The selected bodies; either may be None.

    Raises:
        MailError: ``INVALID_RESPONSE`` if the message or a selected part
            cannot be decoded.
    """
    try:
        parsed = BytesParser(policy=policy.default).parsebytes(body)
    except (TypeError, ValueError, MessageError) as exc:
        logger.warning("imap_message_unparseable", error=str(exc))
        raise MailError(ErrorKind.INVALID_RESPONSE, f"Failed to parse message: {exc}") from exc

    text: str | None = None
    html: str | None = None

    for part in parsed.walk():
        for key, value in part.items():
            if key.lower() != "content-type":
                continue

            content_type = str(value).strip().lower()
            if content_type.startswith("text/plain"):
                text = _decode_part(part)
            elif content_type.startswith("text/html"):
                html = _decode_part(part)

    return Content(text=text, html=html)


def fetch_to_preview(record: FetchRecord) -> Preview:
    """Project a fetch record into a listing preview.

    Raises:
        MailError: ``UNSUPPORTED`` if the record has no UID.
    """
    message_id = _parse_uid(record.uid)
    envelope = record.envelope or _EMPTY_ENVELOPE

    return Preview(
        from_=_to_addresses(envelope.from_),
        id=message_id,
        sent=_parse_sent(record),
        subject=bytes_to_string(envelope.subject),
    )


def fetch_to_message(record: FetchRecord) -> Message:
    """Project a fetch record into a full message.

    Args:
        record: The fetched message, optionally including its body.

    Returns:
        Message: Addresses for every role, subject, date and content. A
            record without a body yields empty content.

    Raises:
        MailError: ``UNSUPPORTED`` if the record has no UID, or
            ``INVALID_RESPONSE`` if the body cannot be decoded.
    """
    message_id = _parse_uid(record.uid)
    envelope = record.envelope or _EMPTY_ENVELOPE

    content = parse_content(record.body) if record.body is not None else Content()

    return Message(
        from_=_to_addresses(envelope.from_),
        to=_to_addresses(envelope.to),
        cc=_to_addresses(envelope.cc),
        bcc=_to_addresses(envelope.bcc),
        id=message_id,
        sent=_parse_sent(record),
        subject=bytes_to_string(envelope.subject),
        content=content,
    )
