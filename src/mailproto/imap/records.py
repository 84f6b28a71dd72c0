"""Fetch record types handed in by the IMAP session layer.

The shapes mirror what an IMAP ``FETCH (UID INTERNALDATE ENVELOPE BODY[])``
returns: envelope strings and address halves stay as raw bytes until they are
mapped into domain values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from imapclient.response_types import Address as ImapAddress
from imapclient.response_types import Envelope as ImapEnvelope

_BODY_KEYS = ("BODY[]", "RFC822")


@dataclass(frozen=True)
class EnvelopeAddress:
    """One address structure from an envelope."""

    name: bytes | None = None
    mailbox: bytes | None = None
    host: bytes | None = None


@dataclass(frozen=True)
class Envelope:
    """The envelope fields this package projects."""

    subject: bytes | None = None
    from_: tuple[EnvelopeAddress, ...] | None = None
    to: tuple[EnvelopeAddress, ...] | None = None
    cc: tuple[EnvelopeAddress, ...] | None = None
    bcc: tuple[EnvelopeAddress, ...] | None = None


@dataclass(frozen=True)
class FetchRecord:
    """A single fetched message."""

    uid: int | None = None
    internal_date: datetime | None = None
    envelope: Envelope | None = None
    body: bytes | None = None


def _as_bytes(value: bytes | str | None) -> bytes | None:
    if value is None or isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def _convert_addresses(addresses: Iterable[ImapAddress] | None) -> tuple[EnvelopeAddress, ...] | None:
    if addresses is None:
        return None
    return tuple(
        EnvelopeAddress(
            name=_as_bytes(a.name),
            mailbox=_as_bytes(a.mailbox),
            host=_as_bytes(a.host),
        )
        for a in addresses
    )


def _convert_envelope(envelope: ImapEnvelope | None) -> Envelope | None:
    if envelope is None:
        return None
    return Envelope(
        subject=_as_bytes(envelope.subject),
        from_=_convert_addresses(envelope.from_),
        to=_convert_addresses(envelope.to),
        cc=_convert_addresses(envelope.cc),
        bcc=_convert_addresses(envelope.bcc),
    )


def fetch_record_from_imapclient(data: Mapping[Any, Any]) -> FetchRecord:
    """Convert one message entry of ``IMAPClient.fetch()`` into a FetchRecord.

    Args:
        data: The per-message response dict, keyed by fetch item name as
            bytes or str (e.g. ``b"ENVELOPE"``).

    Returns:
        FetchRecord: Record with whichever items the fetch included.
    """

    items: dict[str, Any] = {}
    for key, value in data.items():
        name = key.decode("ascii") if isinstance(key, bytes) else str(key)
        items[name.upper()] = value

    uid = items.get("UID")
    body = next((items[k] for k in _BODY_KEYS if items.get(k) is not None), None)

    return FetchRecord(
        uid=int(uid) if uid is not None else None,
        internal_date=items.get("INTERNALDATE"),
        envelope=_convert_envelope(items.get("ENVELOPE")),
        body=_as_bytes(body),
    )
