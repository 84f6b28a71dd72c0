"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from mailproto.imap.records import Envelope, EnvelopeAddress, FetchRecord


@pytest.fixture
def sample_capa_body() -> str:
    """Provide a CAPA body as sent by a typical server."""
    return (
        "TOP\r\n"
        "USER\r\n"
        "SASL PLAIN login\r\n"
        "RESP-CODES\r\n"
        "LOGIN-DELAY 900\r\n"
        "PIPELINING\r\n"
        "EXPIRE 60\r\n"
        "UIDL\r\n"
        "IMPLEMENTATION Shlemazle Mail Server\r\n"
    )


@pytest.fixture
def sample_multipart_message() -> bytes:
    """Provide a multipart/alternative message with text and HTML parts."""
    return (
        b"From: Alice <alice@example.com>\r\n"
        b"To: bob@example.com\r\n"
        b"Subject: Lunch\r\n"
        b"MIME-Version: 1.0\r\n"
        b'Content-Type: multipart/alternative; boundary="sep"\r\n'
        b"\r\n"
        b"--sep\r\n"
        b"Content-Type: text/plain; charset=utf-8\r\n"
        b"\r\n"
        b"See you at noon.\r\n"
        b"--sep\r\n"
        b"Content-Type: text/html; charset=utf-8\r\n"
        b"\r\n"
        b"<p>See you at noon.</p>\r\n"
        b"--sep--\r\n"
    )


@pytest.fixture
def sample_envelope() -> Envelope:
    """Provide an envelope with every role populated."""
    return Envelope(
        subject=b"Lunch",
        from_=(EnvelopeAddress(name=b"Alice", mailbox=b"alice", host=b"example.com"),),
        to=(
            EnvelopeAddress(name=None, mailbox=b"bob", host=b"example.com"),
            EnvelopeAddress(name=b"Carol", mailbox=b"carol", host=b"example.org"),
        ),
        cc=(EnvelopeAddress(name=b"Dave", mailbox=b"dave", host=None),),
        bcc=None,
    )


@pytest.fixture
def sample_fetch_record(sample_envelope: Envelope, sample_multipart_message: bytes) -> FetchRecord:
    """Provide a fetch record with a UID, date, envelope and body."""
    return FetchRecord(
        uid=4827,
        internal_date=datetime(2023, 5, 1, 12, 0, tzinfo=timezone.utc),
        envelope=sample_envelope,
        body=sample_multipart_message,
    )
