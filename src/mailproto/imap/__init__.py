"""IMAP fetch record mapping."""

from .parsing import fetch_to_message, fetch_to_preview, parse_content
from .records import Envelope, EnvelopeAddress, FetchRecord, fetch_record_from_imapclient

__all__ = [
    "Envelope",
    "EnvelopeAddress",
    "FetchRecord",
    "fetch_record_from_imapclient",
    "fetch_to_message",
    "fetch_to_preview",
    "parse_content",
]
