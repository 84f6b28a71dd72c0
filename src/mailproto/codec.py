"""Helpers for turning envelope byte fragments into text."""

from __future__ import annotations

AT_SIGN = "@"


def bytes_to_string(value: bytes | None) -> str | None:
    """Lossily decode a UTF-8 fragment, keeping ``None`` for absent fields."""
    if value is None:
        return None
    return value.decode("utf-8", errors="replace")


def address_to_string(mailbox: bytes | None, host: bytes | None) -> str | None:
    """Rebuild ``mailbox@host`` from the two halves of an envelope address.

    Args:
        mailbox: Local part as sent by the server.
        host: Domain part as sent by the server.

    Returns:
        The joined address, or None when either half is missing. A partial
        address is never produced.
    """
    local = bytes_to_string(mailbox)
    domain = bytes_to_string(host)
    if local is None or domain is None:
        return None
    return f"{local}{AT_SIGN}{domain}"
