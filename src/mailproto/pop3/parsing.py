"""Helpers for parsing POP3 server replies into domain values.

Buffers handed to these functions are complete replies; multi-line bodies
have already had their terminating ``.`` line removed by the session layer.
"""

from __future__ import annotations

import socket
import string
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

import structlog

from mailproto.exceptions import ErrorKind, MailError
from mailproto.models import (
    Capabilities,
    Capability,
    ExpireCapability,
    ImplementationCapability,
    LoginDelayCapability,
    PipeliningCapability,
    RespCodesCapability,
    SaslCapability,
    Stats,
    TopCapability,
    UidlCapability,
    UniqueID,
    UserCapability,
)

logger = structlog.get_logger()

OK = "+OK"
ERR = "-ERR"
SPACE = " "
LF = "\n"

_U32_BITS = 32
_U64_BITS = 64
_MAX_PORT = 65535

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

T = TypeVar("T")


def parse_utf8_bytes(raw: bytes) -> str:
    """Decode a received buffer as strict UTF-8.

    Raises:
        MailError: ``INVALID_RESPONSE`` if the bytes are not valid UTF-8.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MailError(
            ErrorKind.INVALID_RESPONSE,
            f"Failed to parse server response into utf8 encoded string: {exc}",
        ) from exc


def parse_server_response(full_response: str) -> str:
    """Strip the status indicator from a single-line reply.

    Args:
        full_response: The reply line, e.g. ``"+OK 2 320"``.

    Returns:
        The trimmed text following ``+OK``.

    Raises:
        MailError: ``SERVER_ERROR`` with the trimmed text after ``-ERR``, or
            ``INVALID_RESPONSE`` for short or unrecognised replies.
    """
    ok_size = len(OK) + 1

    if len(full_response) < ok_size:
        raise MailError(ErrorKind.INVALID_RESPONSE, "Response is too short")

    if full_response.startswith(OK):
        return full_response[ok_size:].strip()

    if full_response.startswith(ERR):
        reason = full_response[len(ERR) + 1 :].strip()
        logger.debug("pop3_server_error", reason=reason)
        raise MailError(ErrorKind.SERVER_ERROR, reason)

    raise MailError(ErrorKind.INVALID_RESPONSE, f"Response is invalid: '{full_response}'")


def _parse_unsigned(token: str | None, bits: int, field: str, line: str) -> int:
    if not token:
        raise MailError(ErrorKind.INVALID_RESPONSE, f"Missing {field} in line: '{line}'")
    if not (token.isascii() and token.isdigit()):
        raise MailError(ErrorKind.INVALID_RESPONSE, f"Invalid {field} '{token}' in line: '{line}'")
    value = int(token)
    if value >= 2**bits:
        raise MailError(ErrorKind.INVALID_RESPONSE, f"{field} '{token}' out of range in line: '{line}'")
    return value


def _split_pair(line: str) -> tuple[str | None, str | None]:
    # Anything after the second token is extra server information.
    tokens = line.strip().split(SPACE, 2)
    first = tokens[0] if tokens[0] else None
    second = tokens[1].strip() if len(tokens) > 1 else None
    return first, second or None


def _parse_lines(body: str, parse_line: Callable[[str], T]) -> list[T]:
    lines = (line.strip() for line in body.split(LF))
    return [parse_line(line) for line in lines if line]


def to_stats(line: str) -> Stats:
    """Parse ``"<count> <size>"`` from a STAT reply or a LIST line."""
    count, size = _split_pair(line)
    return Stats(
        message_count=_parse_unsigned(count, _U32_BITS, "message count", line),
        drop_size=_parse_unsigned(size, _U64_BITS, "drop size", line),
    )


def to_stats_list(body: str) -> list[Stats]:
    """Parse every non-empty line of a multi-line LIST body, in order."""
    return _parse_lines(body, to_stats)


def to_unique_id(line: str) -> UniqueID:
    """Parse ``"<msg> <unique-id>"`` from a UIDL reply or listing line."""
    index, unique_id = _split_pair(line)
    message_index = _parse_unsigned(index, _U32_BITS, "message index", line)
    if unique_id is None:
        raise MailError(ErrorKind.INVALID_RESPONSE, f"Missing unique id in line: '{line}'")
    return UniqueID(message_index=message_index, unique_id=unique_id)


def to_unique_id_list(body: str) -> list[UniqueID]:
    """Parse every non-empty line of a multi-line UIDL body, in order."""
    return _parse_lines(body, to_unique_id)


def _seconds(token: str, line: str) -> timedelta:
    return timedelta(seconds=_parse_unsigned(token, _U64_BITS, "seconds", line))


def _parse_capability(line: str) -> Capability | None:
    tokens = line.strip().translate(_ASCII_UPPER).split()
    if not tokens:
        return None

    name, args = tokens[0], tokens[1:]

    if name == "TOP":
        return TopCapability()
    if name == "USER":
        return UserCapability()
    if name == "SASL":
        return SaslCapability(mechanisms=tuple(args))
    if name == "RESP-CODES":
        return RespCodesCapability()
    if name == "LOGIN-DELAY":
        delay = _seconds(args[0], line) if args else timedelta(0)
        return LoginDelayCapability(delay=delay)
    if name == "PIPELINING":
        return PipeliningCapability()
    if name == "EXPIRE":
        if not args or args[0] == "NEVER":
            return ExpireCapability(expires=None)
        return ExpireCapability(expires=_seconds(args[0], line))
    if name == "UIDL":
        return UidlCapability()
    if name == "IMPLEMENTATION":
        return ImplementationCapability(name=SPACE.join(args))

    logger.debug("pop3_capability_ignored", capability=name)
    return None


def parse_capabilities(response: str) -> Capabilities:
    """Parse a CAPA body into the capabilities this package understands.

    Lines are matched case-insensitively. Unknown capabilities are skipped
    so that new server extensions never break parsing.

    Args:
        response: The multi-line CAPA body.

    Returns:
        Capabilities in the order the server listed them.

    Raises:
        MailError: ``INVALID_RESPONSE`` if a known capability carries a
            malformed numeric argument.
    """
    capabilities: Capabilities = []
    for line in response.split(LF):
        capability = _parse_capability(line)
        if capability is not None:
            capabilities.append(capability)
    return capabilities


def _check_port(host: str, service: str | int) -> None:
    if isinstance(service, int):
        port = service
    elif service.isascii() and service.isdigit():
        port = int(service)
    else:
        return

    if not 0 <= port <= _MAX_PORT:
        raise MailError(
            ErrorKind.PARSE_SERVER_ADDRESS,
            f"Failed to parse given address: port {service} out of range for {host}",
        )


def parse_socket_address(host: str, service: str | int) -> tuple[Any, ...]:
    """Resolve a server address and return the first candidate.

    Args:
        host: Host name or literal address.
        service: Port number or service name.

    Returns:
        The socket address tuple of the first resolved candidate.

    Raises:
        MailError: ``PARSE_SERVER_ADDRESS`` if the port is out of range, or
            resolution fails or yields nothing.
    """
    _check_port(host, service)

    try:
        candidates = socket.getaddrinfo(host, service, type=socket.SOCK_STREAM)
    except (OSError, UnicodeError) as exc:
        logger.warning("pop3_address_resolution_failed", host=host, service=service, error=str(exc))
        raise MailError(
            ErrorKind.PARSE_SERVER_ADDRESS,
            f"Failed to parse given address: {exc}",
        ) from exc

    if not candidates:
        logger.warning("pop3_address_resolution_empty", host=host, service=service)
        raise MailError(
            ErrorKind.PARSE_SERVER_ADDRESS,
            f"Failed to parse given address: no addresses found for {host}:{service}",
        )

    _family, _type, _proto, _canonname, sockaddr = candidates[0]
    return sockaddr


def map_tls_error(error: BaseException) -> MailError:
    """Wrap a failed TLS handshake, keeping its message verbatim."""
    return MailError(ErrorKind.SECURE_CONNECTION, str(error))


def map_write_error(error: BaseException) -> MailError:
    """Wrap a failed command write on the server connection."""
    return MailError(ErrorKind.SEND_COMMAND, f"Failed to send command: {error}")
