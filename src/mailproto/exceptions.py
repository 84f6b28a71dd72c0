"""Error taxonomy for mailproto.

Every failure raised by the parsers is a :class:`MailError` carrying one of a
closed set of :class:`ErrorKind` values plus the diagnostic text of the layer
that failed.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    INVALID_RESPONSE = "invalid_response"
    SERVER_ERROR = "server_error"
    PARSE_SERVER_ADDRESS = "parse_server_address"
    SECURE_CONNECTION = "secure_connection"
    SEND_COMMAND = "send_command"
    UNSUPPORTED = "unsupported"
    SERIALIZE_JSON = "serialize_json"
    # An already typed error forwarded unchanged from a lower layer.
    MAIL_ERROR = "mail_error"


class MailError(Exception):
    """Exception raised for every mail protocol decoding failure.

    Attributes are read-only once the error is constructed.
    """

    def __init__(self, kind: ErrorKind, message: str, *, source: MailError | None = None) -> None:
        super().__init__(message)
        self._kind = ErrorKind(kind)
        self._message = message
        self._source = source

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def source(self) -> MailError | None:
        """The forwarded error when ``kind`` is ``MAIL_ERROR``."""
        return self._source

    @classmethod
    def forward(cls, error: MailError) -> MailError:
        """Wrap a lower-level error without altering its diagnostic text.

        Args:
            error: The error raised by the protocol layer.

        Returns:
            MailError: A ``MAIL_ERROR`` error whose ``source`` is ``error``.
        """
        return cls(ErrorKind.MAIL_ERROR, error.message, source=error)

    def to_dict(self) -> dict[str, str]:
        return {"kind": self._kind.value, "message": self._message}

    def __repr__(self) -> str:
        return f"MailError(kind={self._kind.value!r}, message={self._message!r})"
