"""mailproto - decode POP3 and IMAP responses into typed mail values.

This package turns already-received protocol buffers and fetch records into
immutable domain values, raising :class:`~mailproto.exceptions.MailError` for
anything it cannot decode.
"""

__version__ = "0.1.0"

from mailproto.config import Settings, get_settings
from mailproto.exceptions import ErrorKind, MailError

__all__ = ["ErrorKind", "MailError", "Settings", "get_settings", "__version__"]
