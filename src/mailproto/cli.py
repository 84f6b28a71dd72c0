"""Command-line interface for mailproto.

Decodes captured POP3 replies and raw messages from disk and prints the
resulting values as JSON. Useful when diagnosing what a server actually sent.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog
from pydantic import TypeAdapter

from mailproto import __version__
from mailproto.config import Settings, get_settings
from mailproto.exceptions import MailError
from mailproto.imap import parse_content
from mailproto.models import Capabilities, Stats, UniqueID
from mailproto.pop3 import (
    parse_capabilities,
    parse_server_response,
    parse_socket_address,
    parse_utf8_bytes,
    to_stats,
    to_stats_list,
    to_unique_id_list,
)

logger = structlog.get_logger()

_CAPABILITIES = TypeAdapter(Capabilities)
_STATS_LIST = TypeAdapter(list[Stats])
_UNIQUE_IDS = TypeAdapter(list[UniqueID])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mailproto", description="Decode mail protocol captures")
    subparsers = parser.add_subparsers(dest="command", required=True)

    text_commands = {
        "response": "Decode a single-line POP3 status reply",
        "stat": "Decode a STAT reply payload (without +OK)",
        "list": "Decode a multi-line LIST body",
        "uidl": "Decode a multi-line UIDL body",
        "capa": "Decode a multi-line CAPA body",
    }
    for name, help_text in text_commands.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", type=Path, help="File containing the captured text")

    content_parser = subparsers.add_parser("content", help="Select text/html bodies from a raw message")
    content_parser.add_argument("file", type=Path, help="Raw RFC 822 message file")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a server address")
    resolve_parser.add_argument("host", help="Server host name")
    resolve_parser.add_argument(
        "service",
        nargs="?",
        default=None,
        help="Port or service name (default: settings pop3_service)",
    )

    return parser


def _read_text(path: Path) -> str:
    return parse_utf8_bytes(path.read_bytes())


def _log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper())


def _text_handlers() -> dict[str, Callable[[str], Any]]:
    return {
        "response": lambda raw: {"response": parse_server_response(raw.rstrip("\r\n"))},
        "stat": lambda raw: to_stats(raw).model_dump(),
        "list": lambda raw: _STATS_LIST.dump_python(to_stats_list(raw), mode="json"),
        "uidl": lambda raw: _UNIQUE_IDS.dump_python(to_unique_id_list(raw), mode="json"),
        "capa": lambda raw: _CAPABILITIES.dump_python(parse_capabilities(raw), mode="json"),
    }


def _run(parsed: argparse.Namespace, settings: Settings) -> Any:
    if parsed.command == "content":
        return parse_content(parsed.file.read_bytes()).model_dump(mode="json")

    if parsed.command == "resolve":
        service = parsed.service or settings.pop3_service
        sockaddr = parse_socket_address(parsed.host, service)
        return {"host": sockaddr[0], "port": sockaddr[1]}

    handler = _text_handlers()[parsed.command]
    return handler(_read_text(parsed.file))


def main(args: list[str] | None = None) -> int:
    """Main entry point for the mailproto CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    # Configure logging
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(_log_level(settings)),
    )

    logger.debug("mailproto_cli_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        result = _run(parsed, settings)
    except MailError as exc:
        logger.debug("mailproto_cli_failed", command=parsed.command, kind=exc.kind.value)
        print(f"{exc.kind.value}: {exc.message}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
