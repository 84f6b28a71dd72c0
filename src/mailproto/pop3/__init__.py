"""POP3 reply parsing."""

from .parsing import (
    map_tls_error,
    map_write_error,
    parse_capabilities,
    parse_server_response,
    parse_socket_address,
    parse_utf8_bytes,
    to_stats,
    to_stats_list,
    to_unique_id,
    to_unique_id_list,
)

__all__ = [
    "map_tls_error",
    "map_write_error",
    "parse_capabilities",
    "parse_server_response",
    "parse_socket_address",
    "parse_utf8_bytes",
    "to_stats",
    "to_stats_list",
    "to_unique_id",
    "to_unique_id_list",
]
