# SPDX-License-Identifier: MIT
"""Apply client options to grpcio channels."""

from __future__ import annotations

import logging
from typing import Any

from grpc_options.client_option import ClientOption
from grpc_options.defaults import GRPC_MAX_CHANNEL_ARG
from grpc_options.errors import ConnectionError

logger = logging.getLogger(__name__)


def channel_args(option: ClientOption) -> list[tuple[str, int]]:
    """Translate an option into grpcio channel arguments.

    Connect timeout, write-buffer watermarks, channel type and the trace
    sampling limits have no grpcio channel argument and are not included.
    grpcio has no argument for the HTTP/2 initial window either; the
    flow-control window is passed as ``grpc.http2.lookahead_bytes``, the
    BDP-probe lookahead, which is the closest knob.

    Values above ``GRPC_MAX_CHANNEL_ARG`` are clamped to it, since grpcio
    only accepts C int arguments. For the idle timeout that limit means
    "never".

    Args:
        option: The client option to translate.

    Returns:
        List of (key, value) pairs suitable for ``options=``.
    """
    args = [
        ("grpc.keepalive_time_ms", option.keep_alive_time),
        ("grpc.keepalive_timeout_ms", option.keep_alive_timeout),
        (
            "grpc.keepalive_permit_without_calls",
            1 if option.keep_alive_without_calls else 0,
        ),
        ("grpc.http2.min_time_between_pings_ms", option.keep_alive_time),
        ("grpc.client_idle_timeout_ms", option.idle_timeout_millis),
        ("grpc.max_metadata_size", option.max_header_list_size),
        ("grpc.max_receive_message_length", option.max_inbound_message_size),
        ("grpc.http2.lookahead_bytes", option.flow_control_window),
    ]
    return [(key, min(value, GRPC_MAX_CHANNEL_ARG)) for key, value in args]


def open_channel(
    target: str,
    option: ClientOption | None = None,
    *,
    tls: bool = False,
) -> Any:
    """Open a grpcio channel configured from a client option.

    Args:
        target: Server address in format "host:port".
        option: Client option to apply. Defaults to ``ClientOption.default()``.
        tls: Whether to use TLS encryption.

    Returns:
        A ``grpc.Channel``.

    Raises:
        ConnectionError: If grpcio is missing or the channel cannot be created.
    """
    option = option or ClientOption.default()
    options = channel_args(option)

    try:
        import grpc

        if tls:
            credentials = grpc.ssl_channel_credentials()
            channel = grpc.secure_channel(target, credentials, options=options)
        else:
            channel = grpc.insecure_channel(target, options=options)
    except ImportError as e:
        raise ConnectionError("gRPC not available. Install with: pip install grpcio") from e
    except Exception as e:
        raise ConnectionError(f"Failed to open channel to {target}: {e}") from e

    logger.debug("Opened %s channel to %s with %s", "TLS" if tls else "insecure", target, option)
    return channel
