# SPDX-License-Identifier: MIT
"""Validated, immutable transport options for gRPC clients.

Basic usage:

    from grpc_options import ClientOption, open_channel

    builder = ClientOption.builder()
    builder.set_keep_alive_time(10_000)
    builder.set_flow_control_window(2 * 1024 * 1024)
    builder.set_channel_type("epoll")
    option = builder.build()

    channel = open_channel("localhost:50051", option)
"""

from grpc_options.channel import channel_args, open_channel
from grpc_options.channel_type import ChannelType
from grpc_options.client_option import ClientOption
from grpc_options.errors import (
    ConnectionError,
    ErrorCode,
    GrpcOptionsError,
    InvalidArgumentError,
    MissingValueError,
    UnknownChannelTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Options
    "ClientOption",
    "ChannelType",
    # Channels
    "channel_args",
    "open_channel",
    # Errors
    "GrpcOptionsError",
    "ErrorCode",
    "InvalidArgumentError",
    "MissingValueError",
    "UnknownChannelTypeError",
    "ConnectionError",
]
