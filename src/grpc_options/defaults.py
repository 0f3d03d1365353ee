# SPDX-License-Identifier: MIT
"""Default values and hard limits for gRPC client options."""

from __future__ import annotations

DEFAULT_KEEPALIVE_TIME = 30 * 1000  # 30 seconds
DEFAULT_KEEPALIVE_TIMEOUT = 60 * 1000  # 60 seconds
IDLE_TIMEOUT_MILLIS_DISABLE = 30 * 24 * 60 * 60 * 1000  # 30 days, effectively never
KEEPALIVE_WITHOUT_CALLS_DISABLE = False

# https://tools.ietf.org/html/rfc7540#section-6.5.2
DEFAULT_MAX_HEADER_LIST_SIZE = 8 * 1024
DEFAULT_MAX_MESSAGE_SIZE = 4 * 1024 * 1024

# https://tools.ietf.org/html/rfc7540#section-6.9.2
DEFAULT_FLOW_CONTROL_WINDOW = 1 * 1024 * 1024  # 1MiB
INITIAL_FLOW_CONTROL_WINDOW = 65535

DEFAULT_CONNECT_TIMEOUT = 3000
DEFAULT_WRITE_BUFFER_HIGH_WATER_MARK = 32 * 1024 * 1024
DEFAULT_WRITE_BUFFER_LOW_WATER_MARK = 16 * 1024 * 1024
DEFAULT_CHANNEL_TYPE = "AUTO"

# Client-side trace sampling
DEFAULT_MAX_TRACE_EVENT = 0
DEFAULT_LIMIT_COUNT = 100
DEFAULT_LIMIT_TIME = 60 * 1000

# grpcio stores integer channel arguments as a C int; INT_MAX also means
# "infinite" for grpc.client_idle_timeout_ms
GRPC_MAX_CHANNEL_ARG = 2**31 - 1
