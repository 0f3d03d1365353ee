# SPDX-License-Identifier: MIT
"""Immutable gRPC client transport options and their validating builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any

from grpc_options.channel_type import ChannelType
from grpc_options.defaults import (
    DEFAULT_CHANNEL_TYPE,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_FLOW_CONTROL_WINDOW,
    DEFAULT_KEEPALIVE_TIME,
    DEFAULT_KEEPALIVE_TIMEOUT,
    DEFAULT_LIMIT_COUNT,
    DEFAULT_LIMIT_TIME,
    DEFAULT_MAX_HEADER_LIST_SIZE,
    DEFAULT_MAX_MESSAGE_SIZE,
    DEFAULT_MAX_TRACE_EVENT,
    DEFAULT_WRITE_BUFFER_HIGH_WATER_MARK,
    DEFAULT_WRITE_BUFFER_LOW_WATER_MARK,
    IDLE_TIMEOUT_MILLIS_DISABLE,
    INITIAL_FLOW_CONTROL_WINDOW,
    KEEPALIVE_WITHOUT_CALLS_DISABLE,
)
from grpc_options.errors import InvalidArgumentError, MissingValueError

logger = logging.getLogger(__name__)


def _render(name: str, values: list[tuple[str, Any]]) -> str:
    parts = []
    for key, value in values:
        if isinstance(value, ChannelType):
            value = value.name
        parts.append(f"{key}={value}")
    return f"{name}{{{', '.join(parts)}}}"


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid size or duration
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("Rejected %s=%r: not an integer", name, value)
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def _require_positive(name: str, value: Any) -> int:
    value = _require_int(name, value)
    if value <= 0:
        logger.debug("Rejected %s=%r", name, value)
        raise InvalidArgumentError(f"{name} must be positive")
    return value


def _require_non_negative(name: str, value: Any) -> int:
    value = _require_int(name, value)
    if value < 0:
        logger.debug("Rejected %s=%r", name, value)
        raise InvalidArgumentError(f"{name} must not be negative")
    return value


@dataclass(frozen=True, kw_only=True)
class ClientOption:
    """Transport tuning for a gRPC client connection.

    Instances are immutable and hold no resources, so one option can be shared
    by any number of channels and threads. Use ``ClientOption.Builder`` to
    create one with validated values.

    ``keep_alive_without_calls`` and ``idle_timeout_millis`` are always the
    disabled defaults and cannot be set, neither here nor on the builder.

    Example:
        builder = ClientOption.builder()
        builder.set_keep_alive_time(10_000).set_channel_type("epoll")
        option = builder.build()
    """

    keep_alive_time: int
    keep_alive_timeout: int
    keep_alive_without_calls: bool = field(default=KEEPALIVE_WITHOUT_CALLS_DISABLE, init=False)
    idle_timeout_millis: int = field(default=IDLE_TIMEOUT_MILLIS_DISABLE, init=False)
    max_header_list_size: int
    max_inbound_message_size: int
    flow_control_window: int

    # Socket level
    connect_timeout: int
    write_buffer_high_water_mark: int
    write_buffer_low_water_mark: int
    channel_type: ChannelType

    # Trace sampling
    max_trace_event: int
    limit_count: int
    limit_time: int

    def __post_init__(self) -> None:
        if self.channel_type is None:
            raise MissingValueError("channel_type")

    def __str__(self) -> str:
        """Render all fields in declaration order."""
        return _render("ClientOption", [(f.name, getattr(self, f.name)) for f in fields(self)])

    @classmethod
    def builder(cls) -> ClientOption.Builder:
        """Create a builder populated with the defaults."""
        return cls.Builder()

    @classmethod
    def default(cls) -> ClientOption:
        """Create an option with every field at its default."""
        return cls.Builder().build()

    class Builder:
        """Accumulates validated option values.

        Every setter checks its value immediately and raises without touching
        any state when the value is rejected. Setters return the builder so
        calls can be chained. A builder is meant for a single owner and is not
        thread-safe; ``build()`` may be called more than once.
        """

        def __init__(self) -> None:
            self._flow_control_window = DEFAULT_FLOW_CONTROL_WINDOW
            self._max_header_list_size = DEFAULT_MAX_HEADER_LIST_SIZE
            self._keep_alive_time = DEFAULT_KEEPALIVE_TIME
            self._keep_alive_timeout = DEFAULT_KEEPALIVE_TIMEOUT
            self._max_inbound_message_size = DEFAULT_MAX_MESSAGE_SIZE
            self._connect_timeout = DEFAULT_CONNECT_TIMEOUT
            self._write_buffer_high_water_mark = DEFAULT_WRITE_BUFFER_HIGH_WATER_MARK
            self._write_buffer_low_water_mark = DEFAULT_WRITE_BUFFER_LOW_WATER_MARK
            self._channel_type = ChannelType.from_name(DEFAULT_CHANNEL_TYPE)
            self._max_trace_event = DEFAULT_MAX_TRACE_EVENT
            self._limit_count = DEFAULT_LIMIT_COUNT
            self._limit_time = DEFAULT_LIMIT_TIME

        def build(self) -> ClientOption:
            """Snapshot the current values into a new ClientOption."""
            option = ClientOption(
                keep_alive_time=self._keep_alive_time,
                keep_alive_timeout=self._keep_alive_timeout,
                max_header_list_size=self._max_header_list_size,
                max_inbound_message_size=self._max_inbound_message_size,
                flow_control_window=self._flow_control_window,
                connect_timeout=self._connect_timeout,
                write_buffer_high_water_mark=self._write_buffer_high_water_mark,
                write_buffer_low_water_mark=self._write_buffer_low_water_mark,
                channel_type=self._channel_type,
                max_trace_event=self._max_trace_event,
                limit_count=self._limit_count,
                limit_time=self._limit_time,
            )
            logger.debug("Built %s", option)
            return option

        def set_flow_control_window(self, flow_control_window: int) -> ClientOption.Builder:
            """Set the HTTP/2 flow-control window in bytes.

            Raises:
                InvalidArgumentError: If below the protocol initial window (65535).
            """
            _require_int("flow_control_window", flow_control_window)
            if flow_control_window < INITIAL_FLOW_CONTROL_WINDOW:
                logger.debug("Rejected flow_control_window=%r", flow_control_window)
                raise InvalidArgumentError(
                    f"flow_control_window expected >= {INITIAL_FLOW_CONTROL_WINDOW}"
                )
            self._flow_control_window = flow_control_window
            return self

        def set_max_header_list_size(self, max_header_list_size: int) -> ClientOption.Builder:
            """Set the maximum header list size in bytes."""
            self._max_header_list_size = _require_positive(
                "max_header_list_size", max_header_list_size
            )
            return self

        def set_keep_alive_time(self, keep_alive_time: int) -> ClientOption.Builder:
            """Set the keep-alive ping interval in milliseconds."""
            self._keep_alive_time = _require_positive("keep_alive_time", keep_alive_time)
            return self

        def set_keep_alive_timeout(self, keep_alive_timeout: int) -> ClientOption.Builder:
            """Set how long to wait for a keep-alive ack, in milliseconds."""
            self._keep_alive_timeout = _require_positive("keep_alive_timeout", keep_alive_timeout)
            return self

        def set_max_inbound_message_size(self, max_inbound_message_size: int) -> ClientOption.Builder:
            """Set the largest message the client accepts, in bytes."""
            self._max_inbound_message_size = _require_positive(
                "max_inbound_message_size", max_inbound_message_size
            )
            return self

        def set_connect_timeout(self, connect_timeout: int) -> ClientOption.Builder:
            """Set the connect timeout in milliseconds."""
            self._connect_timeout = _require_positive("connect_timeout", connect_timeout)
            return self

        def set_write_buffer_high_water_mark(self, high_water_mark: int) -> ClientOption.Builder:
            """Set the outbound buffer size at which writes pause."""
            self._write_buffer_high_water_mark = _require_positive(
                "write_buffer_high_water_mark", high_water_mark
            )
            return self

        def set_write_buffer_low_water_mark(self, low_water_mark: int) -> ClientOption.Builder:
            """Set the outbound buffer size at which writes resume."""
            self._write_buffer_low_water_mark = _require_positive(
                "write_buffer_low_water_mark", low_water_mark
            )
            return self

        def set_channel_type(self, channel_type: str | ChannelType) -> ClientOption.Builder:
            """Select the channel implementation by name or member.

            Raises:
                MissingValueError: If channel_type is None.
                UnknownChannelTypeError: If the name is not a known channel type.
            """
            if isinstance(channel_type, ChannelType):
                self._channel_type = channel_type
            else:
                self._channel_type = ChannelType.from_name(channel_type)
            return self

        def set_max_trace_event(self, max_trace_event: int) -> ClientOption.Builder:
            """Set the maximum number of trace events; must not be negative."""
            self._max_trace_event = _require_non_negative("max_trace_event", max_trace_event)
            return self

        def set_limit_count(self, limit_count: int) -> ClientOption.Builder:
            """Set the sampled event count per limit window; must not be negative."""
            self._limit_count = _require_non_negative("limit_count", limit_count)
            return self

        def set_limit_time(self, limit_time: int) -> ClientOption.Builder:
            """Set the sampling limit window in milliseconds; must not be negative."""
            self._limit_time = _require_non_negative("limit_time", limit_time)
            return self

        def __repr__(self) -> str:
            return _render(
                "Builder",
                [
                    ("flow_control_window", self._flow_control_window),
                    ("max_header_list_size", self._max_header_list_size),
                    ("keep_alive_time", self._keep_alive_time),
                    ("keep_alive_timeout", self._keep_alive_timeout),
                    ("max_inbound_message_size", self._max_inbound_message_size),
                    ("connect_timeout", self._connect_timeout),
                    ("write_buffer_high_water_mark", self._write_buffer_high_water_mark),
                    ("write_buffer_low_water_mark", self._write_buffer_low_water_mark),
                    ("channel_type", self._channel_type),
                    ("max_trace_event", self._max_trace_event),
                    ("limit_count", self._limit_count),
                    ("limit_time", self._limit_time),
                ],
            )
