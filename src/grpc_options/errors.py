# SPDX-License-Identifier: MIT
"""Error types for gRPC client options."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Error codes raised while building or applying client options."""

    UNKNOWN = 0
    INVALID_ARGUMENT = 1
    MISSING_VALUE = 2
    UNKNOWN_CHANNEL_TYPE = 3
    UNAVAILABLE = 4


class GrpcOptionsError(Exception):
    """Base exception for all grpc_options errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN) -> None:
        """Initialize with message and error code."""
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        """Return string representation."""
        return f"[{self.code.name}] {self.message}"


class InvalidArgumentError(GrpcOptionsError):
    """A setter received a value outside its allowed domain."""

    def __init__(self, message: str) -> None:
        """Initialize invalid argument error."""
        super().__init__(message, ErrorCode.INVALID_ARGUMENT)


class MissingValueError(GrpcOptionsError):
    """A required value was supplied as None."""

    def __init__(self, field_name: str) -> None:
        """Initialize missing value error."""
        super().__init__(f"{field_name} must not be None", ErrorCode.MISSING_VALUE)
        self.field_name = field_name


class UnknownChannelTypeError(GrpcOptionsError):
    """Channel type name does not match any known variant."""

    def __init__(self, name: str) -> None:
        """Initialize unknown channel type error."""
        super().__init__(f"Unknown channel type: {name!r}", ErrorCode.UNKNOWN_CHANNEL_TYPE)
        self.name = name


class ConnectionError(GrpcOptionsError):
    """Error opening a channel with the configured options."""

    def __init__(self, message: str) -> None:
        """Initialize connection error."""
        super().__init__(message, ErrorCode.UNAVAILABLE)
