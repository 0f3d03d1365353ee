# SPDX-License-Identifier: MIT
"""Channel implementation selector."""

from __future__ import annotations

from enum import Enum

from grpc_options.errors import MissingValueError, UnknownChannelTypeError


class ChannelType(Enum):
    """Underlying transport implementation used by a channel."""

    AUTO = "auto"  # let the runtime pick the best available transport
    NIO = "nio"
    EPOLL = "epoll"

    @classmethod
    def from_name(cls, name: str | None) -> ChannelType:
        """Resolve a channel type from its name.

        Matching ignores case and surrounding whitespace.

        Args:
            name: Member name such as "AUTO" or "epoll".

        Returns:
            The matching ChannelType.

        Raises:
            MissingValueError: If name is None.
            UnknownChannelTypeError: If name matches no member.
        """
        if name is None:
            raise MissingValueError("channel_type")
        if not isinstance(name, str):
            raise UnknownChannelTypeError(str(name))
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownChannelTypeError(name) from None
