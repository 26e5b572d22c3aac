"""
Address Family Value Object
Protocol families an endpoint address can belong to.
"""

import socket
from enum import Enum


class AddressFamily(str, Enum):
    """Protocol family of an endpoint address."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    UNKNOWN = "unknown"

    def to_socket_family(self) -> int:
        """Map to the OS socket family (AF_UNSPEC for UNKNOWN)."""
        if self is AddressFamily.IPV4:
            return socket.AF_INET
        if self is AddressFamily.IPV6:
            return socket.AF_INET6
        return socket.AF_UNSPEC

    @classmethod
    def from_socket_family(cls, family: int) -> "AddressFamily":
        """
        Map an OS socket family to an AddressFamily.

        Args:
            family: Integer socket family tag (e.g. socket.AF_INET)

        Returns:
            The matching member, or UNKNOWN for any unsupported tag
        """
        if family == socket.AF_INET:
            return cls.IPV4
        if family == socket.AF_INET6:
            return cls.IPV6
        return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not AddressFamily.UNKNOWN
