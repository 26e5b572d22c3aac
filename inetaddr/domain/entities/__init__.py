"""Domain Entities - Mutable address objects."""

from inetaddr.domain.entities.internet_address import (
    INVALID_IP,
    LOCAL_IP,
    Address,
    InternetAddress,
    SocketAddress,
)

__all__ = [
    "INVALID_IP",
    "LOCAL_IP",
    "Address",
    "InternetAddress",
    "SocketAddress",
]
