"""
inetaddr Domain Layer
Address classification, validation and rendering.
"""

from inetaddr.domain.value_objects import (
    AddressFamily,
    IPLiteral,
    classify,
    is_valid_ipv4,
    is_valid_ipv6,
    is_valid_port,
)
from inetaddr.domain.entities import (
    Address,
    InternetAddress,
)

__all__ = [
    # Value Objects
    "AddressFamily",
    "IPLiteral",
    "classify",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_port",
    # Entities
    "Address",
    "InternetAddress",
]
