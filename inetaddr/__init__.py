"""
inetaddr - Network endpoint addresses
Strict IPv4/IPv6 classification, lazy validation and canonical rendering.
"""

from inetaddr.domain.value_objects import (
    INVALID_PORT,
    MAX_VALID_PORT,
    MIN_VALID_PORT,
    RANDOM_PORT,
    AddressFamily,
    IPLiteral,
    classify,
    is_valid_ipv4,
    is_valid_ipv6,
    is_valid_port,
)
from inetaddr.domain.entities import (
    INVALID_IP,
    LOCAL_IP,
    Address,
    InternetAddress,
)

__version__ = "0.1.0"

__all__ = [
    "INVALID_IP",
    "INVALID_PORT",
    "LOCAL_IP",
    "MAX_VALID_PORT",
    "MIN_VALID_PORT",
    "RANDOM_PORT",
    "Address",
    "AddressFamily",
    "IPLiteral",
    "InternetAddress",
    "classify",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_port",
]
