"""Domain Value Objects - Immutable address primitives."""

from inetaddr.domain.value_objects.address_family import AddressFamily
from inetaddr.domain.value_objects.ip_literal import (
    IPLiteral,
    classify,
    is_valid_ipv4,
    is_valid_ipv6,
)
from inetaddr.domain.value_objects.port import (
    INVALID_PORT,
    MAX_VALID_PORT,
    MIN_VALID_PORT,
    RANDOM_PORT,
    describe_port,
    is_valid_port,
)

__all__ = [
    "AddressFamily",
    "IPLiteral",
    "classify",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "INVALID_PORT",
    "MAX_VALID_PORT",
    "MIN_VALID_PORT",
    "RANDOM_PORT",
    "describe_port",
    "is_valid_port",
]
