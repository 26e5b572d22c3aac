"""
IP Literal Value Object
Strict IPv4/IPv6 text grammars and the family classifier built on them.

The IPv6 grammar follows the textual form of RFC 4291 section 2.2, written
out as the IPv6address production of RFC 3986 section 3.2.2.
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Any

from inetaddr.domain.value_objects.address_family import AddressFamily

_DEC_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_H16 = r"[0-9A-Fa-f]{1,4}"

IPV4_GRAMMAR = rf"{_DEC_OCTET}(?:\.{_DEC_OCTET}){{3}}"

_LS32 = rf"(?:{_H16}:{_H16}|{IPV4_GRAMMAR})"


def _ipv6_alternatives():
    # 6( h16 ":" ) ls32 / "::" 5( h16 ":" ) ls32
    yield rf"(?:{_H16}:){{6}}{_LS32}"
    yield rf"::(?:{_H16}:){{5}}{_LS32}"

    # [ *n( h16 ":" ) h16 ] "::" tail, for n = 0..6
    tails = (
        rf"(?:{_H16}:){{4}}{_LS32}",
        rf"(?:{_H16}:){{3}}{_LS32}",
        rf"(?:{_H16}:){{2}}{_LS32}",
        rf"{_H16}:{_LS32}",
        _LS32,
        _H16,
        "",
    )
    for n, tail in enumerate(tails):
        yield rf"(?:(?:{_H16}:){{0,{n}}}{_H16})?::{tail}"


IPV6_GRAMMAR = "|".join(f"(?:{alt})" for alt in _ipv6_alternatives())

IPV4_PATTERN = re.compile(IPV4_GRAMMAR)
IPV6_PATTERN = re.compile(IPV6_GRAMMAR)

# Always valid, whatever the grammar above says
IPV6_SPECIAL_LITERALS = frozenset({"::", "::1", "0:0:0:0:0:0:0:1"})


def is_valid_ipv4(text: Any) -> bool:
    """Check whether text is a strict dotted-decimal IPv4 literal."""
    if not isinstance(text, str):
        return False
    return IPV4_PATTERN.fullmatch(text) is not None


def is_valid_ipv6(text: Any) -> bool:
    """Check whether text is an RFC 4291 IPv6 literal (no zone, no brackets)."""
    if not isinstance(text, str):
        return False
    if text in IPV6_SPECIAL_LITERALS:
        return True
    return IPV6_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True)
class IPLiteral:
    """
    Value object tagging an IP text with the family whose grammar it matched.

    Attributes:
        family: IPV4, IPV6, or UNKNOWN when neither grammar matched
        text: The text exactly as given
    """

    family: AddressFamily
    text: str

    @property
    def is_valid(self) -> bool:
        return self.family.is_known

    def to_packed(self) -> bytes:
        """
        Binary network-order form of the address.

        Returns:
            4 bytes for IPv4, 16 bytes for IPv6, b"" for UNKNOWN
        """
        if not self.is_valid:
            return b""
        return ipaddress.ip_address(self.text).packed

    def __str__(self) -> str:
        return str(self.text)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "family": self.family.value,
            "text": self.text,
        }


def classify(text: Any) -> IPLiteral:
    """
    Classify an IP text by grammar match.

    The family is decided by which grammar accepts the text, so "is IPv4"
    and "is a valid IPv4 literal" are the same question.

    Args:
        text: Candidate IP text

    Returns:
        IPLiteral tagged IPV4, IPV6 or UNKNOWN
    """
    if is_valid_ipv4(text):
        return IPLiteral(family=AddressFamily.IPV4, text=text)
    if is_valid_ipv6(text):
        return IPLiteral(family=AddressFamily.IPV6, text=text)
    return IPLiteral(family=AddressFamily.UNKNOWN, text=text)
