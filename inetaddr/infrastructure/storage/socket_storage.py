"""
Socket Address Storage
Holds the address the way a socket-address structure does: a family tag
plus the binary network-order address.
"""

import ipaddress
import socket
from typing import Any

from inetaddr.domain.value_objects.address_family import AddressFamily
from inetaddr.domain.value_objects.ip_literal import classify
from inetaddr.domain.value_objects.port import INVALID_PORT
from inetaddr.infrastructure.storage.base import AddressStorage


class SocketStorage(AddressStorage):
    """
    Storage backend modelled on a socket address structure.

    The family tag is written every time the IP is set and is the only
    thing family() reads; the packed bytes are never re-sniffed. The text
    form is kept next to the binary one so that get_ip() returns exactly
    what was set, even for text no family accepts.
    """

    name = "socket"

    def __init__(self) -> None:
        self._family_tag: int = socket.AF_UNSPEC
        self._packed: bytes = b""
        self._text: Any = ""
        self._port: int = INVALID_PORT

    @property
    def family_tag(self) -> int:
        """OS socket family tag of the stored address."""
        return self._family_tag

    @property
    def packed(self) -> bytes:
        """Binary address: 4 bytes (IPv4), 16 bytes (IPv6) or b"" when unset."""
        return self._packed

    def populate(self, family_tag: int, packed: bytes, port: int) -> None:
        """
        Fill the storage from a raw socket address, as returned by a
        binding layer (e.g. after accept or getsockname).

        The family is taken from family_tag as given. The text form is
        rebuilt from packed only when its length fits that family;
        otherwise the text is left empty.

        Args:
            family_tag: OS socket family (socket.AF_INET, socket.AF_INET6, ...)
            packed: Binary network-order address
            port: Port number
        """
        expected_length = {socket.AF_INET: 4, socket.AF_INET6: 16}.get(family_tag)
        self._family_tag = family_tag
        self._packed = bytes(packed)
        if expected_length is not None and len(self._packed) == expected_length:
            self._text = str(ipaddress.ip_address(self._packed))
        else:
            self._text = ""
        self._port = port

    def get_ip(self) -> Any:
        return self._text

    def set_ip(self, ip: Any) -> None:
        literal = classify(ip)
        self._family_tag = literal.family.to_socket_family()
        self._packed = literal.to_packed()
        self._text = ip

    def get_port(self) -> int:
        return self._port

    def set_port(self, port: int) -> None:
        self._port = port

    def family(self) -> AddressFamily:
        return AddressFamily.from_socket_family(self._family_tag)

    def clear(self) -> None:
        self._family_tag = socket.AF_UNSPEC
        self._packed = b""
        self._text = ""
        self._port = INVALID_PORT
