"""
Text Address Storage
Holds the address as a plain (ip text, port) pair.
"""

from typing import Any

from inetaddr.domain.value_objects.address_family import AddressFamily
from inetaddr.domain.value_objects.ip_literal import classify
from inetaddr.domain.value_objects.port import INVALID_PORT
from inetaddr.infrastructure.storage.base import AddressStorage


class TextStorage(AddressStorage):
    """Storage backend keeping the IP as text; family is its grammar match."""

    name = "text"

    def __init__(self) -> None:
        self._ip: Any = ""
        self._port: int = INVALID_PORT

    def get_ip(self) -> Any:
        return self._ip

    def set_ip(self, ip: Any) -> None:
        self._ip = ip

    def get_port(self) -> int:
        return self._port

    def set_port(self, port: int) -> None:
        self._port = port

    def family(self) -> AddressFamily:
        return classify(self._ip).family

    def clear(self) -> None:
        self._ip = ""
        self._port = INVALID_PORT
