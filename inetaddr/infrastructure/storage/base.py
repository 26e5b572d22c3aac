"""
Base Address Storage Interface
Abstract base class for the ways an address value can be held.
"""

from abc import ABC, abstractmethod
from typing import Any

from inetaddr.domain.value_objects.address_family import AddressFamily


class AddressStorage(ABC):
    """
    Abstract base class for address storage backends.

    A backend owns the ip/port payload of one address and answers which
    family that payload belongs to. Validation and rendering live in the
    address entity, so every backend shares one grammar.
    """

    name: str = "abstract"

    @abstractmethod
    def get_ip(self) -> Any:
        """Return the IP text exactly as it was set."""
        pass

    @abstractmethod
    def set_ip(self, ip: Any) -> None:
        """Replace the stored IP. Never rejects a value."""
        pass

    @abstractmethod
    def get_port(self) -> int:
        """Return the stored port."""
        pass

    @abstractmethod
    def set_port(self, port: int) -> None:
        """Replace the stored port. Never rejects a value."""
        pass

    @abstractmethod
    def family(self) -> AddressFamily:
        """Return the family of the stored IP."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Reset to the cleared state (empty IP, invalid port)."""
        pass

    def copy(self) -> "AddressStorage":
        """Return an independent storage of the same kind holding the same value."""
        clone = type(self)()
        clone.set_ip(self.get_ip())
        clone.set_port(self.get_port())
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ip={self.get_ip()!r}, port={self.get_port()!r})"
