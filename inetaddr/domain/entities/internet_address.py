"""
Internet Address Entity
Mutable IP + port endpoint with lazy validation and canonical rendering.
"""

import re
from typing import Any, Optional, Union

import structlog

from inetaddr.domain.value_objects.address_family import AddressFamily
from inetaddr.domain.value_objects.ip_literal import is_valid_ipv4, is_valid_ipv6
from inetaddr.domain.value_objects.port import INVALID_PORT, describe_port, is_valid_port
from inetaddr.infrastructure.storage import AddressStorage, create_storage

logger = structlog.get_logger(__name__)

LOCAL_IP = "127.0.0.1"  # loopback, for talking to this machine
INVALID_IP = "0.0.0.0"  # placeholder for "no IP chosen"

_PORT_LITERAL = re.compile(r"-?[0-9]+")

SocketAddress = Union[tuple[str, int], tuple[str, int, int, int]]


class InternetAddress:
    """
    Entity representing a network endpoint (IP + port).

    Values are never rejected when set: any IP text and any integer port
    are stored as given, and validity is only computed when asked for.
    Family is derived from the stored value on every query.

    Attributes:
        ip: The IP text as set
        port: The port as set (may be a sentinel or out of range)
        backend: Name of the storage backend ("text" or "socket")
    """

    def __init__(
        self,
        ip: Any = "",
        port: int = INVALID_PORT,
        *,
        backend: Optional[str] = None,
    ) -> None:
        self._storage: AddressStorage = create_storage(backend)
        self._storage.set_ip(ip)
        self._storage.set_port(port)

    @classmethod
    def _from_storage(cls, storage: AddressStorage) -> "InternetAddress":
        address = cls.__new__(cls)
        address._storage = storage
        return address

    # Setters & getters

    def get_ip(self) -> Any:
        return self._storage.get_ip()

    def set_ip(self, ip: Any) -> None:
        self._storage.set_ip(ip)

    def get_port(self) -> int:
        return self._storage.get_port()

    def set_port(self, port: int) -> None:
        self._storage.set_port(port)

    ip = property(get_ip, set_ip)
    port = property(get_port, set_port)

    @property
    def backend(self) -> str:
        return self._storage.name

    @property
    def storage(self) -> AddressStorage:
        """The backend holding this address (e.g. for SocketStorage.packed)."""
        return self._storage

    # Queries

    def family(self) -> AddressFamily:
        """Protocol family of the stored IP, UNKNOWN if no grammar accepts it."""
        return self._storage.family()

    def has_valid_ip(self) -> bool:
        """Check the IP against the grammar of its family."""
        family = self.family()
        # The socket backend takes family from its tag, so recheck the text
        if family is AddressFamily.IPV4:
            return is_valid_ipv4(self.get_ip())
        if family is AddressFamily.IPV6:
            return is_valid_ipv6(self.get_ip())
        return False

    def has_valid_port(self) -> bool:
        return is_valid_port(self.get_port())

    def is_valid(self) -> bool:
        return self.has_valid_ip() and self.has_valid_port()

    def socket_family(self) -> int:
        """OS socket family for a binding layer (AF_UNSPEC when unknown)."""
        return self.family().to_socket_family()

    def to_sockaddr(self) -> Optional[SocketAddress]:
        """
        Socket address tuple as accepted by socket.bind/connect.

        Returns:
            (ip, port) for IPv4, (ip, port, flowinfo, scope_id) for IPv6,
            or None when the address is not valid
        """
        if not self.is_valid():
            return None
        if self.family() is AddressFamily.IPV6:
            return (self.get_ip(), self.get_port(), 0, 0)
        return (self.get_ip(), self.get_port())

    # Mutators

    def clear(self) -> None:
        """Reset to the empty IP and invalid port."""
        self._storage.clear()
        logger.debug("address_cleared", backend=self.backend)

    def assign(self, other: "InternetAddress") -> "InternetAddress":
        """Copy the ip and port of other into this address (backend kept)."""
        if other is not self:
            self.set_ip(other.get_ip())
            self.set_port(other.get_port())
        return self

    def copy(self) -> "InternetAddress":
        """Return an independent address with the same value and backend."""
        return self._from_storage(self._storage.copy())

    def __copy__(self) -> "InternetAddress":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "InternetAddress":
        return self.copy()

    def move(self) -> "InternetAddress":
        """
        Transfer this address's payload to a new address.

        The returned address takes over the storage; this one is left
        cleared and shares nothing with it.
        """
        moved = self._from_storage(self._storage)
        self._storage = create_storage(moved.backend)
        logger.debug("address_moved", backend=moved.backend)
        return moved

    def move_from(self, other: "InternetAddress") -> "InternetAddress":
        """Take the value of other into this address and clear other."""
        if other is not self:
            self.assign(other)
            other.clear()
            logger.debug("address_moved", backend=self.backend)
        return self

    # Output formatters

    def to_string(self) -> str:
        """
        Canonical rendering.

        "ip:port" for IPv4 and "[ip]:port" for IPv6. Anything else is
        "Invalid_IP(ip):port", with the port shown as "Invalid_Port(port)"
        when it is out of range too. Never raises.
        """
        family = self.family()
        ip = self.get_ip()
        port = self.get_port()
        if family is AddressFamily.IPV4:
            return f"{ip}:{port}"
        if family is AddressFamily.IPV6:
            return f"[{ip}]:{port}"
        return f"Invalid_IP({ip}):{describe_port(port)}"

    @classmethod
    def from_string(cls, text: str, *, backend: Optional[str] = None) -> "InternetAddress":
        """
        Parse a rendered address ("ip:port" or "[ip]:port").

        The host part is stored unvalidated; Invalid_IP(..) and
        Invalid_Port(..) markers are unwrapped. An IPv6 host must be
        bracketed to be told apart from the port.

        Args:
            text: Address text
            backend: Storage backend for the new address

        Returns:
            InternetAddress instance

        Raises:
            ValueError: If there is no port separator, the port is not an
                integer, or an IPv6 host is not bracketed
        """
        if not isinstance(text, str):
            raise ValueError(f"Invalid address text: {text!r}")

        host, sep, port_text = text.rpartition(":")
        if not sep:
            raise ValueError(f"Missing port in address: {text!r}")

        if port_text.startswith("Invalid_Port(") and port_text.endswith(")"):
            port_text = port_text[len("Invalid_Port("):-1]
        if _PORT_LITERAL.fullmatch(port_text) is None:
            raise ValueError(f"Invalid port in address: {text!r}")

        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        elif host.startswith("Invalid_IP(") and host.endswith(")"):
            host = host[len("Invalid_IP("):-1]
        elif ":" in host:
            raise ValueError(f"Unbracketed IPv6 host in address: {text!r}")

        return cls(host, int(port_text), backend=backend)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "ip": self.get_ip(),
            "port": self.get_port(),
            "family": self.family().value,
            "is_valid": self.is_valid(),
        }

    @classmethod
    def from_dict(cls, data: dict, *, backend: Optional[str] = None) -> "InternetAddress":
        """Create from dictionary representation (only ip and port are read)."""
        return cls(data["ip"], data["port"], backend=backend)

    # Operators

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"InternetAddress(ip={self.get_ip()!r}, port={self.get_port()!r}, "
            f"backend={self.backend!r})"
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, InternetAddress):
            return NotImplemented
        return self.get_ip() == other.get_ip() and self.get_port() == other.get_port()

    # Mutable, so not hashable
    __hash__ = None


Address = InternetAddress
