"""Infrastructure Storage - Backends holding an address value."""

from typing import Optional

import structlog

from inetaddr.infrastructure.storage.base import AddressStorage
from inetaddr.infrastructure.storage.socket_storage import SocketStorage
from inetaddr.infrastructure.storage.text_storage import TextStorage

logger = structlog.get_logger(__name__)

STORAGE_BACKENDS: dict[str, type[AddressStorage]] = {
    TextStorage.name: TextStorage,
    SocketStorage.name: SocketStorage,
}


def create_storage(backend: Optional[str] = None) -> AddressStorage:
    """
    Create an empty storage backend.

    Args:
        backend: Backend name ("text" or "socket"); None uses the
            configured ADDRESS_BACKEND

    Returns:
        A cleared AddressStorage instance

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend is None:
        from inetaddr.config import get_settings

        backend = get_settings().address.backend

    try:
        storage_cls = STORAGE_BACKENDS[backend]
    except KeyError as e:
        raise ValueError(
            f"Unknown address backend: {backend!r} "
            f"(expected one of {sorted(STORAGE_BACKENDS)})"
        ) from e

    logger.debug("storage_backend_selected", backend=backend)
    return storage_cls()


__all__ = [
    "AddressStorage",
    "SocketStorage",
    "TextStorage",
    "STORAGE_BACKENDS",
    "create_storage",
]
