"""
inetaddr Infrastructure Layer
Storage backends for address values.
"""

from inetaddr.infrastructure.storage import (
    AddressStorage,
    SocketStorage,
    TextStorage,
    create_storage,
)

__all__ = [
    "AddressStorage",
    "SocketStorage",
    "TextStorage",
    "create_storage",
]
