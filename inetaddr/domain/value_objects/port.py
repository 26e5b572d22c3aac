"""
Port Value Object
Port sentinels and the range rule for a usable port.
"""

from typing import Any

RANDOM_PORT = 0  # let the OS pick a port when binding
INVALID_PORT = -1  # no port set

# Inclusive bounds; the well-known range 0-1023 is never valid
MIN_VALID_PORT = 1024
MAX_VALID_PORT = 65535


def is_valid_port(port: Any) -> bool:
    """
    Check if a port lies in the usable range [MIN_VALID_PORT, MAX_VALID_PORT].

    Sentinels (RANDOM_PORT, INVALID_PORT) are accepted by setters but are
    never valid. Booleans and non-integers are not ports.
    """
    if isinstance(port, bool) or not isinstance(port, int):
        return False
    return MIN_VALID_PORT <= port <= MAX_VALID_PORT


def describe_port(port: Any) -> str:
    """Render a port, marking it when it is not valid."""
    if is_valid_port(port):
        return str(port)
    return f"Invalid_Port({port})"
