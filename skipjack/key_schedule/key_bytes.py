"""
Skipjack Key Handling

Skipjack has no expanded key schedule: each round of rule G reads one
byte of the 80-bit key directly, cycling through the ten key bytes four
at a time. This module validates keys and holds that index arithmetic.
"""

from typing import Iterable, Tuple, Union

KEY_SIZE = 10  # 80-bit key, in bytes

KeyLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class KeyLengthError(ValueError):
    """Raised when a key is not exactly KEY_SIZE bytes long."""


def normalize_key(key: KeyLike) -> bytes:
    """
    Validate a key and return it as immutable bytes.

    Args:
        key: The secret key, as a bytes-like object or a sequence of ints

    Returns:
        The key as a 10-byte bytes object

    Raises:
        KeyLengthError: If the key is not exactly 10 bytes
        TypeError: If the key is an int or str
        ValueError: If a key item is outside 0..255
    """
    # bytes(5) would silently build five zero bytes
    if isinstance(key, (int, str)):
        raise TypeError(f"Key must be a bytes-like object or a sequence of ints, "
                        f"not {type(key).__name__}")

    key_bytes = bytes(key)
    if len(key_bytes) != KEY_SIZE:
        raise KeyLengthError(f"Key must be exactly {KEY_SIZE} bytes, got {len(key_bytes)}")

    return key_bytes


def key_byte_index(step: int, round_index: int) -> int:
    """
    Return the key byte consumed by round `round_index` (0..3) of rule G
    at the given zero-based step.
    """
    return (4 * step + round_index) % KEY_SIZE


def round_key_bytes(key: bytes, step: int) -> Tuple[int, int, int, int]:
    """
    Return the four key bytes rule G consumes at the given step, in
    forward round order.

    Args:
        key: A normalized 10-byte key
        step: The zero-based step number (counter - 1)

    Returns:
        A tuple (k0, k1, k2, k3)
    """
    return (
        key[key_byte_index(step, 0)],
        key[key_byte_index(step, 1)],
        key[key_byte_index(step, 2)],
        key[key_byte_index(step, 3)],
    )
