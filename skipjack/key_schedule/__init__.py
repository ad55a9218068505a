"""
Key Schedule Package

This package validates Skipjack keys and maps each step of rule G to
the key bytes it consumes.
"""

from .key_bytes import KEY_SIZE, KeyLengthError, normalize_key, key_byte_index, round_key_bytes

__all__ = ['KEY_SIZE', 'KeyLengthError', 'normalize_key', 'key_byte_index', 'round_key_bytes']
