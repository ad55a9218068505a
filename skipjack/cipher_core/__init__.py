"""
Cipher Core Package

This package implements the core components of Skipjack: word packing,
rule G, the stepping rules and the 32-round encryption/decryption
operations.
"""

from .block_cipher import (
    SKIPJACK_PARAMS,
    SkipjackCipher,
    encrypt_block,
    decrypt_block,
    known_answer_test,
)

__all__ = ['SKIPJACK_PARAMS', 'SkipjackCipher', 'encrypt_block', 'decrypt_block',
           'known_answer_test']
