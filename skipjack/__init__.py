"""
Skipjack - A Faithful Skipjack Block Cipher Library

This library implements Skipjack, the 64-bit block cipher with an
80-bit key published by NIST, directly following the round structure
of the NIST Skipjack and KEA algorithm document.

Key Features:
- 64-bit block, 80-bit key, 32 rounds
- Unbalanced Feistel network with stepping rules A, B, A' and B'
- Single-block operation only; no modes of operation
- F table audit tools (bijectivity, differential and linear analysis)

Skipjack is obsolete and must not be used to protect real data.
"""

from .cipher_core import SKIPJACK_PARAMS, SkipjackCipher, encrypt_block, decrypt_block, known_answer_test
from .key_schedule import KeyLengthError

__version__ = '0.1.0'
__author__ = 'Skipjack Team'

__all__ = ['SKIPJACK_PARAMS', 'SkipjackCipher', 'encrypt_block', 'decrypt_block',
           'known_answer_test', 'KeyLengthError']
