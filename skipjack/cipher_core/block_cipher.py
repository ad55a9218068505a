"""
Block Cipher Implementation

This module provides the core implementation of Skipjack, a 64-bit
block cipher built on an unbalanced Feistel network of 32 rounds
under an 80-bit key.

Only single-block (codebook) operation is offered. Skipjack is not
recommended for modern use, so no chaining mode is provided.
"""

import logging
from typing import Callable, Tuple

from ..key_schedule.key_bytes import KEY_SIZE, KeyLike, normalize_key
from .packing import Words, block_to_words, words_to_block
from .stepping_rules import rule_a, rule_a_inv, rule_b, rule_b_inv

logger = logging.getLogger(__name__)

SKIPJACK_PARAMS = {
    'block_size': 64,       # Block size in bits
    'word_size': 16,        # State word size in bits
    'key_size': KEY_SIZE,   # Key size in bytes
    'num_rounds': 32,
}

SteppingRule = Callable[[Words, int, bytes], Tuple[Words, int]]

# Eight rounds of A, eight of B, eight of A, eight of B
ENCRYPTION_SCHEDULE: Tuple[SteppingRule, ...] = (
    (rule_a,) * 8 + (rule_b,) * 8 + (rule_a,) * 8 + (rule_b,) * 8
)

_INVERSE_RULES = {rule_a: rule_a_inv, rule_b: rule_b_inv}

# The encryption schedule run backwards, each rule replaced by its inverse
DECRYPTION_SCHEDULE: Tuple[SteppingRule, ...] = tuple(
    _INVERSE_RULES[rule] for rule in reversed(ENCRYPTION_SCHEDULE)
)

# Known-answer vector published by NIST
KNOWN_ANSWER = {
    'plaintext': 0x33221100ddccbbaa,
    'key': bytes([0x00, 0x99, 0x88, 0x77, 0x66, 0x55, 0x44, 0x33, 0x22, 0x11]),
    'ciphertext': 0x2587cae27a12d300,
}


def _check_block(block: int) -> None:
    if isinstance(block, bool) or not isinstance(block, int):
        raise TypeError(f"Block must be an int, not {type(block).__name__}")
    if not 0 <= block < (1 << SKIPJACK_PARAMS['block_size']):
        raise ValueError(f"Block must be an unsigned {SKIPJACK_PARAMS['block_size']}-bit integer")


def _run_schedule(words: Words, counter: int, key: bytes,
                  schedule: Tuple[SteppingRule, ...]) -> Tuple[Words, int]:
    """
    Apply each stepping rule of a schedule in turn.

    Args:
        words: The initial four-word state
        counter: The initial round counter
        key: The normalized 10-byte key
        schedule: The sequence of stepping rules to apply

    Returns:
        The final state and counter
    """
    trace = logger.isEnabledFor(logging.DEBUG)

    for rule in schedule:
        round_number = counter
        words, counter = rule(words, counter, key)
        if trace:
            logger.debug("round %2d %-10s %s", round_number, rule.__name__,
                         ' '.join(f"{w:04x}" for w in words))

    return words, counter


class SkipjackCipher:
    """
    Skipjack block cipher bound to a single 80-bit key.

    The key is validated once, at construction, and stored as immutable
    bytes, so one instance may be shared freely between threads.
    """

    block_size = SKIPJACK_PARAMS['block_size']
    key_size = SKIPJACK_PARAMS['key_size']
    num_rounds = SKIPJACK_PARAMS['num_rounds']

    def __init__(self, key: KeyLike):
        """
        Initialize the cipher with a key.

        Args:
            key: The secret key (10 bytes)

        Raises:
            KeyLengthError: If the key is not exactly 10 bytes
        """
        self._key = normalize_key(key)

    @property
    def key(self) -> bytes:
        return self._key

    def encrypt_block(self, plaintext: int) -> int:
        """
        Encrypt a single 64-bit block.

        Args:
            plaintext: The plaintext block as an unsigned 64-bit integer

        Returns:
            The ciphertext block
        """
        _check_block(plaintext)

        words, counter = _run_schedule(block_to_words(plaintext), 1, self._key,
                                       ENCRYPTION_SCHEDULE)
        assert counter == self.num_rounds + 1

        return words_to_block(words)

    def decrypt_block(self, ciphertext: int) -> int:
        """
        Decrypt a single 64-bit block.

        Args:
            ciphertext: The ciphertext block as an unsigned 64-bit integer

        Returns:
            The plaintext block
        """
        _check_block(ciphertext)

        words, counter = _run_schedule(block_to_words(ciphertext), self.num_rounds, self._key,
                                       DECRYPTION_SCHEDULE)
        assert counter == 0

        return words_to_block(words)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{self.key_size}-byte key>)"


def encrypt_block(plaintext: int, key: KeyLike) -> int:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block as an unsigned 64-bit integer
        key: The secret key (10 bytes)

    Returns:
        The ciphertext block
    """
    cipher = SkipjackCipher(key)
    return cipher.encrypt_block(plaintext)


def decrypt_block(ciphertext: int, key: KeyLike) -> int:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block as an unsigned 64-bit integer
        key: The secret key (10 bytes)

    Returns:
        The plaintext block
    """
    cipher = SkipjackCipher(key)
    return cipher.decrypt_block(ciphertext)


def known_answer_test() -> bool:
    """
    Check the implementation against the published test vector.

    Returns:
        True if both encryption and decryption reproduce the vector
    """
    cipher = SkipjackCipher(KNOWN_ANSWER['key'])

    ciphertext = cipher.encrypt_block(KNOWN_ANSWER['plaintext'])
    plaintext = cipher.decrypt_block(KNOWN_ANSWER['ciphertext'])

    passed = (ciphertext == KNOWN_ANSWER['ciphertext']
              and plaintext == KNOWN_ANSWER['plaintext'])

    if passed:
        logger.info("Known-answer test passed")
    else:
        logger.error("Known-answer test failed: got ciphertext %016x, plaintext %016x",
                     ciphertext, plaintext)

    return passed


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    if not known_answer_test():
        raise SystemExit(1)
