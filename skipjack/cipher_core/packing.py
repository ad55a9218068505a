"""
Word and Byte Packing

Skipjack processes a 64-bit block as four 16-bit words, and rule G
splits each word into two bytes. All conversions put the most
significant unit first.
"""

from typing import Sequence, Tuple

Words = Tuple[int, int, int, int]


def block_to_words(block: int) -> Words:
    """
    Split a 64-bit block into four 16-bit words, high word first.

    Args:
        block: The block as an unsigned 64-bit integer

    Returns:
        A tuple (w1, w2, w3, w4)
    """
    return (
        (block >> 48) & 0xFFFF,
        (block >> 32) & 0xFFFF,
        (block >> 16) & 0xFFFF,
        block & 0xFFFF,
    )


def words_to_block(words: Sequence[int]) -> int:
    """
    Merge four 16-bit words into a single 64-bit block.

    Args:
        words: Four words, high word first

    Returns:
        The block as an unsigned 64-bit integer
    """
    block = (words[0] & 0xFFFF) << 48
    block |= (words[1] & 0xFFFF) << 32
    block |= (words[2] & 0xFFFF) << 16
    block |= words[3] & 0xFFFF
    return block


def word_to_bytes(word: int) -> Tuple[int, int]:
    """Split a 16-bit word into (high byte, low byte)."""
    return (word >> 8) & 0xFF, word & 0xFF


def bytes_to_word(pair: Sequence[int]) -> int:
    """Merge (high byte, low byte) into a 16-bit word."""
    return ((pair[0] & 0xFF) << 8) | (pair[1] & 0xFF)
