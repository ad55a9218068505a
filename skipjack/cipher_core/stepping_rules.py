"""
Stepping Rules

Each Skipjack round applies one stepping rule to the four-word state.
Rules A and B advance the state during encryption; A' and B' undo them
during decryption.

Every rule reads the complete input tuple before building a new one,
and returns the new state together with the updated counter. The step
number handed to G is always the counter value the round started with,
minus one.
"""

from typing import Tuple

from .packing import Words
from .rule_g import rule_g, rule_g_inv


def rule_a(words: Words, counter: int, key: bytes) -> Tuple[Words, int]:
    """
    Apply rule A.

    Args:
        words: The current state (w1, w2, w3, w4)
        counter: The round counter (1..32) before this round
        key: The normalized 10-byte key

    Returns:
        The new state and the incremented counter
    """
    w1, w2, w3, w4 = words
    g = rule_g(w1, counter - 1, key)

    return (g ^ w4 ^ counter, g, w2, w3), counter + 1


def rule_b(words: Words, counter: int, key: bytes) -> Tuple[Words, int]:
    """
    Apply rule B.

    Args:
        words: The current state (w1, w2, w3, w4)
        counter: The round counter (1..32) before this round
        key: The normalized 10-byte key

    Returns:
        The new state and the incremented counter
    """
    w1, w2, w3, w4 = words

    return (w4, rule_g(w1, counter - 1, key), w1 ^ w2 ^ counter, w3), counter + 1


def rule_a_inv(words: Words, counter: int, key: bytes) -> Tuple[Words, int]:
    """
    Apply rule A', undoing rule A for the same counter.

    Args:
        words: The current state (w1, w2, w3, w4)
        counter: The number of the round being undone (32..1)
        key: The normalized 10-byte key

    Returns:
        The new state and the decremented counter
    """
    w1, w2, w3, w4 = words

    return (rule_g_inv(w2, counter - 1, key), w3, w4, w1 ^ w2 ^ counter), counter - 1


def rule_b_inv(words: Words, counter: int, key: bytes) -> Tuple[Words, int]:
    """
    Apply rule B', undoing rule B for the same counter.

    Args:
        words: The current state (w1, w2, w3, w4)
        counter: The number of the round being undone (32..1)
        key: The normalized 10-byte key

    Returns:
        The new state and the decremented counter
    """
    w1, w2, w3, w4 = words
    g = rule_g_inv(w2, counter - 1, key)

    return (g, g ^ w3 ^ counter, w4, w1), counter - 1
