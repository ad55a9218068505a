"""
Rule G and Rule G'

Rule G is a four-round Feistel permutation on a single 16-bit word,
split into two bytes. Each round mixes in one key byte and one lookup
into the F table. Byte names (g1..g6) follow NIST's naming.
"""

from ..f_table.table import F
from ..key_schedule.key_bytes import round_key_bytes
from .packing import bytes_to_word, word_to_bytes


def rule_g(word: int, step: int, key: bytes) -> int:
    """
    Apply rule G to a word.

    Args:
        word: The 16-bit input word
        step: The zero-based step number (counter - 1)
        key: The normalized 10-byte key

    Returns:
        The 16-bit output word (g5, g6)
    """
    g1, g2 = word_to_bytes(word)
    k0, k1, k2, k3 = round_key_bytes(key, step)

    # Each new byte is F(previous byte ^ key byte) ^ the byte two places back
    g3 = F[g2 ^ k0] ^ g1
    g4 = F[g3 ^ k1] ^ g2
    g5 = F[g4 ^ k2] ^ g3
    g6 = F[g5 ^ k3] ^ g4

    return bytes_to_word((g5, g6))


def rule_g_inv(word: int, step: int, key: bytes) -> int:
    """
    Apply rule G', the inverse of rule G.

    The chain runs backwards from (g5, g6) to (g1, g2), consuming the
    same key bytes in reverse order.

    Args:
        word: The 16-bit input word (g5, g6)
        step: The zero-based step number (counter - 1)
        key: The normalized 10-byte key

    Returns:
        The 16-bit output word (g1, g2)
    """
    g5, g6 = word_to_bytes(word)
    k0, k1, k2, k3 = round_key_bytes(key, step)

    g4 = F[g5 ^ k3] ^ g6
    g3 = F[g4 ^ k2] ^ g5
    g2 = F[g3 ^ k1] ^ g4
    g1 = F[g2 ^ k0] ^ g3

    return bytes_to_word((g1, g2))
