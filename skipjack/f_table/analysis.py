"""
S-box Analysis

This module evaluates the cryptographic properties of an 8-bit S-box:
bijectivity, differential uniformity and linear bias. It is used to
audit the Skipjack F table, which must be a permutation of 0..255 for
rules G and G' to be mutual inverses.
"""

import logging
from typing import Dict, List, Sequence

import numpy as np

from .table import F

logger = logging.getLogger(__name__)

SBOX_SIZE = 8  # 8-bit S-box (256 entries)


def is_permutation(sbox: Sequence[int]) -> bool:
    """
    Check whether an S-box is a bijection on the byte range.

    Args:
        sbox: The S-box to check

    Returns:
        True if every value in 0..255 appears exactly once
    """
    if len(sbox) != 256:
        return False
    return sorted(sbox) == list(range(256))


def create_inverse_sbox(sbox: Sequence[int]) -> List[int]:
    """
    Create the inverse of a bijective S-box.

    Args:
        sbox: The forward S-box

    Returns:
        List containing the inverse S-box
    """
    if not is_permutation(sbox):
        raise ValueError("S-box must be a permutation of 0..255 to be inverted")

    inv_sbox = [0] * 256
    for i, val in enumerate(sbox):
        inv_sbox[val] = i
    return inv_sbox


def difference_distribution_table(sbox: Sequence[int]) -> np.ndarray:
    """
    Build the difference distribution table (DDT) of an S-box.

    Entry [dx, dy] counts the inputs x with S(x) ^ S(x ^ dx) == dy.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A 256x256 integer array
    """
    table = np.asarray(sbox, dtype=np.int64)
    x = np.arange(256)

    ddt = np.zeros((256, 256), dtype=np.int32)
    for dx in range(256):
        dy = table[x] ^ table[x ^ dx]
        ddt[dx] = np.bincount(dy, minlength=256)

    return ddt


def calculate_differential_uniformity(sbox: Sequence[int]) -> int:
    """
    Calculate the differential uniformity of an S-box.

    Lower values indicate better resistance to differential cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The largest DDT entry with a non-zero input difference
    """
    ddt = difference_distribution_table(sbox)
    return int(np.max(ddt[1:, :]))


def linear_approximation_table(sbox: Sequence[int]) -> np.ndarray:
    """
    Build the linear approximation table (LAT) of an S-box.

    Entry [a, b] is the number of inputs x for which the parity of
    (x & a) equals the parity of (S(x) & b), minus 128.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A 256x256 integer array of biases
    """
    table = np.asarray(sbox, dtype=np.int64)
    masks = np.arange(256)

    parity = np.array([bin(i).count('1') % 2 for i in range(256)], dtype=np.int64)

    # Signs (-1)^(a.x) and (-1)^(b.S(x)), one row per mask
    input_signs = 1 - 2 * parity[np.bitwise_and.outer(masks, masks)]
    output_signs = 1 - 2 * parity[np.bitwise_and.outer(masks, table)]

    correlation = input_signs @ output_signs.T
    return correlation // 2


def calculate_linear_bias(sbox: Sequence[int]) -> float:
    """
    Calculate the linear bias of an S-box.

    Lower values indicate better resistance to linear cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The maximum absolute bias over non-trivial masks, normalized to [0, 1]
    """
    lat = linear_approximation_table(sbox)
    max_bias = int(np.max(np.abs(lat[1:, 1:])))
    return max_bias / 128.0


def evaluate_sbox(sbox: Sequence[int] = F) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate (default: the Skipjack F table)

    Returns:
        A dictionary with 'bijective', 'differential' and 'linear' scores
    """
    bijective = is_permutation(sbox)
    if not bijective:
        logger.warning("S-box is not a permutation; G would not be invertible")

    return {
        'bijective': bijective,
        'differential': calculate_differential_uniformity(sbox),
        'linear': calculate_linear_bias(sbox),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    metrics = evaluate_sbox(F)

    print(f"Bijective: {metrics['bijective']}")
    print(f"Differential uniformity: {metrics['differential']}")
    print(f"Linear bias: {metrics['linear']}")
