"""
F Table Package

This package holds Skipjack's fixed F substitution table and the
tools used to audit its cryptographic properties.
"""

from .table import F
from .analysis import evaluate_sbox, is_permutation, create_inverse_sbox

__all__ = ['F', 'evaluate_sbox', 'is_permutation', 'create_inverse_sbox']
