"""
Factorial number system.

A rank r of a permutation of n items is written as digits f[0..n-1] where
f[i] has place value (n-1-i)! and lies in [0, n-1-i]. This is the Lehmer
code of the permutation with that rank.
"""
from math import factorial
from typing import Sequence


class RankError(ValueError):
    """Rank outside [0, n!) for the requested size."""

    def __init__(self, rank: int, n: int):
        super().__init__(f"rank {rank} out of range [0, {n}!)")
        self.rank = rank
        self.n = n


def to_factoradic(rank: int, n: int) -> list[int]:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if rank < 0 or rank >= factorial(n):
        raise RankError(rank, n)
    digits = [0] * n
    for radix in range(1, n + 1):
        rank, digits[n - radix] = divmod(rank, radix)
    return digits


def from_factoradic(digits: Sequence[int]) -> int:
    n = len(digits)
    rank = 0
    for i, f in enumerate(digits):
        if not 0 <= f < n - i:
            raise ValueError(f"digit {f} at position {i} not in [0, {n - i})")
        rank = rank * (n - i) + f
    return rank
