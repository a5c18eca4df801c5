"""
Ranking and unranking of permutations in lexicographic order.

Ref. Blai Bonet, "Efficient Algorithms to Rank and Unrank Permutations in
Lexicographic Order". Both directions are O(n log n).
"""
import logging
from typing import Sequence

from plainperm.counting import CountingTree
from plainperm.factoradic import to_factoradic

logger = logging.getLogger(__name__)


def lehmer_code(p: Sequence[int]) -> list[int]:
    """
    Factoradic digits of p's rank: f[i] counts values after position i that
    are smaller than p[i].

    p must be a permutation of 0..n-1; this is not checked.
    """
    tree = CountingTree(len(p))
    code = []
    for c in p:
        code.append(tree.count_below(c))
        tree.remove(c)
    return code


def lex_rank(p: Sequence[int]) -> int:
    """
    Return the rank of p among all permutations of 0..n-1 in lexicographic
    order.

    p must be a permutation of 0..n-1. Other input gives an unspecified
    result.
    """
    n = len(p)
    tree = CountingTree(n)
    r = 0
    for i, c in enumerate(p):
        r = r * (n - i) + tree.count_below(c)
        tree.remove(c)
    return r


def lex_unrank(rank: int, n: int) -> list[int]:
    """
    Return the permutation of 0..n-1 with the given lexicographic rank.

    Raises RankError unless 0 <= rank < n!.
    """
    logger.debug("lex_unrank rank=%d n=%d", rank, n)
    f = to_factoradic(rank, n)
    logger.debug("lex_unrank digits=%s", f)
    tree = CountingTree(n)
    p = []
    for d in f:
        c = tree.kth(d)
        tree.remove(c)
        p.append(c)
    return p
