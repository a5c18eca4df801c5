"""
Steinhaus-Johnson-Trotter ("plain changes") permutation generators.

Successive permutations differ by a single swap of two adjacent items.
"""
from typing import Callable, Collection, Iterator, MutableSequence

from plainperm.pptypes import StepFunc, T


def sjt_recursive(p: MutableSequence) -> StepFunc:
    """
    Return a loopless generator that permutes p in place in plain changes
    order.

    The generator permutes by position; the values in p are never looked at.
    The first call leaves p as it is, and each call after that makes one
    adjacent swap. Every call returns True until all len(p)! permutations
    have been produced; the following call restores p to its initial order
    and returns False, as do all calls after it.
    """
    f = _sjtr(len(p))
    return lambda: f(p, 0)


def _sjtr(n: int) -> Callable[[MutableSequence, int], bool]:
    # Each level owns the state for one size; sub-generators work on a
    # window of the caller's sequence starting at `lo`.
    perm = True
    if n <= 1:
        def step(p, lo):
            nonlocal perm
            r, perm = perm, False
            return r
        return step

    p0 = _sjtr(n - 1)
    i = n
    d = 0

    def step(p, lo):
        nonlocal perm, i, d
        if not perm:
            pass
        elif i == n:
            i -= 1
            perm = p0(p, lo)
            d = -1
        elif i == 0:
            i += 1
            perm = p0(p, lo + 1)
            d = 1
            if not perm:
                p[lo], p[lo + 1] = p[lo + 1], p[lo]
        else:
            a, b = lo + i, lo + i - 1
            p[a], p[b] = p[b], p[a]
            i += d
        return perm
    return step


def sjt_even(n: int) -> tuple[list[int], StepFunc]:
    """
    Iterative plain changes with Even's speedup.

    Returns the list [0, 1, ..., n-1] and a function that permutes it in
    place. The function returns True for each new permutation until the
    sequence rolls over to its original order, when it returns False. The
    cycle repeats if the function is called again.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    # guard cells at both ends hold n, so nothing is ever mobile past them
    p = [n] + list(range(n)) + [n]
    d = [-1] * (n + 2)
    out = list(range(n))

    def step() -> bool:
        k = 0
        top = -1
        for i in range(1, n + 1):
            v = p[i]
            if v > top and v > p[i + d[i]]:
                top = v
                k = i
        if k == 0:
            for i in range(1, n + 1):
                p[i] = out[i - 1] = i - 1
                d[i] = -1
            return False
        nx = k + d[k]
        p[k], p[nx] = p[nx], top
        out[k - 1], out[nx - 1] = p[k], top
        d[k], d[nx] = d[nx], d[k]
        for i in range(1, n + 1):
            if p[i] > top:
                d[i] = -d[i]
        return True

    return out, step


class SJTGenerator(Iterator):
    """
    Iterate over all arrangements of elements in plain changes order.

    The first tuple is elements in their given order; each following tuple
    differs from the previous one by a swap of two adjacent items.
    """

    def __init__(self, elements: Collection[T]):
        self._items = list(elements)
        self._step = sjt_recursive(self._items)

    def __next__(self) -> tuple:
        if not self._step():
            raise StopIteration
        return tuple(self._items)


def sjt_perms(elements: Collection[T]) -> SJTGenerator:
    try:
        iter(elements)
    except TypeError as err:
        raise TypeError("Elements must be iterable") from err
    return SJTGenerator(elements)
