"""Next-permutation in lexicographic order, including multisets."""
from math import factorial
from typing import Callable, Collection, Iterator, MutableSequence

from plainperm.pptypes import KeyFunc, OrderedT, Permutable, T


def _lex_next(
    n: int,
    less: Callable[[int, int], bool],
    swap: Callable[[int, int], None]
) -> bool:
    if n <= 1:
        return False
    last = n - 1
    k = last - 1
    while not less(k, k + 1):
        if k == 0:
            return False
        k -= 1
    l = last
    while not less(k, l):
        l -= 1
    swap(k, l)
    l, r = k + 1, last
    while l < r:
        swap(l, r)
        l, r = l + 1, r - 1
    return True


def lex_next(p: MutableSequence[OrderedT]) -> bool:
    """
    Reorder p in place to the next permutation in lexicographic order.

    Index 0 is most significant. Values need not be distinct; for a sequence
    with duplicates, distinct multiset permutations are produced. Returns
    True when a new permutation was produced. If p is already the last
    permutation (non-increasing), it is left unmodified and False is returned.
    """

    def swap(i, j):
        p[i], p[j] = p[j], p[i]

    return _lex_next(len(p), lambda i, j: p[i] < p[j], swap)


def lex_next_sort(p: Permutable) -> bool:
    """Like lex_next, but works only through p's len/less/swap methods."""
    return _lex_next(len(p), p.less, p.swap)


class _Keyed:
    # Permutable view over a list, ordered by precomputed keys
    def __init__(self, elements: list, keys: list):
        self.elements = elements
        self.keys = keys

    def __len__(self):
        return len(self.elements)

    def less(self, i, j):
        return self.keys[i] < self.keys[j]

    def swap(self, i, j):
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]
        self.keys[i], self.keys[j] = self.keys[j], self.keys[i]


class LexGenerator(Iterator):
    """
    Iterate over every distinct arrangement of elements in increasing
    lexicographic order, starting from the sorted arrangement.

    Elements whose keys compare equal are treated as identical, so only one
    arrangement per pattern of keys is produced.
    """

    def __init__(
        self, elements: Collection[T], key: KeyFunc | None = None
    ):
        items = sorted(elements, key=key)
        keys = items if key is None else [key(e) for e in items]
        self._view = _Keyed(items, list(keys))
        self._started = False
        self._done = False

    def __next__(self) -> tuple:
        if self._done:
            raise StopIteration
        if not self._started:
            self._started = True
        elif not lex_next_sort(self._view):
            self._done = True
            raise StopIteration
        return tuple(self._view.elements)


def _wrap(elements):
    try:
        iter(elements)
    except TypeError as err:
        raise TypeError("Elements must be iterable") from err
    return elements


def lex_perms(
    elements: Collection[T], key: KeyFunc | None = None
) -> LexGenerator:
    return LexGenerator(_wrap(elements), key)


def count_arrangements(
    elements: Collection[T], key: KeyFunc | None = None
) -> int:
    """Number of distinct arrangements: n! / prod(multiplicity!)."""
    keys = sorted(_wrap(elements), key=key)
    if key is not None:
        keys = [key(e) for e in keys]
    total = factorial(len(keys))
    run = 1
    for i in range(1, len(keys)):
        # equal under the order, not necessarily ==
        if not keys[i - 1] < keys[i]:
            run += 1
            total //= run
        else:
            run = 1
    return total
