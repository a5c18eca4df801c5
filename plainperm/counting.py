"""Binary-indexed counting tree over the values 0..n-1."""


class CountingTree:
    """
    Tracks which of the values 0..n-1 are still available.

    Both queries, "how many available values are below x" and "which is the
    k-th smallest available value", run in O(log n). Capacity is padded to a
    power of two so that `kth` can walk the tree from the top down.
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        size = 1
        while size < n:
            size <<= 1
        self.n = n
        self.size = size
        self._avail = n
        # node i covers values (i - lowbit(i), i], 1-based
        self.tree = [0] * (size + 1)
        for i in range(1, size + 1):
            self.tree[i] = max(0, min(i, n) - (i - (i & -i)))

    def __len__(self) -> int:
        return self._avail

    def count_below(self, x: int) -> int:
        s = 0
        i = x
        while i > 0:
            s += self.tree[i]
            i -= i & -i
        return s

    def remove(self, x: int) -> None:
        i = x + 1
        while i <= self.size:
            self.tree[i] -= 1
            i += i & -i
        self._avail -= 1

    def kth(self, k: int) -> int:
        """Return the k-th (0-based) smallest available value."""
        if not 0 <= k < self._avail:
            raise IndexError(
                f"k={k} out of range for {self._avail} available values"
            )
        pos = 0
        step = self.size
        while step:
            nxt = pos + step
            if nxt <= self.size and self.tree[nxt] <= k:
                k -= self.tree[nxt]
                pos = nxt
            step >>= 1
        return pos
