from itertools import permutations

import pytest

from plainperm import count_arrangements, lex_next, lex_next_sort, lex_perms


class Record:
    """Permutable over one field of a list of dicts."""

    def __init__(self, rows, field):
        self.rows = rows
        self.field = field

    def __len__(self):
        return len(self.rows)

    def less(self, i, j):
        return self.rows[i][self.field] < self.rows[j][self.field]

    def swap(self, i, j):
        self.rows[i], self.rows[j] = self.rows[j], self.rows[i]


def test_lex_next_3():
    p = [0, 1, 2]
    res = [tuple(p)]
    while lex_next(p):
        res.append(tuple(p))
    assert res == [
        (0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)
    ]
    # exhausted: left unchanged
    assert p == [2, 1, 0]
    assert not lex_next(p)
    assert p == [2, 1, 0]


@pytest.mark.parametrize(
    "start", ([], [7], [0, 1, 2, 3], [1, 1, 2, 2], [0, 0, 0], [1, 2, 2, 4, 4, 4])
)
def test_lex_next_multiset(start):
    p = list(start)
    res = [tuple(p)]
    while lex_next(p):
        res.append(tuple(p))
    assert res == sorted(set(permutations(start)))
    assert len(res) == count_arrangements(start)
    assert p == sorted(start, reverse=True)


def test_lex_next_preserves_multiset():
    p = ["b", "a", "c", "a"]
    for _ in range(5):
        lex_next(p)
        assert sorted(p) == ["a", "a", "b", "c"]


def test_lex_next_sort():
    rows = [{"n": 3, "id": "x"}, {"n": 1, "id": "y"}, {"n": 2, "id": "z"}]
    rows.sort(key=lambda r: r["n"])
    seq = Record(rows, "n")
    seen = [tuple(r["id"] for r in rows)]
    while lex_next_sort(seq):
        seen.append(tuple(r["id"] for r in rows))
    assert len(seen) == 6
    assert seen[0] == ("y", "z", "x")
    assert seen[-1] == ("x", "z", "y")


@pytest.mark.parametrize("func", (lex_next, lex_next_sort))
def test_lex_next_last_is_noop(func):
    p = [5, 4, 4, 1]
    arg = p if func is lex_next else Record([{"v": v} for v in p], "v")
    assert not func(arg)
    if func is lex_next:
        assert p == [5, 4, 4, 1]


def test_lex_perms():
    obj = (1, 4, 2, 2)
    res = tuple(lex_perms(obj))
    assert len(res) == 12
    assert res[0] == (1, 2, 2, 4)
    assert res[-1] == (4, 2, 2, 1)
    assert list(res) == sorted(res)


def test_lex_perms_key():
    obj = ("ralph", "randomly", "rankled", "at", "an", "estuary")
    res = tuple(lex_perms(obj, lambda x: x.startswith("r")))
    assert len(res) == 20
    assert count_arrangements(obj, lambda x: x.startswith("r")) == 20
    assert all(not w.startswith("r") for w in res[0][:3])


def test_lex_perms_iteration():
    gen = lex_perms((3, 1, 2))
    res = [next(gen) for _ in range(6)]
    assert res[0] == (1, 2, 3)
    with pytest.raises(StopIteration):
        next(gen)
    with pytest.raises(StopIteration):
        next(gen)


def test_lex_perms_not_iterable():
    with pytest.raises(TypeError):
        lex_perms(5)
