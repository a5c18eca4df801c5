from typing import Any, Callable, Protocol, TypeVar, TypeAlias

T = TypeVar('T')


class SupportsOrder(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass


class Permutable(Protocol):
    """
    Indexable collection that can be permuted in place without exposing its
    storage.
    """

    def __len__(self) -> int:
        pass

    def less(self, i: int, j: int) -> bool:
        pass

    def swap(self, i: int, j: int) -> None:
        pass


OrderedT = TypeVar('OrderedT', bound=SupportsOrder)

KeyFunc: TypeAlias = Callable[[T], Any]
StepFunc: TypeAlias = Callable[[], bool]
