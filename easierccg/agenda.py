from typing import Generic, Iterable, List, TypeVar
from dataclasses import dataclass, field
import heapq

from easierccg.tree import Tree

T = TypeVar('T')


class Agenda(Generic[T]):
    """Binary min-heap used as the agenda of best-first parsing.
    Elements must be totally ordered; the smallest one comes out first.

    >>> agenda = Agenda([10, 5, 3, 6, 4])
    >>> [agenda.remove_min() for _ in range(len(agenda))]
    [3, 4, 5, 6, 10]
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._heap: List[T] = list(elements)
        heapq.heapify(self._heap)

    def insert(self, element: T) -> None:
        heapq.heappush(self._heap, element)

    def remove_min(self) -> T:
        if self.is_empty:
            raise IndexError('remove_min from an empty agenda')
        return heapq.heappop(self._heap)

    def peek_min(self) -> T:
        if self.is_empty:
            raise IndexError('peek_min on an empty agenda')
        return self._heap[0]

    @property
    def is_empty(self) -> bool:
        return len(self._heap) == 0

    @property
    def count(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f'Agenda(size={len(self)})'


@dataclass(order=True)
class AgendaItem:
    priority: float
    tree: Tree = field(compare=False)
    cost: float = field(compare=False)
    start: int = field(compare=False)
    end: int = field(compare=False)

    @property
    def span(self):
        return self.start, self.end
