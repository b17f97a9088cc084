"""Array-backed binary max-heap with a pluggable ordering.

The tree is implicit in list position: the children of index i live at 2i+1
and 2i+2 and its parent at (i-1)//2. Ordering comes from a ``less(a, b)``
callable supplied at construction (``operator.lt`` by default); pass
``operator.gt`` to get min-first behavior.
"""

import logging
import operator
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BinaryHeap(Generic[T]):
    def __init__(self, *values: T, less: Callable[[T, T], bool] = operator.lt) -> None:
        """Create a heap, optionally seeded with values.

        Accepts ``BinaryHeap()``, ``BinaryHeap([3, 2, 1])`` or
        ``BinaryHeap(3, 2, 1)``. Values are inserted one at a time.
        """
        self._data: List[T] = []
        self._less = less
        # True while _data holds the ascending layout left behind by sort()
        self._sorted = False

        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            initial = values[0]
        else:
            initial = values
        for value in initial:
            self.insert(value)

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    def insert(self, value: T) -> None:
        self._restore()
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def extract_max(self, *_: object) -> Optional[T]:
        """Remove and return the largest element, or None if the heap is empty.

        Stray positional arguments are ignored.
        """
        if not self._data:
            logger.debug("extract_max on empty heap")
            return None
        self._restore()
        self._swap(0, len(self._data) - 1)
        result = self._data.pop()
        self._sift_down(0)
        return result

    def max(self) -> Optional[T]:
        """Largest element, or None. Reads the tail while in sorted layout."""
        if not self._data:
            return None
        if self._sorted:
            return self._data[-1]
        return self._data[0]

    def sort(self) -> List[T]:
        """Heapsort the internal list in place and return a sorted copy.

        The heap keeps the ascending layout until the next insert,
        extract_max or sort, which flips it back into heap order first.
        """
        self._restore()
        logger.debug("heapsort of %d elements", len(self._data))
        for i in range(len(self._data) - 1, 0, -1):
            self._swap(0, i)
            self._sift_down(0, i)
        self._sorted = len(self._data) > 1
        return list(self._data)

    def verify_heap(self) -> bool:
        size = len(self._data)
        for i in range(size):
            for child in (self._left(i), self._right(i)):
                if child < size and self._less(self._data[i], self._data[child]):
                    return False
        return True

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()
        self._sorted = False

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(less=self._less)
        clone._data = self._data.copy()
        clone._sorted = self._sorted
        return clone

    def _restore(self) -> None:
        # An ascending list read back to front is a valid max-heap.
        if self._sorted:
            logger.debug("restoring heap order of %d sorted elements", len(self._data))
            self._data.reverse()
            self._sorted = False

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = self._parent(index)
            if self._less(self._data[parent], self._data[index]):
                self._swap(parent, index)
                index = parent
            else:
                break

    def _sift_down(self, index: int = 0, limit: Optional[int] = None) -> None:
        """Move the value at index down until neither child outranks it.

        Children at or beyond ``limit`` are ignored; sort() uses this to keep
        the already placed suffix out of the heap.
        """
        if limit is None:
            limit = len(self._data)
        while True:
            left = self._left(index)
            right = self._right(index)
            if left >= limit:
                break
            larger = left
            if right < limit and self._less(self._data[left], self._data[right]):
                larger = right
            if not self._less(self._data[index], self._data[larger]):
                break
            self._swap(index, larger)
            index = larger

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return ",".join(str(value) for value in self._data)

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.extract_max()
