"""List-backed queue with tail, head and index removal.

Despite the name, dequeue() removes from the END of the queue (stack-pop
semantics). Use remove_first() to take from the head.
"""

from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class IndexOutOfBounds(IndexError):
    """Raised when an index-based removal or peek targets a missing position."""


class Queue(Generic[T]):
    def __init__(self, items: Optional[Iterable[T]] = None):
        self._data: List[T] = list(items) if items is not None else []

    @property
    def items(self) -> List[T]:
        return self._data.copy()

    def enqueue(self, item: T) -> None:
        self._data.append(item)

    def enqueue_many(self, items: Iterable[T]) -> None:
        for item in items:
            self._data.append(item)

    def dequeue(self) -> None:
        if self._data:
            self._data.pop()

    def remove_first(self) -> None:
        if not self._data:
            raise IndexOutOfBounds("remove_first from empty queue")
        del self._data[0]

    def remove_at(self, idx: int) -> None:
        """Remove the element at ``idx``, shifting later elements down.

        Only ``0 <= idx < len(queue)`` is valid; ``idx == len(queue)`` fails
        just like any larger index.
        """
        if not isinstance(idx, int) or isinstance(idx, bool):
            raise TypeError("index must be an integer")
        if idx < 0 or idx >= len(self._data):
            raise IndexOutOfBounds(
                "remove_at: index %d out of range for queue of size %d"
                % (idx, len(self._data))
            )
        del self._data[idx]

    def destroy(self) -> None:
        self._data.clear()

    clear = destroy

    def front(self) -> T:
        if not self._data:
            raise IndexOutOfBounds("front from empty queue")
        return self._data[0]

    def back(self) -> T:
        if not self._data:
            raise IndexOutOfBounds("back from empty queue")
        return self._data[-1]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def copy(self) -> "Queue[T]":
        """Return a shallow copy of the queue."""
        clone: Queue[T] = Queue()
        clone._data = self._data.copy()
        return clone

    def __len__(self):
        return len(self._data)

    def __bool__(self):
        return len(self._data) > 0

    def __eq__(self, other):
        if not isinstance(other, Queue):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __repr__(self):
        return "Queue(%r)" % (self._data,)


def create_queue(items: Iterable[T]) -> Queue[T]:
    return Queue(items)


def create_empty() -> Queue:
    return Queue()
