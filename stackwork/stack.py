"""LIFO stack with optional capacity and multi-level undo of pops."""
import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from stackwork.errors import StackOverflow, StackUnderflow

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fixed size of the array-backed demo stack.
DEMO_CAPACITY = 9


class Stack(Generic[T]):
    """Bounded or unbounded LIFO container.

    Every successful pop is recorded in an undo history. ``undo()``
    pushes the most recently popped value back, so repeated calls replay
    pops in reverse chronological order. Pushing does not clear the
    history.

    Undo is not capacity-checked: it restores a value that came from
    inside the stack, so it always succeeds while history is non-empty,
    even if that leaves the stack above its configured capacity.
    """

    def __init__(self, capacity: Optional[int] = None):
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._items: List[T] = []       # bottom -> top
        self._history: List[T] = []     # most recent pop last
        self._capacity = capacity

    @classmethod
    def bounded(cls, capacity: int) -> "Stack[T]":
        return cls(capacity=capacity)

    def push(self, value: T):
        if self._capacity is not None and len(self._items) >= self._capacity:
            logger.debug("Push rejected, stack full at %d", self._capacity)
            raise StackOverflow(self._capacity)
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            logger.debug("Pop on empty stack")
            raise StackUnderflow("pop")
        value = self._items.pop()
        self._history.append(value)
        return value

    def peek(self) -> T:
        if not self._items:
            raise StackUnderflow("peek")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def undo(self) -> Optional[T]:
        """Restore the most recently popped value. Returns None if nothing to undo."""
        if not self._history:
            return None
        value = self._history.pop()
        self._items.append(value)
        return value

    def clear(self):
        """Drop all elements and the undo history."""
        self._items.clear()
        self._history.clear()

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    @property
    def history_size(self) -> int:
        return len(self._history)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom without mutating."""
        return reversed(self._items)

    def __repr__(self) -> str:
        bound = "" if self._capacity is None else f", capacity={self._capacity}"
        return f"Stack({self._items!r}{bound})"
