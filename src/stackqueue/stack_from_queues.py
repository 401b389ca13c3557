"""LIFO stack composed from two FIFO queues.

A queue can only give up its oldest element, so reaching the newest one means
cycling every older element through the other queue first. After the newest
element is taken (pop) or put back at the end (peek) the two queues trade
places, leaving ``_primary`` with all elements in push order and ``_secondary``
empty.

Both ``pop`` and ``peek`` are therefore O(n), unlike the amortized O(1)
operations of ``QueueFromStacks``.
"""

import logging
from typing import Generic, List, Optional, TypeVar

from .queue import Queue

logger = logging.getLogger(__name__)

T = TypeVar('T')


class StackFromQueues(Generic[T]):
    def __init__(self) -> None:
        self._primary: Queue[T] = Queue()
        self._secondary: Queue[T] = Queue()

    def push(self, value: T) -> None:
        self._primary.enqueue(value)

    def pop(self) -> Optional[T]:
        if self._primary.is_empty():
            return None
        self._rotate()
        value = self._primary.dequeue()
        self._swap()
        return value

    def peek(self) -> Optional[T]:
        if self._primary.is_empty():
            return None
        self._rotate()
        value = self._primary.dequeue()
        # Re-enqueued last, the top keeps its place behind the older elements.
        self._secondary.enqueue(value)
        self._swap()
        return value

    def size(self) -> int:
        return self._primary.size() + self._secondary.size()

    def is_empty(self) -> bool:
        return self._primary.is_empty() and self._secondary.is_empty()

    def clear(self) -> None:
        self._primary.clear()
        self._secondary.clear()

    def copy(self) -> 'StackFromQueues[T]':
        clone: StackFromQueues[T] = StackFromQueues()
        clone._primary = self._primary.copy()
        clone._secondary = self._secondary.copy()
        return clone

    def _rotate(self) -> None:
        """Move all but the newest element of ``_primary`` into ``_secondary``."""
        moved = self._primary.size() - 1
        if moved > 0:
            logger.debug("rotating %d elements into secondary queue", moved)
        while self._primary.size() > 1:
            self._secondary.enqueue(self._primary.dequeue())

    def _swap(self) -> None:
        self._primary, self._secondary = self._secondary, self._primary

    def _ordered(self) -> List[T]:
        ordered: List[T] = []
        primary = self._primary.copy()
        while not primary.is_empty():
            ordered.append(primary.dequeue())
        return ordered

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"StackFromQueues({self._ordered()})"

    def __str__(self) -> str:
        return f"StackFromQueues(size={self.size()})"
