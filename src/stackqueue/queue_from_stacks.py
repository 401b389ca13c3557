"""FIFO queue composed from two LIFO stacks.

Enqueued elements land on ``_in_stack``. Elements are only moved to
``_out_stack`` once it is empty, which reverses them into oldest-on-top order.
Each element is transferred at most once, so dequeue is amortized O(1) with an
O(n) worst case right after a long run of enqueues.
"""

import logging
from typing import Generic, List, Optional, TypeVar

from .stack import Stack

logger = logging.getLogger(__name__)

T = TypeVar('T')


class QueueFromStacks(Generic[T]):
    def __init__(self) -> None:
        self._in_stack: Stack[T] = Stack()
        self._out_stack: Stack[T] = Stack()

    def enqueue(self, value: T) -> None:
        self._in_stack.push(value)

    def dequeue(self) -> Optional[T]:
        self._transfer()
        return self._out_stack.pop()

    def peek(self) -> Optional[T]:
        self._transfer()
        return self._out_stack.peek()

    def size(self) -> int:
        return self._in_stack.size() + self._out_stack.size()

    def is_empty(self) -> bool:
        return self._in_stack.is_empty() and self._out_stack.is_empty()

    def clear(self) -> None:
        self._in_stack.clear()
        self._out_stack.clear()

    def copy(self) -> 'QueueFromStacks[T]':
        clone: QueueFromStacks[T] = QueueFromStacks()
        clone._in_stack = self._in_stack.copy()
        clone._out_stack = self._out_stack.copy()
        return clone

    def _transfer(self) -> None:
        if not self._out_stack.is_empty() or self._in_stack.is_empty():
            return
        logger.debug("transferring %d elements to out stack", self._in_stack.size())
        # Loop on emptiness: a popped None may be a stored element.
        while not self._in_stack.is_empty():
            self._out_stack.push(self._in_stack.pop())

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def _ordered(self) -> List[T]:
        ordered: List[T] = []
        out_stack = self._out_stack.copy()
        while not out_stack.is_empty():
            ordered.append(out_stack.pop())
        newer: List[T] = []
        in_stack = self._in_stack.copy()
        while not in_stack.is_empty():
            newer.append(in_stack.pop())
        return ordered + newer[::-1]

    def __repr__(self) -> str:
        return f"QueueFromStacks({self._ordered()})"

    def __str__(self) -> str:
        return f"QueueFromStacks(size={self.size()})"
