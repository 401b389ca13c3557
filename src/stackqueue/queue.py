"""Two-list queue with amortized O(1) dequeue.

New elements are appended to ``_back``. Dequeue pops from the end of ``_front``;
when ``_front`` runs dry the whole of ``_back`` is reversed into it at once, so
every element is reversed exactly one time over its life in the queue.

Note: the module name shadows the stdlib ``queue`` only for code that puts
``src/stackqueue`` itself on ``sys.path``. Import it as ``stackqueue.queue``.
"""

import logging
from typing import Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Queue(Generic[T]):
    def __init__(self) -> None:
        self._front: List[T] = []
        self._back: List[T] = []

    def enqueue(self, value: T) -> None:
        self._back.append(value)

    def dequeue(self) -> Optional[T]:
        if not self._front:
            if not self._back:
                return None
            logger.debug("reversing %d elements into front buffer", len(self._back))
            self._front = self._back[::-1]
            self._back.clear()
        return self._front.pop()

    def peek(self) -> Optional[T]:
        if self._front:
            return self._front[-1]
        if self._back:
            # _back has not been reversed yet, so its oldest element is first.
            return self._back[0]
        return None

    def size(self) -> int:
        return len(self._front) + len(self._back)

    def is_empty(self) -> bool:
        return not self._front and not self._back

    def clear(self) -> None:
        self._front.clear()
        self._back.clear()

    def copy(self) -> 'Queue[T]':
        """Return a shallow copy of the queue."""
        clone: Queue[T] = Queue()
        clone._front = self._front.copy()
        clone._back = self._back.copy()
        return clone

    def _ordered(self) -> List[T]:
        return self._front[::-1] + self._back

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"Queue({self._ordered()})"

    def __str__(self) -> str:
        return f"Queue(size={self.size()})"
