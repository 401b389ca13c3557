from typing import Generic, List, Optional, TypeVar

T = TypeVar('T')


class Stack(Generic[T]):
    def __init__(self) -> None:
        self._data: List[T] = []

    def push(self, value: T) -> None:
        self._data.append(value)

    def pop(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data.pop()

    def peek(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[-1]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'Stack[T]':
        clone: Stack[T] = Stack()
        clone._data = self._data.copy()
        return clone

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"Stack({self._data})"

    def __str__(self) -> str:
        return f"Stack(size={len(self._data)})"
