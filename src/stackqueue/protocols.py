"""Structural interfaces for the two ordering disciplines.

Anything with the right methods satisfies these; no inheritance is needed.
"""

from typing import Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar('T')


@runtime_checkable
class LifoContainer(Protocol[T]):
    def push(self, value: T) -> None: ...

    def pop(self) -> Optional[T]: ...

    def peek(self) -> Optional[T]: ...

    def size(self) -> int: ...

    def is_empty(self) -> bool: ...


@runtime_checkable
class FifoContainer(Protocol[T]):
    def enqueue(self, value: T) -> None: ...

    def dequeue(self) -> Optional[T]: ...

    def peek(self) -> Optional[T]: ...

    def size(self) -> int: ...

    def is_empty(self) -> bool: ...
