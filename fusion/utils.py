from collections import deque
from typing import Generic, Iterable, Iterator, Self, TypeVar

T = TypeVar("T")


class Peekable(Generic[T], Iterator[T]):
    """Iterator with a single item of lookahead."""

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._cache: deque[T] = deque()

    def __iter__(self) -> Self:
        return self

    def peek(self) -> T:
        if not self._cache:
            self._cache.append(next(self._it))
        return self._cache[0]

    def __next__(self) -> T:
        if self._cache:
            return self._cache.popleft()
        return next(self._it)
