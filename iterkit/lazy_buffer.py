"""A list that fills itself from an iterable on demand."""

from __future__ import annotations

from itertools import islice
from typing import Generic, Iterable, Iterator, List, Sequence, TypeVar

T = TypeVar("T")

_MISSING = object()


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


class LazyBuffer(Generic[T]):
    """Buffer of items pulled from a source only when asked for.

    The source is never advanced again once it has run out.
    """

    def __init__(self, iterable: Iterable[T]):
        self._source = _fused(iterable)
        self._buffer: List[T] = []

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._buffer!r})"

    def count(self) -> int:
        """Buffered items plus those left in the source, which is exhausted."""
        return len(self._buffer) + sum(1 for _ in self._source)

    def get_next(self) -> bool:
        """Pull one item into the buffer; return whether there was one."""
        item = next(self._source, _MISSING)
        if item is _MISSING:
            return False
        self._buffer.append(item)
        return True

    def prefill(self, length: int) -> None:
        """Pull items until the buffer holds ``length`` or the source runs out."""
        missing = length - len(self._buffer)
        if missing > 0:
            self._buffer.extend(islice(self._source, missing))

    def get_at(self, indices: Sequence[int]) -> List[T]:
        """Return the buffered items at ``indices``."""
        return [self._buffer[i] for i in indices]

    def __getitem__(self, index):
        return self._buffer[index]