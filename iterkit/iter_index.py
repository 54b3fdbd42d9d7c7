"""Select a contiguous run of an iterable's items by position."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, TypeVar, Union

T = TypeVar("T")


def _check_position(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class InclusiveRange:
    """Positions ``start`` to ``end``, both included."""

    start: int
    end: int

    def __post_init__(self) -> None:
        _check_position(self.start, "start")
        _check_position(self.end, "end")


Index = Union[slice, InclusiveRange]


def get(iterable: Iterable[T], index: Index) -> Iterator[T]:
    """Return a lazy iterator over the items of ``iterable`` at ``index``.

    ``index`` is a ``slice`` without a step (half-open, either bound may be
    omitted) or an :class:`InclusiveRange`. Bounds must be non-negative.
    """
    if isinstance(index, InclusiveRange):
        return islice(iter(iterable), index.start, index.end + 1)
    if isinstance(index, slice):
        if index.step is not None:
            raise ValueError("a step is not supported")
        start = 0 if index.start is None else _check_position(index.start, "start")
        stop = None if index.stop is None else _check_position(index.stop, "stop")
        return islice(iter(iterable), start, stop)
    raise TypeError(f"unsupported index type: {type(index).__name__}")