"""Merge any number of iterables into one ordered stream."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass
class _HeadTail:
    head: Any
    tail: Iterator[Any]


class KMergeBy(Generic[T]):
    """Iterator merging several iterables, smallest head first.

    ``less_than(a, b)`` decides whether ``a`` goes before ``b``. If every input
    is sorted by it, the output is sorted too. The first item of every input
    is taken when the merger is built.
    """

    def __init__(self, iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]):
        self._less_than = less_than
        heap: List[_HeadTail] = []
        for iterable in iterables:
            tail = iter(iterable)
            head = next(tail, _MISSING)
            if head is not _MISSING:
                heap.append(_HeadTail(head, tail))
        self._heap = heap
        for i in reversed(range(len(heap) // 2)):
            self._sift_down(i)

    def _lt(self, a: _HeadTail, b: _HeadTail) -> bool:
        return bool(self._less_than(a.head, b.head))

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        pos = index
        child = 2 * pos + 1
        while child + 1 < size:
            if self._lt(heap[child + 1], heap[child]):
                child += 1
            if not self._lt(heap[child], heap[pos]):
                return
            heap[pos], heap[child] = heap[child], heap[pos]
            pos = child
            child = 2 * pos + 1
        if child + 1 == size and self._lt(heap[child], heap[pos]):
            heap[pos], heap[child] = heap[child], heap[pos]

    def __iter__(self) -> "KMergeBy[T]":
        return self

    def __next__(self) -> T:
        heap = self._heap
        if not heap:
            raise StopIteration
        top = heap[0]
        following = next(top.tail, _MISSING)
        if following is _MISSING:
            result = top.head
            last = heap.pop()
            if heap:
                heap[0] = last
        else:
            result, top.head = top.head, following
        self._sift_down(0)
        return result

    def __length_hint__(self) -> int:
        return sum(operator.length_hint(entry.tail) + 1 for entry in self._heap)


def kmerge(iterables: Iterable[Iterable[T]]) -> KMergeBy[T]:
    """Merge iterables in ascending order using ``<``."""
    return KMergeBy(iterables, operator.lt)


def kmerge_by(iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]) -> KMergeBy[T]:
    """Merge iterables using ``less_than`` as the ordering predicate."""
    return KMergeBy(iterables, less_than)