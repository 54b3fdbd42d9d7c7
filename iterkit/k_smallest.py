"""Select the ``k`` smallest items of an iterable, in ascending order."""

from __future__ import annotations

from functools import cmp_to_key
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
Compare = Callable[[T, T], int]

_MISSING = object()


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")


def _sift_down(heap: list, is_less: Callable[[Any, Any], bool], origin: int, length: int) -> None:
    """Move ``heap[origin]`` away from the root, keeping larger items on top."""
    while True:
        left = 2 * origin + 1
        if left >= length:
            return
        right = left + 1
        child = right if right < length and is_less(heap[left], heap[right]) else left
        if not is_less(heap[origin], heap[child]):
            return
        heap[origin], heap[child] = heap[child], heap[origin]
        origin = child


def k_smallest_general(iterable: Iterable[T], k: int, compare: Compare) -> List[T]:
    """Consume ``iterable`` and return its ``k`` smallest items, ascending.

    ``compare(a, b)`` returns a negative, zero or positive number.
    """
    _check_k(k)
    if k == 0:
        for _ in iterable:
            pass
        return []

    if k == 1:
        best: Any = _MISSING
        for item in iterable:
            if best is _MISSING or compare(item, best) < 0:
                best = item
        return [] if best is _MISSING else [best]

    def is_less(a: T, b: T) -> bool:
        return compare(a, b) < 0

    source = _fused(iterable)
    storage = list(islice(source, k))
    size = len(storage)
    for i in reversed(range(size // 2 + 1)):
        _sift_down(storage, is_less, i, size)

    for value in source:
        if is_less(value, storage[0]):
            storage[0] = value
            _sift_down(storage, is_less, 0, size)

    for last in range(size - 1, 0, -1):
        storage[0], storage[last] = storage[last], storage[0]
        _sift_down(storage, is_less, 0, last)
    return storage


def k_smallest_relaxed_general(iterable: Iterable[T], k: int, compare: Compare) -> List[T]:
    """Like :func:`k_smallest_general`, buffering up to ``2 * k`` items."""
    _check_k(k)
    if k == 0:
        for _ in iterable:
            pass
        return []

    sort_key = cmp_to_key(compare)
    source = _fused(iterable)
    buf = list(islice(source, 2 * k))
    buf.sort(key=sort_key)
    if len(buf) < k:
        return buf
    del buf[k:]

    for value in source:
        if compare(value, buf[k - 1]) >= 0:
            continue
        buf.append(value)
        if len(buf) == 2 * k:
            buf.sort(key=sort_key)
            del buf[k:]

    buf.sort(key=sort_key)
    del buf[k:]
    return buf


def _compare_values(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def key_to_cmp(key: Callable[[T], Any]) -> Compare:
    """Turn a key function into a three-way comparison of the keys."""

    def compare(a: T, b: T) -> int:
        return _compare_values(key(a), key(b))

    return compare


def _compare_for(key: Optional[Callable[[T], Any]]) -> Compare:
    return _compare_values if key is None else key_to_cmp(key)


def k_smallest(iterable: Iterable[T], k: int, key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """Return the ``k`` smallest items of ``iterable`` (by ``key``), ascending."""
    return k_smallest_general(iterable, k, _compare_for(key))


def k_smallest_relaxed(
    iterable: Iterable[T], k: int, key: Optional[Callable[[T], Any]] = None
) -> List[T]:
    """Relaxed-memory variant of :func:`k_smallest`."""
    return k_smallest_relaxed_general(iterable, k, _compare_for(key))