"""Ordered merge of sorted (key, value) sequences with summation on equal keys."""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_EXHAUSTED = object()


def merge_sorted(
    left: Iterable[tuple[K, V]],
    right: Iterable[tuple[K, V]],
) -> Iterator[tuple[K, V]]:
    """
    Lazily merge two key-sorted sequences into one key-sorted sequence.

    Both inputs must already be ascending by key with unique keys; nothing is
    re-sorted here. When a key appears in both inputs it is emitted once with
    the two values added together.
    """
    it1 = iter(left)
    it2 = iter(right)
    head1: Any = next(it1, _EXHAUSTED)
    head2: Any = next(it2, _EXHAUSTED)

    while head1 is not _EXHAUSTED and head2 is not _EXHAUSTED:
        k1, v1 = head1
        k2, v2 = head2
        if k1 < k2:
            yield head1
            head1 = next(it1, _EXHAUSTED)
        elif k2 < k1:
            yield head2
            head2 = next(it2, _EXHAUSTED)
        else:
            yield (k1, v1 + v2)
            head1 = next(it1, _EXHAUSTED)
            head2 = next(it2, _EXHAUSTED)

    # At most one side still has elements.
    if head1 is not _EXHAUSTED:
        yield head1
        yield from it1
    elif head2 is not _EXHAUSTED:
        yield head2
        yield from it2


def merge_tables(tables: Sequence[Iterable[tuple[K, V]]]) -> list[tuple[K, V]]:
    """
    Reduce any number of key-sorted tables into one by merging in pairs.

    Each round merges neighbours, halving the number of tables, so every
    entry takes part in O(log n) merges instead of O(n) for a linear fold.
    """
    if not tables:
        return []

    level = [list(table) for table in tables]
    while len(level) > 1:
        paired = [
            list(merge_sorted(level[i], level[i + 1]))
            for i in range(0, len(level) - 1, 2)
        ]
        if len(level) % 2:
            paired.append(level[-1])
        level = paired

    return level[0]
