"""Helpers on sets, lists and sequences of sets used in mining."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def contains_set(superset: Iterable[Any], subset: Iterable[Any]) -> bool:
    """Tell whether every element of ``subset`` is in ``superset``."""
    return set(subset) <= set(superset)


def index_of_sort(values: Sequence[Any]) -> list[int]:
    """Return the indices that sort ``values`` ascending, ties kept in order."""
    return sorted(range(len(values)), key=values.__getitem__)


def sub_list(items: Sequence[T], start: int, stop: int) -> list[T]:
    """Return the items from ``start`` inclusive to ``stop`` exclusive."""
    if not 0 <= start <= stop <= len(items):
        raise IndexError(f"range {start}..{stop} out of bounds for {len(items)} items")
    return list(items[start:stop])


def _search(haystack: Sequence[Any], needle: Sequence[Any]) -> bool:
    """Tell whether ``needle`` occurs contiguously in a non-empty ``haystack``."""
    if not haystack:
        return False
    width = len(needle)
    return any(
        haystack[pos : pos + width] == needle
        for pos in range(len(haystack) - width + 1)
    )


def is_sub_list(sub: Sequence[Any], sup: Sequence[Any]) -> bool:
    """Tell whether ``sub`` occurs as a contiguous run in ``sup``.

    An empty ``sub`` is found in any non-empty ``sup``.
    """
    return _search(list(sup), list(sub))


def contains_key(mapping: Mapping[Hashable, Any], key: Hashable) -> bool:
    """Tell whether ``mapping`` has ``key``."""
    return key in mapping


def is_sub_sequence(s1: Iterable[Any], s2: Iterable[Any]) -> bool:
    """Tell whether sorted ``s2`` is a contiguous run of sorted ``s1``.

    An empty ``s2`` is found in any non-empty ``s1``.
    """
    return _search(sorted(set(s1)), sorted(set(s2)))


def is_subset_sequence(
    s1: Iterable[Iterable[Any]], s2: Sequence[Iterable[Any]]
) -> bool:
    """Tell whether the sets of ``s2`` are matched, in order, by sets of ``s1``.

    Each set of ``s2`` must be a contiguous sorted run of a later set of ``s1``.
    """
    if not s2:
        return True
    wanted = iter(s2)
    current = next(wanted)
    for candidate in s1:
        if is_sub_sequence(candidate, current):
            current = next(wanted, None)
            if current is None:
                return True
    return False


def is_single_subset_sequence(
    s1: Sequence[Any], s2: Iterable[Iterable[Any]]
) -> bool:
    """Tell whether the items of ``s1`` appear, in order, in successive sets of ``s2``."""
    if not s1:
        return True
    wanted = iter(s1)
    current = next(wanted)
    for candidate in s2:
        if current in candidate:
            current = next(wanted, _END)
            if current is _END:
                return True
    return False


_END = object()