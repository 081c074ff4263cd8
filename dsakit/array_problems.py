"""Small array problems: resizing, missing elements, duplicates, pair sums, extremes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby


def resized(values: Iterable[int], new_size: int) -> list[int]:
    """Copy the values into a new array of ``new_size`` slots.

    Slots past the copied values hold 0; values that do not fit are dropped.
    """
    if new_size < 0:
        raise ValueError("new_size must be non-negative")
    items = list(values)[:new_size]
    return items + [0] * (new_size - len(items))


def index_sum_grid(rows: int, cols: int) -> list[list[int]]:
    """A ``rows`` x ``cols`` grid whose cell ``(i, j)`` holds ``i + j + 1``."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must be non-negative")
    return [[i + j + 1 for j in range(cols)] for i in range(rows)]


def missing_single(values: Iterable[int]) -> int | None:
    """The one value missing from a sorted run of consecutive integers, or None."""
    items = list(values)
    if not items:
        return None
    offset = items[0]
    for i, value in enumerate(items):
        if value - i != offset:
            return offset + i
    return None


def missing_elements(values: Iterable[int]) -> list[int]:
    """Every value missing from a sorted sequence between its first and last element."""
    items = list(values)
    if not items:
        return []
    offset = items[0]
    missing: list[int] = []
    for i, value in enumerate(items):
        while offset < value - i:
            missing.append(offset + i)
            offset += 1
    return missing


def missing_unsorted(values: Iterable[int], upper: int | None = None) -> list[int]:
    """Values from 1 to ``upper`` (default: the largest value) absent from the input."""
    items = list(values)
    if upper is None:
        if not items:
            return []
        upper = max(items)
    present = set(items)
    return [k for k in range(1, upper + 1) if k not in present]


def duplicates_sorted(values: Iterable[int]) -> list[int]:
    """Each value that repeats in a sorted sequence, listed once."""
    return list(count_duplicates_sorted(values))


def count_duplicates_sorted(values: Iterable[int]) -> dict[int, int]:
    """Repeated values of a sorted sequence mapped to how often they appear."""
    counts: dict[int, int] = {}
    for value, run in groupby(values):
        length = sum(1 for _ in run)
        if length > 1:
            counts[value] = counts.get(value, 0) + length
    return counts


def count_duplicates(values: Iterable[int]) -> dict[int, int]:
    """Repeated values of any sequence with their counts, in order of first appearance."""
    counts = Counter(values)
    return {value: n for value, n in counts.items() if n > 1}


def pairs_with_sum(values: Iterable[int], key: int) -> list[tuple[int, int]]:
    """Pairs ``(value, partner)`` adding up to ``key`` where the partner came earlier."""
    seen: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for value in values:
        partner = key - value
        if partner in seen:
            pairs.append((value, partner))
        seen.add(value)
    return pairs


def pairs_with_sum_sorted(values: Iterable[int], key: int) -> list[tuple[int, int]]:
    """Pairs adding up to ``key`` in a sorted sequence, found from both ends."""
    items = list(values)
    pairs: list[tuple[int, int]] = []
    i, j = 0, len(items) - 1
    while i < j:
        total = items[i] + items[j]
        if total == key:
            pairs.append((items[i], items[j]))
            i += 1
            j -= 1
        elif total < key:
            i += 1
        else:
            j -= 1
    return pairs


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """The smallest and largest value, found in a single pass."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("min_max() needs at least one value") from None
    low = high = first
    for value in iterator:
        if value > high:
            high = value
        elif value < low:
            low = value
    return low, high