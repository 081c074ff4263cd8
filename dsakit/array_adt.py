"""A fixed-capacity array with searching, reordering and set operations."""

from __future__ import annotations

import enum
import heapq
from bisect import bisect_right
from collections.abc import Iterable, Iterator
from itertools import pairwise


class SortOrder(enum.Enum):
    """How the elements of an array are ordered."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    UNSORTED = "unsorted"


class ArrayFullError(Exception):
    """Raised when an element is added to an array that has no free capacity."""


class ArrayADT:
    """An array of integers with a fixed capacity and a live length."""

    def __init__(self, size: int, values: Iterable[int] = ()) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        items = list(values)
        if len(items) > size:
            raise ValueError("number of elements exceeds the size of the array")
        self.size = size
        self._items = items

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, values={self._items!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._items[index] = value

    def _ensure_room(self) -> None:
        if len(self._items) >= self.size:
            raise ArrayFullError("array is full")

    def append(self, value: int) -> None:
        """Add a value after the last element."""
        self._ensure_room()
        self._items.append(value)

    def insert(self, index: int, value: int) -> None:
        """Insert a value at ``index``, shifting later elements right."""
        if index < 0:
            raise IndexError("index should be >= 0")
        if index > len(self._items):
            raise IndexError("index out of range")
        self._ensure_room()
        self._items.insert(index, value)

    def insert_sorted(self, value: int) -> int:
        """Insert a value keeping the current sort order; return its index."""
        order = self.sort_order()
        if order is SortOrder.UNSORTED:
            raise ValueError("array is not sorted")
        self._ensure_room()
        if order is SortOrder.ASCENDING:
            position = bisect_right(self._items, value)
        else:
            position = next(
                (i for i, item in enumerate(self._items) if item < value),
                len(self._items),
            )
        self._items.insert(position, value)
        return position

    def delete(self, index: int) -> int:
        """Remove the element at ``index`` and return it."""
        if not 0 <= index < len(self._items):
            raise IndexError("invalid index")
        return self._items.pop(index)

    def sort_order(self) -> SortOrder:
        """Ascending (ties allowed), strictly descending, or unsorted."""
        descents = sum(1 for a, b in pairwise(self._items) if a > b)
        if descents == 0:
            return SortOrder.ASCENDING
        if descents == len(self._items) - 1:
            return SortOrder.DESCENDING
        return SortOrder.UNSORTED

    def linear_search(self, key: int) -> int:
        """Index of the first occurrence of ``key``, or -1."""
        return next((i for i, item in enumerate(self._items) if item == key), -1)

    def search_transpose(self, key: int) -> int:
        """Find ``key`` and swap it one place towards the front; return its new index or -1."""
        index = self.linear_search(key)
        if index > 0:
            items = self._items
            items[index], items[index - 1] = items[index - 1], items[index]
            return index - 1
        return index

    def search_move_front(self, key: int) -> int:
        """Find ``key`` and swap it with the first element; return 0 or -1."""
        index = self.linear_search(key)
        if index < 0:
            return -1
        items = self._items
        items[index], items[0] = items[0], items[index]
        return 0

    def _resolve_order(self, order: SortOrder | None) -> bool:
        if order is None:
            order = self.sort_order()
        if order is SortOrder.UNSORTED:
            raise ValueError("binary search needs a sorted array")
        return order is SortOrder.ASCENDING

    def binary_search(self, key: int, order: SortOrder | None = None) -> int:
        """Iterative binary search; the order is detected unless given."""
        ascending = self._resolve_order(order)
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            item = self._items[mid]
            if item == key:
                return mid
            if (key < item) if ascending else (key > item):
                high = mid - 1
            else:
                low = mid + 1
        return -1

    def binary_search_recursive(self, key: int, order: SortOrder | None = None) -> int:
        """Recursive binary search; the order is detected unless given."""
        ascending = self._resolve_order(order)
        items = self._items

        def find(low: int, high: int) -> int:
            if low > high:
                return -1
            mid = (low + high) // 2
            if items[mid] == key:
                return mid
            if (key < items[mid]) if ascending else (key > items[mid]):
                return find(low, mid - 1)
            return find(mid + 1, high)

        return find(0, len(items) - 1)

    def search(self, key: int) -> int:
        """Binary search when the array is sorted, linear search otherwise."""
        order = self.sort_order()
        if order is SortOrder.UNSORTED:
            return self.linear_search(key)
        return self.binary_search(key, order)

    def _require_elements(self) -> None:
        if not self._items:
            raise ValueError("array is empty")

    def max(self) -> int:
        """Largest element."""
        self._require_elements()
        return max(self._items)

    def min(self) -> int:
        """Smallest element."""
        self._require_elements()
        return min(self._items)

    def sum(self) -> int:
        """Sum of the elements."""
        return sum(self._items)

    def sum_recursive(self) -> int:
        """Sum of the elements, computed from the last one back."""
        items = self._items

        def add(n: int) -> int:
            if n < 0:
                return 0
            return items[n] + add(n - 1)

        return add(len(items) - 1)

    def average(self) -> float:
        """Arithmetic mean of the elements."""
        self._require_elements()
        return sum(self._items) / len(self._items)

    def reverse(self) -> None:
        """Reverse the elements in place by swapping from both ends."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1

    def left_shift(self) -> None:
        """Move every element one place left, filling the end with 0."""
        if self._items:
            self._items = [*self._items[1:], 0]

    def right_shift(self) -> None:
        """Move every element one place right, filling the front with 0."""
        if self._items:
            self._items = [0, *self._items[:-1]]

    def left_rotate(self) -> None:
        """Move the first element to the end."""
        if self._items:
            self._items = [*self._items[1:], self._items[0]]

    def right_rotate(self) -> None:
        """Move the last element to the front."""
        if self._items:
            self._items = [self._items[-1], *self._items[:-1]]

    def negatives_left(self) -> None:
        """Rearrange so that all negative elements come before the others."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            while i < j and items[i] < 0:
                i += 1
            while i < j and items[j] >= 0:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]

    def merge(self, other: ArrayADT) -> ArrayADT:
        """Merge two sorted arrays into a new sorted array."""
        merged = list(heapq.merge(self._items, other._items))
        return ArrayADT(len(merged), merged)

    def union(self, other: ArrayADT) -> ArrayADT:
        """Sorted union of two sorted arrays; equal pairs appear once."""
        a, b = self._items, other._items
        result: list[int] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                result.append(a[i])
                i += 1
            elif a[i] > b[j]:
                result.append(b[j])
                j += 1
            else:
                result.append(a[i])
                i += 1
                j += 1
        result.extend(a[i:])
        result.extend(b[j:])
        return ArrayADT(len(a) + len(b), result)

    def intersection(self, other: ArrayADT) -> ArrayADT:
        """Elements found in both sorted arrays."""
        a, b = self._items, other._items
        result: list[int] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                i += 1
            elif a[i] > b[j]:
                j += 1
            else:
                result.append(a[i])
                i += 1
                j += 1
        return ArrayADT(len(a) + len(b), result)

    def difference(self, other: ArrayADT) -> ArrayADT:
        """Sorted elements of this array that are not in ``other``."""
        a, b = sorted(self._items), sorted(other._items)
        result: list[int] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                result.append(a[i])
                i += 1
            elif a[i] > b[j]:
                j += 1
            else:
                i += 1
                j += 1
        result.extend(a[i:])
        return ArrayADT(len(a), result)