"""Square matrices stored compactly, keeping only the cells their shape allows."""

from __future__ import annotations

import abc
from collections.abc import Iterator


class PackedMatrix(abc.ABC):
    """An ``n`` x ``n`` matrix kept in a flat list of its significant cells.

    Cells are addressed as ``matrix[i, j]``. Cells outside the stored shape
    read as 0; writing a non-zero value to one raises ``ValueError``.
    """

    _separator = " "

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._cells = [0] * self._storage_size(n)

    @staticmethod
    @abc.abstractmethod
    def _storage_size(n: int) -> int:
        """Number of cells stored for an ``n`` x ``n`` matrix."""

    @abc.abstractmethod
    def _slot(self, i: int, j: int) -> int | None:
        """Storage index of cell ``(i, j)``, or None when it is always zero."""

    def _check_key(self, key: tuple[int, int]) -> tuple[int, int]:
        i, j = key
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"cell ({i}, {j}) is outside a {self.n}x{self.n} matrix")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> int:
        slot = self._slot(*self._check_key(key))
        return 0 if slot is None else self._cells[slot]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = self._check_key(key)
        slot = self._slot(i, j)
        if slot is None:
            if value != 0:
                raise ValueError(
                    f"cell ({i}, {j}) must be zero in a {type(self).__name__}"
                )
            return
        self._cells[slot] = value

    def rows(self) -> Iterator[list[int]]:
        """Yield the full rows of the matrix."""
        for i in range(self.n):
            yield [self[i, j] for j in range(self.n)]

    def __str__(self) -> str:
        return "\n".join(
            self._separator.join(str(value) for value in row) for row in self.rows()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.rows())!r})"


class DiagonalMatrix(PackedMatrix):
    """Only the main diagonal is stored."""

    _separator = "\t"

    @staticmethod
    def _storage_size(n: int) -> int:
        return n

    def _slot(self, i: int, j: int) -> int | None:
        return i if i == j else None

    def __add__(self, other: object) -> DiagonalMatrix:
        if not isinstance(other, DiagonalMatrix):
            return NotImplemented
        if other.n != self.n:
            raise ValueError("matrices must have the same size")
        result = DiagonalMatrix(self.n)
        result._cells = [a + b for a, b in zip(self._cells, other._cells)]
        return result


class LowerTriangularMatrix(PackedMatrix):
    """Cells on or below the diagonal, stored row by row."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        return i * (i + 1) // 2 + j if i >= j else None


class UpperTriangularMatrix(PackedMatrix):
    """Cells on or above the diagonal, stored column by column."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        return j * (j + 1) // 2 + i if i <= j else None


class SymmetricMatrix(PackedMatrix):
    """One triangle is stored; cell ``(i, j)`` and cell ``(j, i)`` share a slot."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        row, col = max(i, j), min(i, j)
        return row * (row + 1) // 2 + col


class TridiagonalMatrix(PackedMatrix):
    """The main diagonal and its two neighbours: lower, main, then upper."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return max(3 * n - 2, 0)

    def _slot(self, i: int, j: int) -> int | None:
        if i - j == 1:
            return i - 1
        if i == j:
            return self.n - 1 + i
        if j - i == 1:
            return 2 * self.n - 1 + i
        return None


class ToeplitzMatrix(PackedMatrix):
    """Each diagonal is constant: the first row then the rest of the first column."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return max(2 * n - 1, 0)

    def _slot(self, i: int, j: int) -> int | None:
        if i <= j:
            return j - i
        return self.n - 1 + (i - j)