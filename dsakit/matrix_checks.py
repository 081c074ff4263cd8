"""Predicates that classify square matrices by their shape."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _require_square(matrix: Matrix) -> None:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")


def is_diagonal(matrix: Matrix) -> bool:
    """True when every element off the main diagonal is zero."""
    _require_square(matrix)
    return all(
        value == 0
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if i != j
    )


def is_lower_triangular(matrix: Matrix) -> bool:
    """True when every element above the main diagonal is zero."""
    _require_square(matrix)
    return all(
        value == 0
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if i < j
    )


def is_upper_triangular(matrix: Matrix) -> bool:
    """True when every element below the main diagonal is zero."""
    _require_square(matrix)
    return all(
        value == 0
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if i > j
    )


def is_symmetric(matrix: Matrix) -> bool:
    """True when the matrix equals its transpose."""
    _require_square(matrix)
    return all(
        value == matrix[j][i]
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
    )


def is_tridiagonal(matrix: Matrix) -> bool:
    """True when every element more than one place off the diagonal is zero."""
    _require_square(matrix)
    return all(
        value == 0
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if abs(i - j) > 1
    )


def is_toeplitz(matrix: Matrix) -> bool:
    """True when every diagonal running down to the right is constant."""
    _require_square(matrix)
    return all(
        upper_value == lower_value
        for upper, lower in zip(matrix, matrix[1:])
        for upper_value, lower_value in zip(upper, lower[1:])
    )