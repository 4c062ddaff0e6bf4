"""Operations on rectangular integer matrices given as lists of rows."""

from __future__ import annotations

from typing import Iterable, Sequence

Matrix = Sequence[Sequence[int]]


def _rows(matrix: Iterable[Iterable[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def _shape(rows: list[list[int]]) -> tuple[int, int]:
    return len(rows), (len(rows[0]) if rows else 0)


def add(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of equal shape."""
    left = _rows(first)
    right = _rows(second)
    if _shape(left) != _shape(right):
        raise ValueError("matrices must have the same dimensions")
    return [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(left, right)]


def is_symmetric(matrix: Matrix) -> bool:
    """Tell whether ``matrix`` is square and equal to its transpose."""
    rows = _rows(matrix)
    m, n = _shape(rows)
    if m != n:
        return False
    return rows == [list(column) for column in zip(*rows)]


def spiral(matrix: Matrix) -> list[int]:
    """List the elements clockwise from the outer boundary inward."""
    rows = _rows(matrix)
    order: list[int] = []
    while rows:
        order.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return order


def is_identity(matrix: Matrix) -> bool:
    """Tell whether ``matrix`` is square with ones on the diagonal and zeros elsewhere."""
    rows = _rows(matrix)
    m, n = _shape(rows)
    if m != n:
        return False
    return all(
        value == (1 if i == j else 0)
        for i, row in enumerate(rows)
        for j, value in enumerate(row)
    )


def diagonal_sum(matrix: Matrix) -> int:
    """Sum the elements whose row index equals their column index."""
    rows = _rows(matrix)
    _, n = _shape(rows)
    return sum(row[i] for i, row in enumerate(rows) if i < n)