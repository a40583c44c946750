"""Small dense matrices and the affine transforms built from them."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass

from minirt.tuples import Tuple, _truncate


@dataclass(frozen=True)
class Matrix:
    """An immutable row-major matrix."""

    cells: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.cells)
        if not rows or not rows[0]:
            raise ValueError("matrix must have at least one row and column")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("matrix rows must all have the same length")
        object.__setattr__(self, "cells", rows)

    @property
    def nrows(self) -> int:
        return len(self.cells)

    @property
    def ncols(self) -> int:
        return len(self.cells[0])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.cells[row][col]

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.ncols != other.nrows:
            raise ValueError("matrix dimensions do not match for multiplication")
        columns = list(zip(*other.cells))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.cells
            )
        )

    def apply(self, t: Tuple) -> Tuple:
        """Multiply this 4-column matrix by a tuple."""
        if self.ncols != 4 or self.nrows < 4:
            raise ValueError("only 4x4 matrices can transform tuples")
        comps = (t.x, t.y, t.z, t.w)
        x, y, z, w = (
            sum(a * b for a, b in zip(row, comps)) for row in self.cells[:4]
        )
        return Tuple(x, y, z, _truncate(w))

    def transpose(self) -> Matrix:
        return Matrix(tuple(zip(*self.cells)))

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self.cells)

    def submatrix(self, row: int, col: int) -> Matrix:
        """The matrix with one row and one column removed."""
        if self.nrows < 2 or self.ncols < 2:
            raise ValueError("matrix too small to take a submatrix")
        if not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise IndexError("submatrix index out of range")
        return Matrix(_submatrix(self.cells, row, col))

    def cofactor(self, row: int, col: int) -> float:
        if not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise IndexError("cofactor index out of range")
        return _cofactor(self.cells, row, col)

    def inverse(self) -> Matrix:
        """The inverse; a singular matrix is returned unchanged."""
        return _invert(self)


def _submatrix(cells, row, col):
    return tuple(
        tuple(v for j, v in enumerate(r) if j != col)
        for i, r in enumerate(cells)
        if i != row
    )


def _cofactor(cells, row, col) -> float:
    minor = _determinant(_submatrix(cells, row, col))
    return -minor if (row + col) % 2 else minor


def _determinant(cells) -> float:
    size = len(cells)
    if any(len(row) != size for row in cells):
        raise ValueError("determinant needs a square matrix")
    if size == 1:
        return cells[0][0]
    if size == 2:
        return cells[0][0] * cells[1][1] - cells[0][1] * cells[1][0]
    return sum(value * _cofactor(cells, 0, col) for col, value in enumerate(cells[0]))


@functools.lru_cache(maxsize=4096)
def _invert(m: Matrix) -> Matrix:
    det = m.determinant()
    if det == 0:
        return m
    size = m.nrows
    return Matrix(
        tuple(
            tuple(_cofactor(m.cells, col, row) / det for col in range(size))
            for row in range(size)
        )
    )


def identity(size: int) -> Matrix:
    """The size x size identity matrix."""
    if size < 1:
        raise ValueError("identity size must be positive")
    return Matrix(
        tuple(tuple(1.0 if i == j else 0.0 for j in range(size)) for i in range(size))
    )


def from_rows(r1: Tuple, r2: Tuple, r3: Tuple, r4: Tuple) -> Matrix:
    """A 4x4 matrix whose rows are the x, y, z, w of four tuples."""
    return Matrix(tuple((r.x, r.y, r.z, r.w) for r in (r1, r2, r3, r4)))


def _with_entries(entries: dict[tuple[int, int], float]) -> Matrix:
    rows = [list(row) for row in identity(4).cells]
    for (i, j), value in entries.items():
        rows[i][j] = value
    return Matrix(tuple(tuple(row) for row in rows))


def translation(offset: Tuple) -> Matrix:
    return _with_entries({(0, 3): offset.x, (1, 3): offset.y, (2, 3): offset.z})


def scaling(factors: Tuple) -> Matrix:
    return _with_entries({(0, 0): factors.x, (1, 1): factors.y, (2, 2): factors.z})


def rotation(radians: float, axis: int) -> Matrix:
    """Rotation about x (axis 0), y (axis 1) or z (any other axis)."""
    c, s = math.cos(radians), math.sin(radians)
    if axis == 0:
        return _with_entries({(1, 1): c, (1, 2): -s, (2, 1): s, (2, 2): c})
    if axis == 1:
        return _with_entries({(0, 0): c, (0, 2): s, (2, 0): -s, (2, 2): c})
    return _with_entries({(0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c})


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    return _with_entries(
        {(0, 1): xy, (0, 2): xz, (1, 0): yx, (1, 2): yz, (2, 0): zx, (2, 1): zy}
    )


def rodrigues(target: Tuple, initial: Tuple) -> Matrix:
    """Rotation that turns the initial direction onto the target direction.

    Parallel and anti-parallel directions give the identity.
    """
    target = target.normalize()
    axis = initial.cross(target)
    if axis.magnitude() == 0:
        return identity(4)
    u = axis.normalize()
    theta = math.acos(max(-1.0, min(1.0, initial.dot(target))))
    k = Matrix(((0.0, -u.z, u.y), (u.z, 0.0, -u.x), (-u.y, u.x, 0.0)))
    k2 = k @ k
    sin_t, one_minus_cos = math.sin(theta), 1 - math.cos(theta)
    entries = {
        (i, j): (1.0 if i == j else 0.0) + sin_t * k[i, j] + one_minus_cos * k2[i, j]
        for i in range(3)
        for j in range(3)
    }
    return _with_entries(entries)