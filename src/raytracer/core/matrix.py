"""
Square matrix of order 2, 3 or 4 on a fixed 4x4 backing store.

Data model (invariants):
- `cells: float64 ndarray (4, 4)` always; only the leading `order x order` block
  is meaningful, every other cell stays 0.0.
- `order` is one of 2, 3, 4 and is fixed at construction.
- Equality, multiplication and transpose look at the declared block only, so the
  padding never leaks into a result.

Order handling:
- `Matrix.empty(order)` is the single place that validates an order; anything
  outside {2, 3, 4} raises `ConfigurationError`.
- Products require equal orders and `apply` (matrix x Tuple) requires order 4;
  both raise `ConfigurationError` otherwise.
- `get`/`set` raise `IndexError` when a row or column falls outside the order.

Layout of an order-3 matrix inside the store:

    # order=3, rows a/b/c
    #   [a0, a1, a2, 0]
    #   [b0, b1, b2, 0]
    #   [c0, c1, c2, 0]
    #   [ 0,  0,  0, 0]

Example:
    a = Matrix.order4((1, 2, 3, 4), (2, 4, 4, 2), (8, 6, 4, 1), (0, 0, 0, 1))
    a.apply(Tuple(1, 2, 3, 1))   # Tuple(18, 24, 33, 1)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from raytracer.common.tolerance import all_approx_equal
from raytracer.common.types import Row2, Row3, Row4
from raytracer.errors import ConfigurationError

from .tuples import Tuple

STORE_SIZE = 4
SUPPORTED_ORDERS = (2, 3, 4)


def _validate_order(order: int) -> int:
    if order not in SUPPORTED_ORDERS:
        raise ConfigurationError(f"unknown matrix dimension {order} (expected one of 2, 3, 4)")
    return int(order)


class Matrix:
    """Tagged-order square matrix.

    Fields:
    - `order`: declared dimension.
    - `cells (4, 4) float64`: backing store, zero outside the declared block.

    `get/set` and `m[row, col]` are bounds checked against `order`. All other
    operations are pure and return new instances.
    """

    __slots__ = ("_order", "_cells")

    _order: int
    _cells: np.ndarray

    def __init__(self, order: int, rows: Sequence[Sequence[float]] | None = None) -> None:
        self._order = _validate_order(order)
        self._cells = np.zeros((STORE_SIZE, STORE_SIZE), dtype=np.float64)
        if rows is None:
            return
        if len(rows) != self._order or any(len(r) != self._order for r in rows):
            raise ValueError(f"order-{self._order} matrix needs {self._order} rows of {self._order} values")
        self._cells[: self._order, : self._order] = np.asarray(rows, dtype=np.float64)

    # ── factories ───────────────────
    @classmethod
    def empty(cls, order: int) -> "Matrix":
        """Zero matrix of `order`.

        Raises
        ------
        ConfigurationError
            When `order` is not 2, 3 or 4.
        """
        return cls(order)

    @classmethod
    def order2(cls, row0: Row2, row1: Row2) -> "Matrix":
        return cls(2, (row0, row1))

    @classmethod
    def order3(cls, row0: Row3, row1: Row3, row2: Row3) -> "Matrix":
        return cls(3, (row0, row1, row2))

    @classmethod
    def order4(cls, row0: Row4, row1: Row4, row2: Row4, row3: Row4) -> "Matrix":
        return cls(4, (row0, row1, row2, row3))

    @classmethod
    def identity(cls) -> "Matrix":
        """A fresh order-4 identity matrix."""
        m = cls(4)
        m._cells[:, :] = np.eye(STORE_SIZE, dtype=np.float64)
        return m

    # ── properties ──────────────────
    @property
    def order(self) -> int:
        return self._order

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the full 4x4 store (padding included)."""
        view = self._cells.view()
        view.setflags(write=False)
        return view

    # ── cell access ─────────────────
    def _check_index(self, row: int, col: int) -> None:
        n = self._order
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"cell ({row}, {col}) is outside an order-{n} matrix")

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return float(self._cells[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """Replace one cell in place (the only mutating operation)."""
        self._check_index(row, col)
        self._cells[row, col] = float(value)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self.set(row, col, value)

    def row_tuple(self, row: int) -> Tuple:
        """Row `row` of an order-4 matrix read as `Tuple(x=r[0], y=r[1], z=r[2], w=r[3])`."""
        if self._order != 4:
            raise ConfigurationError(f"row_tuple needs an order-4 matrix, got order {self._order}")
        self._check_index(row, 0)
        r = self._cells[row]
        return Tuple(r[0], r[1], r[2], r[3])

    def to_list(self) -> list[list[float]]:
        n = self._order
        return [[float(v) for v in self._cells[i, :n]] for i in range(n)]

    # ── algebra (pure) ──────────────
    def transpose(self) -> "Matrix":
        n = self._order
        out = Matrix.empty(n)
        out._cells[:n, :n] = self._cells[:n, :n].T
        return out

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product over the declared order.

        `result[i, j] = sum_k self[i, k] * other[k, j]` for `i, j, k < order`.

        Raises
        ------
        ConfigurationError
            When the two orders differ.
        """
        if other._order != self._order:
            raise ConfigurationError(
                f"cannot multiply an order-{self._order} matrix by an order-{other._order} matrix"
            )
        n = self._order
        out = Matrix.empty(n)
        out._cells[:n, :n] = self._cells[:n, :n] @ other._cells[:n, :n]
        return out

    def apply(self, t: Tuple) -> Tuple:
        """Linear map of an order-4 matrix onto a `Tuple` (component i = row i . t)."""
        if self._order != 4:
            raise ConfigurationError(f"apply needs an order-4 matrix, got order {self._order}")
        return Tuple(
            self.row_tuple(0).dot(t),
            self.row_tuple(1).dot(t),
            self.row_tuple(2).dot(t),
            self.row_tuple(3).dot(t),
        )

    def copy(self) -> "Matrix":
        out = Matrix.empty(self._order)
        out._cells[:, :] = self._cells
        return out

    # ── equality / sugar ────────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._order != other._order:
            return False
        n = self._order
        return all_approx_equal(self._cells[:n, :n].ravel(), other._cells[:n, :n].ravel())

    __hash__ = None  # type: ignore[assignment]

    def __matmul__(self, other: "Matrix | Tuple") -> "Matrix | Tuple":
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.apply(other)
        return NotImplemented

    __mul__ = __matmul__

    def __repr__(self) -> str:  # pragma: no cover - display only
        return f"Matrix(order={self._order}, rows={self.to_list()!r})"


IDENTITY = Matrix.identity()
# Shared constant: its store is frozen, `set` on it raises.
IDENTITY._cells.setflags(write=False)


def identity() -> Matrix:
    """Order-4 identity; a copy, so callers may `set` cells freely."""
    return IDENTITY.copy()


def create_order2(row0: Row2, row1: Row2) -> Matrix:
    return Matrix.order2(row0, row1)


def create_order3(row0: Row3, row1: Row3, row2: Row3) -> Matrix:
    return Matrix.order3(row0, row1, row2)


def create_order4(row0: Row4, row1: Row4, row2: Row4, row3: Row4) -> Matrix:
    return Matrix.order4(row0, row1, row2, row3)


__all__ = [
    "Matrix",
    "IDENTITY",
    "identity",
    "create_order2",
    "create_order3",
    "create_order4",
    "SUPPORTED_ORDERS",
]
