"""Row-major matrices of numeric components."""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Iterator

from mygl.vector import Vec2, Vec3, Vec4, Vector

_ROW_TYPES: dict[int, type[Vector]] = {2: Vec2, 3: Vec3, 4: Vec4}


def _make_row(values: Iterable[Any]) -> Vector:
    components = list(values)
    cls = _ROW_TYPES.get(len(components))
    if cls is None:
        return Vector(*components)
    return cls(*components)


class Matrix:
    """A matrix stored as a list of row vectors.

    ``m[r]`` is the row vector ``r``, so ``m[r][c]`` reads and writes a
    single component.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[Any]]) -> None:
        built = [_make_row(row) for row in rows]
        if not built:
            raise ValueError("a matrix needs at least one row")
        if len({len(row) for row in built}) != 1:
            raise ValueError("matrix rows have different lengths")
        self._rows = built

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        """Return a ``rows`` x ``columns`` matrix filled with zeros."""
        return cls.scalar(rows, columns, 0.0)

    @classmethod
    def scalar(cls, rows: int, columns: int, value: Any) -> "Matrix":
        """Return a matrix with ``value`` on the diagonal and zeros elsewhere."""
        if rows < 1 or columns < 1:
            raise ValueError("a matrix needs at least one row and one column")
        return cls(
            [value if r == c else 0.0 for c in range(columns)] for r in range(rows)
        )

    @property
    def rows(self) -> int:
        return len(self._rows)

    @property
    def columns(self) -> int:
        return len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def __getitem__(self, index: int) -> Vector:
        return self._rows[index]

    def __setitem__(self, index: int, value: Iterable[Any]) -> None:
        row = _make_row(value)
        if len(row) != self.columns:
            raise ValueError(
                f"row of length {len(row)} does not fit {self.columns} columns"
            )
        self._rows[index] = row

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    def __repr__(self) -> str:
        body = ", ".join(repr(list(row)) for row in self._rows)
        return f"Matrix([{body}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def _check_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ValueError(f"matrix shapes differ: {self.shape} and {other.shape}")

    def _elementwise(self, other: "Matrix", op) -> "Matrix":
        self._check_same_shape(other)
        return Matrix(
            (op(a, b) for a, b in zip(row_a, row_b))
            for row_a, row_b in zip(self._rows, other._rows)
        )

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a - b)

    def __neg__(self) -> "Matrix":
        return Matrix((-a for a in row) for row in self._rows)

    def __truediv__(self, other):
        if isinstance(other, Matrix):
            return self._elementwise(other, lambda a, b: a / b)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise ValueError(
                    f"cannot multiply {self.shape} by {other.shape} matrix"
                )
            columns = list(zip(*other._rows))
            return Matrix(
                (sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self._rows
            )
        if isinstance(other, Vector):
            if len(other) != self.columns:
                raise ValueError(
                    f"cannot multiply {self.shape} matrix by a vector "
                    f"of length {len(other)}"
                )
            return _make_row(
                sum(a * b for a, b in zip(row, other)) for row in self._rows
            )
        if isinstance(other, numbers.Real):
            return Matrix((a * other for a in row) for row in self._rows)
        return NotImplemented

    def __imul__(self, other):
        """Scale in place, or pre-multiply in place: ``m *= n`` sets ``m`` to ``n * m``."""
        if isinstance(other, Matrix):
            if other.rows != other.columns or other.columns != self.rows:
                raise ValueError(
                    f"cannot pre-multiply {self.shape} matrix by {other.shape}"
                )
            self._rows = (other * self)._rows
            return self
        if isinstance(other, numbers.Real):
            self._rows = (self * other)._rows
            return self
        return NotImplemented

    def copy(self) -> "Matrix":
        """Return an independent matrix with the same components."""
        return Matrix(self._rows)


def _square(size: int, args: tuple[Any, ...]) -> Matrix:
    if not args:
        return Matrix.zeros(size, size)
    if len(args) == 1:
        (arg,) = args
        if isinstance(arg, Matrix):
            if arg.shape != (size, size):
                raise ValueError(f"expected a {size}x{size} matrix, got {arg.shape}")
            return arg.copy()
        if isinstance(arg, numbers.Real):
            return Matrix.scalar(size, size, arg)
        raise TypeError(f"cannot build a matrix from {type(arg).__name__}")
    if len(args) != size * size:
        raise ValueError(
            f"a {size}x{size} matrix takes {size * size} components, got {len(args)}"
        )
    return Matrix(args[r * size:(r + 1) * size] for r in range(size))


def mat2(*args: Any) -> Matrix:
    """Build a 2x2 matrix: zeros, a diagonal scalar, a copy, or 4 row-major values."""
    return _square(2, args)


def mat3(*args: Any) -> Matrix:
    """Build a 3x3 matrix: zeros, a diagonal scalar, a copy, or 9 row-major values."""
    return _square(3, args)


def mat4(*args: Any) -> Matrix:
    """Build a 4x4 matrix: zeros, a diagonal scalar, a copy, or 16 row-major values."""
    return _square(4, args)