"""Small fixed-size vectors with component-wise arithmetic."""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Iterator


def _vector_of(values: Iterable[Any]) -> "Vector":
    """Build the most specific vector type for the given components."""
    components = list(values)
    cls = _BY_LENGTH.get(len(components))
    if cls is None:
        return Vector(*components)
    return cls(*components)


def _component(index: int) -> property:
    def getter(self: "Vector") -> Any:
        return self._data[index]

    def setter(self: "Vector", value: Any) -> None:
        self._data[index] = value

    return property(getter, setter, doc=f"Component {index}.")


class Vector:
    """A vector of numeric components supporting GLSL-style operators."""

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("a vector needs at least one component")
        self._data = list(args)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._data))})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def _pairwise(self, other: "Vector", op) -> "Vector":
        if len(other) != len(self):
            raise ValueError(
                f"vector lengths differ: {len(self)} and {len(other)}"
            )
        return _vector_of(op(a, b) for a, b in zip(self._data, other._data))

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._pairwise(other, lambda a, b: a + b)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._pairwise(other, lambda a, b: a - b)

    def __neg__(self) -> "Vector":
        return _vector_of(-a for a in self._data)

    def _times_matrix(self, matrix: Iterable[Iterable[Any]]) -> "Vector":
        rows = [list(row) for row in matrix]
        if len(rows) != len(self):
            raise ValueError(
                f"cannot multiply a vector of length {len(self)} "
                f"by a matrix with {len(rows)} rows"
            )
        if len({len(row) for row in rows}) != 1:
            raise ValueError("matrix rows have different lengths")
        return _vector_of(
            sum(v * c for v, c in zip(self._data, column)) for column in zip(*rows)
        )

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self._pairwise(other, lambda a, b: a * b)
        if isinstance(other, numbers.Real):
            return _vector_of(a * other for a in self._data)
        if isinstance(other, Iterable) and not isinstance(other, (str, bytes)):
            return self._times_matrix(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return _vector_of(other * a for a in self._data)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return self._pairwise(other, lambda a, b: a / b)
        if isinstance(other, numbers.Real):
            return _vector_of(a / other for a in self._data)
        return NotImplemented

    def copy(self) -> "Vector":
        """Return an independent vector with the same components."""
        return _vector_of(self._data)

    def truncate(self, length: int) -> "Vector":
        """Return a vector made of the first ``length`` components."""
        if not 1 <= length <= len(self):
            raise ValueError(
                f"cannot truncate a vector of length {len(self)} to {length}"
            )
        return _vector_of(self._data[:length])

    def extend(self, *args: Any) -> "Vector":
        """Return a longer vector with extra components (numbers or vectors) appended."""
        extra: list[Any] = []
        for arg in args:
            if isinstance(arg, Vector):
                extra.extend(arg)
            else:
                extra.append(arg)
        return _vector_of(self._data + extra)


class Vec2(Vector):
    """Two-component vector."""

    __slots__ = ()

    def __init__(self, x: Any = 0.0, y: Any = 0.0) -> None:
        super().__init__(x, y)

    x = _component(0)
    y = _component(1)
    r = x
    g = y


class Vec3(Vector):
    """Three-component vector."""

    __slots__ = ()

    def __init__(self, x: Any = 0.0, y: Any = 0.0, z: Any = 0.0) -> None:
        super().__init__(x, y, z)

    x = _component(0)
    y = _component(1)
    z = _component(2)
    r = x
    g = y
    b = z


class Vec4(Vector):
    """Four-component vector."""

    __slots__ = ()

    def __init__(
        self, x: Any = 0.0, y: Any = 0.0, z: Any = 0.0, w: Any = 0.0
    ) -> None:
        super().__init__(x, y, z, w)

    x = _component(0)
    y = _component(1)
    z = _component(2)
    w = _component(3)
    r = x
    g = y
    b = z
    a = w


_BY_LENGTH: dict[int, type[Vector]] = {2: Vec2, 3: Vec3, 4: Vec4}