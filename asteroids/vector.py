"""Mutable N-dimensional vectors of floating point components."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real


class Vector:
    """A vector of floats; index 0, 1, 2, ... corresponds to the x, y, z, ... axis."""

    __slots__ = ("_values",)

    def __init__(self, *args: float) -> None:
        if not args:
            raise ValueError("a vector needs at least one component")
        self._values = [float(value) for value in args]

    @classmethod
    def filled(cls, size: int, values: Iterable[float] = ()) -> Vector:
        """Build a vector of ``size`` components from ``values``.

        No values give the null vector; fewer than ``size`` values are
        padded with the last value given.
        """
        if size <= 0:
            raise ValueError("a vector needs at least one component")
        components = [float(value) for value in values]
        if len(components) > size:
            raise ValueError(f"{len(components)} values do not fit into {size} components")
        if not components:
            return cls(*([0.0] * size))
        components.extend([components[-1]] * (size - len(components)))
        return cls(*components)

    @classmethod
    def from_angle(cls, angle: float, size: int = 2) -> Vector:
        """Unit vector pointing to ``angle`` (radians) in the x/y plane."""
        if size < 2:
            raise ValueError("an angle needs at least two dimensions")
        return cls(math.cos(angle), math.sin(angle), *([0.0] * (size - 2)))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, i: int) -> float:
        return self._values[i]

    def __setitem__(self, i: int, value: float) -> None:
        self._values[i] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(v) for v in self._values)})"

    def _check_size(self, other: Vector) -> None:
        if len(self) != len(other):
            raise ValueError(f"vector sizes differ: {len(self)} and {len(other)}")

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_size(other)
        return Vector(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_size(other)
        return Vector(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Vector:
        return Vector(*(-a for a in self))

    def __mul__(self, other):
        """Scale by a number, or take the scalar (inner) product with a vector."""
        if isinstance(other, Vector):
            self._check_size(other)
            return sum(a * b for a, b in zip(self, other))
        if isinstance(other, Real):
            return Vector(*(a * other for a in self))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector(*(other * a for a in self))
        return NotImplemented

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_size(other)
        self._values = [a + b for a, b in zip(self._values, other)]
        return self

    def __isub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_size(other)
        self._values = [a - b for a, b in zip(self._values, other)]
        return self

    def __imul__(self, factor: float) -> Vector:
        if not isinstance(factor, Real):
            return NotImplemented
        self._values = [a * factor for a in self._values]
        return self

    def __itruediv__(self, factor: float) -> Vector:
        if not isinstance(factor, Real):
            return NotImplemented
        self._values = [a / factor for a in self._values]
        return self

    def copy(self) -> Vector:
        return Vector(*self._values)

    def at(self, i: int) -> float:
        """Component ``i``; raises IndexError unless 0 <= i < len(self)."""
        if not 0 <= i < len(self._values):
            raise IndexError(f"index {i} out of range for a vector of size {len(self)}")
        return self._values[i]

    def normalize(self) -> None:
        """Scale this vector to length 1."""
        length = self.length()
        self._values = [a / length for a in self._values]

    def get_reflective(self, normal: Vector) -> Vector:
        """Specular reflection of this vector at a surface with the given unit normal."""
        return self - (2.0 * (self * normal)) * normal

    def angle(self, axis_1: int, axis_2: int) -> float:
        """Angle in radians of this vector in the plane spanned by the two axes."""
        return math.atan2(self._values[axis_2], self._values[axis_1])

    def cross_product(self, v: Vector) -> Vector:
        if len(self) != 3 or len(v) != 3:
            raise ValueError("the cross product is defined for three-dimensional vectors only")
        a1, a2, a3 = self._values
        b1, b2, b3 = v
        return Vector(a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1)

    def length(self) -> float:
        return math.sqrt(self.square_of_length())

    def square_of_length(self) -> float:
        return sum(a * a for a in self._values)