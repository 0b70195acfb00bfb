"""Square matrices stored as column vectors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from asteroids.vector import Vector


def _as_vector(values: Iterable[float]) -> Vector:
    return Vector(*values)


class SquareMatrix:
    """An N x N matrix; ``matrix[i]`` is its i-th column vector."""

    __slots__ = ("_columns",)

    def __init__(self, columns: Iterable[Iterable[float]]) -> None:
        cols = [_as_vector(column) for column in columns]
        if not cols:
            raise ValueError("a matrix needs at least one column")
        size = len(cols)
        if any(len(column) != size for column in cols):
            raise ValueError(f"each column must contain exactly {size} elements")
        self._columns = cols

    @classmethod
    def zeros(cls, size: int) -> SquareMatrix:
        return cls(Vector.filled(size) for _ in range(size))

    @classmethod
    def identity(cls, size: int) -> SquareMatrix:
        matrix = cls.zeros(size)
        for i, column in enumerate(matrix._columns):
            column[i] = 1.0
        return matrix

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._columns)

    def __getitem__(self, i: int) -> Vector:
        return self._columns[i]

    def __setitem__(self, i: int, column: Iterable[float]) -> None:
        vector = _as_vector(column)
        if len(vector) != len(self):
            raise ValueError(f"a column must contain exactly {len(self)} elements")
        self._columns[i] = vector

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns == other._columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SquareMatrix([{', '.join(repr(c) for c in self._columns)}])"

    def at(self, row: int, column: int) -> float:
        return self._columns[column][row]

    def set_at(self, row: int, column: int, value: float) -> None:
        self._columns[column][row] = value

    def __mul__(self, other):
        """Product with a vector of the same size or with another square matrix."""
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(f"vector size {len(other)} does not match matrix size {len(self)}")
            result = Vector.filled(len(self))
            for column, factor in zip(self._columns, other):
                result += factor * column
            return result
        if isinstance(other, SquareMatrix):
            if len(other) != len(self):
                raise ValueError(f"matrix sizes differ: {len(self)} and {len(other)}")
            return SquareMatrix(self * column for column in other._columns)
        return NotImplemented