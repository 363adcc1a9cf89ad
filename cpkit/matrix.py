"""Square matrices modulo 1e9+7 and counts computed by their powers."""

from __future__ import annotations

from collections.abc import Iterable

MODULUS = 10**9 + 7
_ROWS = 3


class Matrix:
    """A square matrix whose products are reduced modulo 1e9+7."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("a matrix needs at least one row")
        self.size = size
        self._rows = [[0] * size for _ in range(size)]

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """The identity matrix of the given size."""
        result = cls(size)
        for i in range(size):
            result._rows[i][i] = 1
        return result

    def __getitem__(self, index: int) -> list[int]:
        return self._rows[index]

    def __mul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            raise ValueError("matrix sizes differ")
        columns = list(zip(*other._rows))
        result = Matrix(self.size)
        result._rows = [
            [sum(a * b for a, b in zip(row, column)) % MODULUS for column in columns]
            for row in self._rows
        ]
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def power(self, exponent: int) -> "Matrix":
        """This matrix raised to a non-negative integer power."""
        if exponent < 0:
            raise ValueError("the exponent must be non-negative")
        result = Matrix.identity(self.size)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number modulo 1e9+7; 1 for every n below 3."""
    if n < 3:
        return 1
    step = Matrix(2)
    step[0][0] = step[0][1] = step[1][0] = 1
    return step.power(n - 1)[0][0]


def _step_matrix(blocked: list[int]) -> Matrix:
    step = Matrix(_ROWS)
    for i in range(_ROWS):
        if blocked[i] > 0:
            continue
        for j in range(max(i - 1, 0), min(i + 2, _ROWS)):
            step[i][j] = 1
    return step


def count_paths(m: int, obstacles: Iterable[tuple[int, int, int]]) -> int:
    """Paths across a 3-by-m field from row 2 of column 1 to row 2 of column m.

    Each move goes one column right and up, straight or down by one row.
    An obstacle ``(row, first, last)`` blocks that row in columns first..last.
    The count is taken modulo 1e9+7.
    """
    if m < 1:
        raise ValueError("the field needs at least one column")
    obstacles = list(obstacles)
    for row, first, last in obstacles:
        if not 1 <= row <= _ROWS:
            raise ValueError(f"row {row} is outside 1..{_ROWS}")
        if not 2 <= first <= last <= m:
            raise ValueError(f"columns {first}..{last} are outside 2..{m}")

    points = sorted({1, m, *(f - 1 for _, f, _ in obstacles), *(l for _, _, l in obstacles)})
    index = {value: i for i, value in enumerate(points)}
    delta = [[0] * _ROWS for _ in range(len(points) + 1)]
    for row, first, last in obstacles:
        delta[index[first - 1] + 1][row - 1] += 1
        delta[index[last] + 1][row - 1] -= 1

    blocked = [0] * _ROWS
    vector = [0, 1, 0]
    for k in range(1, len(points)):
        blocked = [b + d for b, d in zip(blocked, delta[k])]
        step = _step_matrix(blocked).power(points[k] - points[k - 1])
        vector = [
            sum(step[i][j] * vector[j] for j in range(_ROWS)) % MODULUS for i in range(_ROWS)
        ]
    return vector[1]