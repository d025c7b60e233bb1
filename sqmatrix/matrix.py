"""Square integer matrices and a reader for the two-matrix input format."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from os import PathLike


class Matrix:
    """A mutable square matrix of integers."""

    def __init__(self, data: Iterable[Iterable[int]]) -> None:
        rows = [[int(value) for value in row] for row in data]
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise ValueError("matrix data must be square")
        self._rows = rows

    @classmethod
    def zeros(cls, n: int) -> Matrix:
        """Return an n-by-n matrix filled with zeros."""
        if n < 0:
            raise ValueError("matrix size must not be negative")
        return cls([0] * n for _ in range(n))

    def _check_same_size(self, other: Matrix) -> None:
        if len(self) != len(other):
            raise ValueError(
                f"matrix sizes differ: {len(self)} and {len(other)}"
            )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._rows):
            raise IndexError("indices out of range")

    def _unpack(self, index: tuple[int, int]) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("matrix index must be a (row, column) pair")
        i, j = index
        self._check_index(i)
        self._check_index(j)
        return i, j

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return Matrix(
            [a + b for a, b in zip(left, right)]
            for left, right in zip(self._rows, other._rows)
        )

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        columns = list(zip(*other._rows))
        return Matrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        )

    def __getitem__(self, index: tuple[int, int]) -> int:
        i, j = self._unpack(index)
        return self._rows[i][j]

    def __setitem__(self, index: tuple[int, int], value: int) -> None:
        i, j = self._unpack(index)
        self._rows[i][j] = int(value)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[int]]:
        return (list(row) for row in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._rows
        )

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    @property
    def rows(self) -> list[list[int]]:
        """A copy of the matrix contents as a list of rows."""
        return [list(row) for row in self._rows]

    def sum_diagonal_major(self) -> int:
        """Sum of the main diagonal, top left to bottom right."""
        return sum(row[i] for i, row in enumerate(self._rows))

    def sum_diagonal_minor(self) -> int:
        """Sum of the anti-diagonal, top right to bottom left."""
        last = len(self._rows) - 1
        return sum(row[last - i] for i, row in enumerate(self._rows))

    def swap_rows(self, r1: int, r2: int) -> None:
        """Swap two rows in place."""
        if not (0 <= r1 < len(self) and 0 <= r2 < len(self)):
            raise IndexError("Not within bounds")
        self._rows[r1], self._rows[r2] = self._rows[r2], self._rows[r1]

    def swap_cols(self, c1: int, c2: int) -> None:
        """Swap two columns in place."""
        if not (0 <= c1 < len(self) and 0 <= c2 < len(self)):
            raise IndexError("Not within bounds")
        for row in self._rows:
            row[c1], row[c2] = row[c2], row[c1]


def _take_matrix(values: Sequence[int], n: int) -> Matrix:
    return Matrix(values[r * n:(r + 1) * n] for r in range(n))


def parse_matrices(text: str) -> tuple[Matrix, Matrix]:
    """Parse a size N followed by two N-by-N matrices of whitespace-separated integers."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"input holds a non-integer value: {exc}") from None
    n, values = numbers[0], numbers[1:]
    if n < 0:
        raise ValueError("matrix size must not be negative")
    needed = n * n
    if len(values) < 2 * needed:
        raise ValueError(
            f"expected {2 * needed} values for two {n}x{n} matrices, "
            f"got {len(values)}"
        )
    return (
        _take_matrix(values[:needed], n),
        _take_matrix(values[needed:2 * needed], n),
    )


def read_matrices(path: str | PathLike[str]) -> tuple[Matrix, Matrix]:
    """Read two matrices from a file in the format accepted by parse_matrices."""
    with open(path, encoding="utf-8") as handle:
        return parse_matrices(handle.read())