"""Dense row-major matrix of floats used to collect descriptor frames."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence


class Matrix:
    """A dense ``rows`` by ``cols`` matrix of floats stored row by row.

    Indexing takes either a flat position ``m[k]`` or a pair ``m[i, j]``.
    Arithmetic with a scalar is done in place with ``-=``, ``+=``, ``/=``,
    ``*=`` and ``**=``.
    """

    def __init__(
        self,
        rows: int = 0,
        cols: int = 0,
        data: Iterable[float] | None = None,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative: {rows}x{cols}")
        size = rows * cols
        if data is None:
            values = [0.0] * size
        else:
            values = [float(x) for x in data]
            if len(values) != size:
                raise ValueError(
                    f"{len(values)} values given for a {rows}x{cols} matrix"
                )
        self._rows = rows
        self._cols = cols
        self._data = values

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        if not rows:
            return cls()
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("rows of different lengths")
        return cls(len(rows), width, (x for row in rows for x in row))

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """``(rows, cols)``."""
        return self._rows, self._cols

    def tolist(self) -> list[list[float]]:
        """Return the contents as a list of rows."""
        c = self._cols
        return [self._data[i * c : (i + 1) * c] for i in range(self._rows)]

    def fill(self, value: float) -> None:
        """Set every element to ``value``."""
        self._data = [float(value)] * len(self._data)

    def get_row(self, k: int) -> list[float]:
        """Return a copy of row ``k``."""
        if not 0 <= k < self._rows:
            raise IndexError(f"row {k} out of range for {self._rows} rows")
        c = self._cols
        return self._data[k * c : (k + 1) * c]

    def get_col(self, k: int, row1: int = 0, row2: int | None = None) -> list[float]:
        """Return column ``k`` between rows ``row1`` and ``row2`` inclusive."""
        if not 0 <= k < self._cols:
            raise IndexError(f"column {k} out of range for {self._cols} columns")
        if row2 is None:
            row2 = self._rows - 1
        if self._rows == 0 and row1 == 0 and row2 == -1:
            return []
        if not 0 <= row1 <= row2 < self._rows:
            raise IndexError(f"rows {row1}..{row2} out of range for {self._rows} rows")
        c = self._cols
        return [self._data[i * c + k] for i in range(row1, row2 + 1)]

    def del_row(self, index: int) -> None:
        """Delete row ``index``; a single-row or column-less matrix is kept."""
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} out of range for {self._rows} rows")
        if self._rows <= 1 or self._cols == 0:
            return
        c = self._cols
        del self._data[index * c : (index + 1) * c]
        self._rows -= 1

    def del_col(self, index: int) -> None:
        """Delete column ``index``; a single-column or row-less matrix is kept."""
        if not 0 <= index < self._cols:
            raise IndexError(f"column {index} out of range for {self._cols} columns")
        if self._rows == 0 or self._cols <= 1:
            return
        self._data = [
            x
            for row in self.tolist()
            for j, x in enumerate(row)
            if j != index
        ]
        self._cols -= 1

    def merge(self, other: Matrix) -> None:
        """Merge ``other`` into this matrix.

        An empty matrix takes the contents of ``other``. A single-row
        ``other`` is added below as a new row; a taller ``other`` is placed to
        the right, the result having as many rows as ``other``.
        """
        if len(self) == 0:
            self._rows, self._cols = other.rows, other.cols
            self._data = list(other)
            return
        if len(other) == 0:
            return
        if other.rows > 1:
            if self._rows > other.rows:
                raise ValueError(
                    f"cannot place {other.rows} rows beside {self._rows} rows"
                )
            left = self.tolist()
            left.extend([0.0] * self._cols for _ in range(other.rows - self._rows))
            merged = [l_row + o_row for l_row, o_row in zip(left, other.tolist())]
            self._rows = other.rows
            self._cols = self._cols + other.cols
            self._data = [x for row in merged for x in row]
        else:
            if other.cols != self._cols:
                raise ValueError(
                    f"cannot add a row of {other.cols} values to {self._cols} columns"
                )
            self._data.extend(other)
            self._rows += 1

    def append_row(self, row: Sequence[float]) -> None:
        """Add ``row`` below the last row."""
        if len(row) != self._cols:
            raise ValueError(
                f"cannot add a row of {len(row)} values to {self._cols} columns"
            )
        self._data.extend(float(x) for x in row)
        self._rows += 1

    def transpose(self) -> None:
        """Transpose the matrix in place."""
        r, c = self._rows, self._cols
        self._data = [self._data[j * c + i] for i in range(c) for j in range(r)]
        self._rows, self._cols = c, r

    def slice_cols(self, col1: int, col2: int) -> None:
        """Keep only columns ``col1`` to ``col2``, counted from 1, inclusive."""
        if not 1 <= col1 <= col2 <= self._cols:
            raise IndexError(
                f"columns {col1}..{col2} out of range for {self._cols} columns"
            )
        self._data = [x for row in self.tolist() for x in row[col1 - 1 : col2]]
        self._cols = col2 - col1 + 1

    def slice_rows(self, row1: int, row2: int) -> Matrix:
        """Return a new matrix of rows ``row1`` to ``row2`` inclusive."""
        if not 0 <= row1 <= row2 < self._rows:
            raise IndexError(f"rows {row1}..{row2} out of range for {self._rows} rows")
        c = self._cols
        return Matrix(row2 - row1 + 1, c, self._data[row1 * c : (row2 + 1) * c])

    def sum(self, dim: int) -> list[float]:
        """Sum each column (``dim`` 1) or each row (``dim`` 2)."""
        if dim == 1:
            return [math.fsum(self.get_col(j)) for j in range(self._cols)]
        if dim == 2:
            return [math.fsum(row) for row in self.tolist()]
        raise ValueError(f"dimension must be 1 or 2, not {dim}")

    def mean(self, dim: int) -> list[float]:
        """Average each column (``dim`` 1) or each row (``dim`` 2)."""
        if dim == 1:
            return [total / self._rows for total in self.sum(1)]
        if dim == 2:
            return [total / self._cols for total in self.sum(2)]
        raise ValueError(f"dimension must be 1 or 2, not {dim}")

    def norm(self) -> float:
        """Return the Frobenius norm."""
        return math.sqrt(math.fsum(x * x for x in self._data))

    def _offset(self, key: int | tuple[int, int]) -> int:
        if isinstance(key, tuple):
            i, j = key
            if not (0 <= i < self._rows and 0 <= j < self._cols):
                raise IndexError(f"index {key} out of range for {self.shape}")
            return i * self._cols + j
        if not 0 <= key < len(self._data):
            raise IndexError(f"index {key} out of range for {len(self._data)} values")
        return key

    def __getitem__(self, key: int | tuple[int, int]) -> float:
        return self._data[self._offset(key)]

    def __setitem__(self, key: int | tuple[int, int], value: float) -> None:
        self._data[self._offset(key)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{x:g}" for x in row) for row in self.tolist())

    def __isub__(self, value: float) -> Matrix:
        self._data = [x - value for x in self._data]
        return self

    def __iadd__(self, value: float) -> Matrix:
        self._data = [x + value for x in self._data]
        return self

    def __itruediv__(self, value: float) -> Matrix:
        self._data = [x / value for x in self._data]
        return self

    def __imul__(self, value: float) -> Matrix:
        self._data = [x * value for x in self._data]
        return self

    def __ipow__(self, value: float) -> Matrix:
        self._data = [math.pow(x, value) for x in self._data]
        return self