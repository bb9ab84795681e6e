"""
Dense two-dimensional container used for score and backtrack matrices.
"""

import numpy as np
from typing import Any, Tuple

from .exceptions import GridIndexError


class Grid:
    """
    Fixed-size rows x cols matrix with bounds-checked access.

    Integer fills are stored in an int64 array, anything else in an object
    array. Dimensions are set once at construction; there is no resize.
    """

    __slots__ = ('_rows', '_cols', '_cells')

    def __init__(self, rows: int, cols: int, fill: Any):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols

        if isinstance(fill, (int, np.integer)) and not isinstance(fill, bool):
            self._cells = np.full((rows, cols), fill, dtype=np.int64)
        else:
            self._cells = np.empty((rows, cols), dtype=object)
            self._cells.fill(fill)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def _check(self, row: int, col: int):
        # numpy would silently wrap negative indices
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise GridIndexError(row, col, self._rows, self._cols)

    def get(self, row: int, col: int) -> Any:
        self._check(row, col)
        value = self._cells[row, col]
        if isinstance(value, np.integer):
            return int(value)
        return value

    def set(self, row: int, col: int, value: Any):
        self._check(row, col)
        self._cells[row, col] = value

    def __getitem__(self, index: Tuple[int, int]) -> Any:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: Tuple[int, int], value: Any):
        row, col = index
        self.set(row, col, value)

    def to_numpy(self) -> np.ndarray:
        """Copy of the underlying array."""
        return self._cells.copy()

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols}, dtype={self._cells.dtype})"


__all__ = ['Grid']
