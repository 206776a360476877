from __future__ import annotations


class ColumnFull(ValueError):
    """Raised when a disc is dropped into a column with no open cell."""

    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column + 1} is full.")
        self.column = column
