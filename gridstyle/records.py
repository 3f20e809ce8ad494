"""Define the table data which styles are applied to."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from typing import Any

    from gridstyle.data_structures import Position


class Records(metaclass=ABCMeta):
    """Base class for a grid of textual records."""

    @abstractmethod
    def count_rows(self) -> int:
        """Return the number of rows in the grid."""

    @abstractmethod
    def count_columns(self) -> int:
        """Return the number of columns in the grid."""

    @abstractmethod
    def get_text(self, pos: Position) -> str:
        """Return the text of the cell at a given position."""

    @property
    def shape(self) -> tuple[int, int]:
        """The number of rows and columns in the grid."""
        return self.count_rows(), self.count_columns()


class ListRecords(Records):
    """Records stored as a list of rows."""

    def __init__(self, rows: Iterable[Sequence[Any]] = ()) -> None:
        """Create a new grid of records.

        Args:
            rows: The rows of the grid. Each value is converted to a string, and
                rows shorter than the longest row are padded with empty cells.

        """
        data = [[str(value) for value in row] for row in rows]
        self._columns = max((len(row) for row in data), default=0)
        self.rows = [row + [""] * (self._columns - len(row)) for row in data]

    @classmethod
    def from_dicts(cls, items: Iterable[Mapping[str, Any]]) -> ListRecords:
        """Create records with a header row from a list of mappings."""
        items = list(items)
        header: list[str] = []
        for item in items:
            header.extend(key for key in item if key not in header)
        if not header:
            return cls()
        return cls(
            [header, *([item.get(key, "") for key in header] for item in items)]
        )

    def count_rows(self) -> int:
        """Return the number of rows in the grid."""
        return len(self.rows)

    def count_columns(self) -> int:
        """Return the number of columns in the grid."""
        return self._columns

    def get_text(self, pos: Position) -> str:
        """Return the text of the cell at a given position."""
        return self.rows[pos.row][pos.col]

    def __repr__(self) -> str:
        """Represent the records as a string."""
        rows, cols = self.shape
        return f"{self.__class__.__name__}({rows}x{cols})"
