"""Locate cells in a table by their contents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridstyle.data_structures import Position
from gridstyle.entity import Cell, Column
from gridstyle.object import Object

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gridstyle.entity import Entity
    from gridstyle.records import Records


class ByContent(Object):
    """Select every cell with the given text."""

    def __init__(self, text: str) -> None:
        """Search for cells whose text is exactly ``text``."""
        self.text = text

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a cell entity for each matching cell."""
        count_rows, count_columns = records.shape
        for row in range(count_rows):
            for col in range(count_columns):
                if records.get_text(Position(row, col)) == self.text:
                    yield Cell(row, col)

    def __repr__(self) -> str:
        """Represent the object as a string."""
        return f"ByContent({self.text!r})"


class ByColumnName(Object):
    """Select every column whose header has the given text.

    The first row of the records is treated as the header row.
    """

    def __init__(self, text: str) -> None:
        """Search for columns with a header of ``text``."""
        self.text = text

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a column entity for each matching column."""
        if not records.count_rows():
            return
        for col in range(records.count_columns()):
            if records.get_text(Position(0, col)) == self.text:
                yield Column(col)

    def __repr__(self) -> str:
        """Represent the object as a string."""
        return f"ByColumnName({self.text!r})"


class Locator:
    """A factory for objects which find things in a table."""

    @staticmethod
    def content(text: str) -> ByContent:
        """Locate cells with the given content."""
        return ByContent(text)

    @staticmethod
    def column(text: str) -> ByColumnName:
        """Locate columns by their header."""
        return ByColumnName(text)
