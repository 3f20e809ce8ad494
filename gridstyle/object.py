"""Define objects, which select groups of cells from table records."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from gridstyle.entity import Cell, Column, Global, Row

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gridstyle.data_structures import Position
    from gridstyle.entity import Entity
    from gridstyle.records import Records


def positions(obj: Object | Entity, records: Records) -> Iterator[Position]:
    """Yield the unique positions of the cells selected by an object."""
    seen: set[Position] = set()
    count_rows, count_columns = records.shape
    for entity in obj.cells(records):
        for pos in entity.iter(count_rows, count_columns):
            if pos not in seen:
                seen.add(pos)
                yield pos


class Object(metaclass=ABCMeta):
    """Base class for cell selections.

    Objects can be combined using the ``|`` (union), ``&`` (intersection) and
    ``-`` (difference) operators.
    """

    @abstractmethod
    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield the entities selected from the given records."""

    def __or__(self, other: Object | Entity) -> Object:
        """Select cells in either object."""
        return UnionObject(self, other)

    def __and__(self, other: Object | Entity) -> Object:
        """Select cells in both objects."""
        return IntersectionObject(self, other)

    def __sub__(self, other: Object | Entity) -> Object:
        """Select cells in this object which are not in the other."""
        return DifferenceObject(self, other)


class All(Object):
    """Select every cell in the table."""

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a single global entity."""
        yield Global()

    def __repr__(self) -> str:
        """Represent the object as a string."""
        return "All()"


class _Lines(Object):
    """Base class for row and column selections."""

    def __init__(self, start: int | None = None, stop: int | None = None) -> None:
        """Select lines with indices in the range ``start`` to ``stop``.

        Negative indices count back from the end, as with slices.
        """
        self.start = start
        self.stop = stop

    @classmethod
    def single(cls, index: int) -> _Lines:
        """Select a single line."""
        return cls(index, (index + 1) or None)

    @classmethod
    def first(cls) -> _Lines:
        """Select the first line."""
        return cls.single(0)

    @classmethod
    def last(cls) -> _Lines:
        """Select the last line."""
        return cls.single(-1)

    @classmethod
    def new(cls, start: int | None = None, stop: int | None = None) -> _Lines:
        """Select a range of lines."""
        return cls(start, stop)

    def indices(self, count: int) -> range:
        """Return the selected indices for a given number of lines."""
        return range(count)[self.start : self.stop]

    def __repr__(self) -> str:
        """Represent the object as a string."""
        return f"{self.__class__.__name__}({self.start!r}, {self.stop!r})"


class Rows(_Lines):
    """Select a range of rows."""

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a row entity for each selected row."""
        for index in self.indices(records.count_rows()):
            yield Row(index)


class Columns(_Lines):
    """Select a range of columns."""

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a column entity for each selected column."""
        for index in self.indices(records.count_columns()):
            yield Column(index)


class Segment(Object):
    """Select a rectangular region of cells."""

    def __init__(self, rows: slice = slice(None), cols: slice = slice(None)) -> None:
        """Select the cells where the given row and column ranges overlap."""
        self.rows = rows
        self.cols = cols

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a cell entity for each selected cell."""
        for row in range(records.count_rows())[self.rows]:
            for col in range(records.count_columns())[self.cols]:
                yield Cell(row, col)

    def __repr__(self) -> str:
        """Represent the object as a string."""
        return f"Segment({self.rows!r}, {self.cols!r})"


class Frame(Object):
    """Select the cells around the outer edge of the table."""

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a cell entity for each cell on the edge of the table."""
        count_rows, count_columns = records.shape
        for row in range(count_rows):
            for col in range(count_columns):
                if row in (0, count_rows - 1) or col in (0, count_columns - 1):
                    yield Cell(row, col)

    def __repr__(self) -> str:
        """Represent the object as a string."""
        return "Frame()"


class _CombinedObject(Object):
    def __init__(self, left: Object | Entity, right: Object | Entity) -> None:
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.left!r}, {self.right!r})"


class UnionObject(_CombinedObject):
    """Cells selected by either of two objects."""

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a cell entity for each cell in either object."""
        seen: set[Position] = set()
        for obj in (self.left, self.right):
            for pos in positions(obj, records):
                if pos not in seen:
                    seen.add(pos)
                    yield Cell(*pos)


class IntersectionObject(_CombinedObject):
    """Cells selected by both of two objects."""

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a cell entity for each cell in both objects."""
        right = set(positions(self.right, records))
        for pos in positions(self.left, records):
            if pos in right:
                yield Cell(*pos)


class DifferenceObject(_CombinedObject):
    """Cells selected by one object but not another."""

    def cells(self, records: Records) -> Iterator[Entity]:
        """Yield a cell entity for each cell only in the first object."""
        right = set(positions(self.right, records))
        for pos in positions(self.left, records):
            if pos not in right:
                yield Cell(*pos)
