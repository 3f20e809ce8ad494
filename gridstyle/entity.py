"""Define entities, which describe a logical group of cells in a grid."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from gridstyle.data_structures import Position

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    from gridstyle.object import Object
    from gridstyle.records import Records


class Entity(metaclass=ABCMeta):
    """A logical selection of cells.

    An entity is resolved to concrete cell positions once the size of the grid is
    known. Positions outside of the grid are never produced, so an entity which
    refers to a row or column beyond the edge of the grid resolves to nothing.
    """

    @abstractmethod
    def iter(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        """Yield the positions of the cells in this entity.

        Args:
            count_rows: The number of rows in the grid
            count_columns: The number of columns in the grid

        Yields:
            Cell positions, in row-major order

        """

    def contains(self, pos: Position, count_rows: int, count_columns: int) -> bool:
        """Determine if a position is part of this entity."""
        return pos in set(self.iter(count_rows, count_columns))

    def cells(self, records: Records) -> Iterator[Entity]:
        """Entities can be used directly as objects to select themselves."""
        yield self

    def __or__(self, other: Object | Entity) -> Object:
        """Select cells in either this entity or the other selection."""
        from gridstyle.object import UnionObject

        return UnionObject(self, other)

    def __and__(self, other: Object | Entity) -> Object:
        """Select cells in both this entity and the other selection."""
        from gridstyle.object import IntersectionObject

        return IntersectionObject(self, other)

    def __sub__(self, other: Object | Entity) -> Object:
        """Select cells in this entity which are not in the other selection."""
        from gridstyle.object import DifferenceObject

        return DifferenceObject(self, other)

    def _key(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        """Compare entities by type and value."""
        if isinstance(other, Entity):
            return type(self) is type(other) and self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        """Hash entities by type and value."""
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        """Represent the entity as a string."""
        return f"{self.__class__.__name__}({', '.join(map(repr, self._key()))})"


class Global(Entity):
    """Every cell in the grid."""

    def iter(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        """Yield the position of every cell in the grid."""
        for row in range(count_rows):
            for col in range(count_columns):
                yield Position(row, col)


class Row(Entity):
    """Every cell in a single row."""

    def __init__(self, index: int) -> None:
        """Select the row with the given index."""
        self.index = index

    def iter(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        """Yield the positions of the cells in the row."""
        if 0 <= self.index < count_rows:
            for col in range(count_columns):
                yield Position(self.index, col)

    def _key(self) -> tuple[Any, ...]:
        return (self.index,)


class Column(Entity):
    """Every cell in a single column."""

    def __init__(self, index: int) -> None:
        """Select the column with the given index."""
        self.index = index

    def iter(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        """Yield the positions of the cells in the column."""
        if 0 <= self.index < count_columns:
            for row in range(count_rows):
                yield Position(row, self.index)

    def _key(self) -> tuple[Any, ...]:
        return (self.index,)


class Cell(Entity):
    """A single cell."""

    def __init__(self, row: int, col: int) -> None:
        """Select the cell at the given row and column."""
        self.row = row
        self.col = col

    @property
    def position(self) -> Position:
        """The position of the cell."""
        return Position(self.row, self.col)

    def iter(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        """Yield the cell's position if it is inside the grid."""
        if 0 <= self.row < count_rows and 0 <= self.col < count_columns:
            yield self.position

    def _key(self) -> tuple[Any, ...]:
        return (self.row, self.col)
