"""Apply cell options to a selection of cells."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Protocol

    from gridstyle.config import ColoredConfig
    from gridstyle.entity import Entity
    from gridstyle.object import Object
    from gridstyle.records import Records

    class CellOption(Protocol):
        """An option which can be applied to a group of cells."""

        def change_cell(
            self, records: Records, cfg: ColoredConfig, entity: Entity
        ) -> None:
            """Apply the option to the cells of an entity."""


log = logging.getLogger(__name__)


class Modify:
    """Apply cell options to the cells selected by an object."""

    def __init__(
        self, obj: Object | Entity, options: tuple[CellOption, ...] = ()
    ) -> None:
        """Create a new modifier.

        Args:
            obj: The object which selects the cells to modify
            options: The cell options to apply to the selected cells

        """
        self.obj = obj
        self.options = options

    @classmethod
    def new(cls, obj: Object | Entity) -> Modify:
        """Create a new modifier with no options."""
        return cls(obj)

    def with_(self, *options: CellOption) -> Modify:
        """Return a new modifier which also applies the given options."""
        return Modify(self.obj, (*self.options, *options))

    def change_table(self, records: Records, cfg: ColoredConfig) -> None:
        """Apply each option to every entity the object selects."""
        for entity in self.obj.cells(records):
            log.debug("Modifying %r", entity)
            for option in self.options:
                option.change_cell(records, cfg, entity)

    def __repr__(self) -> str:
        """Represent the modifier as a string."""
        return f"{self.__class__.__name__}({self.obj!r}, {self.options!r})"
