"""Define a table which holds records and their styling configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridstyle.config import ColoredConfig
from gridstyle.records import ListRecords, Records

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from typing import Any, Protocol

    class TableOption(Protocol):
        """An option which can be applied to a whole table."""

        def change_table(self, records: Records, cfg: ColoredConfig) -> None:
            """Apply the option to the table."""


log = logging.getLogger(__name__)


class Table:
    """A table of records with a styling configuration."""

    def __init__(
        self,
        records: Records | Iterable[Sequence[Any]] = (),
        config: ColoredConfig | None = None,
    ) -> None:
        """Create a new table.

        Args:
            records: The table's records, or a list of rows to create them from
            config: The table's styling configuration

        """
        self.records = (
            records if isinstance(records, Records) else ListRecords(records)
        )
        self.config = config if config is not None else ColoredConfig()

    @property
    def shape(self) -> tuple[int, int]:
        """The number of rows and columns in the table."""
        return self.records.shape

    def with_(self, option: TableOption) -> Table:
        """Apply an option to the table.

        Args:
            option: The table option to apply

        Returns:
            The table, allowing calls to be chained

        """
        log.debug("Applying %r to %r", option, self)
        option.change_table(self.records, self.config)
        return self

    def __repr__(self) -> str:
        """Represent the table as a string."""
        rows, cols = self.shape
        return f"{self.__class__.__name__}({rows}x{cols})"
