"""Contains a configuration of a cell's border which sets its color.

::

                               top
                                │
                                v
       corner_top_left ───> +───────+ <─── corner_top_right
                            │       │
                  left ───> │ cell  │ <─── right
                            │       │
    corner_bottom_left ───> +───────+ <─── corner_bottom_right
                                ^
                                │
                              bottom

A corner's color is only meaningful where two borders meet, so a corner may only
be set once both of its adjacent sides have been set. Attempting to set a corner
before this raises :py:class:`InvalidBorderTransition`.

Example:
    Color the top border of the first row red::

        table.with_(Modify(Rows.first()).with_(BorderColor().top(RED)))

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridstyle.data_structures import CORNER_SIDES, Border, DiBool, Position

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gridstyle.color import Color
    from gridstyle.config import ColoredConfig
    from gridstyle.entity import Entity
    from gridstyle.records import Records

log = logging.getLogger(__name__)


class InvalidBorderTransition(ValueError):
    """Raised when a corner is set before both of its adjacent sides."""

    def __init__(self, corner: str, missing: Iterable[str]) -> None:
        """Create a new exception naming the corner and its missing sides."""
        self.corner = corner
        self.missing = tuple(missing)
        super().__init__(
            f"Cannot set the {corner.replace('_', '-')} corner color before the "
            f"{' and '.join(self.missing)} border "
            f"{'color is' if len(self.missing) == 1 else 'colors are'} set"
        )


def _set_at(cfg: ColoredConfig, pos: Position, border: Border) -> None:
    """Merge a border color into the configuration at a single position."""
    cfg.set_border_color(pos, border)


def apply_border_color(
    border: Border,
    entity: Entity,
    count_rows: int,
    count_columns: int,
    cfg: ColoredConfig,
) -> None:
    """Apply a border color to every cell of an entity.

    Args:
        border: The border colors to apply
        entity: The cells to apply the border colors to
        count_rows: The number of rows in the table
        count_columns: The number of columns in the table
        cfg: The configuration to update

    """
    for pos in entity.iter(count_rows, count_columns):
        _set_at(cfg, pos, border)


class BorderColor:
    """A builder for the colors of a cell's border.

    Builders are immutable: every setter returns a new builder, leaving the one it
    was called on unchanged.
    """

    __slots__ = ("_inner", "_sides")

    def __init__(self, inner: Border | None = None) -> None:
        """Create a new border color builder.

        Args:
            inner: The initial border colors

        Raises:
            InvalidBorderTransition: If ``inner`` sets a corner without both of its
                adjacent sides

        """
        inner = inner or Border.empty()
        sides = inner.has_sides
        for corner, corner_sides in CORNER_SIDES.items():
            if getattr(inner, corner) is not None:
                missing = [side for side in corner_sides if not getattr(sides, side)]
                if missing:
                    log.debug("Rejected %s corner color: %s not set", corner, missing)
                    raise InvalidBorderTransition(corner, missing)
        self._inner = inner
        self._sides = sides

    @classmethod
    def _from_border(cls, inner: Border) -> BorderColor:
        """Create a builder from a border already known to be valid."""
        builder = cls.__new__(cls)
        builder._inner = inner
        builder._sides = inner.has_sides
        return builder

    @classmethod
    def empty(cls) -> BorderColor:
        """Create a builder with no colors set."""
        return cls()

    @classmethod
    def full(
        cls,
        top: Color,
        bottom: Color,
        left: Color,
        right: Color,
        top_left: Color,
        top_right: Color,
        bottom_left: Color,
        bottom_right: Color,
    ) -> BorderColor:
        """Create a builder with all sides and corners set."""
        return cls(
            Border.full(
                top, bottom, left, right, top_left, top_right, bottom_left, bottom_right
            )
        )

    @classmethod
    def filled(cls, color: Color) -> BorderColor:
        """Create a builder with all sides and corners set to the same color.

        This is equivalent to :py:meth:`full` with ``color`` in every position.
        """
        return cls.full(color, color, color, color, color, color, color, color)

    @property
    def sides(self) -> DiBool:
        """Which of the border's sides have been set."""
        return self._sides

    def _with_side(self, side: str, color: Color) -> BorderColor:
        return self._from_border(self._inner._replace(**{side: color}))

    def _with_corner(self, corner: str, color: Color) -> BorderColor:
        missing = [
            side for side in CORNER_SIDES[corner] if not getattr(self._sides, side)
        ]
        if missing:
            log.debug("Rejected %s corner color: %s not set", corner, missing)
            raise InvalidBorderTransition(corner, missing)
        return self._from_border(self._inner._replace(**{corner: color}))

    def top(self, color: Color) -> BorderColor:
        """Set the top border color."""
        return self._with_side("top", color)

    def bottom(self, color: Color) -> BorderColor:
        """Set the bottom border color."""
        return self._with_side("bottom", color)

    def left(self, color: Color) -> BorderColor:
        """Set the left border color."""
        return self._with_side("left", color)

    def right(self, color: Color) -> BorderColor:
        """Set the right border color."""
        return self._with_side("right", color)

    def corner_top_left(self, color: Color) -> BorderColor:
        """Set the top left corner color.

        Raises:
            InvalidBorderTransition: If the top or left border color is not set

        """
        return self._with_corner("top_left", color)

    def corner_top_right(self, color: Color) -> BorderColor:
        """Set the top right corner color.

        Raises:
            InvalidBorderTransition: If the top or right border color is not set

        """
        return self._with_corner("top_right", color)

    def corner_bottom_left(self, color: Color) -> BorderColor:
        """Set the bottom left corner color.

        Raises:
            InvalidBorderTransition: If the bottom or left border color is not set

        """
        return self._with_corner("bottom_left", color)

    def corner_bottom_right(self, color: Color) -> BorderColor:
        """Set the bottom right corner color.

        Raises:
            InvalidBorderTransition: If the bottom or right border color is not set

        """
        return self._with_corner("bottom_right", color)

    def into_descriptor(self) -> Border:
        """Return the finished border colors."""
        return self._inner

    into_inner = into_descriptor

    def change_cell(self, records: Records, cfg: ColoredConfig, entity: Entity) -> None:
        """Apply the border colors to the cells of an entity."""
        count_rows, count_columns = records.shape
        log.debug("Applying %r to %r", self, entity)
        apply_border_color(self._inner, entity, count_rows, count_columns, cfg)

    def change_table(self, records: Records, cfg: ColoredConfig) -> None:
        """Apply the border colors to every cell in the table."""
        count_rows, count_columns = records.shape
        log.debug("Applying %r to all %d cells", self, count_rows * count_columns)
        for row in range(count_rows):
            for col in range(count_columns):
                _set_at(cfg, Position(row, col), self._inner)

    def __eq__(self, other: object) -> bool:
        """Compare builders by their colors and set sides."""
        if isinstance(other, BorderColor):
            return (self._inner, self._sides) == (other._inner, other._sides)
        return NotImplemented

    def __hash__(self) -> int:
        """Hash builders by their colors and set sides."""
        return hash((self._inner, self._sides))

    def __repr__(self) -> str:
        """Represent the builder as a string."""
        attrs = ", ".join(f"{k}={v!s}" for k, v in self._inner.present().items())
        return f"{self.__class__.__name__}({attrs})"
