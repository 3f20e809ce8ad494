"""Contains commonly used data structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Callable

# The two sides which meet at each corner
CORNER_SIDES: dict[str, tuple[str, str]] = {
    "top_left": ("top", "left"),
    "top_right": ("top", "right"),
    "bottom_left": ("bottom", "left"),
    "bottom_right": ("bottom", "right"),
}


class Position(NamedTuple):
    """A zero-indexed ``(row, col)`` coordinate in a grid."""

    row: int
    col: int

    def __repr__(self) -> str:
        """Represent the position as a string."""
        return f"Position({self.row}, {self.col})"


class DiBool(NamedTuple):
    """A tuple of four bools with directions."""

    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    @classmethod
    def from_value(cls, value: bool) -> DiBool:
        """Construct an instance from a single value."""
        return cls(top=value, right=value, bottom=value, left=value)


class Border(NamedTuple):
    """The values of a cell's four sides and four corners.

    Any attribute may be :const:`None`, meaning it is not set::

        top_left ───> +───────+ <─── top_right
                      │  top  │
                 left │       │ right
                      │bottom │
        bottom_left─> +───────+ <─── bottom_right

    """

    top: Any = None
    bottom: Any = None
    left: Any = None
    right: Any = None
    top_left: Any = None
    top_right: Any = None
    bottom_left: Any = None
    bottom_right: Any = None

    @classmethod
    def empty(cls) -> Border:
        """Construct a border with no attributes set."""
        return cls()

    @classmethod
    def full(
        cls,
        top: Any,
        bottom: Any,
        left: Any,
        right: Any,
        top_left: Any,
        top_right: Any,
        bottom_left: Any,
        bottom_right: Any,
    ) -> Border:
        """Construct a border with every side and corner set."""
        return cls(
            top=top,
            bottom=bottom,
            left=left,
            right=right,
            top_left=top_left,
            top_right=top_right,
            bottom_left=bottom_left,
            bottom_right=bottom_right,
        )

    @classmethod
    def filled(cls, value: Any) -> Border:
        """Construct a border with every side and corner set to the same value."""
        return cls.full(value, value, value, value, value, value, value, value)

    @property
    def is_empty(self) -> bool:
        """Determine if no attributes are set."""
        return all(value is None for value in self)

    @property
    def has_sides(self) -> DiBool:
        """Determine which of the border's sides are set."""
        return DiBool(
            top=self.top is not None,
            right=self.right is not None,
            bottom=self.bottom is not None,
            left=self.left is not None,
        )

    def present(self) -> dict[str, Any]:
        """Return a dictionary of the attributes which are set."""
        return {
            name: value for name, value in self._asdict().items() if value is not None
        }

    def merge(self, other: Border) -> Border:
        """Layer another border on top of this one.

        Only the attributes set on ``other`` replace those of this border; any
        attributes which are not set on ``other`` are left as they are.

        Args:
            other: The border to layer on top of this one

        Returns:
            A new border containing the combined attributes

        """
        return self._replace(**other.present())

    def convert(self, func: Callable[[Any], Any]) -> Border:
        """Map each of the attributes which are set through a function."""
        return Border(*(None if value is None else func(value) for value in self))
