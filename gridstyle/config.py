"""Define the shared styling configuration for table borders."""

from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

import fastjsonschema
from prompt_toolkit.utils import Event

from gridstyle.color import Color
from gridstyle.data_structures import Border, Position

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

log = logging.getLogger(__name__)

_BORDER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {name: {"type": "string"} for name in Border._fields},
    "additionalProperties": False,
}

SCHEMA: dict[str, Any] = {
    "title": "gridstyle border color configuration",
    "type": "object",
    "properties": {
        "default": _BORDER_SCHEMA,
        "cells": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "row": {"type": "integer", "minimum": 0},
                    "col": {"type": "integer", "minimum": 0},
                    "border": _BORDER_SCHEMA,
                },
                "required": ["row", "col", "border"],
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}

_schema_validate = fastjsonschema.compile(SCHEMA)


class ConfigValidationError(ValueError):
    """Raised when a serialized configuration does not match the schema."""


class ColoredConfig:
    """Border colors for each cell of a table.

    Each cell position holds at most one border. Setting a border on a position
    which already has one merges the two attribute by attribute, so attributes
    which are not set on the new border are preserved.
    """

    def __init__(self) -> None:
        """Create a new empty configuration."""
        self._border_colors: dict[Position, Border] = {}
        self._border_color_default = Border.empty()
        self.on_change = Event(self)

    @property
    def border_colors(self) -> Mapping[Position, Border]:
        """A read-only view of the border colors set on each position."""
        return MappingProxyType(self._border_colors)

    def set_border_color(self, pos: tuple[int, int], border: Border) -> None:
        """Merge a border color into the border at a position.

        Args:
            pos: The ``(row, col)`` position of the cell
            border: The border colors to set. Attributes which are :const:`None`
                leave the existing values at the position unchanged.

        """
        if border.is_empty:
            return
        pos = Position(*pos)
        current = self._border_colors.get(pos, Border.empty())
        self._border_colors[pos] = current.merge(border)
        log.debug("Set border color at %r: %r", pos, border.present())
        self.on_change.fire()

    def get_border_color(self, pos: tuple[int, int]) -> Border:
        """Get the border color at a position, layered over the default."""
        return self._border_color_default.merge(
            self._border_colors.get(Position(*pos), Border.empty())
        )

    def set_border_color_default(self, border: Border) -> None:
        """Merge a border color into the default border for every cell."""
        self._border_color_default = self._border_color_default.merge(border)
        self.on_change.fire()

    def get_border_color_default(self) -> Border:
        """Get the default border color."""
        return self._border_color_default

    def remove_border_color(self, pos: tuple[int, int]) -> None:
        """Remove any border color set at a position."""
        if self._border_colors.pop(Position(*pos), None) is not None:
            self.on_change.fire()

    def clear_border_colors(self) -> None:
        """Remove the border color from every position."""
        self._border_colors.clear()
        self.on_change.fire()

    def __contains__(self, pos: object) -> bool:
        """Determine if a border color is set at a position."""
        return pos in self._border_colors

    def __len__(self) -> int:
        """Return the number of positions with a border color set."""
        return len(self._border_colors)

    def __repr__(self) -> str:
        """Represent the configuration as a string."""
        return f"{self.__class__.__name__}({len(self)} border colors)"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the configuration to a JSON compatible dictionary."""
        return {
            "default": _border_to_dict(self._border_color_default),
            "cells": [
                {"row": pos.row, "col": pos.col, "border": _border_to_dict(border)}
                for pos, border in sorted(self._border_colors.items())
            ],
        }

    def to_json(self, **kwargs: Any) -> str:
        """Serialize the configuration to a JSON string."""
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColoredConfig:
        """Load a configuration from a dictionary.

        Args:
            data: A dictionary in the format produced by :py:meth:`to_dict`

        Returns:
            A new configuration

        Raises:
            ConfigValidationError: If the data does not match the configuration
                schema, or if any of the colors are invalid

        """
        try:
            _schema_validate(data)
        except fastjsonschema.JsonSchemaValueException as error:
            raise ConfigValidationError(
                f"Invalid border color configuration: {error.message}"
            ) from error

        config = cls()
        try:
            config.set_border_color_default(_border_from_dict(data.get("default", {})))
            for item in data.get("cells", []):
                config.set_border_color(
                    (item["row"], item["col"]), _border_from_dict(item["border"])
                )
        except ValueError as error:
            raise ConfigValidationError(
                f"Invalid border color configuration: {error}"
            ) from error
        return config

    @classmethod
    def from_json(cls, text: str) -> ColoredConfig:
        """Load a configuration from a JSON string.

        Raises:
            ConfigValidationError: If the text is not valid JSON, or if the decoded
                data is not a valid configuration

        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as error:
            raise ConfigValidationError(
                f"Invalid border color configuration: {error}"
            ) from error
        return cls.from_dict(data)


def _border_to_dict(border: Border) -> dict[str, str]:
    return {name: color.style for name, color in border.present().items()}


def _border_from_dict(data: Mapping[str, str]) -> Border:
    return Border(**{name: Color.from_style(style) for name, style in data.items()})
