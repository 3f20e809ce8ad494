"""Tests for the border color builder and its application to cells."""

from __future__ import annotations

from itertools import combinations

import pytest

from gridstyle.border_color import (
    BorderColor,
    InvalidBorderTransition,
    apply_border_color,
)
from gridstyle.color import BLUE, GREEN, MAGENTA, RED, YELLOW, Color
from gridstyle.config import ColoredConfig
from gridstyle.data_structures import CORNER_SIDES, Border, DiBool, Position
from gridstyle.entity import Cell, Column, Entity, Global, Row
from gridstyle.records import ListRecords

SIDE_SETTERS = {
    "top": BorderColor.top,
    "bottom": BorderColor.bottom,
    "left": BorderColor.left,
    "right": BorderColor.right,
}

CORNER_SETTERS = {
    "top_left": BorderColor.corner_top_left,
    "top_right": BorderColor.corner_top_right,
    "bottom_left": BorderColor.corner_bottom_left,
    "bottom_right": BorderColor.corner_bottom_right,
}


def test_empty() -> None:
    """An empty builder has no sides or colors set."""
    builder = BorderColor.empty()
    assert builder == BorderColor()
    assert builder.sides == DiBool.from_value(False)
    assert builder.into_descriptor() == Border.empty()


def test_sides() -> None:
    """Each side setter sets its own color and marks the side as set."""
    builder = BorderColor().top(RED).bottom(BLUE).left(GREEN).right(YELLOW)
    assert builder.sides == DiBool.from_value(True)
    assert builder.into_descriptor() == Border(
        top=RED, bottom=BLUE, left=GREEN, right=YELLOW
    )


def test_top_left_corner() -> None:
    """A corner can be set once both of its sides are set."""
    border = BorderColor.empty().top(RED).left(GREEN).corner_top_left(MAGENTA)
    assert border.into_descriptor() == Border(top=RED, left=GREEN, top_left=MAGENTA)
    assert border.into_descriptor().present() == {
        "top": RED,
        "left": GREEN,
        "top_left": MAGENTA,
    }


@pytest.mark.parametrize("corner", list(CORNER_SETTERS))
def test_permitted_corners(corner: str) -> None:
    """Only the requested sides and corner are set."""
    builder = BorderColor()
    for side in CORNER_SIDES[corner]:
        builder = SIDE_SETTERS[side](builder, RED)
    sides = builder.sides
    builder = CORNER_SETTERS[corner](builder, BLUE)

    # Setting a corner does not change which sides are set
    assert builder.sides == sides
    assert builder.into_descriptor().present() == {
        **{side: RED for side in CORNER_SIDES[corner]},
        corner: BLUE,
    }


@pytest.mark.parametrize("corner", list(CORNER_SETTERS))
@pytest.mark.parametrize("n_missing", [1, 2])
def test_rejected_corners(corner: str, n_missing: int) -> None:
    """Corners cannot be set unless both adjacent sides are set."""
    required = CORNER_SIDES[corner]
    for missing in combinations(required, n_missing):
        builder = BorderColor()
        # Set every side except the missing ones
        for side in SIDE_SETTERS:
            if side not in missing:
                builder = SIDE_SETTERS[side](builder, RED)
        with pytest.raises(InvalidBorderTransition) as exc_info:
            CORNER_SETTERS[corner](builder, BLUE)
        assert exc_info.value.corner == corner
        assert set(exc_info.value.missing) == set(missing)


def test_rejected_corner_message() -> None:
    """The error names the corner and the missing sides."""
    with pytest.raises(InvalidBorderTransition, match="top-left.*left"):
        BorderColor().top(RED).corner_top_left(BLUE)
    with pytest.raises(ValueError, match="bottom and right"):
        BorderColor().corner_bottom_right(BLUE)


def test_constructor_derives_sides() -> None:
    """Builders created from a border record the sides which the border sets."""
    builder = BorderColor(Border(top=RED, left=GREEN, top_left=BLUE))
    assert builder.sides == DiBool(top=True, left=True)
    assert builder.into_descriptor() == Border(top=RED, left=GREEN, top_left=BLUE)
    assert builder == BorderColor().top(RED).left(GREEN).corner_top_left(BLUE)


@pytest.mark.parametrize(
    ("border", "corner", "missing"),
    [
        (Border(top_left=RED), "top_left", ("top", "left")),
        (Border(top=RED, bottom_right=BLUE), "bottom_right", ("bottom", "right")),
        (Border(bottom=RED, bottom_left=BLUE), "bottom_left", ("left",)),
        (Border.filled(RED)._replace(right=None), "top_right", ("right",)),
    ],
)
def test_constructor_rejects_corner_without_sides(
    border: Border, corner: str, missing: tuple[str, ...]
) -> None:
    """A border with a corner but not its adjacent sides cannot start a builder."""
    with pytest.raises(InvalidBorderTransition) as exc_info:
        BorderColor(border)
    assert exc_info.value.corner == corner
    assert exc_info.value.missing == missing


def test_constructor_does_not_accept_sides() -> None:
    """The set sides cannot be given separately from the border."""
    with pytest.raises(TypeError):
        BorderColor(sides=DiBool.from_value(True))  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        BorderColor(Border(), DiBool.from_value(True))  # type: ignore[call-arg]


def test_builders_are_immutable() -> None:
    """Advancing a builder leaves the original unchanged."""
    start = BorderColor().top(RED)
    branch_a = start.left(GREEN)
    branch_b = start.right(BLUE).corner_top_right(YELLOW)

    assert start.into_descriptor() == Border(top=RED)
    assert start.sides == DiBool(top=True)
    assert branch_a.into_descriptor() == Border(top=RED, left=GREEN)
    assert branch_b.into_descriptor() == Border(
        top=RED, right=BLUE, top_right=YELLOW
    )
    with pytest.raises(InvalidBorderTransition):
        start.corner_top_left(BLUE)


def test_filled() -> None:
    """A filled builder is the same as a full one with a single color."""
    for color in (RED, Color.parse(fg="#123456", bg="ansiwhite"), Color()):
        assert BorderColor.filled(color) == BorderColor.full(
            color, color, color, color, color, color, color, color
        )
        assert BorderColor.filled(color).into_descriptor() == Border.filled(color)


def test_full_allows_corners() -> None:
    """Full builders have every side set, so corners can be changed."""
    builder = BorderColor.full(RED, BLUE, GREEN, YELLOW, RED, YELLOW, GREEN, BLUE)
    assert builder.sides == DiBool.from_value(True)
    builder = builder.corner_top_left(MAGENTA).corner_bottom_right(MAGENTA)
    assert builder.into_descriptor() == Border(
        top=RED,
        bottom=BLUE,
        left=GREEN,
        right=YELLOW,
        top_left=MAGENTA,
        top_right=YELLOW,
        bottom_left=GREEN,
        bottom_right=MAGENTA,
    )


def test_into_inner() -> None:
    """The descriptor can be extracted under either name."""
    builder = BorderColor().bottom(RED)
    assert builder.into_inner() == builder.into_descriptor()


def test_apply_single_cell() -> None:
    """A full border applied to one cell only touches that cell."""
    border = BorderColor.full(
        top=RED,
        bottom=BLUE,
        left=GREEN,
        right=YELLOW,
        top_left=RED,
        top_right=YELLOW,
        bottom_left=GREEN,
        bottom_right=BLUE,
    ).into_descriptor()
    cfg = ColoredConfig()
    apply_border_color(border, Cell(0, 0), 2, 2, cfg)

    assert list(cfg.border_colors) == [Position(0, 0)]
    assert cfg.border_colors[Position(0, 0)] == Border(
        top=RED,
        bottom=BLUE,
        left=GREEN,
        right=YELLOW,
        top_left=RED,
        top_right=YELLOW,
        bottom_left=GREEN,
        bottom_right=BLUE,
    )
    for pos in ((0, 1), (1, 0), (1, 1)):
        assert pos not in cfg


def test_apply_merges() -> None:
    """Applying a border keeps existing attributes which it does not set."""
    cfg = ColoredConfig()
    cfg.set_border_color((0, 0), Border(bottom=BLUE))
    border = BorderColor().top(RED).into_descriptor()
    apply_border_color(border, Cell(0, 0), 1, 1, cfg)
    assert cfg.border_colors[Position(0, 0)] == Border(top=RED, bottom=BLUE)


@pytest.mark.parametrize(
    "entity", [Row(3), Column(3), Cell(0, 5), Cell(5, 0), Global()]
)
def test_apply_empty_selection(entity: Entity) -> None:
    """Selections which resolve to nothing leave the configuration unchanged."""
    cfg = ColoredConfig()
    cfg.set_border_color((0, 0), Border(bottom=BLUE))
    before = dict(cfg.border_colors)
    count_rows, count_columns = (2, 2) if not isinstance(entity, Global) else (0, 0)
    border = BorderColor.filled(RED).into_descriptor()
    apply_border_color(border, entity, count_rows, count_columns, cfg)
    assert dict(cfg.border_colors) == before


def test_apply_row_and_column() -> None:
    """Rows and columns receive the border in every cell."""
    cfg = ColoredConfig()
    border = BorderColor().left(GREEN).into_descriptor()
    apply_border_color(border, Row(1), 3, 2, cfg)
    apply_border_color(border, Column(0), 3, 2, cfg)
    assert set(cfg.border_colors) == {
        Position(1, 0),
        Position(1, 1),
        Position(0, 0),
        Position(2, 0),
    }


def test_change_table_matches_global() -> None:
    """Applying to the whole table matches applying to the global entity."""
    records = ListRecords([["a", "b", "c"], ["d", "e", "f"]])
    builder = BorderColor().bottom(BLUE).right(RED).corner_bottom_right(GREEN)

    cfg_entity = ColoredConfig()
    cfg_entity.set_border_color((1, 2), Border(top=YELLOW))
    builder.change_cell(records, cfg_entity, Global())

    cfg_table = ColoredConfig()
    cfg_table.set_border_color((1, 2), Border(top=YELLOW))
    builder.change_table(records, cfg_table)

    cfg_explicit = ColoredConfig()
    cfg_explicit.set_border_color((1, 2), Border(top=YELLOW))
    for row in range(2):
        for col in range(3):
            builder.change_cell(records, cfg_explicit, Cell(row, col))

    assert dict(cfg_entity.border_colors) == dict(cfg_table.border_colors)
    assert dict(cfg_entity.border_colors) == dict(cfg_explicit.border_colors)
    assert len(cfg_table) == 6
    assert cfg_table.border_colors[Position(1, 2)] == Border(
        top=YELLOW, bottom=BLUE, right=RED, bottom_right=GREEN
    )


def test_change_table_empty_records() -> None:
    """Empty tables are not modified."""
    cfg = ColoredConfig()
    BorderColor.filled(RED).change_table(ListRecords(), cfg)
    assert len(cfg) == 0


def test_repr() -> None:
    """Builders are represented by the colors they set."""
    assert repr(BorderColor().top(RED)) == "BorderColor(top=fg:ansired)"
