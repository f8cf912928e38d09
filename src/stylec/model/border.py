"""Border glyph sets and the named presets."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass


def cell_width(text: str) -> int:
    """Return the number of terminal cells *text* occupies."""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def _max_width(*glyphs: str) -> int:
    return max(cell_width(g) for g in glyphs)


@dataclass(frozen=True)
class Border:
    """The eight glyphs that draw a box around styled content.

    An all-empty Border (the default) draws nothing.
    """

    top: str = ""
    bottom: str = ""
    left: str = ""
    right: str = ""
    top_left: str = ""
    top_right: str = ""
    bottom_right: str = ""
    bottom_left: str = ""

    def __post_init__(self) -> None:
        for glyph in self.fields():
            if any(0xD800 <= ord(ch) <= 0xDFFF for ch in glyph):
                raise ValueError(f"border glyph contains a lone surrogate: {glyph!r}")

    def fields(self) -> tuple[str, str, str, str, str, str, str, str]:
        """Return the glyphs in canonical order."""
        return (
            self.top,
            self.bottom,
            self.left,
            self.right,
            self.top_left,
            self.top_right,
            self.bottom_right,
            self.bottom_left,
        )

    @property
    def top_size(self) -> int:
        return _max_width(self.top_left, self.top, self.top_right)

    @property
    def bottom_size(self) -> int:
        return _max_width(self.bottom_left, self.bottom, self.bottom_right)

    @property
    def left_size(self) -> int:
        return _max_width(self.top_left, self.left, self.bottom_left)

    @property
    def right_size(self) -> int:
        return _max_width(self.top_right, self.right, self.bottom_right)


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


def normal_border() -> Border:
    return Border("─", "─", "│", "│", "┌", "┐", "┘", "└")


def rounded_border() -> Border:
    return Border("─", "─", "│", "│", "╭", "╮", "╯", "╰")


def thick_border() -> Border:
    return Border("━", "━", "┃", "┃", "┏", "┓", "┛", "┗")


def double_border() -> Border:
    return Border("═", "═", "║", "║", "╔", "╗", "╝", "╚")


def hidden_border() -> Border:
    return Border(" ", " ", " ", " ", " ", " ", " ", " ")


BORDER_PRESETS = {
    "normal": normal_border,
    "rounded": rounded_border,
    "thick": thick_border,
    "double": double_border,
    "hidden": hidden_border,
}
