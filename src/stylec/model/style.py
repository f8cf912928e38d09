"""The Style value type: an immutable bundle of terminal text attributes.

Every setter and unsetter returns a new Style; the receiver is left untouched.
Simple attributes get their three accessors (``name``, ``unset_name``,
``get_name``) from small factories so that every accessor carries accurate
type annotations, which the property registry reads to learn the argument
shape of each attribute.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable

from stylec.model.border import Border
from stylec.model.color import NoColor, TerminalColor
from stylec.model.position import Position

__all__ = ["Style"]


# ---------------------------------------------------------------------------
# Accessor factories
# ---------------------------------------------------------------------------


def _setter(name: str, kind: Any) -> Callable[..., Any]:
    attr = f"_{name}"

    def setter(self, value):
        if kind is int:
            _check_sizes(name, (value,))
        return replace(self, **{attr: value})

    setter.__name__ = setter.__qualname__ = name
    setter.__annotations__ = {"value": kind, "return": "Style"}
    setter.__doc__ = f"Return a copy with {name.replace('_', ' ')} set."
    return setter


def _unsetter(name: str) -> Callable[..., Any]:
    attr = f"_{name}"

    def unsetter(self):
        return replace(self, **{attr: _default(attr)})

    unsetter.__name__ = unsetter.__qualname__ = f"unset_{name}"
    unsetter.__annotations__ = {"return": "Style"}
    unsetter.__doc__ = f"Return a copy with {name.replace('_', ' ')} reset."
    return unsetter


def _getter(name: str, kind: Any) -> Callable[..., Any]:
    attr = f"_{name}"

    def getter(self):
        return getattr(self, attr)

    getter.__name__ = getter.__qualname__ = f"get_{name}"
    getter.__annotations__ = {"return": kind}
    return getter


def _accessors(name: str, kind: Any) -> tuple[Callable[..., Any], ...]:
    return _setter(name, kind), _unsetter(name), _getter(name, kind)


def _default(attr: str) -> Any:
    return Style.__dataclass_fields__[attr].default


def _check_sizes(name: str, values: tuple[int, ...]) -> None:
    for value in values:
        if value < 0:
            raise ValueError(f"{name} must not be negative: {value}")


def _which_sides(values: tuple[Any, ...]) -> tuple[Any, Any, Any, Any] | None:
    """Expand CSS-style shorthand into (top, right, bottom, left)."""
    if len(values) == 1:
        return values[0], values[0], values[0], values[0]
    if len(values) == 2:
        return values[0], values[1], values[0], values[1]
    if len(values) == 3:
        return values[0], values[1], values[2], values[1]
    if len(values) == 4:
        return values[0], values[1], values[2], values[3]
    return None


# Spacing is not carried over by Style.inherit.
_NOT_INHERITED = frozenset({
    "_padding_top",
    "_padding_right",
    "_padding_bottom",
    "_padding_left",
    "_margin_top",
    "_margin_right",
    "_margin_bottom",
    "_margin_left",
    "_margin_background",
})


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


@dataclass(frozen=True, repr=False)
class Style:
    """Terminal text attributes: decoration, colors, spacing, alignment, borders."""

    # text decoration
    _bold: bool = False
    _italic: bool = False
    _underline: bool = False
    _strikethrough: bool = False
    _reverse: bool = False
    _blink: bool = False
    _faint: bool = False
    _underline_spaces: bool = False
    _strikethrough_spaces: bool = False
    _color_whitespace: bool = False
    _inline: bool = False

    # colors
    _foreground: TerminalColor = field(default=NoColor())
    _background: TerminalColor = field(default=NoColor())

    # dimensions
    _width: int = 0
    _height: int = 0
    _max_width: int = 0
    _max_height: int = 0

    # alignment
    _align: Position = Position(0.0)
    _align_vertical: Position = Position(0.0)

    # spacing
    _padding_top: int = 0
    _padding_right: int = 0
    _padding_bottom: int = 0
    _padding_left: int = 0
    _margin_top: int = 0
    _margin_right: int = 0
    _margin_bottom: int = 0
    _margin_left: int = 0
    _margin_background: TerminalColor = field(default=NoColor())

    # borders
    _border_style: Border = field(default=Border())
    _border_top: bool = False
    _border_right: bool = False
    _border_bottom: bool = False
    _border_left: bool = False
    _border_top_foreground: TerminalColor = field(default=NoColor())
    _border_right_foreground: TerminalColor = field(default=NoColor())
    _border_bottom_foreground: TerminalColor = field(default=NoColor())
    _border_left_foreground: TerminalColor = field(default=NoColor())
    _border_top_background: TerminalColor = field(default=NoColor())
    _border_right_background: TerminalColor = field(default=NoColor())
    _border_bottom_background: TerminalColor = field(default=NoColor())
    _border_left_background: TerminalColor = field(default=NoColor())

    def __repr__(self) -> str:
        changed = [
            f"{f.name[1:]}={getattr(self, f.name)!r}"
            for f in fields(self)
            if getattr(self, f.name) != f.default
        ]
        return f"Style({', '.join(changed)})"

    # --- text decoration ---------------------------------------------------

    bold, unset_bold, get_bold = _accessors("bold", bool)
    italic, unset_italic, get_italic = _accessors("italic", bool)
    underline, unset_underline, get_underline = _accessors("underline", bool)
    strikethrough, unset_strikethrough, get_strikethrough = _accessors("strikethrough", bool)
    reverse, unset_reverse, get_reverse = _accessors("reverse", bool)
    blink, unset_blink, get_blink = _accessors("blink", bool)
    faint, unset_faint, get_faint = _accessors("faint", bool)
    underline_spaces, unset_underline_spaces, get_underline_spaces = _accessors(
        "underline_spaces", bool
    )
    strikethrough_spaces, unset_strikethrough_spaces, get_strikethrough_spaces = _accessors(
        "strikethrough_spaces", bool
    )
    color_whitespace, unset_color_whitespace, get_color_whitespace = _accessors(
        "color_whitespace", bool
    )
    inline, unset_inline, get_inline = _accessors("inline", bool)

    # --- colors ------------------------------------------------------------

    foreground, unset_foreground, get_foreground = _accessors("foreground", TerminalColor)
    background, unset_background, get_background = _accessors("background", TerminalColor)

    # --- dimensions --------------------------------------------------------

    width, unset_width, get_width = _accessors("width", int)
    height, unset_height, get_height = _accessors("height", int)
    max_width, unset_max_width, get_max_width = _accessors("max_width", int)
    max_height, unset_max_height, get_max_height = _accessors("max_height", int)

    # --- alignment ---------------------------------------------------------

    def align(self, *positions: Position) -> Style:
        """Set the horizontal alignment, then optionally the vertical one."""
        style = self
        if len(positions) > 0:
            style = replace(style, _align=positions[0])
        if len(positions) > 1:
            style = replace(style, _align_vertical=positions[1])
        return style

    unset_align = _unsetter("align")
    get_align = _getter("align", Position)
    align_vertical, unset_align_vertical, get_align_vertical = _accessors(
        "align_vertical", Position
    )

    # --- padding -----------------------------------------------------------

    def padding(self, *values: int) -> Style:
        """Set padding with CSS shorthand: 1 to 4 values, clockwise from the top."""
        _check_sizes("padding", values)
        sides = _which_sides(values)
        if sides is None:
            return self
        top, right, bottom, left = sides
        return replace(
            self,
            _padding_top=top,
            _padding_right=right,
            _padding_bottom=bottom,
            _padding_left=left,
        )

    def unset_padding(self) -> Style:
        return replace(
            self, _padding_top=0, _padding_right=0, _padding_bottom=0, _padding_left=0
        )

    def get_padding(self) -> tuple[int, int, int, int]:
        return self._padding_top, self._padding_right, self._padding_bottom, self._padding_left

    padding_top, unset_padding_top, get_padding_top = _accessors("padding_top", int)
    padding_right, unset_padding_right, get_padding_right = _accessors("padding_right", int)
    padding_bottom, unset_padding_bottom, get_padding_bottom = _accessors("padding_bottom", int)
    padding_left, unset_padding_left, get_padding_left = _accessors("padding_left", int)

    # --- margins -----------------------------------------------------------

    def margin(self, *values: int) -> Style:
        """Set margins with CSS shorthand: 1 to 4 values, clockwise from the top."""
        _check_sizes("margin", values)
        sides = _which_sides(values)
        if sides is None:
            return self
        top, right, bottom, left = sides
        return replace(
            self,
            _margin_top=top,
            _margin_right=right,
            _margin_bottom=bottom,
            _margin_left=left,
        )

    def unset_margin(self) -> Style:
        return replace(self, _margin_top=0, _margin_right=0, _margin_bottom=0, _margin_left=0)

    def get_margin(self) -> tuple[int, int, int, int]:
        return self._margin_top, self._margin_right, self._margin_bottom, self._margin_left

    margin_top, unset_margin_top, get_margin_top = _accessors("margin_top", int)
    margin_right, unset_margin_right, get_margin_right = _accessors("margin_right", int)
    margin_bottom, unset_margin_bottom, get_margin_bottom = _accessors("margin_bottom", int)
    margin_left, unset_margin_left, get_margin_left = _accessors("margin_left", int)
    margin_background, unset_margin_background, get_margin_background = _accessors(
        "margin_background", TerminalColor
    )

    # --- borders -----------------------------------------------------------

    def border(self, border: Border, *sides: bool) -> Style:
        """Set the border glyphs and which sides draw them.

        With no sides (or more than four) every side is enabled; otherwise the
        flags follow CSS shorthand, clockwise from the top.
        """
        top, right, bottom, left = _which_sides(sides) or (True, True, True, True)
        return replace(
            self,
            _border_style=border,
            _border_top=top,
            _border_right=right,
            _border_bottom=bottom,
            _border_left=left,
        )

    def unset_border(self) -> Style:
        return replace(
            self,
            _border_style=Border(),
            _border_top=False,
            _border_right=False,
            _border_bottom=False,
            _border_left=False,
        )

    def get_border(self) -> tuple[Border, bool, bool, bool, bool]:
        return (
            self._border_style,
            self._border_top,
            self._border_right,
            self._border_bottom,
            self._border_left,
        )

    border_style, unset_border_style, get_border_style = _accessors("border_style", Border)
    border_top, unset_border_top, get_border_top = _accessors("border_top", bool)
    border_right, unset_border_right, get_border_right = _accessors("border_right", bool)
    border_bottom, unset_border_bottom, get_border_bottom = _accessors("border_bottom", bool)
    border_left, unset_border_left, get_border_left = _accessors("border_left", bool)

    def border_foreground(self, *colors: TerminalColor) -> Style:
        """Set border foreground colors with CSS shorthand."""
        sides = _which_sides(colors)
        if sides is None:
            return self
        top, right, bottom, left = sides
        return replace(
            self,
            _border_top_foreground=top,
            _border_right_foreground=right,
            _border_bottom_foreground=bottom,
            _border_left_foreground=left,
        )

    def unset_border_foreground(self) -> Style:
        return self.border_foreground(NoColor())

    def border_background(self, *colors: TerminalColor) -> Style:
        """Set border background colors with CSS shorthand."""
        sides = _which_sides(colors)
        if sides is None:
            return self
        top, right, bottom, left = sides
        return replace(
            self,
            _border_top_background=top,
            _border_right_background=right,
            _border_bottom_background=bottom,
            _border_left_background=left,
        )

    def unset_border_background(self) -> Style:
        return self.border_background(NoColor())

    (
        border_top_foreground,
        unset_border_top_foreground,
        get_border_top_foreground,
    ) = _accessors("border_top_foreground", TerminalColor)
    (
        border_right_foreground,
        unset_border_right_foreground,
        get_border_right_foreground,
    ) = _accessors("border_right_foreground", TerminalColor)
    (
        border_bottom_foreground,
        unset_border_bottom_foreground,
        get_border_bottom_foreground,
    ) = _accessors("border_bottom_foreground", TerminalColor)
    (
        border_left_foreground,
        unset_border_left_foreground,
        get_border_left_foreground,
    ) = _accessors("border_left_foreground", TerminalColor)
    (
        border_top_background,
        unset_border_top_background,
        get_border_top_background,
    ) = _accessors("border_top_background", TerminalColor)
    (
        border_right_background,
        unset_border_right_background,
        get_border_right_background,
    ) = _accessors("border_right_background", TerminalColor)
    (
        border_bottom_background,
        unset_border_bottom_background,
        get_border_bottom_background,
    ) = _accessors("border_bottom_background", TerminalColor)
    (
        border_left_background,
        unset_border_left_background,
        get_border_left_background,
    ) = _accessors("border_left_background", TerminalColor)

    # --- derived sizes -----------------------------------------------------

    def get_border_top_size(self) -> int:
        return self._border_style.top_size if self._border_top else 0

    def get_border_right_size(self) -> int:
        return self._border_style.right_size if self._border_right else 0

    def get_border_bottom_size(self) -> int:
        return self._border_style.bottom_size if self._border_bottom else 0

    def get_border_left_size(self) -> int:
        return self._border_style.left_size if self._border_left else 0

    def get_horizontal_border_size(self) -> int:
        return self.get_border_left_size() + self.get_border_right_size()

    def get_vertical_border_size(self) -> int:
        return self.get_border_top_size() + self.get_border_bottom_size()

    def get_horizontal_padding(self) -> int:
        return self._padding_left + self._padding_right

    def get_vertical_padding(self) -> int:
        return self._padding_top + self._padding_bottom

    def get_horizontal_margins(self) -> int:
        return self._margin_left + self._margin_right

    def get_vertical_margins(self) -> int:
        return self._margin_top + self._margin_bottom

    def get_horizontal_frame_size(self) -> int:
        """Total horizontal space taken by margins, padding and borders."""
        return (
            self.get_horizontal_margins()
            + self.get_horizontal_padding()
            + self.get_horizontal_border_size()
        )

    def get_vertical_frame_size(self) -> int:
        """Total vertical space taken by margins, padding and borders."""
        return (
            self.get_vertical_margins()
            + self.get_vertical_padding()
            + self.get_vertical_border_size()
        )

    def get_frame_size(self) -> tuple[int, int]:
        return self.get_horizontal_frame_size(), self.get_vertical_frame_size()

    # --- composition -------------------------------------------------------

    def inherit(self, other: Style) -> Style:
        """Fill attributes left at their default from *other*.

        Padding and margins are never inherited.
        """
        updates: dict[str, Any] = {}
        for f in fields(self):
            if f.name in _NOT_INHERITED:
                continue
            if getattr(self, f.name) != f.default:
                continue
            theirs = getattr(other, f.name)
            if theirs != f.default:
                updates[f.name] = theirs
        return replace(self, **updates) if updates else self
