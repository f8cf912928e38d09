"""Argument kinds: the parsers and renderers for directive values.

Each kind reads one value from the argument text of a directive, starting at
a cursor position. A value may be preceded by whitespace and must be followed
by a whitespace run or the end of the text; the returned cursor points just
past that trailing whitespace.
"""

from __future__ import annotations

import re
from typing import Any, Protocol

from stylec.errors import ValueParseError
from stylec.model.border import BORDER_PRESETS, Border
from stylec.model.color import COLOR_TOKEN, AdaptiveColor, Color, NoColor, TerminalColor
from stylec.model.position import BOTTOM, CENTER, LEFT, RIGHT, TOP, Position
from stylec.quoting import quote, unquote

__all__ = [
    "ArgumentKind",
    "IntKind",
    "BoolKind",
    "PositionKind",
    "ColorKind",
    "BorderKind",
    "KIND_BY_TYPE",
]

_END = r"(?:\s+|\Z)"
_END_RE = re.compile(_END)
_SPACE_RE = re.compile(r"\s*")
_TOKEN_RE = re.compile(r"\s*(\S+)")


def _next_token(text: str, pos: int) -> str:
    """Return the whitespace-delimited token at *pos*, for error messages."""
    m = _TOKEN_RE.match(text, pos)
    return m.group(1) if m else ""


class ArgumentKind(Protocol):
    """A lexical category of directive value."""

    name: str

    def parse(self, text: str, pos: int) -> tuple[int, Any]: ...

    def is_default(self, value: Any) -> bool: ...

    def render(self, value: Any) -> str: ...


# ---------------------------------------------------------------------------
# int
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"\s*([0-9]+)" + _END)


class IntKind:
    name = "int"

    def parse(self, text: str, pos: int) -> tuple[int, int]:
        m = _INT_RE.match(text, pos)
        if m is None:
            raise ValueParseError(f"invalid int value: {quote(_next_token(text, pos))}")
        return m.end(), int(m.group(1))

    def is_default(self, value: int) -> bool:
        return value == 0

    def render(self, value: int) -> str:
        return str(value)


# ---------------------------------------------------------------------------
# bool
# ---------------------------------------------------------------------------

_BOOL_RE = re.compile(r"\s*(1|[tT]|TRUE|[tT]rue|0|[fF]|FALSE|[fF]alse)" + _END)
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})


class BoolKind:
    name = "bool"

    def parse(self, text: str, pos: int) -> tuple[int, bool]:
        m = _BOOL_RE.match(text, pos)
        if m is None:
            raise ValueParseError(f"invalid bool value: {quote(_next_token(text, pos))}")
        return m.end(), m.group(1) in _TRUE_WORDS

    def is_default(self, value: bool) -> bool:
        return not value

    def render(self, value: bool) -> str:
        return "true" if value else "false"


# ---------------------------------------------------------------------------
# position
# ---------------------------------------------------------------------------

_POSITION_RE = re.compile(
    r"\s*(top|bottom|center|left|right|[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)" + _END
)

_POSITION_WORDS: dict[str, Position] = {
    "top": TOP,
    "bottom": BOTTOM,
    "center": CENTER,
    "left": LEFT,
    "right": RIGHT,
}


class PositionKind:
    name = "position"

    def parse(self, text: str, pos: int) -> tuple[int, Position]:
        m = _POSITION_RE.match(text, pos)
        if m is None:
            raise ValueParseError(f"invalid position: {quote(_next_token(text, pos))}")
        word = m.group(1)
        if word in _POSITION_WORDS:
            return m.end(), _POSITION_WORDS[word]
        value = float(word)
        if not 0.0 <= value <= 1.0:
            raise ValueParseError(f"position out of range [0, 1]: {quote(word)}")
        return m.end(), Position(value)

    def is_default(self, value: float) -> bool:
        return value == 0.0

    def render(self, value: float) -> str:
        text = repr(float(value))
        return text[:-2] if text.endswith(".0") else text


# ---------------------------------------------------------------------------
# color
# ---------------------------------------------------------------------------

_COLOR_OR_NONE_RE = re.compile(r"\s*(none|" + COLOR_TOKEN + ")" + _END)
_ADAPTIVE_RE = re.compile(r"\s*adaptive\s*\(([^,]*),([^,]*)\)" + _END)


class ColorKind:
    """Colors: ``none``, ``11``, ``#abc``, ``#aabbcc`` or ``adaptive(light,dark)``."""

    name = "color"

    def parse(self, text: str, pos: int) -> tuple[int, TerminalColor]:
        m = _ADAPTIVE_RE.match(text, pos)
        if m is not None:
            try:
                color = AdaptiveColor(light=m.group(1).strip(), dark=m.group(2).strip())
            except ValueError as exc:
                raise ValueParseError(str(exc), cause=exc) from exc
            return m.end(), color

        m = _COLOR_OR_NONE_RE.match(text, pos)
        if m is None:
            token = _next_token(text, pos)
            if not token:
                raise ValueParseError("color not recognized")
            raise ValueParseError(f"color not recognized: {quote(token)}")
        word = m.group(1)
        if word == "none":
            return m.end(), NoColor()
        return m.end(), Color(word)

    def is_default(self, value: TerminalColor) -> bool:
        return isinstance(value, NoColor)

    def render(self, value: TerminalColor) -> str:
        if isinstance(value, NoColor):
            return "none"
        if isinstance(value, Color):
            return value.value
        if isinstance(value, AdaptiveColor):
            return f"adaptive({value.light},{value.dark})"
        raise TypeError(f"cannot render color of type {type(value).__name__}")


# ---------------------------------------------------------------------------
# border
# ---------------------------------------------------------------------------

_PRESET_RE = re.compile(r"\s*(" + "|".join(BORDER_PRESETS) + ")" + _END)
_BORDER_OPEN_RE = re.compile(r"\s*border\s*\(")
_BORDER_FIELDS = 8


class BorderKind:
    """Borders: a preset name or ``border("t","b","l","r","tl","tr","br","bl")``."""

    name = "border"

    def parse(self, text: str, pos: int) -> tuple[int, Border]:
        m = _PRESET_RE.match(text, pos)
        if m is not None:
            return m.end(), BORDER_PRESETS[m.group(1)]()

        m = _BORDER_OPEN_RE.match(text, pos)
        if m is None:
            token = _next_token(text, pos)
            if not token:
                raise ValueParseError("no valid border value found")
            raise ValueParseError(f"border not recognized: {quote(token)}")
        pos = m.end()

        glyphs: list[str] = []
        while True:
            pos = _SPACE_RE.match(text, pos).end()
            try:
                pos, glyph = unquote(text, pos)
            except ValueError as exc:
                raise ValueParseError(f"in border string: {exc}", cause=exc) from exc
            glyphs.append(glyph)
            pos = _SPACE_RE.match(text, pos).end()

            sep = text[pos:pos + 1]
            if sep == ")":
                pos += 1
                break
            if sep != ",":
                raise ValueParseError(
                    f"expected ',' or ')' in border value, found {quote(text[pos:])}"
                )
            if len(glyphs) == _BORDER_FIELDS:
                raise ValueParseError(f"border() takes {_BORDER_FIELDS} strings, got more")
            pos += 1

        if len(glyphs) != _BORDER_FIELDS:
            raise ValueParseError(
                f"border() takes {_BORDER_FIELDS} strings, got {len(glyphs)}"
            )
        end = _END_RE.match(text, pos)
        if end is None:
            raise ValueParseError(f"unexpected text after border value: {quote(text[pos:])}")
        return end.end(), Border(*glyphs)

    def is_default(self, value: Border) -> bool:
        return value == Border()

    def render(self, value: Border) -> str:
        return "border(" + ",".join(quote(g) for g in value.fields()) + ")"


# ---------------------------------------------------------------------------
# Type mapping used by property discovery
# ---------------------------------------------------------------------------

INT = IntKind()
BOOL = BoolKind()
POSITION = PositionKind()
COLOR = ColorKind()
BORDER = BorderKind()

KIND_BY_TYPE: dict[type, ArgumentKind] = {
    int: INT,
    bool: BOOL,
    Position: POSITION,
    TerminalColor: COLOR,
    Border: BORDER,
}
"""Closed mapping from a parameter's annotated type to its argument kind."""
