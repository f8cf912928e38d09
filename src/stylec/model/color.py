"""Terminal color values: NoColor, Color, and AdaptiveColor."""

from __future__ import annotations

import re
from dataclasses import dataclass

from stylec.quoting import quote

# An ANSI color number, or a 3- or 6-digit hex color.
COLOR_TOKEN = r"[0-9]+|#[0-9a-fA-F]{3}|#[0-9a-fA-F]{6}"
_COLOR_TOKEN_RE = re.compile(COLOR_TOKEN)


def _check_token(token: str) -> None:
    if not isinstance(token, str) or not _COLOR_TOKEN_RE.fullmatch(token):
        raise ValueError(f"color not recognized: {quote(str(token))}")


class TerminalColor:
    """Base type for every color a Style attribute can hold.

    The set is closed: NoColor, Color and AdaptiveColor are the only
    subclasses, since each must have a text form the directive grammar reads.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"TerminalColor cannot be subclassed outside {__name__}")


@dataclass(frozen=True)
class NoColor(TerminalColor):
    """Absence of a color; the terminal default is used."""

    def __str__(self) -> str:
        return "none"


@dataclass(frozen=True)
class Color(TerminalColor):
    """A single color token: an ANSI number ("11") or hex ("#7D56F4", "#abc").

    Raises ValueError for any other token.
    """

    value: str

    def __post_init__(self) -> None:
        _check_token(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AdaptiveColor(TerminalColor):
    """A pair of colors chosen by the terminal background (light or dark)."""

    light: str
    dark: str

    def __post_init__(self) -> None:
        _check_token(self.light)
        _check_token(self.dark)

    def __str__(self) -> str:
        return f"adaptive({self.light},{self.dark})"
