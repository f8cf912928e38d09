"""stylec model layer -- public type re-exports."""

from stylec.model.border import (
    BORDER_PRESETS,
    Border,
    double_border,
    hidden_border,
    normal_border,
    rounded_border,
    thick_border,
)
from stylec.model.color import AdaptiveColor, Color, NoColor, TerminalColor
from stylec.model.position import BOTTOM, CENTER, LEFT, RIGHT, TOP, Position
from stylec.model.style import Style

__all__ = [
    # style
    "Style",
    # color
    "TerminalColor",
    "NoColor",
    "Color",
    "AdaptiveColor",
    # position
    "Position",
    "TOP",
    "BOTTOM",
    "CENTER",
    "LEFT",
    "RIGHT",
    # border
    "Border",
    "BORDER_PRESETS",
    "normal_border",
    "rounded_border",
    "thick_border",
    "double_border",
    "hidden_border",
]
