"""stylec: a round-trippable text format for terminal styles."""

from stylec.config import ExportConfig
from stylec.errors import (
    DirectiveSyntaxError,
    ExcessInputError,
    MissingValueError,
    StyleError,
    UnknownPropertyError,
    UnsettablePropertyError,
    UnsupportedShapeError,
    ValueParseError,
)
from stylec.exporter import export_style
from stylec.importer import import_style, parse_style
from stylec.model import AdaptiveColor, Border, Color, NoColor, Position, Style
from stylec.properties import PropertyDescriptor, PropertyRegistry, resolve

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # conversion
    "import_style",
    "parse_style",
    "export_style",
    "ExportConfig",
    # registry
    "PropertyDescriptor",
    "PropertyRegistry",
    "resolve",
    # model
    "Style",
    "Color",
    "NoColor",
    "AdaptiveColor",
    "Border",
    "Position",
    # errors
    "StyleError",
    "DirectiveSyntaxError",
    "UnknownPropertyError",
    "UnsupportedShapeError",
    "ValueParseError",
    "MissingValueError",
    "ExcessInputError",
    "UnsettablePropertyError",
]
