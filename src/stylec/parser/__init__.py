from stylec.parser.values import (
    KIND_BY_TYPE,
    ArgumentKind,
    BoolKind,
    BorderKind,
    ColorKind,
    IntKind,
    PositionKind,
)

__all__ = [
    "KIND_BY_TYPE",
    "ArgumentKind",
    "BoolKind",
    "BorderKind",
    "ColorKind",
    "IntKind",
    "PositionKind",
]
