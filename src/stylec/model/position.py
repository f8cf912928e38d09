"""Alignment positions expressed as a fraction of the available space."""

from __future__ import annotations


class Position(float):
    """A position between 0.0 (top/left) and 1.0 (bottom/right)."""

    def __new__(cls, value: float = 0.0) -> Position:
        # Adding 0.0 folds -0.0 into 0.0.
        self = super().__new__(cls, float(value) + 0.0)
        if not 0.0 <= self <= 1.0:
            raise ValueError(f"position out of range [0, 1]: {float(self)!r}")
        return self

    def __repr__(self) -> str:
        return f"Position({float(self)!r})"


TOP = Position(0.0)
BOTTOM = Position(1.0)
CENTER = Position(0.5)
LEFT = Position(0.0)
RIGHT = Position(1.0)
