"""Error hierarchy for style directive parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylec.quoting import quote

if TYPE_CHECKING:
    from stylec.model.style import Style


class StyleError(Exception):
    """Base error for everything raised while reading style directives.

    Attributes:
        message: The underlying reason, without location.
        segment: The directive being processed when the error occurred, once
            the importer has attached it.
        style: The style accumulated up to the failing directive.
        cause: The lower-level exception, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        segment: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.segment = segment
        self.cause = cause
        self.style: Style | None = None

    def __str__(self) -> str:
        if self.segment is None:
            return self.message
        return f"in {quote(self.segment)}: {self.message}"


class DirectiveSyntaxError(StyleError):
    """A directive is not ``clear`` and has no ``:`` separator."""


class UnknownPropertyError(StyleError):
    """The property name does not resolve to any style attribute."""


class UnsupportedShapeError(StyleError):
    """The style has a matching method whose arguments have no argument kind."""


class ValueParseError(StyleError):
    """An argument kind rejected the directive text."""


class MissingValueError(StyleError):
    """Fewer values were given than the property requires."""


class ExcessInputError(StyleError):
    """Text remained after every argument of the property was read."""


class UnsettablePropertyError(StyleError):
    """``unset`` was used on a property that has no unset operation."""
