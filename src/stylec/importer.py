"""Directive interpreter: applies ``name: value;`` text onto a Style.

Syntax:
    Input      = ( Directive ( ';' Directive )* )?
    Directive  = 'clear' | Name ':' Args
    Args       = 'unset' | Value ( WS Value )*

Directives apply left to right; a later directive touching the same property
replaces the earlier value. Processing stops at the first error.
"""

from __future__ import annotations

import logging
from typing import Any

from stylec.errors import (
    DirectiveSyntaxError,
    ExcessInputError,
    MissingValueError,
    StyleError,
    UnsettablePropertyError,
)
from stylec.model.style import Style
from stylec.properties import PropertyDescriptor, PropertyRegistry, default_registry
from stylec.quoting import quote

__all__ = ["CLEAR_KEYWORD", "UNSET_KEYWORD", "assign", "import_style", "parse_style"]

logger = logging.getLogger(__name__)

CLEAR_KEYWORD = "clear"
UNSET_KEYWORD = "unset"


def assign(prop: PropertyDescriptor, dst: Any, args: str) -> Any:
    """Parse *args* for *prop* and apply the result to *dst*.

    Returns the new style. Raises StyleError subclasses without location;
    :func:`import_style` attaches the offending directive.
    """
    if args == UNSET_KEYWORD:
        if prop.unsetter is None:
            raise UnsettablePropertyError("no unset method defined")
        return prop.unsetter(dst)

    values: list[Any] = []
    pos = 0
    for i, kind in enumerate(prop.kinds):
        if pos >= len(args):
            if prop.variadic and i == len(prop.kinds) - 1:
                # A variadic argument list may be empty.
                break
            raise MissingValueError("missing value")
        pos, value = kind.parse(args, pos)
        values.append(value)

    if prop.variadic and prop.kinds:
        repeated = prop.kinds[-1]
        while pos < len(args):
            pos, value = repeated.parse(args, pos)
            values.append(value)

    if pos < len(args):
        raise ExcessInputError(f"excess values at end: ...{args[pos:]}")

    return prop.setter(dst, *values)


def import_style(
    dst: Any,
    text: str,
    *,
    registry: PropertyRegistry | None = None,
) -> Any:
    """Apply the directives in *text* to *dst* and return the resulting style.

    *dst* is never modified. On failure the raised StyleError carries the
    offending directive in ``segment`` and the style built so far in ``style``.
    """
    registry = registry or default_registry
    for segment in text.split(";"):
        segment = segment.strip()
        if not segment:
            continue

        if segment == CLEAR_KEYWORD:
            dst = registry.style_type()
            logger.debug("Applied %s", CLEAR_KEYWORD)
            continue

        try:
            name, sep, args = segment.partition(":")
            if not sep:
                raise DirectiveSyntaxError(f"invalid syntax: {quote(segment)}")
            prop = registry.resolve(name.strip())
            dst = assign(prop, dst, args.strip())
        except DirectiveSyntaxError as exc:
            exc.style = dst
            raise
        except StyleError as exc:
            exc.segment = segment
            exc.style = dst
            raise
        logger.debug("Applied %s", segment)
    return dst


def parse_style(text: str, *, registry: PropertyRegistry | None = None) -> Style:
    """Build a style from *text*, starting from the default style."""
    registry = registry or default_registry
    return import_style(registry.style_type(), text, registry=registry)
