"""Exporter: renders a Style back into directive text.

The output parses back into an equivalent style with
:func:`stylec.importer.import_style`.
"""

from __future__ import annotations

from typing import Any

from stylec.config import ExportConfig
from stylec.properties import PropertyRegistry, default_registry

__all__ = ["export_style"]


def export_style(
    style: Any,
    *,
    separator: str | None = None,
    include_defaults: bool | None = None,
    config: ExportConfig | None = None,
    registry: PropertyRegistry | None = None,
) -> str:
    """Return the directives describing *style*, sorted by property name.

    Properties at their default value are skipped unless *include_defaults*
    is set. Keyword arguments override the matching *config* fields.
    """
    config = config or ExportConfig()
    if separator is None:
        separator = config.separator
    if include_defaults is None:
        include_defaults = config.include_defaults
    registry = registry or default_registry

    parts: list[str] = []
    for getter in registry.getters():
        value = getter.getter(style)
        if not include_defaults and getter.kind.is_default(value):
            continue
        parts.append(f"{getter.name}: {getter.kind.render(value)};")
    return separator.join(parts)
