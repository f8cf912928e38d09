from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExportConfig:
    separator: str = " "  # written between directives
    include_defaults: bool = False  # also emit properties left at their default
