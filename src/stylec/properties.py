"""Property registry: maps kebab-case directive names onto Style operations.

A property named ``padding-left`` is backed by the style methods
``padding_left`` (setter), ``unset_padding_left`` (optional unsetter) and
``get_padding_left`` (getter). Each registry builds its property table from
the style type's declared methods when it is created, reading the argument
shape of every setter from its type annotations.
"""

from __future__ import annotations

import inspect
import logging
import re
import threading
import typing
from dataclasses import dataclass
from typing import Any, Callable

from stylec.errors import UnknownPropertyError, UnsupportedShapeError
from stylec.model.style import Style
from stylec.parser.values import KIND_BY_TYPE, ArgumentKind
from stylec.quoting import quote

__all__ = [
    "EXPORT_DENYLIST",
    "Getter",
    "PropertyDescriptor",
    "PropertyRegistry",
    "default_registry",
    "kebab_to_snake",
    "resolve",
    "snake_to_kebab",
]

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*")

# Getters whose value has no single-value setter: aggregates and derived sizes.
EXPORT_DENYLIST = frozenset({
    "border",
    "margin",
    "padding",
    "frame-size",
    "horizontal-frame-size",
    "vertical-frame-size",
    "horizontal-margins",
    "vertical-margins",
    "horizontal-padding",
    "vertical-padding",
    "horizontal-border-size",
    "vertical-border-size",
    "border-top-size",
    "border-right-size",
    "border-bottom-size",
    "border-left-size",
})


def kebab_to_snake(name: str) -> str:
    """Convert ``hello-world`` to ``hello_world``."""
    return name.replace("-", "_")


def snake_to_kebab(name: str) -> str:
    """Convert ``hello_world`` to ``hello-world``."""
    return name.replace("_", "-")


def _type_name(annotation: Any) -> str:
    return getattr(annotation, "__name__", None) or str(annotation)


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PropertyDescriptor:
    """A directive name bound to the style operations that implement it.

    Attributes:
        name: Kebab-case directive name.
        setter: ``setter(style, *values) -> style``.
        kinds: Argument kinds in positional order.
        variadic: The last kind may repeat zero or more times.
        unsetter: ``unsetter(style) -> style``, or None if ``unset`` is rejected.
    """

    name: str
    setter: Callable[..., Any]
    kinds: tuple[ArgumentKind, ...]
    variadic: bool = False
    unsetter: Callable[..., Any] | None = None

    @property
    def can_unset(self) -> bool:
        return self.unsetter is not None

    @property
    def shape(self) -> str:
        """Human-readable argument shape, e.g. ``border bool...``."""
        names = [k.name for k in self.kinds]
        if self.variadic and names:
            names[-1] += "..."
        return " ".join(names)


@dataclass(frozen=True)
class Getter:
    """A readable property and the kind used to render its value."""

    name: str
    getter: Callable[[Any], Any]
    kind: ArgumentKind


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class PropertyRegistry:
    """Resolves directive names to PropertyDescriptors.

    The property table is built once, when the registry is created, by
    reading the style type's declared methods. Lookups afterwards are plain
    table reads; a name missing from the table is examined again only to
    report why it is unsupported. Hand-written descriptors added with
    :meth:`register` replace table entries of the same name.
    """

    def __init__(self, style_type: type = Style) -> None:
        self._style_type = style_type
        self._lock = threading.Lock()
        self._table: dict[str, PropertyDescriptor] = {}
        self._getters: tuple[Getter, ...] | None = None
        self._build_table()

    @property
    def style_type(self) -> type:
        return self._style_type

    def register(self, descriptor: PropertyDescriptor) -> None:
        """Add a hand-written descriptor. Overwrites any earlier one of the same name."""
        with self._lock:
            self._table[descriptor.name] = descriptor

    def resolve(self, name: str) -> PropertyDescriptor:
        """Return the descriptor for *name*.

        Raises UnknownPropertyError or UnsupportedShapeError.
        """
        _check_prefixes(name)
        descriptor = self._table.get(name)
        if descriptor is not None:
            return descriptor
        # Raises the specific reason when the method exists but is unusable.
        self._describe(name)
        raise UnknownPropertyError(f"property not supported: {quote(name)}")

    def names(self) -> list[str]:
        """Return every resolvable property name, sorted."""
        with self._lock:
            return sorted(self._table)

    def getters(self) -> tuple[Getter, ...]:
        """Return the exportable getters in name order.

        Getters listed in EXPORT_DENYLIST are left out. Raises
        UnsupportedShapeError for a getter whose return type has no kind.
        """
        with self._lock:
            if self._getters is None:
                self._getters = self._collect_getters()
            return self._getters

    # --- reflection --------------------------------------------------------

    def _build_table(self) -> None:
        for attr, _ in self._public_functions():
            if attr.startswith(("get_", "unset_")):
                continue
            try:
                descriptor = self._describe(snake_to_kebab(attr))
            except (UnknownPropertyError, UnsupportedShapeError) as exc:
                logger.debug("Skipping %s.%s: %s", self._style_type.__name__, attr, exc)
                continue
            self._table[descriptor.name] = descriptor

    def _public_functions(self) -> list[tuple[str, Callable[..., Any]]]:
        return [
            (attr, value)
            for attr, value in inspect.getmembers(self._style_type, inspect.isfunction)
            if not attr.startswith("_")
        ]

    def _hints(self, method_name: str, method: Callable[..., Any]) -> dict[str, Any]:
        try:
            return typing.get_type_hints(method)
        except NameError as exc:
            raise UnsupportedShapeError(
                f"cannot resolve annotations of {self._style_type.__name__}.{method_name}: {exc}",
                cause=exc,
            ) from exc

    def _describe(self, name: str) -> PropertyDescriptor:
        if not _NAME_RE.fullmatch(name):
            raise UnknownPropertyError(f"property not supported: {quote(name)}")
        type_name = self._style_type.__name__
        method_name = kebab_to_snake(name)
        method = getattr(self._style_type, method_name, None)
        if method is None or not inspect.isfunction(method):
            raise UnknownPropertyError(f"property not supported: {quote(name)}")

        hints = self._hints(method_name, method)
        if hints.get("return") is not self._style_type:
            raise UnknownPropertyError(
                f"method {quote(method_name)} exists but does not return {type_name}"
            )

        kinds: list[ArgumentKind] = []
        variadic = False
        params = list(inspect.signature(method).parameters.values())[1:]
        for param in params:
            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                variadic = True
            elif param.kind not in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            ):
                raise UnsupportedShapeError(
                    f"{type_name} has method {method_name}, but method takes "
                    f"non-positional parameter {param.name}"
                )
            annotation = hints.get(param.name)
            kind = KIND_BY_TYPE.get(annotation) if isinstance(annotation, type) else None
            if kind is None:
                raise UnsupportedShapeError(
                    f"{type_name} has method {method_name}, but method uses "
                    f"unsupported argument type {_type_name(annotation)}"
                )
            kinds.append(kind)

        descriptor = PropertyDescriptor(
            name=name,
            setter=method,
            kinds=tuple(kinds),
            variadic=variadic,
            unsetter=self._find_unsetter(method_name),
        )
        logger.debug(
            "Registered property %s(%s) unset=%s",
            name,
            descriptor.shape,
            descriptor.can_unset,
        )
        return descriptor

    def _find_unsetter(self, method_name: str) -> Callable[..., Any] | None:
        unset_name = f"unset_{method_name}"
        method = getattr(self._style_type, unset_name, None)
        if method is None or not inspect.isfunction(method):
            return None
        if len(inspect.signature(method).parameters) != 1:
            return None
        if self._hints(unset_name, method).get("return") is not self._style_type:
            return None
        return method

    def _collect_getters(self) -> tuple[Getter, ...]:
        getters: list[Getter] = []
        for attr, method in self._public_functions():
            if not attr.startswith("get_"):
                continue
            name = snake_to_kebab(attr[len("get_"):])
            if name in EXPORT_DENYLIST:
                continue
            if len(inspect.signature(method).parameters) != 1:
                # Takes arguments; not a plain getter.
                continue
            returns = self._hints(attr, method).get("return")
            kind = KIND_BY_TYPE.get(returns) if isinstance(returns, type) else None
            if kind is None:
                raise UnsupportedShapeError(
                    f"{self._style_type.__name__} has getter {attr}, but it returns "
                    f"unsupported type {_type_name(returns)}"
                )
            getters.append(Getter(name=name, getter=method, kind=kind))
        getters.sort(key=lambda g: g.name)
        return tuple(getters)


def _check_prefixes(name: str) -> None:
    if name.startswith("set-"):
        raise UnknownPropertyError("don't use 'set-xx: foo;'  use 'xx: foo;' instead")
    if name.startswith("unset-"):
        raise UnknownPropertyError("don't use 'unset-xx: foo;' use 'xx: unset;' instead")
    if name.startswith("get-"):
        raise UnknownPropertyError("don't use 'get-xx: foo;' use 'xx: foo;' instead")


default_registry = PropertyRegistry()


def resolve(name: str) -> PropertyDescriptor:
    """Resolve *name* against the default Style registry."""
    return default_registry.resolve(name)
