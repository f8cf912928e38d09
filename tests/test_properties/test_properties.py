"""Tests for the property registry and discovery."""

import threading

import pytest

from stylec.errors import UnknownPropertyError, UnsupportedShapeError
from stylec.model import Style
from stylec.parser import BoolKind, BorderKind, IntKind, PositionKind
from stylec.properties import (
    EXPORT_DENYLIST,
    PropertyDescriptor,
    PropertyRegistry,
    default_registry,
    kebab_to_snake,
    resolve,
    snake_to_kebab,
)


class Gadget:
    """A small style-like type with one operation of every shape."""

    def __init__(self, size=0, shiny=False):
        self._size = size
        self._shiny = shiny

    def size(self, value: int) -> "Gadget":
        return Gadget(value, self._shiny)

    def unset_size(self) -> "Gadget":
        return Gadget(0, self._shiny)

    def get_size(self) -> int:
        return self._size

    def shine(self, on: bool) -> "Gadget":
        return Gadget(self._size, on)

    def unset_shine(self, hard: bool) -> "Gadget":
        return Gadget(self._size, False)

    def label(self) -> str:
        return "gadget"

    def rename(self, name: str) -> "Gadget":
        return self

    def resize(self, *, value: int) -> "Gadget":
        return Gadget(value, self._shiny)


# ---------------------------------------------------------------------------
# Name conversion
# ---------------------------------------------------------------------------


class TestNameConversion:
    @pytest.mark.parametrize(
        "kebab,snake",
        [("", ""), ("hello", "hello"), ("hello-world", "hello_world")],
    )
    def test_round_trip(self, kebab, snake):
        assert kebab_to_snake(kebab) == snake
        assert snake_to_kebab(snake) == kebab


# ---------------------------------------------------------------------------
# Discovery against Style
# ---------------------------------------------------------------------------


class TestStyleDiscovery:
    def test_int_property(self):
        prop = resolve("padding-left")
        assert prop.name == "padding-left"
        assert len(prop.kinds) == 1
        assert isinstance(prop.kinds[0], IntKind)
        assert prop.variadic is False
        assert prop.setter is Style.padding_left
        assert prop.unsetter is Style.unset_padding_left

    def test_variadic_border(self):
        prop = resolve("border")
        assert [type(k) for k in prop.kinds] == [BorderKind, BoolKind]
        assert prop.variadic is True
        assert prop.shape == "border bool..."
        assert prop.can_unset

    def test_variadic_position(self):
        prop = resolve("align")
        assert [type(k) for k in prop.kinds] == [PositionKind]
        assert prop.shape == "position..."

    def test_descriptor_is_stable(self):
        assert resolve("bold") is resolve("bold")

    def test_unknown_property(self):
        with pytest.raises(UnknownPropertyError) as exc_info:
            resolve("sparkle")
        assert str(exc_info.value) == 'property not supported: "sparkle"'

    def test_snake_case_name_rejected(self):
        with pytest.raises(UnknownPropertyError, match="property not supported"):
            resolve("padding_left")

    def test_private_name_rejected(self):
        with pytest.raises(UnknownPropertyError):
            resolve("-bold")

    def test_unsupported_argument_type(self):
        with pytest.raises(UnsupportedShapeError) as exc_info:
            resolve("inherit")
        assert str(exc_info.value) == (
            "Style has method inherit, but method uses unsupported argument type Style"
        )


class TestPrefixGuards:
    def test_set_prefix(self):
        with pytest.raises(UnknownPropertyError) as exc_info:
            resolve("set-bold")
        assert str(exc_info.value) == "don't use 'set-xx: foo;'  use 'xx: foo;' instead"

    def test_unset_prefix(self):
        with pytest.raises(UnknownPropertyError) as exc_info:
            resolve("unset-bold")
        assert str(exc_info.value) == "don't use 'unset-xx: foo;' use 'xx: unset;' instead"

    def test_get_prefix(self):
        with pytest.raises(UnknownPropertyError) as exc_info:
            resolve("get-bold")
        assert str(exc_info.value) == "don't use 'get-xx: foo;' use 'xx: foo;' instead"


class TestListing:
    def test_names_are_sorted_and_complete(self):
        names = default_registry.names()
        assert names == sorted(names)
        for expected in ("bold", "border", "border-style", "padding", "padding-left", "align"):
            assert expected in names

    def test_names_skip_unsupported_and_accessors(self):
        names = default_registry.names()
        assert "inherit" not in names
        assert not any(n.startswith(("get-", "unset-")) for n in names)

    def test_getters_exclude_denylist(self):
        getter_names = [g.name for g in default_registry.getters()]
        assert getter_names == sorted(getter_names)
        assert not set(getter_names) & EXPORT_DENYLIST
        assert "border-style" in getter_names
        assert "align-vertical" in getter_names

    def test_every_getter_has_a_setter(self):
        for getter in default_registry.getters():
            prop = default_registry.resolve(getter.name)
            assert prop.can_unset, getter.name


# ---------------------------------------------------------------------------
# Discovery against other types
# ---------------------------------------------------------------------------


class TestCustomStyleType:
    def test_discovers_setter_and_unsetter(self):
        registry = PropertyRegistry(Gadget)
        prop = registry.resolve("size")
        assert prop.setter(Gadget(), 4).get_size() == 4
        assert prop.can_unset

    def test_incompatible_unsetter_is_ignored(self):
        registry = PropertyRegistry(Gadget)
        assert registry.resolve("shine").can_unset is False

    def test_method_not_returning_style(self):
        registry = PropertyRegistry(Gadget)
        with pytest.raises(UnknownPropertyError) as exc_info:
            registry.resolve("label")
        assert str(exc_info.value) == 'method "label" exists but does not return Gadget'

    def test_unsupported_parameter_type(self):
        registry = PropertyRegistry(Gadget)
        with pytest.raises(UnsupportedShapeError, match="unsupported argument type str"):
            registry.resolve("rename")

    def test_keyword_only_parameter(self):
        registry = PropertyRegistry(Gadget)
        with pytest.raises(UnsupportedShapeError, match="non-positional parameter value"):
            registry.resolve("resize")

    def test_names(self):
        assert PropertyRegistry(Gadget).names() == ["shine", "size"]

    def test_getters(self):
        getters = PropertyRegistry(Gadget).getters()
        assert [g.name for g in getters] == ["size"]
        assert isinstance(getters[0].kind, IntKind)

    def test_registered_descriptor_wins(self):
        registry = PropertyRegistry(Gadget)
        custom = PropertyDescriptor(
            name="size",
            setter=lambda g, v: Gadget(v * 10),
            kinds=(IntKind(),),
        )
        registry.register(custom)
        assert registry.resolve("size") is custom

    def test_registered_descriptor_adds_name(self):
        registry = PropertyRegistry(Gadget)
        registry.register(
            PropertyDescriptor(name="sparkle", setter=Gadget.shine, kinds=(BoolKind(),))
        )
        assert "sparkle" in registry.names()


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestConcurrentLookup:
    def test_threads_share_one_descriptor(self):
        registry = PropertyRegistry()
        workers = 8
        barrier = threading.Barrier(workers)
        results: list[PropertyDescriptor] = []
        lock = threading.Lock()

        def worker():
            barrier.wait()
            prop = registry.resolve("border-top-foreground")
            with lock:
                results.append(prop)

        threads = [threading.Thread(target=worker) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert len(results) == workers
        assert all(r is results[0] for r in results)
