"""Import path resolution tests for both import styles."""

from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest

from schema_bindgen.codegen.core.descriptors import ImportDescriptor
from schema_bindgen.codegen.core.errors import UnresolvedReference
from schema_bindgen.codegen.core.imports import ImportResolver, ImportStyle, is_platform_package
from schema_bindgen.codegen.core.mapping import TypeMapper
from schema_bindgen.codegen.core.types import DATETIME, STRING, ClassRef
from schema_bindgen.codegen.languages.python.types import PYTHON_TYPE_MAP
from schema_bindgen.codegen.languages.typescript.types import TYPESCRIPT_TYPE_MAP


@pytest.fixture
def slash() -> ImportResolver:
    return ImportResolver(ImportStyle.SLASH_PATH, TypeMapper(TYPESCRIPT_TYPE_MAP))


@pytest.fixture
def dotted() -> ImportResolver:
    return ImportResolver(ImportStyle.DOTTED_RELATIVE, TypeMapper(PYTHON_TYPE_MAP))


# (referencing module, referenced module, slash path, dotted path)
PATH_CASES = [
    ("acme.shop.models.Widget", "acme.shop.models.Base", "./Base", ".base"),
    ("acme.shop.models.Widget", "acme.shop.parts.Gadget", "../parts/Gadget", "..parts.gadget"),
    ("acme.Widget", "acme.Gadget", "./Gadget", ".gadget"),
    # three and more levels of nesting
    (
        "acme.a.b.c.Widget",
        "acme.x.y.z.Gadget",
        "../../../x/y/z/Gadget",
        "....x.y.z.gadget",
    ),
    ("acme.Widget", "acme.a.b.c.Gadget", "./a/b/c/Gadget", ".a.b.c.gadget"),
    ("acme.a.b.c.Widget", "acme.Gadget", "../../../Gadget", "....gadget"),
    ("acme.a.b.c.d.Widget", "acme.a.b.c.e.Gadget", "../e/Gadget", "..e.gadget"),
    ("acme.a.b.c.d.Widget", "acme.a.b.Gadget", "../../Gadget", "...gadget"),
    ("acme.a.b.Widget", "acme.a.b.c.d.e.Gadget", "./c/d/e/Gadget", ".c.d.e.gadget"),
    ("one.Widget", "two.three.four.Gadget", "../two/three/four/Gadget", "..two.three.four.gadget"),
    # directory equal to the referenced type's name
    ("acme.gadget.Widget", "acme.Gadget", "../Gadget", "..gadget"),
]


@pytest.mark.parametrize(("from_module", "to_module", "expected", "_"), PATH_CASES)
def test_slash_paths(slash, from_module, to_module, expected, _) -> None:
    assert slash.module_path(from_module, to_module) == expected


@pytest.mark.parametrize(("from_module", "to_module", "_", "expected"), PATH_CASES)
def test_dotted_paths(dotted, from_module, to_module, _, expected) -> None:
    assert dotted.module_path(from_module, to_module) == expected


def test_dotted_segments_are_underscored(dotted) -> None:
    assert (
        dotted.module_path("acme.shopModels.Widget", "acme.shopParts.HTTPGadget")
        == "..shop_parts.http_gadget"
    )


def test_nested_type_module(slash, dotted) -> None:
    assert slash.module_path("acme.m.Widget", "acme.m.Widget$Dimensions") == "./Widget$Dimensions"
    assert dotted.module_path("acme.m.Widget", "acme.m.Widget$Dimensions") == ".widget__dimensions"


def test_resolve_builds_descriptor(slash) -> None:
    gadget = ClassRef("Gadget", "acme.shop.parts")
    assert slash.resolve("acme.shop.models.Widget", gadget) == ImportDescriptor(
        "Gadget", "../parts/Gadget"
    )


def test_builtin_types_are_not_imported(slash, dotted) -> None:
    for resolver in (slash, dotted):
        assert resolver.resolve("acme.Widget", STRING) is None
        assert resolver.resolve("acme.Widget", DATETIME) is None


def test_standard_library_types_are_not_imported(slash) -> None:
    assert slash.resolve("acme.Widget", ClassRef("OrderedDict", "collections")) is None
    assert slash.resolve("acme.Widget", ClassRef("Path", "pathlib")) is None


def test_same_module_is_not_imported(slash) -> None:
    assert slash.resolve("acme.Widget", ClassRef("Widget", "acme")) is None
    nested = ClassRef("Inner", "acme", module="acme.Outer$Inner")
    assert slash.resolve("acme.Outer$Inner", nested) is None


def test_missing_module_location_raises(slash) -> None:
    with pytest.raises(UnresolvedReference, match="Gadget"):
        slash.resolve("acme.Widget", ClassRef("Gadget"))


def test_custom_platform_packages() -> None:
    resolver = ImportResolver(
        ImportStyle.SLASH_PATH,
        TypeMapper(TYPESCRIPT_TYPE_MAP),
        platform_packages={"vendor"},
    )
    assert resolver.resolve("acme.Widget", ClassRef("Thing", "vendor.lib")) is None
    assert resolver.resolve("acme.Widget", ClassRef("Path", "pathlib")) == ImportDescriptor(
        "Path", "../pathlib/Path"
    )


def test_paths_are_cached_per_style() -> None:
    cache = {}
    slash = ImportResolver(ImportStyle.SLASH_PATH, TypeMapper(TYPESCRIPT_TYPE_MAP), cache=cache)
    dotted = ImportResolver(
        ImportStyle.DOTTED_RELATIVE, TypeMapper(PYTHON_TYPE_MAP), cache=cache
    )

    slash.module_path("acme.a.Widget", "acme.b.Gadget")
    dotted.module_path("acme.a.Widget", "acme.b.Gadget")

    assert cache == {
        ("slash", "acme.a.Widget", "acme.b.Gadget"): "../b/Gadget",
        ("dotted", "acme.a.Widget", "acme.b.Gadget"): "..b.gadget",
    }


def test_resolution_is_order_independent() -> None:
    pairs = [(f, t) for f, t, _, _ in PATH_CASES]

    forward = ImportResolver(ImportStyle.DOTTED_RELATIVE, TypeMapper(PYTHON_TYPE_MAP))
    backward = ImportResolver(ImportStyle.DOTTED_RELATIVE, TypeMapper(PYTHON_TYPE_MAP))

    first = [forward.module_path(f, t) for f, t in pairs]
    second = [backward.module_path(f, t) for f, t in reversed(pairs)]

    assert first == list(reversed(second))


def shadow_module(monkeypatch, name: str, location: Path) -> None:
    module = types.ModuleType(name)
    module.__file__ = str(location / name / "__init__.py")
    module.__path__ = [str(location / name)]
    monkeypatch.setitem(sys.modules, name, module)


def test_schema_package_named_like_stdlib_is_imported(
    slash, monkeypatch, tmp_path: Path
) -> None:
    shadow_module(monkeypatch, "calendar", tmp_path)
    event = ClassRef("Event", "calendar.models")

    assert not is_platform_package("calendar.models")
    assert slash.resolve("calendar.api.Booking", event) == ImportDescriptor(
        "Event", "../models/Event"
    )


def test_stdlib_packages_stay_platform() -> None:
    assert is_platform_package("datetime")
    assert is_platform_package("collections.abc")
    assert is_platform_package("builtins")
    assert not is_platform_package("acme.shop")
    assert not is_platform_package("")
