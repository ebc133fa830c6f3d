"""Target registry tests."""

from __future__ import annotations

import pytest

from schema_bindgen.codegen.core.config import GeneratorConfig
from schema_bindgen.codegen.core.generator import GenerationContext
from schema_bindgen.codegen.languages.python import PythonGenerator
from schema_bindgen.codegen.languages.typescript import TypescriptGenerator
from schema_bindgen.codegen.registry import (
    RegistryError,
    TargetRegistry,
    create_registry,
    get_generator,
    get_target_info,
    list_supported_targets,
)


def test_builtin_targets() -> None:
    assert list_supported_targets() == ["python", "typescript"]
    registry = create_registry()
    assert registry.is_supported("TS")
    assert registry.is_supported("py")
    assert not registry.is_supported("go")


@pytest.mark.parametrize(
    ("name", "expected"),
    [("typescript", TypescriptGenerator), ("ts", TypescriptGenerator), ("python", PythonGenerator), ("py", PythonGenerator)],
)
def test_get_generator_by_name_or_alias(name, expected) -> None:
    assert isinstance(get_generator(name), expected)


def test_get_generator_uses_target_defaults() -> None:
    assert get_generator("py").config.field_case == "snake"
    assert get_generator("py", {"field_case": "camel"}).config.field_case == "camel"


def test_get_generator_shares_context() -> None:
    context = GenerationContext()
    config = GeneratorConfig(target="python")
    generator = get_generator("python", config, context)
    assert generator.config is config
    assert generator.context is context


def test_unknown_target() -> None:
    with pytest.raises(RegistryError, match="Available: python, typescript"):
        get_generator("go")


def test_invalid_config_type() -> None:
    with pytest.raises(RegistryError, match="Invalid config type"):
        get_generator("python", 42)


def test_register_requires_target_generator() -> None:
    with pytest.raises(RegistryError):
        TargetRegistry().register("bogus", object)


def test_alias_conflicts() -> None:
    registry = create_registry()
    with pytest.raises(RegistryError, match="conflicts"):
        registry.register("kotlin", PythonGenerator, aliases=["python"])
    with pytest.raises(RegistryError, match="already points"):
        registry.register("kotlin", PythonGenerator, aliases=["ts"])


def test_list_all_names() -> None:
    registry = create_registry()
    assert registry.list_all_names() == {
        "typescript": ["typescript", "ts"],
        "python": ["python", "py"],
    }


def test_target_info() -> None:
    info = get_target_info("ts")
    assert info["name"] == "typescript"
    assert info["file_extension"] == ".ts"
    assert info["index_file"] == "index.ts"
    assert info["import_style"] == "slash"
    assert info["supports_interfaces"] is True
    assert info["aliases"] == ["ts"]

    python = get_target_info("python")
    assert python["index_file"] == "__init__.py"
    assert python["import_style"] == "dotted"
    assert python["supports_interfaces"] is False
