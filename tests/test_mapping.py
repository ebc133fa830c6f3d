"""Built-in type table tests."""

from __future__ import annotations

import pytest

from schema_bindgen.codegen.core.mapping import BUILTIN_KEYS, TypeMapper
from schema_bindgen.codegen.core.types import DATETIME, STRING, ClassRef
from schema_bindgen.codegen.languages.python.types import PYTHON_TYPE_MAP
from schema_bindgen.codegen.languages.typescript.types import TYPESCRIPT_TYPE_MAP


@pytest.mark.parametrize("table", [TYPESCRIPT_TYPE_MAP, PYTHON_TYPE_MAP])
def test_target_tables_cover_every_builtin(table) -> None:
    assert set(BUILTIN_KEYS) <= set(table)


def test_missing_builtin_is_rejected() -> None:
    with pytest.raises(ValueError, match="uuid.UUID"):
        TypeMapper({key: "x" for key in BUILTIN_KEYS if key != "uuid.UUID"})


def test_typescript_spellings() -> None:
    mapper = TypeMapper(TYPESCRIPT_TYPE_MAP)
    assert mapper.name_for(STRING) == "string"
    assert mapper.name_for(ClassRef("int", "builtins")) == "number"
    assert mapper.name_for(ClassRef("bool", "builtins")) == "boolean"
    assert mapper.name_for(DATETIME) == "Date"
    assert mapper.name_for(ClassRef("Any", "typing")) == "any"


def test_python_spellings() -> None:
    mapper = TypeMapper(PYTHON_TYPE_MAP)
    assert mapper.name_for(STRING) == "str"
    assert mapper.name_for(DATETIME) == "str"
    assert mapper.name_for(ClassRef("UUID", "uuid")) == "str"
    assert mapper.name_for(ClassRef("object", "builtins")) == "object"


def test_non_builtin_uses_declared_name() -> None:
    mapper = TypeMapper(TYPESCRIPT_TYPE_MAP)
    gadget = ClassRef("Gadget", "acme.shop.parts")
    assert not mapper.is_builtin(gadget)
    assert mapper.name_for(gadget) == "Gadget"


def test_same_simple_name_in_other_package_is_not_builtin() -> None:
    mapper = TypeMapper(TYPESCRIPT_TYPE_MAP)
    assert not mapper.is_builtin(ClassRef("str", "acme.schema"))


def test_spell_appends_repetition_marker() -> None:
    mapper = TypeMapper(TYPESCRIPT_TYPE_MAP)
    assert mapper.spell(STRING, is_repeated=True) == "string[]"
    assert mapper.spell(ClassRef("Gadget", "acme"), is_repeated=False) == "Gadget"


def test_type_overrides_extend_table() -> None:
    mapper = TypeMapper(TYPESCRIPT_TYPE_MAP, {"acme.types.Money": "string"})
    money = ClassRef("Money", "acme.types")
    assert mapper.is_builtin(money)
    assert mapper.name_for(money) == "string"
    assert "acme.types.Money" not in TYPESCRIPT_TYPE_MAP
