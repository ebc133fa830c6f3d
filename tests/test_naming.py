"""Casing and reserved-word remapping tests."""

from __future__ import annotations

import pytest

from schema_bindgen.codegen.core.naming import (
    RESERVED_NAMES,
    NameTransformer,
    NamingCase,
    underscore,
)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("HTTPServer", "http_server"),
        ("fooBarBaz", "foo_bar_baz"),
        ("Inner$Class", "inner__class"),
        ("Widget", "widget"),
        ("XMLHttpRequest2", "xml_http_request2"),
        ("kebab-case-name", "kebab_case_name"),
        ("already_snake", "already_snake"),
        ("version2Name", "version2_name"),
    ],
)
def test_underscore(word: str, expected: str) -> None:
    assert underscore(word) == expected


@pytest.mark.parametrize("word", ["HTTPServer", "fooBarBaz", "Inner$Class", "a-B-c"])
def test_underscore_is_idempotent(word: str) -> None:
    once = underscore(word)
    assert underscore(once) == once


def test_transformer_caches_underscore() -> None:
    names = NameTransformer()
    assert names.underscore("FooBar") == "foo_bar"
    assert names._underscore_cache == {"FooBar": "foo_bar"}


def test_remap_reserved_word_keeps_wire_name() -> None:
    names = NameTransformer()
    assert names.remap("interface") == ("_interface", "interface")
    assert names.remap("default") == ("_default", "default")


def test_remap_ordinary_name_is_identity() -> None:
    assert NameTransformer().remap("serial") == ("serial", "serial")


def test_reserved_table_is_fixed() -> None:
    assert dict(RESERVED_NAMES) == {"default": "_default", "interface": "_interface"}
    with pytest.raises(TypeError):
        RESERVED_NAMES["class"] = "_class"  # type: ignore[index]


def test_custom_reserved_table() -> None:
    names = NameTransformer({"type": "type_"})
    assert names.is_reserved("type")
    assert not names.is_reserved("interface")
    assert names.remap("type") == ("type_", "type")


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (NamingCase.ORIGINAL, "userName"),
        (NamingCase.SNAKE_CASE, "user_name"),
        (NamingCase.CAMEL_CASE, "userName"),
        (NamingCase.PASCAL_CASE, "UserName"),
    ],
)
def test_convert(case: NamingCase, expected: str) -> None:
    assert NameTransformer().convert("userName", case) == expected


def test_convert_keeps_leading_underscore() -> None:
    names = NameTransformer()
    assert names.convert("_interface", NamingCase.SNAKE_CASE) == "_interface"
    assert names.convert("_default_value", NamingCase.CAMEL_CASE) == "_defaultValue"
    assert names.convert("_default_value", NamingCase.PASCAL_CASE) == "_DefaultValue"
