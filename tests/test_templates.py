"""Template engine tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from schema_bindgen.codegen.core.templates import TemplateEngine, TemplateError


@pytest.fixture
def engine() -> TemplateEngine:
    return TemplateEngine()


def test_case_filters(engine: TemplateEngine) -> None:
    rendered = engine.render_string(
        "{{ name | case('snake') }} {{ name | case('camel') }} {{ name | case('pascal') }}",
        {"name": "HTTPServerName"},
    )
    assert rendered == "http_server_name httpServerName HttpServerName"


def test_underscore_filter(engine: TemplateEngine) -> None:
    assert engine.render_string("{{ name | underscore }}", {"name": "Widget$Dimensions"}) == (
        "widget__dimensions"
    )


def test_comment_filter(engine: TemplateEngine) -> None:
    assert engine.render_string("{{ text | comment('#') }}", {"text": "one\ntwo"}) == "# one\n# two"
    assert engine.render_string("{{ text | comment }}", {"text": "one\n\ntwo"}) == "// one\n\n// two"


def test_registered_filters(engine: TemplateEngine) -> None:
    assert sorted(engine.filters()) == ["case", "comment", "underscore"]


def test_in_memory_templates(engine: TemplateEngine) -> None:
    assert not engine.template_exists("greeting.j2")
    engine.add_template("greeting.j2", "Hello {{ name }}")
    assert engine.template_exists("greeting.j2")
    assert engine.render_template("greeting.j2", {"name": "Widget"}) == "Hello Widget"


def test_filesystem_templates(tmp_path: Path) -> None:
    (tmp_path / "class.ts.j2").write_text("class {{ name }} {}\n", encoding="utf-8")
    engine = TemplateEngine(tmp_path)
    assert engine.render_template("class.ts.j2", {"name": "Widget"}) == "class Widget {}\n"


def test_missing_template(engine: TemplateEngine) -> None:
    with pytest.raises(TemplateError, match="Template not found: nope.j2"):
        engine.render_template("nope.j2", {})


def test_undefined_variables_fail(engine: TemplateEngine) -> None:
    with pytest.raises(TemplateError):
        engine.render_string("{{ missing }}", {})
