from __future__ import annotations

from pathlib import Path

import pytest

from stubforge.scaffold import STUBS_DIR
from stubforge.template import TemplateRenderer, TemplateRenderingError, find_tokens


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_replaces_every_occurrence(renderer: TemplateRenderer):
    template = "{project_upper} by {vendor_lower}; see {project_upper}"
    tokens = {"project_upper": "Widgets", "vendor_lower": "acme"}
    assert renderer.render_string(template, tokens) == "Widgets by acme; see Widgets"


def test_render_string_does_not_rescan_values(renderer: TemplateRenderer):
    tokens = {"namespace": "{project_upper}", "project_upper": "Widgets"}
    assert renderer.render_string("{namespace}", tokens) == "{project_upper}"


def test_render_string_ignores_unused_entries(renderer: TemplateRenderer):
    assert renderer.render_string("plain text", {"year": 2024}) == "plain text"


def test_render_string_leaves_code_braces_alone(renderer: TemplateRenderer):
    template = "class {project_upper}\n{\n}\n$a = {$b};"
    rendered = renderer.render_string(template, {"project_upper": "Widgets"})
    assert rendered == "class Widgets\n{\n}\n$a = {$b};"


def test_render_string_missing_policy_keep(renderer: TemplateRenderer):
    template = "Hello {missing}"
    assert renderer.render_string(template, {}) == template


def test_render_string_missing_policy_empty(renderer: TemplateRenderer):
    assert renderer.render_string("Hello {missing}", {}, missing="empty") == "Hello "


def test_render_string_missing_policy_error(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{missing}", {}, missing="error")


def test_render_string_rejects_unknown_policy(renderer: TemplateRenderer):
    with pytest.raises(ValueError):
        renderer.render_string("", {}, missing="skip")


def test_render_file_writes_target(tmp_path: Path, renderer: TemplateRenderer):
    template_path = tmp_path / "template.txt"
    template_path.write_text("Year: {year}", encoding="utf-8")
    output_path = tmp_path / "output.txt"
    rendered = renderer.render_file(template_path, {"year": 2024}, target=output_path)
    assert rendered == "Year: 2024"
    assert output_path.read_text(encoding="utf-8") == "Year: 2024"


def test_render_file_missing_template(tmp_path: Path, renderer: TemplateRenderer):
    with pytest.raises(FileNotFoundError):
        renderer.render_file(tmp_path / "missing.txt", {})


ALL_TOKENS = {
    "author_email": "jane@example.com",
    "author_name": "Jane Doe",
    "creation_date": "2024-03-09",
    "license": "mit",
    "namespace": "Acme\\Widgets",
    "project_camel_case": "widgets",
    "project_lower": "widgets",
    "project_upper": "Widgets",
    "testing": "phpunit",
    "testing_version": "4.6.*",
    "vendor_lower": "acme",
    "vendor_upper": "Acme",
    "year": "2024",
}


@pytest.mark.parametrize(
    "stub",
    sorted(path.relative_to(STUBS_DIR).as_posix() for path in STUBS_DIR.rglob("*.txt")),
)
def test_bundled_stubs_render_completely(stub: str, renderer: TemplateRenderer):
    rendered = renderer.render_file(STUBS_DIR / stub, ALL_TOKENS, missing="error")
    assert find_tokens(rendered) == []
