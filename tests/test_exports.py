from __future__ import annotations

from stubforge.exports import ExportIgnoreList


def test_register_keeps_order_and_ignores_duplicates():
    ignores = ExportIgnoreList()
    for path in ["README.md", ".gitignore", "README.md", "tests"]:
        ignores.register(path)

    assert ignores.entries == ("README.md", ".gitignore", "tests")
    assert len(ignores) == 3
    assert "tests" in ignores
    assert "composer.json" not in ignores


def test_render_appends_sorted_directives():
    ignores = ExportIgnoreList()
    for path in ["tests", "README.md", ".gitattributes", "CHANGELOG.md"]:
        ignores.register(path)

    rendered = ignores.render("# header\n")

    assert rendered == (
        "# header\n"
        "/.gitattributes export-ignore\n"
        "/CHANGELOG.md export-ignore\n"
        "/README.md export-ignore\n"
        "/tests export-ignore\n"
    )


def test_render_without_entries_returns_body():
    assert ExportIgnoreList().render("# header") == "# header\n"
