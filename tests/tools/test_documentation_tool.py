"""Tests for the generate_documentation tool."""

from __future__ import annotations

from java_assistant.config import CONFIG_FILENAME
from java_assistant.tools import DocumentationTool
from tests._fixtures.project_builder import ProjectBuilder

SOURCES = {
    "src/main/java/com/acme/Account.java": """
        package com.acme;

        public class Account {
            public long balance() {
                return 0;
            }
        }
    """,
}


def test_overview_only_writes_single_file(project_builder: ProjectBuilder) -> None:
    project_builder.write(SOURCES)
    root = project_builder.path()

    report = DocumentationTool().execute(
        {"projectPath": str(root), "documentationType": "overview"}
    )

    docs = root.resolve() / "docs"
    assert sorted(path.name for path in docs.iterdir()) == ["project-overview.md"]
    assert "✅ Generated Project structure and overview" in report
    assert "api-documentation.md" not in report
    assert "javadoc-suggestions.md" not in report


def test_all_documents_written_to_explicit_output(project_builder: ProjectBuilder, tmp_path) -> None:
    project_builder.write(SOURCES)
    output = tmp_path / "out" / "nested"

    report = DocumentationTool().execute(
        {"projectPath": str(project_builder.path()), "outputPath": str(output)}
    )

    assert sorted(path.name for path in output.iterdir()) == [
        "api-documentation.md",
        "javadoc-suggestions.md",
        "project-overview.md",
    ]
    assert f"**Output Directory:** {output}" in report
    assert "**Java Files:** 1" in report
    api = (output / "api-documentation.md").read_text(encoding="utf-8")
    assert "- **balance()** → long" in api


def test_configured_output_directory(project_builder: ProjectBuilder) -> None:
    project_builder.write({**SOURCES, CONFIG_FILENAME: "docs:\n  output_dir: generated/docs\n"})
    root = project_builder.path()

    DocumentationTool().execute({"projectPath": str(root), "documentationType": "api"})

    assert (root / "generated" / "docs" / "api-documentation.md").is_file()
    assert not (root / "docs").exists()
