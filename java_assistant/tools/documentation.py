"""generate_documentation tool."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Literal, Optional, Tuple

from pydantic import Field

from ..analysis.aggregator import load_project
from ..config import AssistantConfig
from ..models import ProjectModel
from ..reports.docs import (
    API_FILENAME,
    JAVADOC_FILENAME,
    OVERVIEW_FILENAME,
    render_api_documentation,
    render_javadoc_suggestions,
    render_project_overview,
)
from ..scanner import EXCLUDED_DIRS_WITH_TESTS, exclusion_set, find_java_files
from .base import NO_JAVA_FILES, Tool, ToolArguments

DocumentationType = Literal["javadoc", "api", "overview", "all"]


class DocumentationArguments(ToolArguments):
    output_path: Optional[str] = Field(
        default=None,
        alias="outputPath",
        description="Path where to save the generated documentation (optional, defaults to projectPath/docs)",
    )
    documentation_type: DocumentationType = Field(
        default="all",
        alias="documentationType",
        description="Type of documentation to generate",
    )
    include_private: bool = Field(
        default=False,
        alias="includePrivate",
        description="Include private methods in documentation",
    )


def _documents(
    args: DocumentationArguments,
) -> List[Tuple[str, str, str, Callable[[ProjectModel], str]]]:
    """Return (type, filename, summary, renderer) for each requested document."""
    available = [
        ("overview", OVERVIEW_FILENAME, "Project structure and overview", render_project_overview),
        (
            "api",
            API_FILENAME,
            "API documentation",
            lambda model: render_api_documentation(model, args.include_private),
        ),
        ("javadoc", JAVADOC_FILENAME, "Javadoc improvement suggestions", render_javadoc_suggestions),
    ]
    return [
        document
        for document in available
        if args.documentation_type in ("all", document[0])
    ]


def save_document(output_dir: Path, filename: str, content: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_text(content, encoding="utf-8")
    return path


class DocumentationTool(Tool):
    """Writes overview, API and Javadoc-gap documents for a project."""

    name = "generate_documentation"
    description = (
        "Generates comprehensive documentation for Java projects including Javadoc, "
        "API documentation, and project structure overview"
    )
    action = "generating documentation"
    arguments_model = DocumentationArguments

    def run(self, args: DocumentationArguments, project: Path, config: AssistantConfig) -> str:
        files = find_java_files(
            project, exclusion_set(EXCLUDED_DIRS_WITH_TESTS, config.exclude_dirs)
        )
        if not files:
            return NO_JAVA_FILES

        output_dir = config.resolve_output_dir(args.output_path)
        model = load_project(files)

        lines = [
            "## 📚 Documentation Generation",
            "",
            f"**Project:** {project}",
            f"**Output Directory:** {output_dir}",
            f"**Java Files:** {len(files)}",
            "",
        ]

        written: List[Tuple[Path, str]] = []
        for doc_type, filename, summary, render in _documents(args):
            path = save_document(output_dir, filename, render(model))
            self.logger.debug("Wrote %s documentation to %s", doc_type, path)
            written.append((path, summary))
            lines.append(f"✅ Generated {summary}")

        lines.extend(["", "### 📁 Generated Files"])
        lines.extend(f"- `{path}` - {summary}" for path, summary in written)
        lines.extend(
            [
                "",
                "### 🚀 Next Steps",
                "1. Review the generated documentation",
                "2. Add Javadoc comments to classes and methods",
                "3. Run `javadoc` command to generate HTML documentation",
                "4. Consider using tools like JavaDoc Maven plugin for automated generation",
            ]
        )
        return "\n".join(lines) + "\n"
