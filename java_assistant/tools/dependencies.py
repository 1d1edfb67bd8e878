"""analyze_dependencies tool."""

from __future__ import annotations

from pathlib import Path

from ..analysis.dependencies import load_dependency_reports
from ..config import AssistantConfig
from ..reports.dependencies import render_dependency_reports
from .base import Tool, ToolArguments

NO_MANIFESTS = "❌ No Maven (pom.xml) or Gradle (build.gradle) files found in the project."


class DependencyTool(Tool):
    """Reports dependencies declared in pom.xml or build.gradle and flags risky versions."""

    name = "analyze_dependencies"
    description = (
        "Analyzes Java project dependencies from Maven or Gradle files, detecting "
        "property references, dynamic versions and snapshot versions"
    )
    action = "analyzing dependencies"

    def run(self, args: ToolArguments, project: Path, config: AssistantConfig) -> str:
        reports = load_dependency_reports(project)
        if not reports:
            return NO_MANIFESTS
        self.logger.debug(
            "Parsed %d build files: %s",
            len(reports),
            ", ".join(report.manifest for report in reports),
        )
        return render_dependency_reports(reports)
