"""check_code_quality tool."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field

from ..analysis.quality import analyze_file
from ..config import AssistantConfig
from ..reports.quality import render_file_quality, render_project_quality
from ..scanner import EXCLUDED_DIRS_WITH_TESTS, exclusion_set, find_java_files
from .base import NO_JAVA_FILES, Tool, ToolArguments


class QualityArguments(ToolArguments):
    file_path: Optional[str] = Field(
        default=None,
        alias="filePath",
        description="Specific file to analyze (optional, if not provided will analyze all Java files)",
    )
    include_metrics: bool = Field(
        default=True,
        alias="includeMetrics",
        description="Include detailed code metrics in the analysis",
    )


def _resolve_target(project: Path, file_path: str) -> Path:
    candidate = Path(file_path).expanduser()
    if candidate.is_absolute() or candidate.exists():
        return candidate
    return project / candidate


class QualityTool(Tool):
    """Computes metrics and code smells for one file or the whole project."""

    name = "check_code_quality"
    description = (
        "Analyzes Java code quality, detects code smells, calculates complexity "
        "metrics, and provides improvement suggestions"
    )
    action = "checking code quality"
    arguments_model = QualityArguments

    def run(self, args: QualityArguments, project: Path, config: AssistantConfig) -> str:
        if args.file_path:
            target = _resolve_target(project, args.file_path)
            if not target.is_file():
                return f"❌ File not found: {args.file_path}"
            quality = analyze_file(target, config.quality)
            return render_file_quality(quality, target.stat().st_size, args.include_metrics)

        files = find_java_files(
            project, exclusion_set(EXCLUDED_DIRS_WITH_TESTS, config.exclude_dirs)
        )
        if not files:
            return NO_JAVA_FILES
        self.logger.debug("Analyzing %d Java files", len(files))
        qualities = [analyze_file(path, config.quality) for path in files]
        return render_project_quality(qualities, args.include_metrics)
