"""analyze_project_structure tool."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field

from ..analysis.aggregator import load_project
from ..analysis.tree import render_directory_tree
from ..config import AssistantConfig
from ..reports.structure import (
    render_architecture_analysis,
    render_package_analysis,
    render_project_metrics,
    render_recommendations,
)
from ..scanner import EXCLUDED_DIRS_WITH_TESTS, exclusion_set, find_java_files
from .base import NO_JAVA_FILES, Tool, ToolArguments


class StructureArguments(ToolArguments):
    include_architecture: bool = Field(
        default=True,
        alias="includeArchitecture",
        description="Include architecture pattern analysis",
    )
    include_metrics: bool = Field(
        default=True,
        alias="includeMetrics",
        description="Include detailed project metrics",
    )


class StructureTool(Tool):
    """Renders the directory tree, package statistics and architecture heuristics."""

    name = "analyze_project_structure"
    description = (
        "Analyzes Java project structure, architecture patterns, package organization, "
        "and provides recommendations for improvement"
    )
    action = "analyzing project structure"
    arguments_model = StructureArguments

    def run(self, args: StructureArguments, project: Path, config: AssistantConfig) -> str:
        excluded = exclusion_set(EXCLUDED_DIRS_WITH_TESTS, config.exclude_dirs)
        files = find_java_files(project, excluded)
        if not files:
            return NO_JAVA_FILES

        model = load_project(files)
        sections = [
            "## 🏗️ Project Structure Analysis\n",
            f"**Project Path:** {project}\n**Total Java Files:** {len(files)}\n",
            "### 📁 Directory Structure\n"
            + render_directory_tree(project, excluded, config.structure.tree_depth),
            "### 📦 Package Analysis\n" + render_package_analysis(model),
        ]
        if args.include_architecture:
            sections.append("### 🏛️ Architecture Analysis\n" + render_architecture_analysis(model))
        if args.include_metrics:
            sections.append(
                "### 📊 Project Metrics\n"
                + render_project_metrics(model, config.structure.complexity_threshold)
            )
        sections.append("### 🎯 Recommendations\n" + render_recommendations(model))
        return "\n".join(sections)
