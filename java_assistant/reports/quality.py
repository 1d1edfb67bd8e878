"""Code quality report rendering for single files and whole projects."""

from __future__ import annotations

from collections import Counter
from pathlib import PurePath
from typing import Dict, List, Sequence

from ..analysis.architecture import safe_ratio
from ..models import FileQuality

MAX_PROJECT_SUGGESTIONS = 10
MAX_WORST_FILES = 5


def _detailed_metrics(quality: FileQuality) -> List[str]:
    metrics = quality.metrics
    return [
        "```",
        f"Lines of Code: {metrics.lines_of_code}",
        f"Comment Lines: {metrics.comment_lines}",
        f"Comment Ratio: {metrics.comment_ratio:.1f}%",
        f"Methods: {metrics.method_count}",
        f"Classes: {metrics.class_count}",
        f"Avg Method Length: {metrics.avg_method_length:.1f} lines",
        f"Code Smells: {len(quality.smells)}",
        "```",
    ]


def render_file_quality(quality: FileQuality, size_bytes: int, include_metrics: bool = True) -> str:
    metrics = quality.metrics
    lines = [
        "## 🔍 Code Quality Analysis",
        "",
        f"**File:** `{quality.path}`",
        f"**Size:** {size_bytes / 1024:.2f} KB",
        "",
        "### 📊 Metrics",
        f"- **Lines of Code:** {metrics.lines_of_code}",
        f"- **Lines with Comments:** {metrics.comment_lines}",
        f"- **Comment Ratio:** {metrics.comment_ratio:.1f}%",
        f"- **Methods:** {metrics.method_count}",
        f"- **Classes:** {metrics.class_count}",
        f"- **Average Method Length:** {metrics.avg_method_length:.1f} lines",
        "",
        "### ⚠️ Code Smells Detected",
    ]
    if not quality.smells:
        lines.append("✅ No major code smells detected!")
    else:
        for smell in quality.smells:
            lines.append(
                f"- **{smell.kind.value}:** {smell.description} (Line {smell.line_number})"
            )
    lines.extend(["", "### 🎯 Improvement Suggestions"])
    lines.extend(f"- {suggestion}" for suggestion in quality.suggestions)

    if include_metrics:
        lines.extend(["", "### 📈 Detailed Metrics"])
        lines.extend(_detailed_metrics(quality))

    return "\n".join(lines) + "\n"


def render_project_quality(qualities: Sequence[FileQuality], include_metrics: bool = True) -> str:
    """Summarise metrics and smells over every analysed file."""
    total_files = len(qualities)
    total_lines = sum(quality.metrics.lines_of_code for quality in qualities)
    total_methods = sum(quality.metrics.method_count for quality in qualities)
    total_classes = sum(quality.metrics.class_count for quality in qualities)
    avg_comment_ratio = safe_ratio(
        sum(quality.metrics.comment_ratio for quality in qualities), total_files
    )
    smells = [smell for quality in qualities for smell in quality.smells]

    lines = [
        "## 🔍 Project Code Quality Analysis",
        "",
        f"**Total Java Files:** {total_files}",
        f"**Total Lines of Code:** {total_lines:,}",
        f"**Total Methods:** {total_methods:,}",
        f"**Total Classes:** {total_classes:,}",
        f"**Average Comment Ratio:** {avg_comment_ratio:.1f}%",
        "",
        "### ⚠️ Code Smells Summary",
    ]

    by_kind = Counter(smell.kind for smell in smells)
    if not by_kind:
        lines.append("✅ No major code smells detected across the project!")
    else:
        for kind, count in by_kind.items():
            lines.append(f"- **{kind.value}:** {count} occurrences")

    lines.extend(["", "### 🎯 Top Improvement Suggestions"])
    unique: Dict[str, None] = {}
    for quality in qualities:
        for suggestion in quality.suggestions:
            unique.setdefault(suggestion)
    lines.extend(f"- {suggestion}" for suggestion in list(unique)[:MAX_PROJECT_SUGGESTIONS])

    lines.extend(["", "### 📁 Files with Most Issues"])
    by_file = Counter(PurePath(smell.file).name for smell in smells)
    worst = by_file.most_common(MAX_WORST_FILES)
    if worst:
        lines.extend(f"- `{name}`: {count} issues" for name, count in worst)
    else:
        lines.append("✅ All files are in good shape!")

    if include_metrics:
        lines.extend(
            [
                "",
                "### 📈 Detailed Metrics",
                "```",
                f"Files: {total_files}",
                f"Lines of Code: {total_lines}",
                f"Methods: {total_methods}",
                f"Classes: {total_classes}",
                f"Avg Methods per File: {safe_ratio(total_methods, total_files):.1f}",
                f"Code Smells: {len(smells)}",
                "```",
            ]
        )

    return "\n".join(lines) + "\n"


__all__ = ["render_file_quality", "render_project_quality"]
