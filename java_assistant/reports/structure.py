"""Project structure and architecture report rendering."""

from __future__ import annotations

from typing import List

from ..analysis.architecture import (
    abstraction_percentage,
    average_fields_per_class,
    average_methods_per_class,
    class_interface_ratio,
    complexity_summary,
    detect_patterns,
    high_coupling_packages,
    package_depths,
    safe_ratio,
)
from ..models import ProjectModel

MAX_LISTED_PACKAGES = 10


def render_package_analysis(model: ProjectModel) -> str:
    packages = list(model.packages.values())
    if not packages:
        return "No packages found (all classes in default package)\n"

    lines = [f"**Total Packages:** {len(packages)}", ""]
    ranked = sorted(packages, key=lambda package: len(package.classes), reverse=True)
    for package in ranked[:MAX_LISTED_PACKAGES]:
        lines.extend(
            [
                f"#### {package.name}",
                f"- **Files:** {package.file_count}",
                f"- **Classes:** {len(package.classes)}",
                f"- **Interfaces:** {len(package.interfaces)}",
                f"- **Enums:** {len(package.enums)}",
                f"- **Methods:** {package.method_count}",
                f"- **Fields:** {package.field_count}",
                "",
            ]
        )
    if len(packages) > MAX_LISTED_PACKAGES:
        lines.extend([f"... and {len(packages) - MAX_LISTED_PACKAGES} more packages", ""])

    depths = package_depths(model)
    average_depth = safe_ratio(sum(depths), len(depths))
    lines.extend(
        [
            "### Package Organization",
            f"- **Average package depth:** {average_depth:.1f} levels",
            f"- **Deepest package:** {max(depths)} levels",
        ]
    )
    if average_depth > 4:
        lines.append("⚠️ Consider flattening package structure")
    elif average_depth < 2:
        lines.append("⚠️ Consider adding more package organization")

    return "\n".join(lines) + "\n"


def render_architecture_analysis(model: ProjectModel) -> str:
    lines = ["### Detected Patterns"]
    patterns = detect_patterns(model.classes)
    if patterns:
        lines.extend(f"- **{pattern.name}:** {pattern.description}" for pattern in patterns)
    else:
        lines.append("- No common patterns detected from class names")

    lines.extend(
        [
            "",
            "### Architecture Metrics",
            f"- **Class/Interface Ratio:** {class_interface_ratio(model):.1f}:1",
            f"- **Abstraction Level:** {abstraction_percentage(model):.1f}%",
            f"- **High coupling packages:** {high_coupling_packages(model)}",
        ]
    )
    return "\n".join(lines) + "\n"


def render_project_metrics(model: ProjectModel, complexity_threshold: int = 20) -> str:
    complexity = complexity_summary(model, threshold=complexity_threshold)
    lines = [
        f"- **Total Classes:** {len(model.classes)}",
        f"- **Total Interfaces:** {len(model.interfaces)}",
        f"- **Total Enums:** {len(model.enums)}",
        f"- **Total Methods:** {model.total_methods}",
        f"- **Total Fields:** {model.total_fields}",
        f"- **Average methods per class:** {average_methods_per_class(model):.1f}",
        f"- **Average fields per class:** {average_fields_per_class(model):.1f}",
        f"- **Average class complexity:** {complexity.average:.1f}",
        f"- **Most complex classes:** {', '.join(complexity.complex_classes) or 'none'}",
    ]
    return "\n".join(lines) + "\n"


def render_recommendations(model: ProjectModel) -> str:
    lines: List[str] = []
    packages = list(model.packages.values())

    if not packages:
        lines.append(
            "- ⚠️ **Create proper package structure** - All classes are in default package"
        )
    elif len(packages) > 20:
        lines.append(
            "- ⚠️ **Consider consolidating packages** - Too many packages may indicate over-engineering"
        )

    if abstraction_percentage(model) < 10:
        lines.append(
            "- 💡 **Add more interfaces** - Low abstraction level, consider using interfaces for better design"
        )

    if average_methods_per_class(model) > 15:
        lines.append(
            "- ⚠️ **Reduce class complexity** - Classes have too many methods, consider splitting"
        )

    if any(package.file_count > 20 for package in packages):
        lines.append("- ⚠️ **Split large packages** - Some packages have too many classes")

    lines.extend(
        [
            "- 🎯 **Follow naming conventions** - Ensure consistent package and class naming",
            "- 📁 **Organize by feature** - Consider organizing packages by business functionality",
            "- 🔄 **Reduce coupling** - Minimize dependencies between packages",
        ]
    )
    return "\n".join(lines) + "\n"


__all__ = [
    "render_architecture_analysis",
    "render_package_analysis",
    "render_project_metrics",
    "render_recommendations",
]
