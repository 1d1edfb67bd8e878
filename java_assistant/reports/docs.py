"""Markdown documents written by the documentation tool."""

from __future__ import annotations

from typing import List, Optional

from ..analysis.architecture import abstraction_percentage, average_methods_per_class, safe_ratio
from ..models import ProjectModel, SourceRecord

OVERVIEW_FILENAME = "project-overview.md"
API_FILENAME = "api-documentation.md"
JAVADOC_FILENAME = "javadoc-suggestions.md"

_BEST_PRACTICES = (
    "1. **Class-level documentation:** Include purpose, usage examples, and key features",
    "2. **Method documentation:** Describe parameters, return values, and exceptions",
    "3. **Parameter documentation:** Use @param for each parameter",
    "4. **Return documentation:** Use @return to describe return values",
    "5. **Exception documentation:** Use @throws for checked exceptions",
    "6. **Author and version:** Include @author and @since tags",
)


def has_javadoc(value: Optional[str]) -> bool:
    """A Javadoc value counts only when it is non-empty after trimming."""
    return bool(value and value.strip())


def _join(lines: List[str]) -> str:
    return "\n".join(lines).rstrip() + "\n"


def render_project_overview(model: ProjectModel) -> str:
    lines = [
        "# Project Overview",
        "",
        f"**Total Files:** {model.total_files}",
        f"**Classes:** {len(model.classes)}",
        f"**Interfaces:** {len(model.interfaces)}",
        f"**Enums:** {len(model.enums)}",
        "",
        "## Package Structure",
        "",
    ]

    for name, package in model.packages.items():
        lines.append(f"### {name}")
        lines.append(f"- **Classes:** {len(package.records)}")
        lines.append(f"- **Methods:** {package.method_count}")
        lines.append("")
        for record in package.records:
            lines.append(f"- **{record.display_name}** ({record.type_kind.value})")
        lines.append("")

    lines.extend(
        [
            "## Architecture Overview",
            "",
            "This section provides a high-level view of the project structure:",
            "",
            f"- **Average methods per class:** {average_methods_per_class(model):.1f}",
            f"- **Package distribution:** {len(model.packages)} packages",
        ]
    )
    if model.interfaces:
        lines.append(
            f"- **Interface usage:** {abstraction_percentage(model):.1f}% of types are interfaces"
        )

    return _join(lines)


def _render_type_api(record: SourceRecord, include_private: bool) -> List[str]:
    lines = [f"### {record.display_name} ({record.type_kind.value})", ""]

    if has_javadoc(record.javadoc):
        lines.extend(["**Description:**", record.javadoc or "", ""])

    public_fields = [field for field in record.fields if field.visibility == "public"]
    if public_fields:
        lines.extend(["#### Public Fields", ""])
        for field in public_fields:
            lines.append(f"- **{field.name}** ({field.type})")
            if has_javadoc(field.javadoc):
                lines.append(f"  {field.javadoc}")
        lines.append("")

    methods = (
        record.methods
        if include_private
        else [method for method in record.methods if method.visibility == "public"]
    )
    if methods:
        lines.extend(["#### Methods", ""])
        for method in methods:
            lines.append(f"- **{method.name}()** → {method.return_type}")
            if has_javadoc(method.javadoc):
                lines.append(f"  {method.javadoc}")
        lines.append("")

    return lines


def render_api_documentation(model: ProjectModel, include_private: bool = False) -> str:
    """List public fields and methods per packaged type.

    Non-public methods are included only when ``include_private`` is set.
    """
    lines = ["# API Documentation", ""]
    for name, package in model.packages.items():
        lines.extend([f"## Package: {name}", ""])
        for record in package.records:
            lines.extend(_render_type_api(record, include_private))
    return _join(lines)


def _javadoc_skeleton(type_name: str) -> List[str]:
    return [
        "**Suggested Javadoc:**",
        "```java",
        "/**",
        f" * Description of {type_name}.",
        " * ",
        " * @author TODO: Add author name",
        " * @since TODO: Add version or date",
        " */",
        "```",
        "",
    ]


def render_javadoc_suggestions(model: ProjectModel) -> str:
    """Report Javadoc coverage and skeletons for undocumented types."""
    total_types = 0
    documented_types = 0
    total_methods = 0
    documented_methods = 0
    for package in model.packages.values():
        for record in package.records:
            total_types += 1
            documented_types += has_javadoc(record.javadoc)
            for method in record.methods:
                total_methods += 1
                documented_methods += has_javadoc(method.javadoc)

    type_coverage = safe_ratio(documented_types, total_types) * 100
    method_coverage = safe_ratio(documented_methods, total_methods) * 100

    lines = [
        "# Javadoc Improvement Suggestions",
        "",
        "## Documentation Coverage",
        "",
        f"- **Classes with Javadoc:** {documented_types}/{total_types} ({type_coverage:.1f}%)",
        f"- **Methods with Javadoc:** {documented_methods}/{total_methods} ({method_coverage:.1f}%)",
        "",
        "## Suggested Javadoc Additions",
        "",
    ]

    for name, package in model.packages.items():
        undocumented = [record for record in package.records if not has_javadoc(record.javadoc)]
        if not undocumented:
            continue
        lines.extend([f"### Package: {name}", ""])
        for record in undocumented:
            lines.extend([f"#### {record.display_name}", ""])
            lines.extend(_javadoc_skeleton(record.display_name))
            missing = [method for method in record.methods if not has_javadoc(method.javadoc)]
            if missing:
                lines.append("**Methods needing Javadoc:**")
                lines.extend(f"- {method.name}()" for method in missing)
                lines.append("")

    lines.extend(["## Javadoc Best Practices", ""])
    lines.extend(_BEST_PRACTICES)
    return _join(lines)


__all__ = [
    "API_FILENAME",
    "JAVADOC_FILENAME",
    "OVERVIEW_FILENAME",
    "has_javadoc",
    "render_api_documentation",
    "render_javadoc_suggestions",
    "render_project_overview",
]
