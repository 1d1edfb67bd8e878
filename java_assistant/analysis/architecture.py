"""Name-based architecture heuristics and project ratios."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..models import ProjectModel, SourceRecord


@dataclass
class ArchitecturePattern:
    """A design pattern inferred from class names."""

    name: str
    description: str


@dataclass
class ComplexitySummary:
    average: float
    complex_classes: List[str]


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, substituting ``max(denominator, 1)`` so the result is always finite."""
    return numerator / max(denominator, 1)


def average_methods_per_class(model: ProjectModel) -> float:
    return safe_ratio(model.total_methods, len(model.classes))


def average_fields_per_class(model: ProjectModel) -> float:
    return safe_ratio(model.total_fields, len(model.classes))


def abstraction_percentage(model: ProjectModel) -> float:
    """Interfaces as a percentage of classes plus interfaces."""
    return safe_ratio(len(model.interfaces), len(model.classes) + len(model.interfaces)) * 100


def class_interface_ratio(model: ProjectModel) -> float:
    return safe_ratio(len(model.classes), len(model.interfaces))


def _has_name(classes: Sequence[SourceRecord], fragment: str) -> bool:
    return any(fragment in (record.type_name or "").lower() for record in classes)


def detect_patterns(classes: Sequence[SourceRecord]) -> List[ArchitecturePattern]:
    """Return patterns suggested by class-name substrings (case-insensitive)."""
    patterns: List[ArchitecturePattern] = []

    if all(_has_name(classes, layer) for layer in ("controller", "service", "repository")):
        patterns.append(
            ArchitecturePattern(
                name="MVC/Service Layer Pattern",
                description="Detected Controller-Service-Repository pattern",
            )
        )

    if _has_name(classes, "factory"):
        patterns.append(
            ArchitecturePattern(name="Factory Pattern", description="Factory classes detected")
        )

    if _has_name(classes, "builder"):
        patterns.append(
            ArchitecturePattern(name="Builder Pattern", description="Builder classes detected")
        )

    return patterns


def complexity_summary(model: ProjectModel, threshold: int = 20, limit: int = 5) -> ComplexitySummary:
    """Average (methods + fields) per packaged class and the first complex ones.

    Complex classes are listed in encounter order, truncated to ``limit``.
    """
    complexities: List[int] = []
    complex_classes: List[str] = []
    for package in model.packages.values():
        for record in package.classes:
            complexity = len(record.methods) + len(record.fields)
            complexities.append(complexity)
            if complexity > threshold:
                complex_classes.append(record.display_name)
    return ComplexitySummary(
        average=safe_ratio(sum(complexities), len(complexities)),
        complex_classes=complex_classes[:limit],
    )


def package_depths(model: ProjectModel) -> List[int]:
    return [len(name.split(".")) for name in model.packages]


def high_coupling_packages(model: ProjectModel, file_limit: int = 15) -> int:
    """Count packages whose file count suggests heavy coupling."""
    return sum(1 for package in model.packages.values() if package.file_count > file_limit)


__all__ = [
    "ArchitecturePattern",
    "ComplexitySummary",
    "abstraction_percentage",
    "average_fields_per_class",
    "average_methods_per_class",
    "class_interface_ratio",
    "complexity_summary",
    "detect_patterns",
    "high_coupling_packages",
    "package_depths",
    "safe_ratio",
]
