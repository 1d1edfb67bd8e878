"""Tests for name-based architecture heuristics and project ratios."""

from __future__ import annotations

from java_assistant.analysis import aggregate_records, parse_source
from java_assistant.analysis.architecture import (
    abstraction_percentage,
    average_methods_per_class,
    class_interface_ratio,
    complexity_summary,
    detect_patterns,
    high_coupling_packages,
    package_depths,
    safe_ratio,
)
from java_assistant.models import ProjectModel


def _class(package: str, name: str, methods: int = 0, fields: int = 0) -> str:
    body = [f"package {package};", f"public class {name} {{"]
    body.extend(f"    private int field{index};" for index in range(fields))
    body.extend(f"    public void method{index}() {{" for index in range(methods))
    body.append("}")
    return "\n".join(body)


def test_mvc_pattern_requires_all_three_layers() -> None:
    model = aggregate_records(
        [
            parse_source(_class("shop", "OrderController"), "OrderController.java"),
            parse_source(_class("shop", "OrderService"), "OrderService.java"),
            parse_source(_class("shop", "OrderRepository"), "OrderRepository.java"),
        ]
    )

    names = [pattern.name for pattern in detect_patterns(model.classes)]

    assert names == ["MVC/Service Layer Pattern"]

    partial = detect_patterns(model.classes[:2])
    assert partial == []


def test_factory_and_builder_patterns_are_case_insensitive() -> None:
    model = aggregate_records(
        [
            parse_source(_class("util", "ConnectionFACTORY"), "ConnectionFACTORY.java"),
            parse_source(_class("util", "QueryBuilder"), "QueryBuilder.java"),
        ]
    )

    names = [pattern.name for pattern in detect_patterns(model.classes)]

    assert names == ["Factory Pattern", "Builder Pattern"]


def test_ratios_are_finite_for_empty_project() -> None:
    model = ProjectModel()

    assert safe_ratio(5, 0) == 5.0
    assert average_methods_per_class(model) == 0.0
    assert abstraction_percentage(model) == 0.0
    assert class_interface_ratio(model) == 0.0
    assert complexity_summary(model).average == 0.0


def test_abstraction_and_class_interface_ratio() -> None:
    model = aggregate_records(
        [
            parse_source(_class("app", "Impl"), "Impl.java"),
            parse_source(_class("app", "Other"), "Other.java"),
            parse_source(_class("app", "Third"), "Third.java"),
            parse_source("package app;\npublic interface Port {\n}\n", "Port.java"),
        ]
    )

    assert abstraction_percentage(model) == 25.0
    assert class_interface_ratio(model) == 3.0


def test_complexity_summary_lists_complex_classes_in_order() -> None:
    model = aggregate_records(
        [
            parse_source(_class("core", "Small", methods=2, fields=1), "Small.java"),
            parse_source(_class("core", "Huge", methods=15, fields=10), "Huge.java"),
            parse_source(_class("core", "Large", methods=12, fields=9), "Large.java"),
        ]
    )

    summary = complexity_summary(model, threshold=20)

    assert summary.complex_classes == ["Huge", "Large"]
    assert summary.average == (3 + 25 + 21) / 3


def test_package_depth_and_coupling_counts() -> None:
    records = [
        parse_source(_class("com.example.big", f"Type{index}"), f"Type{index}.java")
        for index in range(16)
    ]
    records.append(parse_source(_class("tools", "Cli"), "Cli.java"))
    model = aggregate_records(records)

    assert sorted(package_depths(model)) == [1, 3]
    assert high_coupling_packages(model) == 1
