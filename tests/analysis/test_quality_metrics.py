"""Tests for per-file metrics, code smells and suggestions."""

from __future__ import annotations

import textwrap

from java_assistant.analysis.quality import (
    analyze_source,
    calculate_metrics,
    detect_code_smells,
    generate_suggestions,
)
from java_assistant.config import QualityConfig
from java_assistant.models import FileMetrics, SmellKind

DEMO = textwrap.dedent(
    """
    package demo;

    /**
     * Demo.
     */
    public class Demo {
        public int sum(int a, int b) {
            if (a > 0) {
                return a + b;
            }
            return b;
        }
    }
    """
).lstrip("\n")


def test_calculate_metrics_counts_code_comments_and_methods() -> None:
    metrics = calculate_metrics(DEMO.splitlines())

    assert metrics.lines_of_code == 9
    assert metrics.comment_lines == 3
    assert metrics.comment_ratio == 25.0
    assert metrics.class_count == 1
    assert metrics.method_count == 1
    assert metrics.avg_method_length == 6.0


def test_calculate_metrics_handles_abstract_and_one_line_methods() -> None:
    metrics = calculate_metrics(
        [
            "public abstract class Shape {",
            "    public abstract double area();",
            "    public String name() { return \"shape\"; }",
            "}",
        ]
    )

    assert metrics.method_count == 2
    assert metrics.avg_method_length == 1.0


def test_calculate_metrics_for_comment_only_file() -> None:
    metrics = calculate_metrics(["// nothing here", "/* still nothing */"])

    assert metrics.lines_of_code == 0
    assert metrics.comment_lines == 2
    assert metrics.comment_ratio == 0.0
    assert metrics.avg_method_length == 0.0


def test_long_line_is_reported_once_with_its_length() -> None:
    statement = 'String message = "'
    statement += "x" * (128 - len(statement)) + '";'
    assert len(statement) == 130
    long_line = "    " + statement

    smells = detect_code_smells(["public class Banner {", long_line, "}"], "Banner.java")

    assert len(smells) == 1
    assert smells[0].kind is SmellKind.LONG_LINE
    assert smells[0].line_number == 2
    assert smells[0].description == "Line too long (130 characters)"


def test_indentation_does_not_count_towards_line_length() -> None:
    line = " " * 8 + "x" * 115
    assert len(line) > 120

    assert detect_code_smells([line], "Indented.java") == []


def test_smell_detection_is_repeatable() -> None:
    lines = [
        "public class Repeat {",
        "    int limit = 1000;",
        "    // TODO tune",
        " " * 30 + "go();",
        "}",
    ]

    first = [(smell.kind, smell.line_number) for smell in detect_code_smells(lines, "Repeat.java")]
    second = [(smell.kind, smell.line_number) for smell in detect_code_smells(lines, "Repeat.java")]

    assert first == second
    assert first == [
        (SmellKind.MAGIC_NUMBER, 2),
        (SmellKind.TECHNICAL_DEBT, 3),
        (SmellKind.DEEP_NESTING, 4),
    ]


def test_configured_thresholds_override_defaults() -> None:
    line = "    int total = first + second + third;"
    config = QualityConfig(max_line_length=20, max_indent=2)

    kinds = [smell.kind for smell in detect_code_smells([line], "A.java", config)]

    assert kinds == [SmellKind.LONG_LINE, SmellKind.DEEP_NESTING]


def test_magic_numbers_skip_comments_and_imports() -> None:
    lines = [
        "import com.example.v1000.Client;",
        "// retry after 5000 ms",
        "int small = 42;",
        "int delay = 5000; // ms",
        "int timeout = 5000;",
    ]

    smells = detect_code_smells(lines, "Timing.java")

    assert [(smell.kind, smell.line_number) for smell in smells] == [
        (SmellKind.MAGIC_NUMBER, 5)
    ]


def test_deep_nesting_empty_catch_and_debt_markers() -> None:
    lines = [
        "try {",
        "    run();",
        "} catch (Exception e) {",
        "}",
        "",
        " " * 28 + "step();",
        "// TODO remove once migrated",
        "// FIXME flaky",
    ]

    smells = detect_code_smells(lines, "Worker.java")

    assert [(smell.kind, smell.line_number) for smell in smells] == [
        (SmellKind.EMPTY_CATCH_BLOCK, 3),
        (SmellKind.DEEP_NESTING, 6),
        (SmellKind.TECHNICAL_DEBT, 7),
        (SmellKind.TECHNICAL_DEBT, 8),
    ]


def test_catch_with_handling_is_not_empty() -> None:
    lines = [
        "} catch (IOException e) {",
        "    log(e);",
        "}",
    ]

    assert detect_code_smells(lines, "Io.java") == []


def test_generate_suggestions_follows_metrics_and_smells() -> None:
    metrics = FileMetrics(
        lines_of_code=600,
        comment_lines=0,
        comment_ratio=0.0,
        method_count=25,
        class_count=1,
        avg_method_length=30.0,
    )
    smells = detect_code_smells(["int timeout = 5000;"], "Big.java")

    assert generate_suggestions(metrics, smells) == [
        "Consider adding more comments to improve code documentation",
        "Some methods are quite long, consider breaking them into smaller functions",
        "Replace magic numbers with named constants",
        "Consider splitting large files into smaller, focused classes",
        "Large number of methods detected, consider applying Single Responsibility Principle",
    ]


def test_analyze_source_combines_metrics_smells_and_suggestions() -> None:
    quality = analyze_source(DEMO, "src/Demo.java")

    assert quality.path == "src/Demo.java"
    assert quality.metrics.method_count == 1
    assert quality.smells == []
    assert quality.suggestions == []
