"""Per-file metrics, code smell detection and improvement suggestions."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Sequence

from ..config import QualityConfig
from ..models import CodeSmell, FileMetrics, FileQuality, SmellKind

_MAGIC_NUMBER = re.compile(r"\b\d{3,}\b")
_VISIBILITY_TOKENS = ("public ", "private ", "protected ")

_SUGGESTIONS_BY_SMELL = {
    SmellKind.LONG_LINE: "Break long lines to improve readability",
    SmellKind.DEEP_NESTING: "Reduce nesting levels using early returns or guard clauses",
    SmellKind.MAGIC_NUMBER: "Replace magic numbers with named constants",
    SmellKind.EMPTY_CATCH_BLOCK: "Add proper error handling in catch blocks",
    SmellKind.TECHNICAL_DEBT: "Address TODO/FIXME comments to reduce technical debt",
}


def _is_comment(stripped: str) -> bool:
    return stripped.startswith(("//", "/*", "*"))


def calculate_metrics(lines: Sequence[str]) -> FileMetrics:
    """Count code and comment lines, classes, methods and method lengths.

    A method starts at a line with a visibility keyword and parentheses and
    ends when its braces balance again, counting the braces on its opening
    line.
    """
    lines_of_code = 0
    comment_lines = 0
    method_count = 0
    class_count = 0
    total_method_length = 0
    current_method_lines = 0
    in_method = False
    brace_count = 0

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        if _is_comment(line):
            comment_lines += 1
            continue

        lines_of_code += 1

        if "class " in line and "interface" not in line:
            class_count += 1

        if "(" in line and ")" in line and any(token in line for token in _VISIBILITY_TOKENS):
            if in_method and current_method_lines > 0:
                total_method_length += current_method_lines
            method_count += 1
            brace_count = line.count("{") - line.count("}")
            if ("{" in line and brace_count <= 0) or (";" in line and "{" not in line):
                # One-line body or abstract declaration.
                total_method_length += 1
                current_method_lines = 0
                in_method = False
            else:
                current_method_lines = 1
                in_method = True
        elif in_method:
            current_method_lines += 1
            brace_count += line.count("{") - line.count("}")
            if brace_count <= 0 and "}" in line:
                total_method_length += current_method_lines
                current_method_lines = 0
                in_method = False

    if in_method and current_method_lines > 0:
        total_method_length += current_method_lines

    total_lines = lines_of_code + comment_lines
    comment_ratio = (comment_lines / total_lines) * 100 if lines_of_code > 0 else 0.0
    avg_method_length = total_method_length / method_count if method_count > 0 else 0.0

    return FileMetrics(
        lines_of_code=lines_of_code,
        comment_lines=comment_lines,
        comment_ratio=comment_ratio,
        method_count=method_count,
        class_count=class_count,
        avg_method_length=avg_method_length,
    )


def _is_empty_catch(lines: Sequence[str], index: int) -> bool:
    following = lines[index + 1 : index + 3]
    if not following:
        return False
    return all(line.strip() in {"", "}"} for line in following)


def detect_code_smells(
    lines: Sequence[str], file: str, config: QualityConfig | None = None
) -> List[CodeSmell]:
    """Scan ``lines`` and return smells in line order.

    Within one line the order is long line, deep nesting, magic number,
    empty catch block, technical debt.
    """
    config = config or QualityConfig()
    smells: List[CodeSmell] = []

    for index, raw_line in enumerate(lines):
        line_number = index + 1
        content = raw_line.rstrip()
        stripped = content.strip()
        if not stripped:
            continue

        if len(stripped) > config.max_line_length:
            smells.append(
                CodeSmell(
                    kind=SmellKind.LONG_LINE,
                    line_number=line_number,
                    file=file,
                    description=f"Line too long ({len(stripped)} characters)",
                )
            )

        indent = len(content) - len(content.lstrip())
        if indent > config.max_indent:
            smells.append(
                CodeSmell(
                    kind=SmellKind.DEEP_NESTING,
                    line_number=line_number,
                    file=file,
                    description="Too many levels of nesting",
                )
            )

        if (
            _MAGIC_NUMBER.search(stripped)
            and not _is_comment(stripped)
            and "//" not in stripped
            and not stripped.startswith("import ")
        ):
            smells.append(
                CodeSmell(
                    kind=SmellKind.MAGIC_NUMBER,
                    line_number=line_number,
                    file=file,
                    description="Magic number detected, consider using constants",
                )
            )

        if "catch" in stripped and _is_empty_catch(lines, index):
            smells.append(
                CodeSmell(
                    kind=SmellKind.EMPTY_CATCH_BLOCK,
                    line_number=line_number,
                    file=file,
                    description="Empty catch block detected",
                )
            )

        if "TODO" in stripped or "FIXME" in stripped:
            smells.append(
                CodeSmell(
                    kind=SmellKind.TECHNICAL_DEBT,
                    line_number=line_number,
                    file=file,
                    description="TODO/FIXME comment found",
                )
            )

    return smells


def generate_suggestions(metrics: FileMetrics, smells: Sequence[CodeSmell]) -> List[str]:
    """Return improvement suggestions for one file's metrics and smells."""
    suggestions: List[str] = []

    if metrics.comment_ratio < 10:
        suggestions.append("Consider adding more comments to improve code documentation")
    if metrics.avg_method_length > 20:
        suggestions.append(
            "Some methods are quite long, consider breaking them into smaller functions"
        )

    present = {smell.kind for smell in smells}
    for kind, suggestion in _SUGGESTIONS_BY_SMELL.items():
        if kind in present:
            suggestions.append(suggestion)

    if metrics.lines_of_code > 500:
        suggestions.append("Consider splitting large files into smaller, focused classes")
    if metrics.method_count > 20:
        suggestions.append(
            "Large number of methods detected, consider applying Single Responsibility Principle"
        )

    return suggestions


def analyze_source(text: str, file: str, config: QualityConfig | None = None) -> FileQuality:
    lines = text.splitlines()
    metrics = calculate_metrics(lines)
    smells = detect_code_smells(lines, file, config)
    return FileQuality(
        path=file,
        metrics=metrics,
        smells=smells,
        suggestions=generate_suggestions(metrics, smells),
    )


def analyze_file(path: Path, config: QualityConfig | None = None) -> FileQuality:
    text = path.read_text(encoding="utf-8", errors="replace")
    return analyze_source(text, str(path), config)


__all__ = [
    "analyze_file",
    "analyze_source",
    "calculate_metrics",
    "detect_code_smells",
    "generate_suggestions",
]
