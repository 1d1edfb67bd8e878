"""Heuristic single-pass parser producing a SourceRecord per Java file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from ..models import FieldSignature, MethodSignature, SourceRecord, TypeKind

_MODIFIERS = r"(?:(?:static|final|abstract|synchronized|native|default|strictfp|transient|volatile)\s+)*"
_TYPE = r"([\w<>\[\]]+)"

_METHOD_PATTERN = re.compile(
    rf"(public|private|protected)\s+{_MODIFIERS}{_TYPE}\s+(\w+)\s*\("
)
_FIELD_PATTERN = re.compile(
    rf"(public|private|protected)\s+{_MODIFIERS}{_TYPE}\s+(\w+)\s*[=;]"
)
_VISIBILITY = re.compile(r"\b(?:public|private|protected)\s")

# Checked in order: a line naming several keywords resolves to the first hit.
_TYPE_PATTERNS = (
    (TypeKind.INTERFACE, re.compile(r"\binterface\s+(\w+)")),
    (TypeKind.ENUM, re.compile(r"\benum\s+(\w+)")),
    (TypeKind.CLASS, re.compile(r"\bclass\s+(\w+)")),
)


def _strip_statement(line: str, keyword: str) -> str:
    body = line[len(keyword):]
    return body.split(";", 1)[0].strip()


def _is_javadoc_line(line: str) -> bool:
    return line.startswith("/**") or line.startswith("*") or "*/" in line


def _match_type(line: str) -> tuple[TypeKind, str] | None:
    for kind, pattern in _TYPE_PATTERNS:
        match = pattern.search(line)
        if match:
            return kind, match.group(1)
    return None


def _match_method(line: str, javadoc: Optional[str]) -> MethodSignature | None:
    match = _METHOD_PATTERN.search(line)
    if not match:
        return None
    visibility, return_type, name = match.groups()
    return MethodSignature(
        visibility=visibility, return_type=return_type, name=name, javadoc=javadoc
    )


def _match_field(line: str, javadoc: Optional[str]) -> FieldSignature | None:
    match = _FIELD_PATTERN.search(line)
    if not match:
        return None
    visibility, field_type, name = match.groups()
    return FieldSignature(visibility=visibility, type=field_type, name=name, javadoc=javadoc)


def _pending_javadoc(buffer: List[str]) -> Optional[str]:
    return "".join(buffer).strip() or None


def parse_source(text: str, path: str = "") -> SourceRecord:
    """Parse Java source text into a shallow SourceRecord.

    Only the first type declaration in the file is recorded. A Javadoc block
    is attached to a declaration only when nothing but blank lines or line
    comments separate them.
    """
    record = SourceRecord(path=path)
    javadoc_buffer: List[str] = []

    for raw_line in text.splitlines():
        line = raw_line.strip()
        is_javadoc = _is_javadoc_line(line)
        is_comment = is_javadoc or line.startswith("//") or line.startswith("/*")

        if not is_comment:
            if line.startswith("package "):
                record.package_name = _strip_statement(line, "package ") or None
            elif line.startswith("import "):
                record.imports.append(_strip_statement(line, "import "))

            declared = _match_type(line)
            if declared is not None:
                if record.type_name is None:
                    record.type_kind, record.type_name = declared
                    record.javadoc = _pending_javadoc(javadoc_buffer)
                javadoc_buffer.clear()

        # Members are matched on comment lines too; commented-out code still counts.
        if _VISIBILITY.search(line):
            if "(" in line and ")" in line:
                method = _match_method(line, _pending_javadoc(javadoc_buffer))
                if method is not None:
                    record.methods.append(method)
                    javadoc_buffer.clear()
            elif ";" in line and "(" not in line:
                field = _match_field(line, _pending_javadoc(javadoc_buffer))
                if field is not None:
                    record.fields.append(field)
                    javadoc_buffer.clear()

        if is_javadoc:
            javadoc_buffer.append(line + "\n")
        elif line and not line.startswith("//"):
            javadoc_buffer.clear()

    return record


def parse_file(path: str | Path) -> SourceRecord:
    """Read and parse a Java file; undecodable bytes are replaced, never raised."""
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return parse_source(text, str(file_path))


__all__ = ["parse_file", "parse_source"]
