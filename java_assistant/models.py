"""Core data models shared across java-assistant components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Dict, List, Optional


class TypeKind(str, Enum):
    """Kind of the primary type declared in a source file."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"


@dataclass
class MethodSignature:
    """Single-line method declaration recovered from source text."""

    visibility: str
    return_type: str
    name: str
    javadoc: Optional[str] = None


@dataclass
class FieldSignature:
    """Single-line field declaration recovered from source text."""

    visibility: str
    type: str
    name: str
    javadoc: Optional[str] = None


@dataclass
class SourceRecord:
    """Shallow structural view of one Java file."""

    path: str
    package_name: Optional[str] = None
    type_name: Optional[str] = None
    type_kind: TypeKind = TypeKind.CLASS
    imports: List[str] = field(default_factory=list)
    methods: List[MethodSignature] = field(default_factory=list)
    fields: List[FieldSignature] = field(default_factory=list)
    javadoc: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Declared type name, or the file stem when no declaration matched."""
        return self.type_name or PurePath(self.path).stem


@dataclass
class PackageAggregate:
    """Per-package totals folded from source records."""

    name: str
    records: List[SourceRecord] = field(default_factory=list)
    classes: List[SourceRecord] = field(default_factory=list)
    interfaces: List[SourceRecord] = field(default_factory=list)
    enums: List[SourceRecord] = field(default_factory=list)
    method_count: int = 0
    field_count: int = 0

    @property
    def file_count(self) -> int:
        return len(self.records)


@dataclass
class ProjectModel:
    """Project-wide model built for a single tool invocation."""

    packages: Dict[str, PackageAggregate] = field(default_factory=dict)
    classes: List[SourceRecord] = field(default_factory=list)
    interfaces: List[SourceRecord] = field(default_factory=list)
    enums: List[SourceRecord] = field(default_factory=list)
    total_files: int = 0

    @property
    def total_methods(self) -> int:
        return sum(package.method_count for package in self.packages.values())

    @property
    def total_fields(self) -> int:
        return sum(package.field_count for package in self.packages.values())


@dataclass
class DependencyDeclaration:
    """A dependency entry extracted from a Maven or Gradle build file."""

    scope: str
    coordinate: str
    version: Optional[str] = None
    resolved_version: Optional[str] = None
    issues: List[str] = field(default_factory=list)


@dataclass
class DependencyReport:
    """Dependencies extracted from one build file."""

    build_tool: str
    manifest: str
    dependencies: List[DependencyDeclaration] = field(default_factory=list)


class SmellKind(str, Enum):
    """Heuristic code smell categories."""

    LONG_LINE = "Long Line"
    DEEP_NESTING = "Deep Nesting"
    MAGIC_NUMBER = "Magic Number"
    EMPTY_CATCH_BLOCK = "Empty Catch Block"
    TECHNICAL_DEBT = "Technical Debt"


@dataclass
class CodeSmell:
    """A single smell occurrence; line numbers are 1-based."""

    kind: SmellKind
    line_number: int
    file: str
    description: str


@dataclass
class FileMetrics:
    """Size and documentation metrics for one file."""

    lines_of_code: int = 0
    comment_lines: int = 0
    comment_ratio: float = 0.0
    method_count: int = 0
    class_count: int = 0
    avg_method_length: float = 0.0


@dataclass
class FileQuality:
    """Metrics, smells and suggestions computed for one file."""

    path: str
    metrics: FileMetrics
    smells: List[CodeSmell] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
