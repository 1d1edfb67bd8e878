"""Tool implementations and the fixed tool registry."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Set

from .base import InvalidArgumentsError, Tool, ToolArguments, ToolError
from .dependencies import DependencyTool
from .documentation import DocumentationTool
from .quality import QualityTool
from .structure import StructureTool
from .testgen import TestGenerationTool

_BUILTIN_FACTORIES: Dict[str, Callable[[], Tool]] = {
    DependencyTool.name: DependencyTool,
    TestGenerationTool.name: TestGenerationTool,
    QualityTool.name: QualityTool,
    DocumentationTool.name: DocumentationTool,
    StructureTool.name: StructureTool,
}

TOOL_NAMES = tuple(_BUILTIN_FACTORIES)


def discover_tools(enabled: Sequence[str] | None = None) -> List[Tool]:
    """Return instantiated tools in registry order, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = set(enabled)
        missing = enabled_set.difference(_BUILTIN_FACTORIES)
        if missing:
            raise ValueError(f"Unknown tools requested: {', '.join(sorted(missing))}")

    tools: List[Tool] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        tools.append(factory())
    return tools


__all__ = [
    "DependencyTool",
    "DocumentationTool",
    "InvalidArgumentsError",
    "QualityTool",
    "StructureTool",
    "TOOL_NAMES",
    "TestGenerationTool",
    "Tool",
    "ToolArguments",
    "ToolError",
    "discover_tools",
]
