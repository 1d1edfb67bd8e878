"""Routes named tool calls to tool implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .logging import get_logger
from .tools import Tool, ToolError, discover_tools


class UnknownToolError(ToolError):
    """Raised when a call names a tool that is not registered."""


@dataclass
class ToolResult:
    """Text payload returned to the transport."""

    text: str
    is_error: bool = False


class ToolDispatcher:
    """Lists the registered tools and executes them by name."""

    def __init__(self, tools: Optional[Iterable[Tool]] = None) -> None:
        registered = list(tools) if tools is not None else discover_tools()
        self._tools: Dict[str, Tool] = {tool.name: tool for tool in registered}
        self.logger = get_logger("dispatcher")

    def list_tools(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema(),
            }
            for tool in self._tools.values()
        ]

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(f"Unknown tool: {name}") from None

    def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Run tool ``name``.

        Unknown names raise ``UnknownToolError``; any other failure becomes an
        error result.
        """
        tool = self.get(name)
        try:
            text = tool.execute(arguments)
        except Exception as exc:
            self.logger.warning("Tool %s rejected call: %s", name, exc)
            return ToolResult(text=f"Error executing tool {name}: {exc}", is_error=True)
        return ToolResult(text=text)


__all__ = ["ToolDispatcher", "ToolResult", "UnknownToolError"]
