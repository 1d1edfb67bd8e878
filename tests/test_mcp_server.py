"""Tests for the MCP server adapter."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from java_assistant.dispatcher import ToolDispatcher, UnknownToolError
from java_assistant.mcp_server import SERVER_NAME, create_server, describe_tools, handle_call
from java_assistant.tools import ToolError


def test_describe_tools_uses_dispatcher_schemas() -> None:
    tools = describe_tools(ToolDispatcher())

    assert [tool.name for tool in tools][0] == "analyze_dependencies"
    assert "projectPath" in tools[0].inputSchema["properties"]


def test_handle_call_returns_text_content(tmp_path: Path) -> None:
    (tmp_path / "pom.xml").write_text("<project></project>", encoding="utf-8")

    content = asyncio.run(
        handle_call(ToolDispatcher(), "analyze_dependencies", {"projectPath": str(tmp_path)})
    )

    assert len(content) == 1
    assert content[0].type == "text"
    assert "No dependencies found in pom.xml" in content[0].text


def test_handle_call_raises_for_error_results() -> None:
    with pytest.raises(ToolError, match="Error executing tool check_code_quality"):
        asyncio.run(handle_call(ToolDispatcher(), "check_code_quality", None))


def test_handle_call_raises_for_unknown_tool() -> None:
    with pytest.raises(UnknownToolError):
        asyncio.run(handle_call(ToolDispatcher(), "refactor", {}))


def test_create_server_uses_project_name() -> None:
    assert create_server().name == SERVER_NAME
