"""MCP stdio server exposing the tools to IDE and LLM clients."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .dispatcher import ToolDispatcher
from .logging import get_logger
from .tools import ToolError

SERVER_NAME = "java-project-assistant"

logger = get_logger("mcp")


def describe_tools(dispatcher: ToolDispatcher) -> List[types.Tool]:
    return [
        types.Tool(
            name=descriptor["name"],
            description=descriptor["description"],
            inputSchema=descriptor["inputSchema"],
        )
        for descriptor in dispatcher.list_tools()
    ]


async def handle_call(
    dispatcher: ToolDispatcher, name: str, arguments: Optional[Dict[str, Any]]
) -> List[types.TextContent]:
    """Run a tool off the event loop; error results are raised so MCP flags them."""
    result = await asyncio.to_thread(dispatcher.call, name, arguments or {})
    if result.is_error:
        raise ToolError(result.text)
    return [types.TextContent(type="text", text=result.text)]


def create_server(
    dispatcher_factory: Callable[[], ToolDispatcher] = ToolDispatcher,
) -> Server:
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return describe_tools(dispatcher_factory())

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        return await handle_call(dispatcher_factory(), name, arguments)

    return server


async def serve_stdio() -> None:  # pragma: no cover - integration path
    server = create_server()
    logger.info("Java Project Assistant MCP server running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run_stdio() -> None:  # pragma: no cover - integration path
    asyncio.run(serve_stdio())


__all__ = ["create_server", "describe_tools", "handle_call", "run_stdio"]
