"""FastAPI application exposing the tools over HTTP."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Body, Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .. import __version__
from ..dispatcher import ToolDispatcher, ToolResult, UnknownToolError


class HealthResponse(BaseModel):
    status: str


class ToolInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


class ToolListResponse(BaseModel):
    tools: List[ToolInfo]


class TextContent(BaseModel):
    type: str = "text"
    text: str


class CallToolResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(default=False, alias="isError")


def _default_dispatcher() -> ToolDispatcher:
    return ToolDispatcher()


def create_app(
    dispatcher_factory: Callable[[], ToolDispatcher] = _default_dispatcher,
) -> FastAPI:
    """Create the FastAPI application exposing tool listing and invocation."""

    app = FastAPI(title="Java Project Assistant", version=__version__)

    async def get_dispatcher() -> ToolDispatcher:
        # Built per request so no analysis state is shared between calls.
        return dispatcher_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/tools", response_model=ToolListResponse)
    async def list_tools(
        dispatcher: ToolDispatcher = Depends(get_dispatcher),
    ) -> ToolListResponse:
        return ToolListResponse(
            tools=[ToolInfo(**descriptor) for descriptor in dispatcher.list_tools()]
        )

    @app.post("/tools/{name}", response_model=CallToolResponse)
    async def call_tool(
        name: str,
        arguments: Optional[Dict[str, Any]] = Body(default=None),
        dispatcher: ToolDispatcher = Depends(get_dispatcher),
    ) -> CallToolResponse:
        def _run() -> ToolResult:
            return dispatcher.call(name, arguments)

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run)
        return CallToolResponse(
            content=[TextContent(text=result.text)], is_error=result.is_error
        )

    @app.exception_handler(UnknownToolError)
    async def unknown_tool_handler(_: Any, exc: UnknownToolError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
