"""Base classes for the tools exposed to external agents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar, Dict, Mapping, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import AssistantConfig, load_config
from ..logging import get_logger

NO_JAVA_FILES = "❌ No Java files found in the project."


class ToolError(RuntimeError):
    """Base error for tool dispatch failures."""


class InvalidArgumentsError(ToolError):
    """Raised when tool arguments fail validation."""


class ToolArguments(BaseModel):
    """Arguments shared by every tool."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    project_path: str = Field(
        alias="projectPath",
        description="Path to the Java project root directory",
    )


class Tool(ABC):
    """Contract for a named tool that renders a text report for a project."""

    name: ClassVar[str]
    description: ClassVar[str]
    action: ClassVar[str]
    arguments_model: ClassVar[Type[ToolArguments]] = ToolArguments

    def __init__(self) -> None:
        self.logger = get_logger(f"tools.{self.name}")

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema advertised to clients, using camelCase argument names."""
        return self.arguments_model.model_json_schema(by_alias=True)

    def parse_arguments(self, arguments: Mapping[str, Any] | None) -> ToolArguments:
        try:
            return self.arguments_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            raise InvalidArgumentsError(str(exc)) from exc

    def execute(self, arguments: Mapping[str, Any] | None) -> str:
        """Validate arguments and run the tool, returning report or error text.

        Only argument validation raises; every failure while producing the
        report is converted into an ``Error ...`` message.
        """
        args = self.parse_arguments(arguments)
        self.logger.info("Running %s for %s", self.name, args.project_path)
        try:
            project = Path(args.project_path).expanduser()
            if not project.exists():
                return f"❌ Project path does not exist: {args.project_path}"
            project = project.resolve()
            return self.run(args, project, load_config(project))
        except Exception as exc:
            self.logger.exception("%s failed for %s", self.name, args.project_path)
            return f"Error {self.action}: {exc}"

    @abstractmethod
    def run(self, args: Any, project: Path, config: AssistantConfig) -> str:
        """Produce the report text for an existing project directory."""


__all__ = [
    "InvalidArgumentsError",
    "NO_JAVA_FILES",
    "Tool",
    "ToolArguments",
    "ToolError",
]
