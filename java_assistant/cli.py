"""CLI entrypoints for the Java project assistant."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .dispatcher import ToolDispatcher, UnknownToolError
from .logging import configure_logging

_TOOL_COMMANDS = {
    "deps": "analyze_dependencies",
    "tests": "generate_tests",
    "quality": "check_code_quality",
    "docs": "generate_documentation",
    "structure": "analyze_project_structure",
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument("-v", "--verbose", **kwargs)


def _add_project_argument(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the Java project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="java-assistant",
        description="Static analysis and report generation for Java projects.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        help="Also append log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    deps_parser = subparsers.add_parser("deps", help="Analyze Maven or Gradle dependencies.")
    _add_project_argument(deps_parser)

    tests_parser = subparsers.add_parser(
        "tests", help="Generate a test template or list classes without tests."
    )
    _add_project_argument(tests_parser)
    tests_parser.add_argument("--class-name", help="Class to generate a test template for.")
    tests_parser.add_argument(
        "--test-framework",
        choices=("junit5", "junit4", "testng"),
        default="junit5",
        help="Testing framework for generated templates.",
    )

    quality_parser = subparsers.add_parser("quality", help="Check code quality and smells.")
    _add_project_argument(quality_parser)
    quality_parser.add_argument("--file-path", help="Analyze a single file instead of the project.")
    quality_parser.add_argument(
        "--no-metrics",
        action="store_true",
        help="Omit the metrics section from the report.",
    )

    docs_parser = subparsers.add_parser("docs", help="Write Markdown documentation files.")
    _add_project_argument(docs_parser)
    docs_parser.add_argument("--output-path", help="Directory for generated documents.")
    docs_parser.add_argument(
        "--documentation-type",
        choices=("javadoc", "api", "overview", "all"),
        default="all",
        help="Which documents to generate.",
    )
    docs_parser.add_argument(
        "--include-private",
        action="store_true",
        help="Include private members in API documentation.",
    )

    structure_parser = subparsers.add_parser(
        "structure", help="Analyze packages, architecture and metrics."
    )
    _add_project_argument(structure_parser)
    structure_parser.add_argument(
        "--no-architecture",
        action="store_true",
        help="Skip the architecture analysis section.",
    )
    structure_parser.add_argument(
        "--no-metrics",
        action="store_true",
        help="Skip the project metrics section.",
    )

    tools_parser = subparsers.add_parser("tools", help="List the available tools.")
    _add_verbose_option(tools_parser, suppress_default=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    mcp_parser = subparsers.add_parser("mcp", help="Run the MCP server over stdio.")
    _add_verbose_option(mcp_parser, suppress_default=True)

    return parser


def _tool_arguments(args: argparse.Namespace) -> Dict[str, Any]:
    arguments: Dict[str, Any] = {"projectPath": args.path}
    if args.command == "tests":
        if args.class_name:
            arguments["className"] = args.class_name
        arguments["testFramework"] = args.test_framework
    elif args.command == "quality":
        if args.file_path:
            arguments["filePath"] = args.file_path
        arguments["includeMetrics"] = not args.no_metrics
    elif args.command == "docs":
        if args.output_path:
            arguments["outputPath"] = args.output_path
        arguments["documentationType"] = args.documentation_type
        arguments["includePrivate"] = bool(args.include_private)
    elif args.command == "structure":
        arguments["includeArchitecture"] = not args.no_architecture
        arguments["includeMetrics"] = not args.no_metrics
    return arguments


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for java-assistant commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return
    if args.command == "mcp":
        from .mcp_server import run_stdio

        run_stdio()
        return

    dispatcher = ToolDispatcher()
    if args.command == "tools":
        for descriptor in dispatcher.list_tools():
            print(f"{descriptor['name']}: {descriptor['description']}")
        return

    tool_name = _TOOL_COMMANDS[args.command]
    try:
        result = dispatcher.call(tool_name, _tool_arguments(args))
    except UnknownToolError as exc:  # pragma: no cover - commands map to registered tools
        parser.exit(1, f"{exc}\n")
    print(result.text)
    if result.is_error:
        parser.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
