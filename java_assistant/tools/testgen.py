"""generate_tests tool."""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional, Sequence

from pydantic import Field

from ..analysis.parser import parse_file
from ..config import AssistantConfig
from ..reports.testgen import JUNIT5, render_class_test_report, render_coverage_gap
from ..scanner import EXCLUDED_DIRS, exclusion_set, find_java_files
from .base import NO_JAVA_FILES, Tool, ToolArguments

TestFramework = Literal["junit5", "junit4", "testng"]


class TestGenerationArguments(ToolArguments):
    class_name: Optional[str] = Field(
        default=None,
        alias="className",
        description="Name of the class to generate tests for (optional, if not provided will analyze all classes)",
    )
    test_framework: TestFramework = Field(
        default=JUNIT5,
        alias="testFramework",
        description="Testing framework to use",
    )


def is_test_source(path: Path) -> bool:
    return "/src/test/" in path.as_posix() or path.stem.endswith(("Test", "Tests"))


def candidate_test_paths(source: Path) -> List[Path]:
    """Conventional locations of the test for ``source``, most specific first."""
    test_name = f"{source.stem}Test{source.suffix}"
    posix = source.as_posix()
    candidates: List[Path] = []
    for old, new in (("/src/main/java/", "/src/test/java/"), ("/src/", "/test/")):
        if old in posix:
            candidates.append(Path(posix.replace(old, new, 1)).with_name(test_name))
    candidates.append(source.with_name(test_name))
    return list(dict.fromkeys(candidates))


def find_class_file(files: Sequence[Path], class_name: str) -> Optional[Path]:
    """Prefer a file whose stem is the class name; fall back to a path substring."""
    wanted = class_name.lower()
    for path in files:
        if path.stem.lower() == wanted:
            return path
    for path in files:
        if wanted in str(path).lower():
            return path
    return None


class TestGenerationTool(Tool):
    """Generates test templates and reports classes without a matching test."""

    __test__ = False

    name = "generate_tests"
    description = (
        "Generates unit test templates for Java classes based on existing code "
        "structure and dependencies"
    )
    action = "generating tests"
    arguments_model = TestGenerationArguments

    def run(self, args: TestGenerationArguments, project: Path, config: AssistantConfig) -> str:
        files = find_java_files(project, exclusion_set(EXCLUDED_DIRS, config.exclude_dirs))
        if not files:
            return NO_JAVA_FILES

        if args.class_name:
            target = find_class_file(files, args.class_name)
            if target is None:
                return f'❌ Class "{args.class_name}" not found in the project.'
            return render_class_test_report(parse_file(target), args.test_framework)

        tested: List[str] = []
        untested: List[str] = []
        for path in files:
            if is_test_source(path):
                continue
            record = parse_file(path)
            if any(candidate.exists() for candidate in candidate_test_paths(path)):
                tested.append(record.display_name)
            else:
                untested.append(record.display_name)
        self.logger.debug("%d sources tested, %d without tests", len(tested), len(untested))
        return render_coverage_gap(tested, untested, args.test_framework)
