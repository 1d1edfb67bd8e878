"""Helper utilities for constructing temporary Java projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from java_assistant.analysis import load_project
from java_assistant.models import ProjectModel
from java_assistant.scanner import EXCLUDED_DIRS_WITH_TESTS, find_java_files


class ProjectBuilder:
    """Utility for writing files into a throwaway Java project and loading it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def load(self) -> ProjectModel:
        """Parse every non-test Java file into a fresh project model."""
        return load_project(find_java_files(self.root, EXCLUDED_DIRS_WITH_TESTS))

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["ProjectBuilder"]
