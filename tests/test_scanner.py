"""Tests for Java source discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from java_assistant.scanner import (
    EXCLUDED_DIRS,
    EXCLUDED_DIRS_WITH_TESTS,
    exclusion_set,
    find_java_files,
)
from tests._fixtures.project_builder import ProjectBuilder


def _relative(root: Path, files: list[Path]) -> list[str]:
    return sorted(path.relative_to(root).as_posix() for path in files)


def test_find_java_files_prunes_excluded_directories(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/main/java/App.java": "public class App {}\n",
            "src/main/java/notes.txt": "not java\n",
            "target/classes/Generated.java": "class Generated {}\n",
            "module/build/Stale.java": "class Stale {}\n",
            "node_modules/pkg/Script.java": "class Script {}\n",
            "src/test/java/AppTest.java": "class AppTest {}\n",
        }
    )
    root = project_builder.path().resolve()

    files = find_java_files(root)

    assert all(path.is_absolute() for path in files)
    assert _relative(root, files) == ["src/main/java/App.java", "src/test/java/AppTest.java"]
    assert _relative(root, find_java_files(root, EXCLUDED_DIRS_WITH_TESTS)) == [
        "src/main/java/App.java"
    ]


def test_find_java_files_with_only_excluded_directories(project_builder: ProjectBuilder) -> None:
    project_builder.write({"build/Out.java": "class Out {}\n", ".git/Hook.java": "class Hook {}\n"})

    assert find_java_files(project_builder.path()) == []


def test_find_java_files_for_missing_root(tmp_path: Path) -> None:
    assert find_java_files(tmp_path / "missing") == []


def test_exclusion_set_adds_configured_names() -> None:
    combined = exclusion_set(EXCLUDED_DIRS, ["generated", ""])

    assert "generated" in combined
    assert "" not in combined
    assert EXCLUDED_DIRS <= combined


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_unreadable_directory_is_skipped(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "locked/Hidden.java": "class Hidden {}\n",
            "open/Visible.java": "class Visible {}\n",
        }
    )
    root = project_builder.path().resolve()
    locked = root / "locked"
    locked.chmod(0)
    try:
        files = find_java_files(root)
    finally:
        locked.chmod(0o755)

    assert _relative(root, files) == ["open/Visible.java"]
