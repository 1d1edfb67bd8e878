"""Java source discovery for the analysis tools."""

from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, Iterable, Iterator, List

JAVA_SUFFIX = ".java"

EXCLUDED_DIRS = frozenset(
    {
        "target",
        "build",
        "node_modules",
        ".git",
        ".idea",
        "out",
    }
)

# Quality, documentation and structure reports skip test sources as well.
EXCLUDED_DIRS_WITH_TESTS = EXCLUDED_DIRS | {"test"}


def exclusion_set(
    base: AbstractSet[str] = EXCLUDED_DIRS, extra: Iterable[str] = ()
) -> frozenset[str]:
    """Combine a built-in exclusion set with configured directory names."""
    return frozenset(base) | frozenset(name for name in extra if name)


def _iter_java_files(root: Path, excluded: AbstractSet[str]) -> Iterator[Path]:
    # os.walk skips directories it cannot list, which is the behaviour we want.
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name not in excluded]
        current_dir = Path(dirpath)
        for filename in filenames:
            if filename.endswith(JAVA_SUFFIX):
                yield current_dir / filename


def find_java_files(
    root: str | Path, excluded: AbstractSet[str] = EXCLUDED_DIRS
) -> List[Path]:
    """Return absolute paths of every .java file below ``root``.

    Directories named in ``excluded`` are pruned at any depth. Order follows
    the directory listing and is not guaranteed to be sorted.
    """
    root_path = Path(root).expanduser().resolve()
    if not root_path.is_dir():
        return []
    return list(_iter_java_files(root_path, excluded))


__all__ = [
    "EXCLUDED_DIRS",
    "EXCLUDED_DIRS_WITH_TESTS",
    "JAVA_SUFFIX",
    "exclusion_set",
    "find_java_files",
]
