"""Box-drawing directory tree for structure reports."""

from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, List

TOP_LEVEL_LIMIT = 20
NESTED_LIMIT = 10


def _list_entries(path: Path, excluded: AbstractSet[str]) -> List[os.DirEntry[str]]:
    with os.scandir(path) as iterator:
        entries = [entry for entry in iterator if entry.name not in excluded]
    return sorted(entries, key=lambda entry: entry.name)


def _render_entry(
    entry: os.DirEntry[str],
    prefix: str,
    is_last: bool,
    depth: int,
    max_depth: int,
    excluded: AbstractSet[str],
) -> List[str]:
    connector = "└── " if is_last else "├── "
    size = ""
    if entry.is_file():
        size = f" ({entry.stat().st_size / 1024:.1f}KB)"
    lines = [f"{prefix}{connector}{entry.name}{size}"]

    if entry.is_dir() and depth < max_depth:
        try:
            children = _list_entries(Path(entry.path), excluded)
        except OSError:
            return lines
        child_prefix = prefix + ("    " if is_last else "│   ")
        shown = children[:NESTED_LIMIT]
        for index, child in enumerate(shown):
            lines.extend(
                _render_entry(
                    child,
                    child_prefix,
                    index == len(shown) - 1,
                    depth + 1,
                    max_depth,
                    excluded,
                )
            )
        if len(children) > NESTED_LIMIT:
            lines.append(f"{child_prefix}... ({len(children) - NESTED_LIMIT} more entries)")

    return lines


def render_directory_tree(
    root: Path, excluded: AbstractSet[str] = frozenset(), max_depth: int = 3
) -> str:
    """Render up to ``max_depth`` nested levels below ``root``.

    At most 20 top-level and 10 nested entries per directory are shown; files
    are annotated with their size in KiB.
    """
    try:
        entries = _list_entries(root, excluded)
    except OSError:
        return "Unable to read directory structure\n"

    lines: List[str] = []
    shown = entries[:TOP_LEVEL_LIMIT]
    for index, entry in enumerate(shown):
        lines.extend(
            _render_entry(entry, "", index == len(shown) - 1, 0, max_depth, excluded)
        )
    if len(entries) > TOP_LEVEL_LIMIT:
        lines.append(f"... (showing first {TOP_LEVEL_LIMIT} entries)")

    return "\n".join(lines) + "\n" if lines else ""


__all__ = ["NESTED_LIMIT", "TOP_LEVEL_LIMIT", "render_directory_tree"]
