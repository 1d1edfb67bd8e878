"""Configuration loading for java-assistant (.java-assistant.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".java-assistant.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class QualityConfig:
    """Thresholds used by the code smell detector."""

    max_line_length: int = 120
    max_indent: int = 24


@dataclass
class StructureConfig:
    """Settings for the project structure report."""

    complexity_threshold: int = 20
    tree_depth: int = 3


@dataclass
class DocsConfig:
    """Settings for documentation generation."""

    output_dir: Optional[str] = None


@dataclass
class AssistantConfig:
    """Represents the settings defined in .java-assistant.yml."""

    root: Path
    exclude_dirs: List[str] = field(default_factory=list)
    quality: QualityConfig = field(default_factory=QualityConfig)
    structure: StructureConfig = field(default_factory=StructureConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)

    def resolve_output_dir(self, output_path: str | None = None) -> Path:
        """Return the documentation directory, preferring an explicit path."""
        if output_path:
            return Path(output_path).expanduser()
        if self.docs.output_dir:
            candidate = Path(self.docs.output_dir).expanduser()
            return candidate if candidate.is_absolute() else self.root / candidate
        return self.root / "docs"


def load_config(config_path: Path) -> AssistantConfig:
    """Load configuration for a project directory (or an explicit config file)."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return AssistantConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    quality = QualityConfig()
    quality_data = _as_dict(data.get("quality"))
    if quality_data:
        quality.max_line_length = _as_int(
            quality_data.get("max_line_length"), quality.max_line_length
        )
        quality.max_indent = _as_int(quality_data.get("max_indent"), quality.max_indent)

    structure = StructureConfig()
    structure_data = _as_dict(data.get("structure"))
    if structure_data:
        structure.complexity_threshold = _as_int(
            structure_data.get("complexity_threshold"), structure.complexity_threshold
        )
        structure.tree_depth = _as_int(structure_data.get("tree_depth"), structure.tree_depth)

    docs_data = _as_dict(data.get("docs"))
    docs = DocsConfig(output_dir=_as_str(docs_data.get("output_dir")) if docs_data else None)

    return AssistantConfig(
        root=root,
        exclude_dirs=_as_str_list(data.get("exclude_dirs")),
        quality=quality,
        structure=structure,
        docs=docs,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    if config_path.name != CONFIG_FILENAME:
        return config_path.parent / CONFIG_FILENAME
    return config_path


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return default
    return default


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AssistantConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "DocsConfig",
    "QualityConfig",
    "StructureConfig",
    "load_config",
]
