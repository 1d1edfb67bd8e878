"""Dependency extraction from Maven and Gradle build files."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional

from ..models import DependencyDeclaration, DependencyReport

MAVEN_MANIFEST = "pom.xml"
GRADLE_MANIFESTS = ("build.gradle", "build.gradle.kts")

DEFAULT_SCOPE = "compile"
UNSPECIFIED_VERSION = "version not specified"

PROPERTY_REFERENCE = "uses property reference"
DYNAMIC_VERSION = "uses dynamic version"
SNAPSHOT_VERSION = "uses snapshot version"

GRADLE_CONFIGURATIONS = (
    "implementation",
    "api",
    "compileOnly",
    "runtimeOnly",
    "testImplementation",
    "testRuntimeOnly",
    "annotationProcessor",
)

_GRADLE_PATTERNS = {
    name: re.compile(rf"\b{name}\b\s*\(?\s*['\"]([^'\"]+)['\"]")
    for name in GRADLE_CONFIGURATIONS
}
_PROPERTY_PATTERN = re.compile(r"\$\{([^}]+)\}")


def dependency_issues(group: str, version: Optional[str]) -> List[str]:
    """Return the suspicious-version flags raised by ``version``."""
    issues: List[str] = []
    if not version:
        return issues
    if version.startswith("${"):
        issues.append(PROPERTY_REFERENCE)
    if version in {"LATEST", "RELEASE"}:
        issues.append(DYNAMIC_VERSION)
    if group == "org.springframework" and "SNAPSHOT" in version:
        issues.append(SNAPSHOT_VERSION)
    return issues


# Maven


def _detect_xml_namespace(element: ET.Element) -> str | None:
    match = re.match(r"\{(.+)}", element.tag)
    return match.group(1) if match else None


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _resolve_properties(version: str, properties: Dict[str, str]) -> Optional[str]:
    resolved = _PROPERTY_PATTERN.sub(
        lambda match: properties.get(match.group(1), match.group(0)), version
    )
    return resolved if resolved != version else None


def parse_maven_dependencies(content: str) -> List[DependencyDeclaration]:
    """Parse the top-level ``<dependencies>`` block of a POM.

    Raises ``xml.etree.ElementTree.ParseError`` for malformed XML.
    """
    root = ET.fromstring(content)
    namespace = _detect_xml_namespace(root)

    def tag(name: str) -> str:
        return f"{{{namespace}}}{name}" if namespace else name

    properties: Dict[str, str] = {}
    properties_node = root.find(tag("properties"))
    if properties_node is not None:
        for child in properties_node:
            properties[_local_name(child.tag)] = (child.text or "").strip()

    declarations: List[DependencyDeclaration] = []
    dependencies_node = root.find(tag("dependencies"))
    if dependencies_node is None:
        return declarations

    for dep in dependencies_node.findall(tag("dependency")):
        group = (dep.findtext(tag("groupId")) or "").strip()
        artifact = (dep.findtext(tag("artifactId")) or "").strip()
        version = (dep.findtext(tag("version")) or "").strip() or None
        scope = (dep.findtext(tag("scope")) or "").strip() or DEFAULT_SCOPE
        declarations.append(
            DependencyDeclaration(
                scope=scope,
                coordinate=f"{group}:{artifact}",
                version=version,
                resolved_version=_resolve_properties(version, properties) if version else None,
                issues=dependency_issues(group, version),
            )
        )
    return declarations


# Gradle


def parse_gradle_dependencies(content: str) -> List[DependencyDeclaration]:
    """Extract quoted dependency notations, grouped by configuration."""
    found: Dict[str, List[str]] = {name: [] for name in GRADLE_CONFIGURATIONS}
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("//"):
            continue
        for name, pattern in _GRADLE_PATTERNS.items():
            found[name].extend(match.group(1) for match in pattern.finditer(stripped))

    declarations: List[DependencyDeclaration] = []
    for name in GRADLE_CONFIGURATIONS:
        for notation in found[name]:
            parts = notation.split(":")
            group = parts[0]
            version = parts[2] if len(parts) >= 3 and parts[2] else None
            declarations.append(
                DependencyDeclaration(
                    scope=name,
                    coordinate=notation,
                    version=version,
                    issues=dependency_issues(group, version),
                )
            )
    return declarations


def load_dependency_reports(root: Path) -> List[DependencyReport]:
    """Return one report per build file present at the project root."""
    reports: List[DependencyReport] = []

    pom = root / MAVEN_MANIFEST
    if pom.is_file():
        reports.append(
            DependencyReport(
                build_tool="maven",
                manifest=MAVEN_MANIFEST,
                dependencies=parse_maven_dependencies(pom.read_text(encoding="utf-8")),
            )
        )

    for manifest in GRADLE_MANIFESTS:
        gradle_file = root / manifest
        if gradle_file.is_file():
            reports.append(
                DependencyReport(
                    build_tool="gradle",
                    manifest=manifest,
                    dependencies=parse_gradle_dependencies(
                        gradle_file.read_text(encoding="utf-8")
                    ),
                )
            )

    return reports


__all__ = [
    "DEFAULT_SCOPE",
    "DYNAMIC_VERSION",
    "GRADLE_CONFIGURATIONS",
    "PROPERTY_REFERENCE",
    "SNAPSHOT_VERSION",
    "UNSPECIFIED_VERSION",
    "dependency_issues",
    "load_dependency_reports",
    "parse_gradle_dependencies",
    "parse_maven_dependencies",
]
