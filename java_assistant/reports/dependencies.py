"""Dependency analysis report rendering."""

from __future__ import annotations

from typing import Dict, List

from ..analysis.dependencies import UNSPECIFIED_VERSION
from ..models import DependencyDeclaration, DependencyReport

_MAVEN_RECOMMENDATIONS = (
    "- Consider using `mvn dependency:check` to scan for known vulnerabilities",
    "- Update dependencies to latest stable versions",
    "- Use `mvn versions:display-dependency-updates` to check for updates",
)

_GRADLE_RECOMMENDATIONS = (
    "- Run `./gradlew dependencyCheckAnalyze` if using OWASP dependency check plugin",
    "- Use `./gradlew dependencies` to see full dependency tree",
    "- Consider using Gradle dependency verification",
)


def _issue_suffix(dependency: DependencyDeclaration) -> str:
    return f" ⚠️ {', '.join(dependency.issues)}" if dependency.issues else ""


def _version_label(dependency: DependencyDeclaration) -> str:
    version = dependency.version or UNSPECIFIED_VERSION
    if dependency.resolved_version:
        return f"{version} → {dependency.resolved_version}"
    return version


def render_maven_report(report: DependencyReport) -> str:
    lines = ["## 📦 Maven Dependencies Analysis", ""]
    if not report.dependencies:
        lines.append(f"✅ No dependencies found in {report.manifest}")
        return "\n".join(lines) + "\n"

    lines.extend([f"**Total Dependencies:** {len(report.dependencies)}", ""])

    by_scope: Dict[str, List[DependencyDeclaration]] = {}
    for dependency in report.dependencies:
        by_scope.setdefault(dependency.scope, []).append(dependency)

    for scope, dependencies in by_scope.items():
        lines.append(f"### {scope.upper()} Scope ({len(dependencies)} dependencies)")
        for dependency in dependencies:
            lines.append(
                f"- **{dependency.coordinate}** ({_version_label(dependency)})"
                f"{_issue_suffix(dependency)}"
            )
        lines.append("")

    lines.append("### 🔒 Security Recommendations")
    lines.extend(_MAVEN_RECOMMENDATIONS)
    return "\n".join(lines) + "\n"


def render_gradle_report(report: DependencyReport) -> str:
    lines = ["## 📦 Gradle Dependencies Analysis", ""]
    if not report.dependencies:
        lines.append(f"✅ No dependencies found in {report.manifest}")
        return "\n".join(lines) + "\n"

    lines.extend([f"**Total Dependencies:** {len(report.dependencies)}", ""])
    for dependency in report.dependencies:
        lines.append(f"- {dependency.scope}: {dependency.coordinate}{_issue_suffix(dependency)}")

    lines.extend(["", "### 🔒 Security Recommendations"])
    lines.extend(_GRADLE_RECOMMENDATIONS)
    return "\n".join(lines) + "\n"


def render_dependency_reports(reports: List[DependencyReport]) -> str:
    sections = [
        render_maven_report(report) if report.build_tool == "maven" else render_gradle_report(report)
        for report in reports
    ]
    return "\n".join(sections)


__all__ = ["render_dependency_reports", "render_gradle_report", "render_maven_report"]
