"""Tests for the analyze_project_structure tool."""

from __future__ import annotations

from java_assistant.config import CONFIG_FILENAME
from java_assistant.tools import StructureTool
from tests._fixtures.project_builder import ProjectBuilder


def _layer(name: str) -> str:
    return f"package com.shop.web;\n\npublic class {name} {{\n}}\n"


def test_structure_report_detects_mvc_layers(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/main/java/com/shop/web/OrderController.java": _layer("OrderController"),
            "src/main/java/com/shop/web/OrderService.java": _layer("OrderService"),
            "src/main/java/com/shop/web/OrderRepository.java": _layer("OrderRepository"),
        }
    )

    report = StructureTool().execute({"projectPath": str(project_builder.path())})

    assert report.startswith("## 🏗️ Project Structure Analysis")
    assert "**Total Java Files:** 3" in report
    assert "### 📁 Directory Structure\n└── src\n" in report
    assert "#### com.shop.web" in report
    assert "MVC/Service Layer Pattern" in report
    assert "### 📊 Project Metrics" in report
    assert "### 🎯 Recommendations" in report


def test_structure_sections_can_be_disabled(project_builder: ProjectBuilder) -> None:
    project_builder.write({"App.java": "public class App {\n}\n"})

    report = StructureTool().execute(
        {
            "projectPath": str(project_builder.path()),
            "includeArchitecture": False,
            "includeMetrics": False,
        }
    )

    assert "Architecture Analysis" not in report
    assert "Project Metrics" not in report
    assert "No packages found (all classes in default package)" in report


def test_structure_tree_depth_comes_from_config(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/main/java/App.java": "public class App {\n}\n",
            CONFIG_FILENAME: "structure:\n  tree_depth: 0\n",
        }
    )

    report = StructureTool().execute({"projectPath": str(project_builder.path())})

    assert "└── src\n" in report
    assert "── main" not in report
