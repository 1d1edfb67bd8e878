"""Tests for folding source records into the project model."""

from __future__ import annotations

from java_assistant.analysis import aggregate_records, parse_source
from java_assistant.models import TypeKind
from tests._fixtures.project_builder import ProjectBuilder


def test_records_are_grouped_by_package_with_totals() -> None:
    records = [
        parse_source(
            "package com.shop;\npublic class Cart {\n    private int size;\n    public void add() {\n    }\n}\n",
            "Cart.java",
        ),
        parse_source("package com.shop;\npublic interface Priced {\n}\n", "Priced.java"),
        parse_source("package com.shop.model;\npublic enum Currency {\n}\n", "Currency.java"),
    ]

    model = aggregate_records(records)

    assert model.total_files == 3
    assert list(model.packages) == ["com.shop", "com.shop.model"]
    shop = model.packages["com.shop"]
    assert shop.file_count == 2
    assert [record.type_name for record in shop.classes] == ["Cart"]
    assert [record.type_name for record in shop.interfaces] == ["Priced"]
    assert shop.method_count == 1
    assert shop.field_count == 1
    assert model.packages["com.shop.model"].enums[0].type_kind is TypeKind.ENUM
    assert model.total_methods == 1
    assert model.total_fields == 1


def test_package_less_records_only_appear_in_flat_lists() -> None:
    records = [
        parse_source("public class Main {\n    public void run() {\n    }\n}\n", "Main.java"),
        parse_source("package app;\npublic class Tool {\n}\n", "Tool.java"),
    ]

    model = aggregate_records(records)

    assert [record.type_name for record in model.classes] == ["Main", "Tool"]
    assert list(model.packages) == ["app"]
    assert model.total_methods == 0


def test_load_project_excludes_test_directories(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/main/java/com/acme/Account.java": """
                package com.acme;

                public class Account {
                }
            """,
            "src/test/java/com/acme/AccountTest.java": """
                package com.acme;

                public class AccountTest {
                }
            """,
        }
    )

    model = project_builder.load()

    assert model.total_files == 1
    assert [record.type_name for record in model.classes] == ["Account"]
