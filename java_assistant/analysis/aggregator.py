"""Fold per-file source records into the project-wide model."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from ..models import PackageAggregate, ProjectModel, SourceRecord, TypeKind
from .parser import parse_file


def _kind_list(container: PackageAggregate | ProjectModel, kind: TypeKind) -> List[SourceRecord]:
    if kind is TypeKind.INTERFACE:
        return container.interfaces
    if kind is TypeKind.ENUM:
        return container.enums
    return container.classes


def aggregate_records(records: Sequence[SourceRecord]) -> ProjectModel:
    """Return a ProjectModel built from ``records``.

    Records without a package appear in the flat kind lists but in no
    package aggregate.
    """
    model = ProjectModel(total_files=len(records))

    for record in records:
        _kind_list(model, record.type_kind).append(record)

        if not record.package_name:
            continue

        package = model.packages.get(record.package_name)
        if package is None:
            package = PackageAggregate(name=record.package_name)
            model.packages[record.package_name] = package

        package.records.append(record)
        _kind_list(package, record.type_kind).append(record)
        package.method_count += len(record.methods)
        package.field_count += len(record.fields)

    return model


def load_project(paths: Iterable[Path]) -> ProjectModel:
    """Parse every file in ``paths`` and aggregate the results."""
    return aggregate_records([parse_file(path) for path in paths])


__all__ = ["aggregate_records", "load_project"]
