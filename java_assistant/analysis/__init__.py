"""Line-oriented Java source analysis.

The parser here is a heuristic, not a Java grammar: declarations must fit on a
single line, nested and secondary top-level types are not modelled, and
generic types with nested angle brackets or commas may not match.
"""

from .aggregator import aggregate_records, load_project
from .parser import parse_file, parse_source

__all__ = ["aggregate_records", "load_project", "parse_file", "parse_source"]
