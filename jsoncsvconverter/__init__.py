"""Flatten nested JSON documents into CSV tables.

The package contains pure functions that:
- parse JSON text (value_model)
- flatten a document into aligned rows (flattener, table)
- read .json files and write .csv files (reader, writer)
"""
from .converter import convert_json_file, convert_json_to_csv
from .errors import (
    ConversionError,
    JSONSyntaxError,
    KeyCollisionError,
    NestingDepthError,
    StructuralError,
)
from .flattener import flatten_json
from .table import FlatTable, build_table, collect_headers, json_to_table, normalize_rows
from .value_model import parse_document

__all__ = [
    "ConversionError",
    "FlatTable",
    "JSONSyntaxError",
    "KeyCollisionError",
    "NestingDepthError",
    "StructuralError",
    "build_table",
    "collect_headers",
    "convert_json_file",
    "convert_json_to_csv",
    "flatten_json",
    "json_to_table",
    "normalize_rows",
    "parse_document",
]
