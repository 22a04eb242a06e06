from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

import pandas as pd

from .constants import NESTED_FIELD_DELIMITER, MISSING_VALUE, MAX_NESTING_DEPTH
from .flattener import PartialRow, flatten_json
from .validation import validate_document
from .value_model import parse_document


@dataclass
class FlatTable:
    """
    A flattened document: ordered column names plus rows aligned to them.
    """
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def as_records(self) -> List[Dict[str, str]]:
        return [dict(zip(self.headers, row)) for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=self.headers, dtype=str)


def collect_headers(partial_rows: List[PartialRow]) -> List[str]:
    """
    Collect every column key across all partial rows, in first-seen order.

    Rows are scanned in emission order and keys in the order they were inserted
    into each row, so the result depends only on the document.
    """
    seen: Dict[str, None] = {}
    for row in partial_rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def normalize_rows(headers: List[str], partial_rows: List[PartialRow]) -> List[List[str]]:
    """
    Expand each partial row into a fixed-width row aligned to ``headers``.

    Columns a row does not carry are filled with the empty string.
    """
    return [[row.get(header, MISSING_VALUE) for header in headers] for row in partial_rows]


def build_table(
    document: Any,
    sep: str = NESTED_FIELD_DELIMITER,
    max_depth: int = MAX_NESTING_DEPTH,
) -> FlatTable:
    """
    Flatten a parsed JSON document into a table.

    Args:
        document: The parsed JSON document; its root must be an object
        sep: The delimiter used to join nested keys
        max_depth: Deepest nesting level accepted

    Returns:
        A FlatTable whose rows all have ``len(headers)`` values

    Raises:
        StructuralError: If the document cannot be flattened (non-object root,
            excessive nesting, colliding column names)

    Examples:
        >>> build_table({'id': 1, 'name': 'John'})
        FlatTable(headers=['id', 'name'], rows=[['1', 'John']])

        >>> build_table({})
        FlatTable(headers=[], rows=[[]])
    """
    validate_document(document, sep=sep, max_depth=max_depth)

    partial_rows = flatten_json(document, sep=sep, max_depth=max_depth)
    headers = collect_headers(partial_rows)
    return FlatTable(headers=headers, rows=normalize_rows(headers, partial_rows))


def json_to_table(content: Union[str, bytes], sep: str = NESTED_FIELD_DELIMITER) -> FlatTable:
    """Parse JSON text and flatten it; see ``parse_document`` and ``build_table``."""
    return build_table(parse_document(content), sep=sep)
