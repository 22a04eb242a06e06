from typing import Any, Dict, List

from .constants import NESTED_FIELD_DELIMITER, MAX_NESTING_DEPTH
from .errors import NestingDepthError
from .value_model import ValueKind, is_scalar, kind_of, to_text

PartialRow = Dict[str, str]


def join_key(prefix: str, key: str, sep: str = NESTED_FIELD_DELIMITER) -> str:
    return f"{prefix}{sep}{key}" if prefix else key


def is_primitive_array(items: List[Any]) -> bool:
    """An array counts as primitive when it is non-empty and its first element is a scalar."""
    return bool(items) and is_scalar(items[0])


def flatten_json(
    data: Any,
    prefix: str = '',
    sep: str = NESTED_FIELD_DELIMITER,
    depth: int = 0,
    max_depth: int = MAX_NESTING_DEPTH,
) -> List[PartialRow]:
    """
    Recursively flatten a parsed JSON value into a list of partial rows.

    Each partial row maps fully-qualified column keys to cell text. Nested object
    keys are joined with ``sep``; array elements do not get an index suffix, their
    position is carried by the row they land on instead.

    Args:
        data: The parsed JSON value to flatten
        prefix: The column key of ``data`` (empty for the document root)
        sep: The delimiter used to join nested keys
        depth: Current nesting level (used in recursion)
        max_depth: Deepest nesting level accepted

    Returns:
        The partial rows for ``data``, in emission order

    Raises:
        NestingDepthError: If the value nests deeper than ``max_depth``

    Examples:
        >>> flatten_json({'id': 1, 'contact': {'email': 'j@e.com'}})
        [{'id': '1', 'contact__email': 'j@e.com'}]

        >>> flatten_json({'id': 2, 'tags': ['a', 'b']})
        [{'id': '2', 'tags': 'a'}, {'tags': 'b'}]

        >>> flatten_json({'id': 3, 'items': [{'n': 'x'}, {'n': 'y'}]})
        [{'id': '3', 'items__n': 'x'}, {'items__n': 'y'}]
    """
    if depth > max_depth:
        raise NestingDepthError(f"JSON nesting exceeds the maximum depth of {max_depth} at '{prefix}'")

    kind = kind_of(data)

    if kind is ValueKind.OBJECT:
        return _flatten_object(data, prefix, sep, depth, max_depth)

    if kind is ValueKind.ARRAY:
        if is_primitive_array(data):
            # One single-column row per element
            return [{prefix: to_text(item)} for item in data]
        rows: List[PartialRow] = []
        for item in data:
            rows.extend(flatten_json(item, prefix, sep, depth + 1, max_depth))
        return rows

    # Scalars and null: to_text renders null as the empty string
    return [{prefix: to_text(data)}]


def _flatten_object(
    data: Dict[str, Any],
    prefix: str,
    sep: str,
    depth: int,
    max_depth: int,
) -> List[PartialRow]:
    scalar_data: PartialRow = {}
    primitive_arrays: Dict[str, List[str]] = {}
    object_array_fields: List[tuple] = []

    # Classify each field, keeping the document's key order
    for key, value in data.items():
        new_key = join_key(prefix, key, sep)

        if kind_of(value) is ValueKind.ARRAY:
            if not value:
                # Empty arrays contribute neither columns nor rows
                continue
            if is_primitive_array(value):
                primitive_arrays[new_key] = [to_text(item) for item in value]
            else:
                object_array_fields.append((new_key, value))
        else:
            for child_row in flatten_json(value, new_key, sep, depth + 1, max_depth):
                scalar_data.update(child_row)

    # Every element of every object array becomes its own set of rows
    object_array_rows: List[PartialRow] = []
    for new_key, items in object_array_fields:
        for item in items:
            object_array_rows.extend(flatten_json(item, new_key, sep, depth + 1, max_depth))

    max_length = max((len(values) for values in primitive_arrays.values()), default=0)
    result: List[PartialRow] = []

    if object_array_rows:
        # Scalar fields only go on the first row
        for i, array_row in enumerate(object_array_rows):
            row = dict(scalar_data) if i == 0 else {}
            row.update(array_row)
            result.append(row)

        # Primitive arrays follow as extra rows, without scalar data
        for i in range(max_length):
            result.append(_primitive_values_at(primitive_arrays, i))

    elif max_length > 0:
        for i in range(max_length):
            row = dict(scalar_data) if i == 0 else {}
            row.update(_primitive_values_at(primitive_arrays, i))
            result.append(row)

    else:
        result.append(scalar_data)

    return result


def _primitive_values_at(primitive_arrays: Dict[str, List[str]], index: int) -> PartialRow:
    return {key: values[index] for key, values in primitive_arrays.items() if index < len(values)}
