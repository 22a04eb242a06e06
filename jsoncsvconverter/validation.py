from functools import reduce
from typing import Any, Dict, List, Tuple

from .constants import NESTED_FIELD_DELIMITER, MAX_NESTING_DEPTH
from .errors import StructuralError, NestingDepthError, KeyCollisionError
from .flattener import join_key
from .value_model import ValueKind, is_scalar, kind_of


def validate_document(
    document: Any,
    sep: str = NESTED_FIELD_DELIMITER,
    max_depth: int = MAX_NESTING_DEPTH,
) -> None:
    """
    Check that a parsed document can be flattened without ambiguity.

    The walk uses an explicit work stack and visits nodes at the same depths the
    flattener recurses through, so a document that passes here cannot exceed the
    flattener's depth limit.

    Args:
        document: The parsed JSON document
        sep: The delimiter used to join nested keys
        max_depth: Deepest nesting level accepted

    Raises:
        StructuralError: If the root value is not an object
        NestingDepthError: If the document nests deeper than ``max_depth``
        KeyCollisionError: If two different key paths join to the same column name,
            e.g. ``{"a__b": 1, "a": {"b": 2}}``
    """
    root_kind = kind_of(document)
    if root_kind is not ValueKind.OBJECT:
        raise StructuralError(f"JSON root must be an object, got {root_kind.name.lower()}")

    columns: Dict[str, Tuple[str, ...]] = {}

    def register(path: Tuple[str, ...]) -> None:
        column = reduce(lambda prefix, key: join_key(prefix, key, sep), path, "")
        seen = columns.setdefault(column, path)
        if seen != path:
            raise KeyCollisionError(column, seen, path)

    # Entries are (value, key path, depth); reversed pushes keep document order
    stack: List[Tuple[Any, Tuple[str, ...], int]] = [(document, (), 0)]

    while stack:
        value, path, depth = stack.pop()
        if depth > max_depth:
            raise NestingDepthError(
                f"JSON nesting exceeds the maximum depth of {max_depth} at '{sep.join(path)}'"
            )

        kind = kind_of(value)
        if kind is ValueKind.OBJECT:
            children = []
            for key, child in value.items():
                child_path = path + (key,)
                if kind_of(child) is ValueKind.ARRAY:
                    children.extend(_array_entries(child, child_path, depth + 1, register))
                else:
                    children.append((child, child_path, depth + 1))
            stack.extend(reversed(children))
        elif kind is ValueKind.ARRAY:
            stack.extend(reversed(_array_entries(value, path, depth + 1, register)))
        else:
            register(path)


def _array_entries(items: List[Any], path: Tuple[str, ...], depth: int, register) -> list:
    if not items:
        return []
    if is_scalar(items[0]):
        # Primitive arrays occupy a single column, whatever their later elements hold
        register(path)
        return []
    return [(item, path, depth) for item in items]
