import json
from decimal import Decimal
from enum import Enum, auto
from typing import Any, Dict, List, Union

from .errors import JSONSyntaxError, NestingDepthError


class JsonNumber(Decimal):
    """
    A parsed JSON number that renders as the exact text it was written with.

    Integers and fractions both parse to this type: ``Decimal`` has no digit limit
    and ``str()`` returns the source text, so ``1e3`` stays ``1e3``.
    """

    def __new__(cls, text: str):
        number = super().__new__(cls, text)
        number.text = text
        return number

    def __str__(self) -> str:
        return self.text


# A parsed JSON node. Objects keep the key order of the source document.
JsonValue = Union[Dict[str, Any], List[Any], str, int, Decimal, float, bool, None]


class ValueKind(Enum):
    """
    The six node types of a parsed JSON document.
    """
    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


SCALAR_KINDS = frozenset({ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN, ValueKind.NULL})


def kind_of(value: Any) -> ValueKind:
    """
    Classify a parsed JSON value.

    Booleans are checked before numbers because ``bool`` is a subclass of ``int``.

    Raises:
        TypeError: If the value is not one of the types produced by a JSON parser
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


def is_scalar(value: Any) -> bool:
    return kind_of(value) in SCALAR_KINDS


def to_text(value: Any) -> str:
    """
    Render a JSON value as the text written into a table cell.

    Examples:
        >>> to_text(None)
        ''
        >>> to_text(True)
        'true'
        >>> to_text(JsonNumber('1.50'))
        '1.50'
        >>> to_text([1, "a"])
        '[1,"a"]'
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.STRING:
        return value
    if kind in SCALAR_KINDS:
        return _compact_json(value)
    # Compound values only end up here when they sit inside an array of primitives
    try:
        return _compact_json(value)
    except RecursionError as e:
        raise NestingDepthError("JSON array element is nested too deeply to render") from e


def _compact_json(value: Any) -> str:
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        fields = (f"{json.dumps(key, ensure_ascii=False)}:{_compact_json(item)}" for key, item in value.items())
        return "{" + ",".join(fields) + "}"
    if kind is ValueKind.ARRAY:
        return "[" + ",".join(_compact_json(item) for item in value) + "]"
    if kind is ValueKind.NUMBER:
        # Numbers are written unquoted, keeping the parsed source text
        return str(value)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    return json.dumps(value, ensure_ascii=False)


def decode_json_content(content: Union[str, bytes]) -> str:
    """
    Decode raw JSON content into text.

    Bytes are decoded as UTF-8; a leading byte order mark is dropped.
    """
    if isinstance(content, bytes):
        content = content.decode('utf-8-sig')
    elif content.startswith('\ufeff'):
        content = content[1:]
    return content


def _reject_constant(name: str):
    raise JSONSyntaxError(f"Invalid JSON value: {name}")


def parse_document(content: Union[str, bytes]) -> JsonValue:
    """
    Parse JSON text into native Python values.

    Numbers are parsed as ``JsonNumber`` so that their text form is kept exactly
    as written in the source document, whatever their size.

    Args:
        content: JSON text, or UTF-8 encoded bytes

    Returns:
        The parsed document

    Raises:
        JSONSyntaxError: If the text is not well-formed JSON
        NestingDepthError: If the document nests too deeply for the parser
    """
    try:
        content = decode_json_content(content)
    except UnicodeDecodeError as e:
        raise JSONSyntaxError(f"Input is not valid UTF-8: {str(e)}") from e

    try:
        return json.loads(
            content,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        raise JSONSyntaxError(
            f"Malformed JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            lineno=e.lineno,
            colno=e.colno,
        ) from e
    except RecursionError as e:
        raise NestingDepthError("JSON document is nested too deeply to parse") from e
