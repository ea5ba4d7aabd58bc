"""Convert CSV fields into the values stored in a table.

CSV files only contain text, so each field has to be converted
to the type declared for its column. Text columns take the field
as it is, numeric columns parse it.

By default numbers are parsed permissively, the same way
``atoi`` and ``atof`` would do: leading whitespace is skipped,
the longest prefix that looks like a number is converted,
and anything that is not a number at all becomes zero:

>>> parse_int_prefix("42 apples")
42
>>> parse_float_prefix("3.14abc")
3.14
>>> parse_int_prefix("apples")
0

This means that a typo in a numeric column silently becomes ``0``.
When that's not acceptable, strict parsing can be used instead,
which requires the whole field to be a valid number
and raises :class:`ValueError` otherwise.
"""

import re

from ..dataframe.column import INT64_MAX, INT64_MIN, ColumnType, Value

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*("
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|[+-]?(?:infinity|inf|nan)"
    r")",
    re.IGNORECASE | re.ASCII,
)
_INT_STRICT = re.compile(r"[ \t\n\v\f\r]*[+-]?\d+[ \t\n\v\f\r]*", re.ASCII)
_FLOAT_STRICT = re.compile(
    r"[ \t\n\v\f\r]*(?:"
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|[+-]?(?:infinity|inf|nan)"
    r")[ \t\n\v\f\r]*",
    re.IGNORECASE | re.ASCII,
)


def parse_int_prefix(text: str) -> int:
    """Parse the integer at the beginning of ``text``.

    Returns ``0`` when ``text`` doesn't start with a number.
    Values that don't fit a 64 bit integer are clamped to its limits.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    return max(INT64_MIN, min(INT64_MAX, int(match.group(1))))


def parse_float_prefix(text: str) -> float:
    """Parse the floating point number at the beginning of ``text``.

    Returns ``0.0`` when ``text`` doesn't start with a number.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def parse_int_strict(text: str) -> int:
    """Parse ``text`` as an integer, the whole text must be a number."""
    if _INT_STRICT.fullmatch(text) is None:
        raise ValueError(f"{text!r} is not an integer")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"{text!r} does not fit a 64 bit integer")
    return value


def parse_float_strict(text: str) -> float:
    """Parse ``text`` as a float, the whole text must be a number."""
    if _FLOAT_STRICT.fullmatch(text) is None:
        raise ValueError(f"{text!r} is not a number")
    return float(text)


def coerce_field(
    field: str,
    type: ColumnType,
    strict: bool = False,
    null_text: str | None = None,
) -> Value:
    """Convert a CSV field into a value for a column of the given type.

    >>> coerce_field("12", ColumnType.INTEGER)
    12
    >>> coerce_field("NULL", ColumnType.TEXT, null_text="NULL") is None
    True

    :param field: The text of the field as returned by the splitter.
    :param type: The type of the column the value is for.
    :param strict: Raise :class:`ValueError` for non numeric text
                   in numeric columns instead of reading it as zero.
    :param null_text: Text fields equal to this are read as missing values.
    """
    if type is ColumnType.INTEGER:
        return parse_int_strict(field) if strict else parse_int_prefix(field)
    elif type is ColumnType.FLOAT:
        return parse_float_strict(field) if strict else parse_float_prefix(field)
    elif null_text is not None and field == null_text:
        return None
    return field
