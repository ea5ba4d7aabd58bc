"""Save a Table to a CSV file.

The output has a header line with the quoted names of the columns,
followed by one line for each row of the table:

* Integer values are written as they are, like ``42``.
* Float values are written with two decimal digits, like ``3.14``.
* Text values are always quoted, and any ``"`` they contain is doubled.
* Missing text values are written as ``"NULL"``.

>>> from colframe.dataframe import ColumnType, Table
>>> table = Table(1, 3)
>>> table.add_column(0, "ID", ColumnType.INTEGER)
>>> table.add_column(1, "Value", ColumnType.FLOAT)
>>> table.add_column(2, "Name", ColumnType.TEXT)
>>> table.set_value(0, 0, 1)
>>> table.set_value(0, 1, 3.14159)
>>> table.set_value(0, 2, 'Say "Hi" now')
>>> print(format_csv(table), end="")
"ID","Value","Name"
1,3.14,"Say ""Hi"" now"

Text containing line breaks can't be written, as each record
must fit a single line.

Note that a missing value and the text ``NULL`` are written
the same way, so they can't be told apart when reading the file back.

The file is written to a temporary file first and moved in place
only once it was fully written, so readers never observe a partially
written file and a failed write never damages an existing file.
"""

import logging
import os
import tempfile
from typing import Iterator

from ..dataframe.column import ColumnType, Value
from ..dataframe.dataframe import Table
from ..errors import CSVFileError, EmptyColumnNameError, UnwritableTextError

logger = logging.getLogger(__name__)

QUOTE = '"'
LINE_BREAKS = ("\n", "\r")


def quote_text(text: str) -> str:
    """Quote a text value, doubling any quote it contains.

    >>> quote_text('a "b" c')
    '"a ""b"" c"'
    """
    return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE


def format_value(value: Value, type: ColumnType, null_text: str = "NULL") -> str:
    """Format a single value as a CSV field."""
    if type is ColumnType.INTEGER:
        return f"{value:d}"
    elif type is ColumnType.FLOAT:
        return f"{value:.2f}"
    elif value is None:
        return quote_text(null_text)
    return quote_text(value)


def iter_csv_lines(table: Table, null_text: str = "NULL") -> Iterator[str]:
    """Emit the lines of the CSV representation of ``table``.

    The header comes first, then one line for each row.
    Each line includes its ``\\n`` terminator.
    """
    check_writable(table, null_text)
    yield ",".join(quote_text(name) for name in table.column_names) + "\n"

    types = table.column_types
    for row in range(table.row_count):
        yield ",".join(
            format_value(table.get_value(row, col), type, null_text)
            for col, type in enumerate(types)
        ) + "\n"


def format_csv(table: Table, null_text: str = "NULL") -> str:
    """Format ``table`` as CSV text."""
    return "".join(iter_csv_lines(table, null_text))


def write_csv(
    table: Table,
    path: str | os.PathLike,
    encoding: str = "utf-8",
    null_text: str = "NULL",
) -> None:
    """Write ``table`` to a CSV file, replacing the file if it exists.

    :param table: The table to save.
    :param path: The path of the local CSV file to write.
    :param encoding: The text encoding of the file.
    :param null_text: The text written, quoted, for missing text values.
    """
    try:
        check_writable(table, null_text)
    except (EmptyColumnNameError, UnwritableTextError) as e:
        logger.debug("Refusing to write '%s': %s", path, e)
        raise

    # Write to tmp, fsync, then rename atomically.
    directory = os.path.dirname(os.path.abspath(path))
    try:
        tmpfile = tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            newline="",
            dir=directory,
            prefix=".colframe-",
            suffix=".tmp",
            delete=False,
        )
    except OSError as e:
        raise CSVFileError(f"Could not write file '{path}': {e}") from e

    tmppath = tmpfile.name
    try:
        with tmpfile as f:
            f.writelines(iter_csv_lines(table, null_text))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmppath, path)
    except OSError as e:
        _remove_tmpfile(tmppath)
        raise CSVFileError(f"Could not write file '{path}': {e}") from e
    except Exception:
        _remove_tmpfile(tmppath)
        raise

    logger.info(
        "Wrote %d rows and %d columns to '%s'", table.row_count, table.column_count, path
    )


def check_writable(table: Table, null_text: str = "NULL") -> None:
    """Ensure all column names and text values of ``table`` can be written.

    Raises :class:`colframe.errors.EmptyColumnNameError` for columns without
    a name and :class:`colframe.errors.UnwritableTextError` for names or
    text values that contain line breaks.
    """
    if _has_line_break(null_text):
        raise UnwritableTextError(f"Missing value text {null_text!r} contains a line break")

    for index, name in enumerate(table.column_names):
        if not name:
            raise EmptyColumnNameError(f"Column {index} name is empty")
        if _has_line_break(name):
            raise UnwritableTextError(f"Column {index} name {name!r} contains a line break")

    for index, type in enumerate(table.column_types):
        if type is not ColumnType.TEXT:
            continue
        column = table.column(index)
        for row in range(table.row_count):
            value = column.get(row)
            if value is not None and _has_line_break(value):
                raise UnwritableTextError(
                    f"Value at row {row}, column {index} contains a line break: {value!r}"
                )


def _has_line_break(text: str) -> bool:
    return any(char in text for char in LINE_BREAKS)


def _remove_tmpfile(path: str) -> None:
    # Best effort cleanup of tmp file
    if os.path.exists(path):
        os.remove(path)
