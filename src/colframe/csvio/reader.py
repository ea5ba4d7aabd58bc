"""Load a CSV file into a Table.

The first line of the file is the header, which provides the
names of the columns. The types of the columns are not
inferred, they have to be declared by the caller in the same
order the columns appear in the file::

    table = read_csv("data.csv", [ColumnType.INTEGER, ColumnType.FLOAT, ColumnType.TEXT])

Every other line of the file is a row of the table.
All rows must have the same number of fields as the header,
so an empty line in the middle of the file is an error.

The file is fully read before the table is created, so that
the table can be allocated with exactly the number of rows
the file contains.

Reading never returns a partially loaded table: in case of any
failure the table loaded until that point is destroyed and
the error is raised.
"""

import logging
import os
from typing import Iterable

from ..dataframe.column import ColumnType
from ..dataframe.dataframe import Table, create_table
from ..errors import (
    ColumnCreationError,
    CSVFileError,
    DataframeError,
    RowArityMismatchError,
    SchemaMismatchError,
    ValueParseError,
)
from .coerce import coerce_field
from .splitter import split_line

logger = logging.getLogger(__name__)


def read_csv(
    path: str | os.PathLike,
    column_types: Iterable[ColumnType | str],
    encoding: str = "utf-8",
    strict_numbers: bool = False,
    null_text: str | None = None,
) -> Table:
    """Read a CSV file into a new :class:`colframe.dataframe.Table`.

    :param path: The path of the local CSV file.
    :param column_types: The type of each column, in the same order
                         as the columns in the file header.
                         Types can also be provided by name, like ``"int"``.
    :param encoding: The text encoding of the file.
    :param strict_numbers: Fail with :class:`colframe.errors.ValueParseError`
                           when a numeric column contains text that is not a number,
                           instead of reading it as zero.
    :param null_text: Text fields equal to this are read as missing values.
                      By default all text is read as is.
    """
    types = [t if isinstance(t, ColumnType) else ColumnType.parse(t) for t in column_types]
    header_line, data_lines = _read_lines(path, encoding)

    if header_line is None:
        raise SchemaMismatchError(f"File '{path}' has no header")
    header = split_line(header_line)
    if len(header) != len(types):
        logger.debug("Header of '%s' has columns %s", path, header)
        raise SchemaMismatchError(
            f"Header column count ({len(header)}) does not match expected ({len(types)})"
        )

    # Line numbers are kept to report errors, the header is line 1.
    rows = list(enumerate(data_lines, start=2))

    table = create_table(len(rows), len(types))
    try:
        _add_columns(table, header, types)
        _load_rows(table, rows, types, strict_numbers, null_text)
    except Exception:
        logger.debug("Failed loading '%s', releasing partially loaded table", path)
        table.destroy()
        raise

    logger.info("Read %d rows and %d columns from '%s'", len(rows), len(types), path)
    return table


def _read_lines(path: str | os.PathLike, encoding: str) -> tuple[str | None, list[str]]:
    """Read the header and data lines of the file without line terminators."""
    try:
        with open(path, encoding=encoding, newline="\n") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except OSError as e:
        raise CSVFileError(f"Could not open file '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise CSVFileError(f"Could not decode file '{path}' as {encoding}: {e}") from e

    if not lines:
        return None, []
    return lines[0], lines[1:]


def _add_columns(table: Table, header: list[str], types: list[ColumnType]) -> None:
    for index, (name, type) in enumerate(zip(header, types)):
        try:
            table.add_column(index, name, type)
        except (DataframeError, ValueError) as e:
            raise ColumnCreationError(f"Failed to add column '{name}': {e}") from e


def _load_rows(
    table: Table,
    rows: list[tuple[int, str]],
    types: list[ColumnType],
    strict_numbers: bool,
    null_text: str | None,
) -> None:
    for row, (lineno, line) in enumerate(rows):
        fields = split_line(line)
        if len(fields) != len(types):
            raise RowArityMismatchError(
                f"Field count ({len(fields)}) does not match number "
                f"of columns ({len(types)}) at line {lineno}",
                line=lineno,
                expected=len(types),
                found=len(fields),
            )

        for column, (field, type) in enumerate(zip(fields, types)):
            try:
                value = coerce_field(field, type, strict_numbers, null_text)
            except ValueError as e:
                raise ValueParseError(
                    f"Invalid {type.value} value {field!r} at line {lineno}, column {column}",
                    line=lineno,
                    column=column,
                ) from e
            table.set_value(row, column, value)
