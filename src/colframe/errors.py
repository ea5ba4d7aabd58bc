"""Errors raised by colframe.

Every error raised by the columnar store and by the CSV codec
derives from :class:`DataframeError`, so callers can catch
all of them with a single ``except`` clause.

Each error also derives from the builtin exception that
is closest in meaning, so that code which expects, for example,
an ``IndexError`` when accessing out of bounds keeps working::

    try:
        table.get_value(10, 0)
    except IndexError:
        ...
"""


class DataframeError(Exception):
    """Base class for all errors raised by colframe."""


class AllocationError(DataframeError, MemoryError):
    """Storage for a table or a column could not be acquired."""


class IndexOutOfRangeError(DataframeError, IndexError):
    """A row or column index is outside of the table bounds."""


class InvalidNameError(DataframeError, ValueError):
    """A column name is not acceptable."""


class EmptyColumnNameError(InvalidNameError):
    """A column has no name.

    Raised when adding a column with an empty name and
    when writing a table that has columns never added.
    """


class DuplicateColumnNameError(InvalidNameError):
    """A column with the same name already exists in the table."""


class ColumnExistsError(DataframeError, ValueError):
    """A column was already added at the requested index."""


class ColumnNotAddedError(DataframeError, LookupError):
    """The column index is within bounds, but no column was added there."""


class TypeMismatchError(DataframeError, TypeError):
    """A value does not match the declared type of its column."""


class TableDestroyedError(DataframeError, RuntimeError):
    """The table was already destroyed and can't be used anymore."""


class CSVError(DataframeError):
    """Base class for errors reading or writing CSV files."""


class CSVFileError(CSVError):
    """The CSV file could not be opened, read or written."""


class SchemaMismatchError(CSVError):
    """The CSV header doesn't match the declared column types."""


class RowArityMismatchError(CSVError):
    """A CSV row has a different number of fields than the header."""

    def __init__(self, message: str, line: int, expected: int, found: int) -> None:
        super().__init__(message)
        self.line = line
        self.expected = expected
        self.found = found


class ColumnCreationError(CSVError):
    """A column declared by the CSV header could not be created."""


class ValueParseError(CSVError):
    """A CSV field can't be converted to the type of its column.

    Only raised when strict number parsing is requested,
    otherwise non numeric text is read as zero.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class UnwritableTextError(CSVError, ValueError):
    """A text value or column name can't be represented in a CSV line.

    Each record is a single line, so text containing
    line breaks can't be written.
    """
