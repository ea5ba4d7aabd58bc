"""The Table object itself and the functions operating on it.

A :class:`Table` is created with a fixed number of rows and columns,
its columns are then added one by one at their index, each with its
own name and type, and finally values can be set and read::

    table = create_table(3, 2)
    add_column(table, 0, "Age", ColumnType.INTEGER)
    add_column(table, 1, "Name", ColumnType.TEXT)
    set_value(table, 0, 0, 25)
    set_value(table, 0, 1, "Alice")
    get_value(table, 0, 1)  # "Alice"
    destroy_table(table)

The functions are thin wrappers around the :class:`Table` methods,
which can be used directly when preferred. The table can also
be used as a context manager, in which case it will be destroyed
when the block ends:

>>> with Table(2, 1) as table:
...     table.add_column(0, "Name", ColumnType.TEXT)
...     table.set_value(1, 0, "Bob")
...     table.to_pydict()
{'Name': [None, 'Bob']}
>>> table.destroyed
True
"""

import logging
from typing import Iterator, Self

from ..errors import (
    AllocationError,
    ColumnExistsError,
    ColumnNotAddedError,
    DuplicateColumnNameError,
    EmptyColumnNameError,
    IndexOutOfRangeError,
    InvalidNameError,
    TableDestroyedError,
)
from .column import MAX_COLUMN_NAME_LENGTH, Column, ColumnType, Value

logger = logging.getLogger(__name__)


class Table:
    """Data structure that holds data in rows and columns.

    Data is stored column major: each column owns an array
    with one value for each row of the table.

    The number of rows and columns is fixed when the table is created,
    columns start empty and have to be added with :meth:`add_column`
    before any value can be stored in them.

    The table owns all its columns and the values stored in them,
    :meth:`destroy` releases all of them at once and the table
    can't be used anymore afterwards.
    """

    def __init__(self, row_count: int, column_count: int) -> None:
        """
        :param row_count: How many rows the table will have.
        :param column_count: How many columns the table will have.
        """
        if row_count < 0 or column_count < 0:
            raise AllocationError(
                f"Can't allocate a table of {row_count} rows and {column_count} columns"
            )
        try:
            self._columns: list[Column | None] = [None] * column_count
        except (MemoryError, OverflowError) as e:
            raise AllocationError(
                f"Unable to allocate {column_count} columns"
            ) from e
        self._row_count = row_count
        self._column_count = column_count
        self._destroyed = False

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        if not self._destroyed:
            self.destroy()

    def __len__(self) -> int:
        return self.row_count

    def __str__(self) -> str:
        if self._destroyed:
            return "Table(destroyed)"
        return f"Table(columns={self.column_names}, rows={self._row_count})"

    @property
    def row_count(self) -> int:
        self._ensure_alive()
        return self._row_count

    @property
    def column_count(self) -> int:
        self._ensure_alive()
        return self._column_count

    @property
    def destroyed(self) -> bool:
        """If the table was already destroyed."""
        return self._destroyed

    @property
    def column_names(self) -> list[str]:
        """Names of the columns, empty for columns not added yet."""
        self._ensure_alive()
        return [c.name if c is not None else "" for c in self._columns]

    @property
    def column_types(self) -> list[ColumnType | None]:
        """Types of the columns, ``None`` for columns not added yet."""
        self._ensure_alive()
        return [c.type if c is not None else None for c in self._columns]

    def has_column(self, index: int) -> bool:
        """Check if a column was added at ``index``."""
        self._check_column_index(index)
        return self._columns[index] is not None

    def column(self, index: int) -> Column:
        """Get the column at ``index``.

        Raises :class:`colframe.errors.ColumnNotAddedError`
        if the column was never added.
        """
        self._check_column_index(index)
        column = self._columns[index]
        if column is None:
            raise ColumnNotAddedError(f"No column was added at index {index}")
        return column

    def add_column(self, index: int, name: str, type: ColumnType) -> None:
        """Add a new column to the table at the given index.

        The column will be able to hold as many values as the
        rows of the table. Numeric columns start filled with zeros
        while text columns start with all values missing.

        :param index: The position of the column in the table.
        :param name: The name of the column, must be unique in the table.
        :param type: The type of the values the column will contain.
        """
        self._check_column_index(index)
        if not name:
            logger.debug("Rejected empty name for column %d", index)
            raise EmptyColumnNameError(f"Column {index} name cannot be empty")
        if len(name) >= MAX_COLUMN_NAME_LENGTH:
            raise InvalidNameError(
                f"Column name '{name}' is longer than {MAX_COLUMN_NAME_LENGTH - 1} characters"
            )
        if self._columns[index] is not None:
            raise ColumnExistsError(
                f"Column {index} already exists as '{self._columns[index].name}'"
            )
        if name in self.column_names:
            raise DuplicateColumnNameError(f"Column '{name}' already exists")
        if not isinstance(type, ColumnType):
            raise ValueError(f"Unsupported column type: {type!r}")

        self._columns[index] = Column(name, type, self._row_count)

    def set_value(self, row: int, column: int, value: Value) -> None:
        """Store a value in the cell at ``row`` and ``column``.

        The value must match the type of the column,
        ``None`` is accepted only for text columns
        and represents a missing value.
        """
        self._check_row_index(row)
        self.column(column).set(row, value)

    def get_value(self, row: int, column: int) -> Value:
        """Get the value stored in the cell at ``row`` and ``column``."""
        self._check_row_index(row)
        return self.column(column).get(row)

    def rows(self) -> Iterator[tuple[Value, ...]]:
        """Iterate over the rows of the table as tuples of values."""
        for row in range(self.row_count):
            yield tuple(
                self.get_value(row, col) for col in range(self._column_count)
            )

    def to_pydict(self) -> dict[str, list[Value]]:
        """Copy the data of the table into a dictionary of lists."""
        self._ensure_alive()
        return {
            column.name: column.values(self._row_count)
            for column in (self.column(i) for i in range(self._column_count))
        }

    def destroy(self) -> None:
        """Release all the data owned by the table.

        Text values are released first, then the column
        arrays, then the columns themselves.
        The table can't be used anymore once it was destroyed,
        destroying it again is an error too.
        """
        self._ensure_alive()
        for column in self._columns:
            if column is not None:
                column.release()
        self._columns.clear()
        self._destroyed = True

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise TableDestroyedError("Table was already destroyed")

    def _check_column_index(self, index: int) -> None:
        self._ensure_alive()
        if not 0 <= index < self._column_count:
            logger.debug(
                "Column index %d out of bounds (%d columns)", index, self._column_count
            )
            raise IndexOutOfRangeError(
                f"Column index {index} out of bounds ({self._column_count} columns)"
            )

    def _check_row_index(self, index: int) -> None:
        self._ensure_alive()
        if not 0 <= index < self._row_count:
            logger.debug("Row index %d out of bounds (%d rows)", index, self._row_count)
            raise IndexOutOfRangeError(
                f"Row index {index} out of bounds ({self._row_count} rows)"
            )


def create_table(row_count: int, column_count: int) -> Table:
    """Create a new empty table with the given number of rows and columns."""
    return Table(row_count, column_count)


def add_column(table: Table, index: int, name: str, type: ColumnType) -> None:
    """Add a column to ``table``, see :meth:`Table.add_column`."""
    table.add_column(index, name, type)


def set_value(table: Table, row: int, column: int, value: Value) -> None:
    """Store a value in ``table``, see :meth:`Table.set_value`."""
    table.set_value(row, column, value)


def get_value(table: Table, row: int, column: int) -> Value:
    """Read a value from ``table``, see :meth:`Table.get_value`."""
    return table.get_value(row, column)


def destroy_table(table: Table) -> None:
    """Release all data owned by ``table``, see :meth:`Table.destroy`."""
    table.destroy()
