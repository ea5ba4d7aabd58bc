"""Typed columns of a table.

A column is a named array of values that all share the same type.
The type is declared when the column is created and never changes,
the storage backing the column is chosen once based on that type:

* ``INTEGER`` columns store signed 64 bit integers in a fixed width array.
* ``FLOAT`` columns store double precision floats in a fixed width array.
* ``TEXT`` columns store a list of strings, where each cell can be ``None``
  to represent a missing value.

Numeric columns are initialized with zeros, text columns with ``None``:

>>> column = Column("Age", ColumnType.INTEGER, 3)
>>> column.values()
[0, 0, 0]
>>> column.set(1, 42)
>>> column.values()
[0, 42, 0]
"""

import array
import enum
from typing import Any, Iterator

from ..errors import AllocationError, TypeMismatchError

MAX_COLUMN_NAME_LENGTH = 64
"""Column names must be shorter than this."""

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Value = int | float | str | None


class ColumnType(enum.Enum):
    """The type of the values stored in a column."""

    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"

    @classmethod
    def parse(cls, text: str) -> "ColumnType":
        """Get the column type from its textual name.

        Accepts the most common spelling of each type,
        like the ones used on the command line:

        >>> ColumnType.parse("int")
        <ColumnType.INTEGER: 'integer'>
        >>> ColumnType.parse("String")
        <ColumnType.TEXT: 'text'>
        """
        try:
            return _TYPE_ALIASES[text.strip().lower()]
        except KeyError:
            raise ValueError(f"Unsupported column type: {text!r}") from None

    @classmethod
    def of(cls, value: Any) -> "ColumnType | None":
        """Detect the column type a Python value belongs to.

        ``None`` is a missing text value, so it is reported as ``TEXT``.
        Returns ``None`` for values that can't be stored in any column.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if value is None or isinstance(value, str):
            return cls.TEXT
        return None

    def allocate(self, size: int) -> array.array | list:
        """Allocate zeroed storage for ``size`` values of this type."""
        try:
            if self is ColumnType.INTEGER:
                return array.array("q", bytes(8 * size))
            elif self is ColumnType.FLOAT:
                return array.array("d", bytes(8 * size))
            else:
                return [None] * size
        except (MemoryError, OverflowError) as e:
            raise AllocationError(
                f"Unable to allocate {size} values for a {self.value} column"
            ) from e


_TYPE_ALIASES = {
    "int": ColumnType.INTEGER,
    "integer": ColumnType.INTEGER,
    "float": ColumnType.FLOAT,
    "double": ColumnType.FLOAT,
    "str": ColumnType.TEXT,
    "string": ColumnType.TEXT,
    "text": ColumnType.TEXT,
}


class Column:
    """A named array of values of a single type.

    The column owns its storage, values set into it are
    copied in, so the caller keeps ownership of what it passed.
    For text cells, replacing a value drops the reference to the
    previous one, so each cell only ever holds a single string.

    Columns are usually created through :meth:`colframe.dataframe.Table.add_column`
    which is in charge of checking the name and the index of the column.
    """

    __slots__ = ("name", "type", "_data")

    def __init__(self, name: str, type: ColumnType, size: int) -> None:
        """
        :param name: The name of the column.
        :param type: The type of the values stored in the column.
        :param size: How many values the column can hold.
        """
        self.name = name
        self.type = type
        self._data = type.allocate(size)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return f"Column({self.name}, {self.type.value}, size={len(self._data)})"

    def check(self, value: Any) -> None:
        """Ensure ``value`` can be stored in this column.

        Raises :class:`colframe.errors.TypeMismatchError` otherwise.
        """
        value_type = ColumnType.of(value)
        if value_type is not self.type:
            raise TypeMismatchError(
                f"Column '{self.name}' holds {self.type.value} values, "
                f"got {type(value).__name__}: {value!r}"
            )
        if value_type is ColumnType.INTEGER and not INT64_MIN <= value <= INT64_MAX:
            raise TypeMismatchError(
                f"Value {value} does not fit a 64 bit integer column '{self.name}'"
            )

    def get(self, row: int) -> Value:
        """Get the value stored at ``row``.

        For text columns the stored string itself is returned,
        no copy is made.
        """
        return self._data[row]

    def set(self, row: int, value: Value) -> None:
        """Store ``value`` at ``row`` replacing the previous one."""
        self.check(value)
        self._data[row] = value

    def values(self, length: int | None = None) -> list[Value]:
        """Copy the first ``length`` values (all of them by default) into a list."""
        if length is None:
            return list(self._data)
        return list(self._data[:length])

    def __iter__(self) -> Iterator[Value]:
        return iter(self._data)

    def release(self) -> None:
        """Release the storage of the column.

        Text cells are cleared first, then the array itself
        is dropped. The column can't be used after this.
        """
        if self.type is ColumnType.TEXT:
            self._data.clear()
        self._data = self.type.allocate(0)
