"""In-memory columnar tables.

A table is an ordered collection of named columns, each column
holds values of a single type and all columns share the same number of rows.

Data is stored column major, which means that all the values of
a column are stored next to each other in a typed array.
This is the same approach taken by dataframe libraries like
``pandas`` and ``polars`` and by formats like Apache Arrow,
and it makes processing a whole column at once efficient.

Three column types are supported:

* :attr:`ColumnType.INTEGER` for signed 64 bit integers.
* :attr:`ColumnType.FLOAT` for double precision floats.
* :attr:`ColumnType.TEXT` for strings, that can also be missing (``None``).

The size of a table is fixed at creation, then
columns are added and values are set cell by cell:

>>> table = create_table(2, 2)
>>> add_column(table, 0, "Age", ColumnType.INTEGER)
>>> add_column(table, 1, "Name", ColumnType.TEXT)
>>> set_value(table, 0, 0, 25)
>>> set_value(table, 0, 1, "Alice")
>>> get_value(table, 0, 1)
'Alice'
>>> list(table.rows())
[(25, 'Alice'), (0, None)]
>>> destroy_table(table)

Values are checked against the type of the column they are stored in,
storing a value of the wrong type raises :class:`colframe.errors.TypeMismatchError`
and leaves the cell unchanged.
"""

from .arrow import from_arrow, to_arrow
from .column import MAX_COLUMN_NAME_LENGTH, Column, ColumnType, Value
from .dataframe import (
    Table,
    add_column,
    create_table,
    destroy_table,
    get_value,
    set_value,
)

__all__ = (
    "Table",
    "Column",
    "ColumnType",
    "Value",
    "MAX_COLUMN_NAME_LENGTH",
    "create_table",
    "add_column",
    "set_value",
    "get_value",
    "destroy_table",
    "to_arrow",
    "from_arrow",
)
