"""Exchange data with Apache Arrow.

Tables can be converted to :class:`pyarrow.Table` objects,
and back, to take advantage of the Arrow ecosystem, like
writing Parquet files or passing data to other dataframe libraries.

>>> table = Table(2, 2)
>>> table.add_column(0, "ID", ColumnType.INTEGER)
>>> table.add_column(1, "Name", ColumnType.TEXT)
>>> table.set_value(0, 0, 1)
>>> table.set_value(0, 1, "Alice")
>>> to_arrow(table).to_pydict()
{'ID': [1, 0], 'Name': ['Alice', None]}

Columns are mapped to ``int64``, ``float64`` and ``string`` Arrow types.
Missing text values become Arrow nulls.
"""

import pyarrow as pa

from ..errors import TypeMismatchError
from .column import ColumnType
from .dataframe import Table

ARROW_TYPES = {
    ColumnType.INTEGER: pa.int64(),
    ColumnType.FLOAT: pa.float64(),
    ColumnType.TEXT: pa.string(),
}


def to_arrow(table: Table) -> pa.Table:
    """Copy the data of ``table`` into a new :class:`pyarrow.Table`."""
    columns = [table.column(i) for i in range(table.column_count)]
    return pa.table(
        [
            pa.array(column.values(table.row_count), type=ARROW_TYPES[column.type])
            for column in columns
        ],
        names=[column.name for column in columns],
    )


def column_type_for(arrow_type: pa.DataType) -> ColumnType:
    """Detect the column type able to store values of an Arrow type."""
    if pa.types.is_integer(arrow_type):
        return ColumnType.INTEGER
    elif pa.types.is_floating(arrow_type):
        return ColumnType.FLOAT
    elif pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
        return ColumnType.TEXT
    raise TypeMismatchError(f"Unsupported Arrow type: {arrow_type}")


def from_arrow(data: pa.Table | pa.RecordBatch) -> Table:
    """Copy the data of a :class:`pyarrow.Table` into a new :class:`Table`.

    Numeric columns can't contain nulls, as there is no
    way to represent a missing number.
    """
    types = [column_type_for(field.type) for field in data.schema]
    table = Table(data.num_rows, data.num_columns)
    try:
        for index, (name, type) in enumerate(zip(data.column_names, types)):
            table.add_column(index, name, type)
            arrow_column = data.column(index)
            if type is not ColumnType.TEXT and arrow_column.null_count:
                raise TypeMismatchError(
                    f"Column '{name}' contains nulls, which are only allowed for text"
                )
            for row, value in enumerate(arrow_column.to_pylist()):
                if type is ColumnType.FLOAT:
                    value = float(value)
                table.set_value(row, index, value)
    except Exception:
        table.destroy()
        raise
    return table
