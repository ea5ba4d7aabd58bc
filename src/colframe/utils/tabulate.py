"""Format a Table into a text table for print.

The `tabulate` function takes a :class:`colframe.dataframe.Table` and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
Values are read one by one through :meth:`colframe.dataframe.Table.get_value`.

Example:

    >>> from colframe.dataframe import ColumnType, Table
    >>> table = Table(3, 3)
    >>> table.add_column(0, "Product", ColumnType.TEXT)
    >>> table.add_column(1, "Quantity", ColumnType.INTEGER)
    >>> table.add_column(2, "Price", ColumnType.FLOAT)
    >>> for row, (product, quantity, price) in enumerate(
    ...     [("Videogame", 8, 66.5), ("Laptop", 8, 38.72), ("Laptop", 7, 77.46)]
    ... ):
    ...     table.set_value(row, 0, product)
    ...     table.set_value(row, 1, quantity)
    ...     table.set_value(row, 2, price)
    >>> print(tabulate(table))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | 7        | 77.46
"""

from typing import Any

from ..dataframe import Table


def tabulate(table: Table, max_rows: int = 20) -> str:
    """Format a Table into a text table.

    Will produce a string like::

        Product   | Quantity | Price
        --------- | -------- | -----
        Videogame | 8        | 66.50
        Laptop    | 8        | 38.72
        Laptop    | 7        | 77.46
    """
    cols = table.column_names
    rows = [
        [format_value(table.get_value(row, colidx)) for colidx in range(len(cols))]
        for row in range(min(max_rows, table.row_count))
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    text = "\n".join(header + separator + textrows)
    if table.row_count > max_rows:
        text += f"\n... and {table.row_count - max_rows} more rows"
    return text


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    print missing values as NULL and truncate long strings.
    """
    if isinstance(v, float):
        return f"{v:.2f}"
    elif v is None:
        return "NULL"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
