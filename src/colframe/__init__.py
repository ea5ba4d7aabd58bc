"""Colframe

A fixed schema, in-memory columnar table with typed columns
and a CSV codec to load and save it.

The library is constituted by two components, each isolated
within its own package and each self documented:

* The Columnar Store (:mod:`colframe.dataframe`), which owns the typed
  arrays of the columns and provides access to the values by row and column.
* The CSV Codec (:mod:`colframe.csvio`), which builds tables from CSV files
  and saves tables back to CSV files.

Errors raised by both components are in :mod:`colframe.errors`.
"""

from . import csvio, dataframe, errors
from .csvio import read_csv, write_csv
from .dataframe import (
    ColumnType,
    Table,
    add_column,
    create_table,
    destroy_table,
    get_value,
    set_value,
)

__all__ = (
    "csvio",
    "dataframe",
    "errors",
    "Table",
    "ColumnType",
    "create_table",
    "add_column",
    "set_value",
    "get_value",
    "destroy_table",
    "read_csv",
    "write_csv",
)
