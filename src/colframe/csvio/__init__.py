"""Read and write tables as CSV files.

The CSV support is constituted by three components:

1. Splitter
2. Reader
3. Writer

The **Splitter** (:class:`colframe.csvio.splitter.FieldSplitter`) breaks
a single line of text into its fields. It's a small state machine that
knows about quoted fields, so that a line like::

    1,"Smith, John","He said ""Hi"" twice"

is split into ``["1", "Smith, John", 'He said "Hi" twice']``.

The **Reader** (:func:`read_csv`) loads a whole file into a
:class:`colframe.dataframe.Table`. The first line provides
the column names and the caller provides the column types,
every field is converted to the type of its column
by :func:`colframe.csvio.coerce.coerce_field`::

    table = read_csv("people.csv", ["int", "text"])

The **Writer** (:func:`write_csv`) saves a table back to a CSV
file that the reader is able to load again, quoting all
text values and column names::

    write_csv(table, "people.csv")

Only one line per record is supported, quoted fields
can contain delimiters and quotes but not line breaks.
"""

from .reader import read_csv
from .splitter import FieldSplitter, split_line
from .writer import format_csv, write_csv

__all__ = ("read_csv", "write_csv", "format_csv", "split_line", "FieldSplitter")
