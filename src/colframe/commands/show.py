"""Command line interface to inspect CSV files.

This module provides a command line interface that loads a CSV file
with :func:`colframe.csvio.read_csv`, prints its content in a tabular
format using the :mod:`colframe.utils.tabulate` module, and optionally
saves it back with :func:`colframe.csvio.write_csv`.
"""

import argparse
import logging
import sys

from colframe.csvio import read_csv, write_csv
from colframe.dataframe import ColumnType
from colframe.errors import DataframeError
from colframe.utils import tabulate

logger = logging.getLogger(__name__)


def parse_types(text: str) -> list[ColumnType]:
    """Parse a comma separated list of column types like ``int,float,text``."""
    try:
        return [ColumnType.parse(t) for t in text.split(",")]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments, load the CSV file and print it."""
    parser = argparse.ArgumentParser(description="Load a CSV file and print it.")
    parser.add_argument("path", type=str, help="The CSV file to load.")
    parser.add_argument(
        "-t",
        "--types",
        type=parse_types,
        required=True,
        help="Comma separated types of the columns, like int,float,text.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on non numeric values in numeric columns instead of reading them as 0.",
    )
    parser.add_argument(
        "--null-text",
        default=None,
        help="Text values equal to this are read as missing values.",
    )
    parser.add_argument(
        "--max-rows", type=int, default=20, help="How many rows to print."
    )
    parser.add_argument(
        "-o", "--output", default=None, help="Save the loaded table to this CSV file."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with read_csv(
            args.path,
            args.types,
            strict_numbers=args.strict,
            null_text=args.null_text,
        ) as table:
            print(tabulate.tabulate(table, max_rows=args.max_rows))
            if args.output:
                write_csv(table, args.output)
    except DataframeError as e:
        logger.debug("Failed processing %s", args.path, exc_info=True)
        print(f"Invalid CSV, {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
