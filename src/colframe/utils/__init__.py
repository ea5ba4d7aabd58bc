"""Generic utilities and helpers.

This is a collection of utilities that are helpful
to work with tables but are not part of the core
storage or of the CSV codec, like printing a table.
"""

from . import tabulate

__all__ = ("tabulate",)
