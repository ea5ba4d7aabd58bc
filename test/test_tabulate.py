import pytest

from colframe.dataframe import ColumnType, Table
from colframe.utils.tabulate import format_value, tabulate


@pytest.fixture
def numbers():
    table = Table(25, 2)
    table.add_column(0, "n", ColumnType.INTEGER)
    table.add_column(1, "label", ColumnType.TEXT)
    for row in range(25):
        table.set_value(row, 0, row)
    table.set_value(0, 1, "zero")
    return table


def test_tabulate_limits_rows(numbers):
    text = tabulate(numbers, max_rows=2)
    assert text == "\n".join(
        [
            "n | label",
            "- | -----",
            "0 | zero ",
            "1 | NULL ",
            "... and 23 more rows",
        ]
    )


def test_tabulate_default_rows(numbers):
    lines = tabulate(numbers).splitlines()
    assert len(lines) == 2 + 20 + 1
    assert lines[-1] == "... and 5 more rows"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, "1.00"),
        (3, "3"),
        (None, "NULL"),
        ("x" * 40, "x" * 27 + "..."),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected
