import pytest

from colframe.csvio import read_csv
from colframe.csvio import reader as reader_module
from colframe.dataframe import ColumnType
from colframe.errors import (
    ColumnCreationError,
    CSVFileError,
    RowArityMismatchError,
    SchemaMismatchError,
    ValueParseError,
)

TYPES = [ColumnType.INTEGER, ColumnType.FLOAT, ColumnType.TEXT]


@pytest.fixture
def write_file(tmp_path):
    """Write some text to a CSV file and return its path."""

    def _write_file(text, name="data.csv"):
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write_file


@pytest.fixture
def created_tables(monkeypatch):
    """Keep track of the tables created by the reader."""
    tables = []
    create_table = reader_module.create_table

    def _create_table(rows, cols):
        table = create_table(rows, cols)
        tables.append(table)
        return table

    monkeypatch.setattr(reader_module, "create_table", _create_table)
    return tables


def test_read_csv(write_file):
    path = write_file("ID,Value,Name\n1,3.14,Alice\n2,2.718,Bob\n3,1.618,Charlie\n")
    with read_csv(path, TYPES) as table:
        assert table.row_count == 3
        assert table.column_count == 3
        assert table.column_names == ["ID", "Value", "Name"]
        assert table.column_types == TYPES

        assert table.get_value(0, 0) == 1
        assert table.get_value(0, 1) == pytest.approx(3.14, abs=0.001)
        assert table.get_value(0, 2) == "Alice"
        assert table.get_value(1, 0) == 2
        assert table.get_value(1, 1) == pytest.approx(2.718, abs=0.001)
        assert table.get_value(1, 2) == "Bob"
        assert table.get_value(2, 0) == 3
        assert table.get_value(2, 1) == pytest.approx(1.618, abs=0.001)
        assert table.get_value(2, 2) == "Charlie"


def test_read_csv_types_by_name(write_file):
    path = write_file("ID,Name\n1,Alice\n")
    with read_csv(path, ["int", "text"]) as table:
        assert table.column_types == [ColumnType.INTEGER, ColumnType.TEXT]


def test_read_csv_without_trailing_newline(write_file):
    path = write_file("ID,Value,Name\n1,3.14,Alice\n2,2.718,Bob")
    with read_csv(path, TYPES) as table:
        assert table.row_count == 2
        assert table.get_value(1, 2) == "Bob"


def test_read_csv_crlf(write_file):
    path = write_file('"ID","Value","Name"\r\n1,3.14,"Alice"\r\n')
    with read_csv(path, TYPES) as table:
        assert table.column_names == ["ID", "Value", "Name"]
        assert table.get_value(0, 2) == "Alice"


def test_read_csv_empty_line(write_file, created_tables):
    path = write_file("ID,Name\n1,a\n\n2,b\n")
    with pytest.raises(RowArityMismatchError) as excinfo:
        read_csv(path, [ColumnType.INTEGER, ColumnType.TEXT])
    assert excinfo.value.line == 3
    assert excinfo.value.expected == 2
    assert excinfo.value.found == 0
    assert created_tables[0].destroyed


def test_read_csv_trailing_empty_line(write_file):
    path = write_file("ID,Value,Name\n1,3.14,Alice\n\n")
    with pytest.raises(RowArityMismatchError) as excinfo:
        read_csv(path, TYPES)
    assert excinfo.value.line == 3


def test_read_csv_header_only(write_file):
    path = write_file("ID,Value,Name\n")
    with read_csv(path, TYPES) as table:
        assert table.row_count == 0
        assert table.column_names == ["ID", "Value", "Name"]


def test_read_csv_quoted_fields(write_file):
    path = write_file('ID,Value,Name\n1,2.5,"Smith, ""Johnny"" John"\n')
    with read_csv(path, TYPES) as table:
        assert table.get_value(0, 2) == 'Smith, "Johnny" John'


def test_read_csv_permissive_numbers(write_file):
    path = write_file("ID,Value,Name\nabc,1.5kg,Alice\n42x,oops,Bob\n")
    with read_csv(path, TYPES) as table:
        assert table.to_pydict() == {
            "ID": [0, 42],
            "Value": [1.5, 0.0],
            "Name": ["Alice", "Bob"],
        }


def test_read_csv_strict_numbers(write_file, created_tables):
    path = write_file("ID,Value,Name\n1,1.5,Alice\nabc,2.5,Bob\n")
    with pytest.raises(ValueParseError) as excinfo:
        read_csv(path, TYPES, strict_numbers=True)
    assert excinfo.value.line == 3
    assert excinfo.value.column == 0
    assert created_tables[0].destroyed


def test_read_csv_null_text(write_file):
    path = write_file('ID,Value,Name\n1,1.5,"NULL"\n2,2.5,Bob\n')
    with read_csv(path, TYPES, null_text="NULL") as table:
        assert table.get_value(0, 2) is None
        assert table.get_value(1, 2) == "Bob"
    with read_csv(path, TYPES) as table:
        assert table.get_value(0, 2) == "NULL"


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(CSVFileError):
        read_csv(tmp_path / "missing.csv", TYPES)


def test_read_csv_bad_encoding(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes("Name\nJos\xe9\n".encode("latin-1"))
    with pytest.raises(CSVFileError):
        read_csv(path, [ColumnType.TEXT])
    with read_csv(path, [ColumnType.TEXT], encoding="latin-1") as table:
        assert table.get_value(0, 0) == "Jos\xe9"


def test_read_csv_empty_file(write_file):
    path = write_file("")
    with pytest.raises(SchemaMismatchError):
        read_csv(path, TYPES)


def test_read_csv_header_mismatch(write_file, created_tables):
    path = write_file("ID,Value\n1,3.14\n")
    with pytest.raises(SchemaMismatchError):
        read_csv(path, TYPES)
    assert created_tables == []


def test_read_csv_row_arity_mismatch(write_file, created_tables):
    path = write_file("ID,Value,Name\n1,3.14,Alice\n2,2.718\n3,1.618,Charlie\n")
    with pytest.raises(RowArityMismatchError) as excinfo:
        read_csv(path, TYPES)

    assert excinfo.value.line == 3
    assert excinfo.value.expected == 3
    assert excinfo.value.found == 2

    # The partially loaded table was released.
    assert len(created_tables) == 1
    table = created_tables[0]
    assert table.destroyed
    assert table._columns == []


def test_read_csv_too_many_fields(write_file, created_tables):
    path = write_file("ID,Value,Name\n1,3.14,Alice,extra\n")
    with pytest.raises(RowArityMismatchError):
        read_csv(path, TYPES)
    assert created_tables[0].destroyed


@pytest.mark.parametrize(
    "header",
    ["ID,,Name", "ID,Value,ID", "ID,Value," + "x" * 64],
)
def test_read_csv_column_creation_error(write_file, created_tables, header):
    path = write_file(header + "\n1,3.14,Alice\n")
    with pytest.raises(ColumnCreationError):
        read_csv(path, TYPES)
    assert created_tables[0].destroyed
