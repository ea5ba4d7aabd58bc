from colframe.csvio import write_csv
from colframe.dataframe import ColumnType, create_table
from colframe.utils.tabulate import tabulate

ages = [25, 30, 22]
names = ["Alice", "Bob", "Charlie"]

with create_table(len(ages), 2) as table:
    table.add_column(0, "Age", ColumnType.INTEGER)
    table.add_column(1, "Name", ColumnType.TEXT)
    for row, (age, name) in enumerate(zip(ages, names)):
        table.set_value(row, 0, age)
        table.set_value(row, 1, name)

    print(tabulate(table))
    write_csv(table, "data.csv")
