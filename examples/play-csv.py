from colframe.csvio import read_csv
from colframe.utils.tabulate import tabulate

with read_csv("data.csv", ["int", "text"]) as table:
    print(tabulate(table))
    print(table.to_pydict())
