"""Shell commands exposing colframe functionalities.

Show
====

``colframe-show`` loads a CSV file and prints it as a table::

    colframe-show --types int,float,text people.csv

The table can also be saved back, which normalizes the file
by quoting all text values and formatting floats with two decimal digits::

    colframe-show --types int,float,text people.csv --output normalized.csv

"""
