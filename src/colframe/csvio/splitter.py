"""Split a line of CSV text into its fields.

The splitter scans the line once, character by character,
switching between two states depending on how each field starts:

* **QUOTED** fields start with ``"``, they end at the first ``"``
  that is immediately followed by a ``,`` or by the end of the line.
  Inside a quoted field ``""`` is an escaped quote and produces a single ``"``.
  The surrounding quotes are not part of the value and
  whitespace is preserved.
* **UNQUOTED** fields end at the first ``,`` or at the end of the line,
  their value is trimmed of leading and trailing whitespace.

>>> split_line('1, 3.14 ,"Hello, ""World""!"')
['1', '3.14', 'Hello, "World"!']

The splitter is lenient with malformed input: a quoted field that
is never closed extends to the end of the line, and a lone quote
found inside a quoted field is kept as is.
"""

import enum

WHITESPACE = " \t\n\v\f\r"
DELIMITER = ","
QUOTE = '"'


class SplitState(enum.Enum):
    """State of the splitter while scanning a field."""

    FIELD_START = enum.auto()
    QUOTED = enum.auto()
    UNQUOTED = enum.auto()


class FieldSplitter:
    """Split a single CSV line into a list of fields.

    Each call to :meth:`split` scans the whole line from the
    beginning, so the same splitter can be reused any number of times::

        splitter = FieldSplitter('a,"b,c"')
        splitter.split()  # ['a', 'b,c']

    The line is expected to have already been stripped
    of its line terminator.
    """

    def __init__(self, line: str) -> None:
        """
        :param line: The text of the line to split.
        """
        self.line = line

    def __str__(self) -> str:
        return f"FieldSplitter({self.line!r})"

    def split(self) -> list[str]:
        """Scan the line and return its fields.

        An empty line has no fields, while a line ending
        with a delimiter has an empty last field.
        """
        line = self.line
        end = len(line)
        fields: list[str] = []
        buffer: list[str] = []
        state = SplitState.FIELD_START
        pos = 0

        while pos < end:
            char = line[pos]
            if state is SplitState.FIELD_START:
                if char == QUOTE:
                    state = SplitState.QUOTED
                    pos += 1  # Skip opening quote
                else:
                    state = SplitState.UNQUOTED
            elif state is SplitState.QUOTED:
                nextchar = line[pos + 1] if pos + 1 < end else None
                if char != QUOTE:
                    buffer.append(char)
                    pos += 1
                elif nextchar == QUOTE:
                    buffer.append(QUOTE)
                    pos += 2  # Escaped quote
                elif nextchar is None or nextchar == DELIMITER:
                    fields.append("".join(buffer))
                    buffer.clear()
                    state = SplitState.FIELD_START
                    pos += 2  # Closing quote and delimiter
                    if nextchar == DELIMITER and pos == end:
                        fields.append("")
                else:
                    buffer.append(char)
                    pos += 1
            else:
                if char == DELIMITER:
                    fields.append("".join(buffer).strip(WHITESPACE))
                    buffer.clear()
                    state = SplitState.FIELD_START
                    pos += 1
                    if pos == end:
                        fields.append("")
                else:
                    buffer.append(char)
                    pos += 1

        if state is SplitState.QUOTED:
            # Quoted field was never closed.
            fields.append("".join(buffer))
        elif state is SplitState.UNQUOTED:
            fields.append("".join(buffer).strip(WHITESPACE))
        return fields


def split_line(line: str) -> list[str]:
    """Split a CSV line into its fields, see :class:`FieldSplitter`."""
    return FieldSplitter(line).split()
