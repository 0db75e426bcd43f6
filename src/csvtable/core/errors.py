"""Exception types raised by the csvtable pipeline."""


class CsvTableError(Exception):
    """Base class for csvtable errors."""

    pass


class FatalInputError(CsvTableError):
    """Input that makes the whole run impossible.

    Raised for an unopenable input file, an invalid column specification,
    or a sample that yields no usable rows.
    """

    pass


class RowParseError(CsvTableError):
    """A single line could not be split into fields.

    The pipeline drops the line and keeps going.
    """

    def __init__(self, line: str, reason: str):
        super().__init__(f"Cannot parse line: {reason}")
        self.line = line
        self.reason = reason
