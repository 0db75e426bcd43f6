"""Tolerant line-at-a-time CSV splitting."""

import csv
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import RowParseError

Row = List[str]


def parse_line(line: str, separator: str, quotechar: str = '"') -> Row:
    """Split one raw line into fields.

    Uses csv.reader with loose quoting (stray and unbalanced quotes are
    kept as data), doubled quotes as escapes and leading whitespace in
    front of quoted fields tolerated.

    Args:
        line: Raw input line, with or without its line terminator
        separator: Field separator
        quotechar: Quote character

    Returns:
        List of field strings; empty for a blank line

    Raises:
        RowParseError: If the csv module rejects the line
    """
    text = line.rstrip("\r\n")
    reader = csv.reader(
        [text],
        delimiter=separator,
        quotechar=quotechar,
        doublequote=True,
        skipinitialspace=True,
        strict=False,
    )
    try:
        return next(reader, [])
    except csv.Error as e:
        raise RowParseError(text, str(e)) from e


def parse_lines(
    lines: Iterable[str],
    separator: str,
    quotechar: str = '"',
    start: int = 1,
    skipped: Optional[List[int]] = None,
) -> Iterator[Tuple[int, Row]]:
    """Parse lines lazily, dropping the ones that fail.

    Args:
        lines: Raw lines
        separator: Field separator
        quotechar: Quote character
        start: Line number of the first line
        skipped: If given, numbers of dropped lines are appended here

    Yields:
        (line_number, row) for every line that parsed
    """
    for lineno, line in enumerate(lines, start=start):
        try:
            row = parse_line(line, separator, quotechar)
        except RowParseError:
            if skipped is not None:
                skipped.append(lineno)
            continue
        yield lineno, row


__all__ = ["Row", "parse_line", "parse_lines"]
