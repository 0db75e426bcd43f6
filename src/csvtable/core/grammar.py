"""Numeric grammars used by the sniffer and the profiler.

Rules:
    decimal-comma number     optional sign, digits, one comma, digits
                             e.g. "3,14", "-0,5"
    thousands-comma number   optional sign, 1-3 digits, one or more groups
                             of ",ddd", optional ".digits" fraction
                             e.g. "1,234", "12,345,678.90"
    numeric literal          optional surrounding quote, optional sign,
                             digits mixed with "." and "," separators,
                             at least one digit; e.g. "1.234,5", "'42'"
    numeric row              every non-empty value consists only of signs,
                             dots, commas, whitespace and digits
"""

import re
from typing import Iterable

_DECIMAL_COMMA = re.compile(r"[-+]?\d+,\d+")
_THOUSANDS_COMMA = re.compile(r"[-+]?\d{1,3}(?:,\d{3})+(?:\.\d+)?")
_NUMERIC_LITERAL = re.compile(r"[-+]?[\d.,]*\d[\d.,]*")
_NUMERIC_ROW_VALUE = re.compile(r"[-+.,\s\d]+")

_QUOTES = "\"'"


def _unquote(token: str) -> str:
    """Strip one layer of matching or dangling quote characters."""
    if token[:1] in _QUOTES:
        token = token[1:]
    if token[-1:] in _QUOTES:
        token = token[:-1]
    return token


def is_decimal_comma_number(token: str) -> bool:
    return _DECIMAL_COMMA.fullmatch(token) is not None


def is_thousands_comma_number(token: str) -> bool:
    return _THOUSANDS_COMMA.fullmatch(token) is not None


def is_numeric_literal(value: str) -> bool:
    """Check a trimmed field value against the permissive number grammar."""
    return _NUMERIC_LITERAL.fullmatch(_unquote(value)) is not None


def is_numeric_row(values: Iterable[str]) -> bool:
    """True if the row holds numbers only (so it cannot be a header).

    Empty values are ignored, but at least one value must be present.
    """
    seen = False
    for value in values:
        if not value.strip():
            continue
        if _NUMERIC_ROW_VALUE.fullmatch(value) is None:
            return False
        seen = True
    return seen


def numeric_comma_count(line: str, other_separators: Iterable[str] = ()) -> int:
    """Count commas in ``line`` that belong to comma-formatted numbers.

    The line is cut into tokens at whitespace and at every other candidate
    separator; each token that is a decimal-comma or thousands-comma number
    contributes all of its commas.

    Args:
        line: Raw input line
        other_separators: Candidate separators besides the comma

    Returns:
        Number of commas that are part of numbers rather than separators
    """
    for sep in other_separators:
        line = line.replace(sep, " ")

    count = 0
    for token in line.split():
        token = _unquote(token)
        if is_decimal_comma_number(token) or is_thousands_comma_number(token):
            count += token.count(",")
    return count


__all__ = [
    "is_decimal_comma_number",
    "is_numeric_literal",
    "is_numeric_row",
    "is_thousands_comma_number",
    "numeric_comma_count",
]
