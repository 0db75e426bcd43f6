"""Column selection and reordering.

A column spec is a comma-separated list of 1-based field positions and
ranges:

    "2"        only the second field
    "1,3-5"    fields 1, 3, 4, 5
    "5-3"      fields 5, 4, 3 (descending range)
    "3,1"      fields 3 then 1

Output columns follow the order in which positions are listed. A
position may appear more than once.
"""

from typing import List, Optional, Sequence, Tuple

from .errors import FatalInputError


def _parse_position(text: str, token: str) -> int:
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise FatalInputError(f"Invalid column specification: {token!r}")
    position = int(text)
    if position < 1:
        raise FatalInputError(
            f"Invalid column specification: {token!r} (columns start at 1)"
        )
    return position


def parse_column_spec(spec: str) -> Tuple[int, ...]:
    """Parse a column spec into 1-based input positions in output order.

    Raises:
        FatalInputError: If a token is neither an integer nor two
            integers joined by "-"
    """
    positions: List[int] = []
    for token in spec.split(","):
        if "-" in token:
            first, _, last = token.partition("-")
            start = _parse_position(first, token)
            stop = _parse_position(last, token)
            step = 1 if stop >= start else -1
            positions.extend(range(start, stop + step, step))
        else:
            positions.append(_parse_position(token, token))
    return tuple(positions)


class ColumnSelector:
    """Map input rows onto output columns."""

    def __init__(self, positions: Optional[Sequence[int]] = None):
        self.positions: Optional[Tuple[int, ...]] = (
            tuple(positions) if positions is not None else None
        )

    @classmethod
    def from_spec(cls, spec: Optional[str]) -> "ColumnSelector":
        """Build a selector from a user spec; blank or None is the identity."""
        if spec is None or not spec.strip():
            return cls()
        return cls(parse_column_spec(spec))

    @property
    def width(self) -> Optional[int]:
        """Number of output columns, or None when it follows the input."""
        return None if self.positions is None else len(self.positions)

    def select(self, row: Sequence[str]) -> List[str]:
        """Return the output fields of ``row``; missing fields are empty."""
        if self.positions is None:
            return list(row)
        return [row[p - 1] if p <= len(row) else "" for p in self.positions]

    def __repr__(self) -> str:
        return f"ColumnSelector({self.positions!r})"


__all__ = ["ColumnSelector", "parse_column_spec"]
