"""Column width and type profiling over the sample rows."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..models.layout import ColumnLayout
from .grammar import is_numeric_literal, is_numeric_row
from .width import WidthMeasurer


@dataclass
class ColumnDescriptor:
    """Mutable per-column statistics collected while scanning the sample.

    Width only grows until ``clamp`` is called. ``numeric`` starts unknown
    (None), becomes True on the first number and False on the first
    non-number; once False it stays False.
    """

    width: int = 0
    numeric: Optional[bool] = None

    def widen(self, width: int) -> None:
        if width > self.width:
            self.width = width

    def classify(self, value: str) -> None:
        if not value:
            return
        if not is_numeric_literal(value):
            self.numeric = False
        elif self.numeric is None:
            self.numeric = True

    def clamp(self, limit: Optional[int]) -> None:
        if limit is not None and self.width > limit:
            self.width = limit

    def layout(self) -> ColumnLayout:
        return ColumnLayout(width=self.width, numeric=self.numeric is True)


@dataclass
class ColumnProfile:
    """Result of profiling: one descriptor per output column."""

    columns: List[ColumnDescriptor] = field(default_factory=list)
    header: bool = False

    def layouts(self) -> Tuple[ColumnLayout, ...]:
        return tuple(col.layout() for col in self.columns)


def detect_header(first_row: Sequence[str], enabled: bool = True) -> bool:
    """A header is assumed unless disabled or the first row is all numbers."""
    return enabled and not is_numeric_row(first_row)


def profile_columns(
    rows: Sequence[Sequence[str]],
    measurer: WidthMeasurer,
    width_limit: Optional[int] = None,
    header: bool = True,
    size: Optional[int] = None,
) -> ColumnProfile:
    """Derive column widths, numeric flags and header presence.

    Args:
        rows: Sample rows, already mapped to output columns
        measurer: Display width measurer
        width_limit: Cap applied to every width after the scan
        header: Whether header treatment is enabled at all
        size: Fixed column count (a column spec); defaults to the first
            row's length

    Returns:
        ColumnProfile with clamped descriptors

    Columns are allocated upfront from ``size`` or the first row. A later
    row with more fields appends new descriptors with width 0 and unknown
    type. Header values count toward widths only.
    """
    if not rows:
        return ColumnProfile(header=False)

    has_header = detect_header(rows[0], header)
    count = size if size is not None else len(rows[0])
    columns = [ColumnDescriptor() for _ in range(count)]

    for index, row in enumerate(rows):
        if len(row) > len(columns):
            columns.extend(ColumnDescriptor() for _ in range(len(row) - len(columns)))

        skip_types = has_header and index == 0
        for column, value in zip(columns, row):
            value = value.strip()
            if not skip_types:
                column.classify(value)
            column.widen(measurer.width(value))

    for column in columns:
        column.clamp(width_limit)

    return ColumnProfile(columns=columns, header=has_header)


__all__ = [
    "ColumnDescriptor",
    "ColumnProfile",
    "detect_header",
    "profile_columns",
]
