"""Sniff-profile-render pipeline.

Phase 1 buffers up to ``sniff_limit`` lines, picks the separator, parses
the buffered lines and profiles the columns. Phase 2 renders the sample
rows and then the rest of the input one line at a time. The input is read
exactly once, so pipes work.
"""

import sys
from typing import Iterable, Iterator, List, Optional, Tuple

from ..models.config import TableConfig
from ..models.layout import RenderState
from .errors import FatalInputError
from .parser import Row, parse_lines
from .profiler import ColumnProfile, profile_columns
from .render import TableRenderer
from .selector import ColumnSelector
from .sniffer import SniffResult, sniff
from .width import WidthMeasurer, select_measurer

# Line-number width used when the sample did not reach the end of input
MIN_NUMBER_WIDTH = 4


def line_number_width(sample_size: int, exhausted: bool) -> int:
    """Columns reserved for line numbers.

    When the whole input fit in the sample the largest number is known;
    otherwise reserve at least MIN_NUMBER_WIDTH digits.
    """
    digits = len(str(max(sample_size, 1)))
    return digits if exhausted else max(MIN_NUMBER_WIDTH, digits)


class TablePipeline:
    """Drive one csvtable run over a stream of text lines."""

    def __init__(
        self,
        config: TableConfig,
        measurer: Optional[WidthMeasurer] = None,
        verbose: bool = False,
    ):
        """Initialize the pipeline.

        Args:
            config: Run configuration
            measurer: Width measurer (default: chosen from config.wide_chars)
            verbose: Print sniffing and profiling details to stderr

        Raises:
            FatalInputError: If the column spec is invalid
        """
        self.config = config
        self.measurer = measurer or select_measurer(config.wide_chars)
        self.selector = ColumnSelector.from_spec(config.columns)
        self.verbose = verbose
        self.sniffed: Optional[SniffResult] = None
        self.profile: Optional[ColumnProfile] = None
        self.skipped: List[int] = []

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)

    def _sample_rows(self, sniffed: SniffResult) -> List[Tuple[int, Row]]:
        rows = []
        for lineno, row in parse_lines(
            sniffed.lines, sniffed.separator, self.config.quotechar, skipped=self.skipped
        ):
            row = self.selector.select(row)
            if any(field.strip() for field in row):
                rows.append((lineno, row))
        return rows

    def _render_state(self, profile: ColumnProfile, sniffed: SniffResult) -> RenderState:
        number_width = 0
        if self.config.line_numbers:
            number_width = line_number_width(len(sniffed.lines), sniffed.exhausted)
        return RenderState(
            columns=profile.layouts(),
            header=profile.header,
            number_width=number_width,
            truncate=self.config.truncate,
            width_limit=self.config.width_limit,
            join=self.config.output_separator,
        )

    def run(self, lines: Iterable[str]) -> Iterator[str]:
        """Render ``lines`` as a table, yielding printed lines.

        Raises:
            FatalInputError: If the sample holds no usable rows
        """
        stream = iter(lines)
        config = self.config

        sniffed = sniff(stream, config.sniff_limit, config.delimiter, verbose=self.verbose)
        self.sniffed = sniffed

        rows = self._sample_rows(sniffed)
        if not rows:
            raise FatalInputError("No usable rows in input")

        profile = profile_columns(
            [row for _, row in rows],
            self.measurer,
            width_limit=config.width_limit,
            header=config.header,
            size=self.selector.width,
        )
        self.profile = profile
        self._log(
            f"Columns: {len(profile.columns)}; header={profile.header}; widths="
            + ",".join(str(col.width) for col in profile.columns)
        )

        state = self._render_state(profile, sniffed)
        renderer = TableRenderer(state, self.measurer)

        yield from renderer.top()
        for index, (lineno, row) in enumerate(rows):
            if index == 0 and state.header:
                yield from renderer.render_row(row)
                yield from renderer.header_separator()
            else:
                yield from renderer.render_row(row, lineno)

        # Rest of the input: no buffering beyond the current line
        start = len(sniffed.lines) + 1
        for lineno, row in parse_lines(
            stream, sniffed.separator, config.quotechar, start=start, skipped=self.skipped
        ):
            yield from renderer.render_row(self.selector.select(row), lineno)

        yield from renderer.bottom()

        if self.skipped:
            self._log(f"Dropped {len(self.skipped)} unparseable line(s)")


def render_table(
    lines: Iterable[str],
    config: Optional[TableConfig] = None,
    measurer: Optional[WidthMeasurer] = None,
) -> Iterator[str]:
    """Render delimiter-separated ``lines`` as table lines.

    Example:
        >>> for line in render_table(["a,b\\n", "1,2\\n"]):
        ...     print(line)
        ┌───┬───┐
        │ a │ b │
        ┝━━━┿━━━┥
        │ 1 │ 2 │
        └───┴───┘
    """
    return TablePipeline(config or TableConfig(), measurer).run(lines)


__all__ = [
    "MIN_NUMBER_WIDTH",
    "TablePipeline",
    "line_number_width",
    "render_table",
]
