"""csvtable core logic.

This module contains everything below the CLI:
- sniffer: delimiter detection over a bounded sample
- parser: tolerant line-at-a-time field splitting
- profiler: column widths, numeric detection, header detection
- selector: column spec parsing and row remapping
- render: box-drawing and literal-separator output
- pipeline: the two-phase driver tying them together
"""

from .errors import CsvTableError, FatalInputError, RowParseError
from .pipeline import TablePipeline, render_table
from .selector import ColumnSelector, parse_column_spec
from .sniffer import SniffResult, sniff
from .width import select_measurer

__all__ = [
    "ColumnSelector",
    "CsvTableError",
    "FatalInputError",
    "RowParseError",
    "SniffResult",
    "TablePipeline",
    "parse_column_spec",
    "render_table",
    "select_measurer",
    "sniff",
]
