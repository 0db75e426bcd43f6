"""Width-aware table rendering.

Box-drawing output looks like this:

    ┌──────┬─────┐
    │ name │ qty │
    ┝━━━━━━┿━━━━━┥
    │ nut  │  12 │
    │ bolt │   7 │
    └──────┴─────┘

With a literal join string the borders disappear and cells are joined by
that string instead.
"""

from typing import List, Optional, Sequence, Tuple

from ..models.layout import ColumnLayout, RenderState
from .width import WidthMeasurer

# (left, fill, cross, right)
BOX_TOP = ("┌", "─", "┬", "┐")
BOX_HEADER = ("┝", "━", "┿", "┥")
BOX_BOTTOM = ("└", "─", "┴", "┘")
BOX_VERTICAL = "│"


class TableRenderer:
    """Turn rows into printed lines according to a RenderState."""

    def __init__(self, state: RenderState, measurer: WidthMeasurer):
        self.state = state
        self.measurer = measurer

    @property
    def boxed(self) -> bool:
        return self.state.join is None

    def _border(self, glyphs: Tuple[str, str, str, str]) -> List[str]:
        if not self.boxed:
            return []
        left, fill, cross, right = glyphs
        widths = [col.width for col in self.state.columns]
        if self.state.line_numbers:
            widths.insert(0, self.state.number_width)
        return [left + cross.join(fill * (w + 2) for w in widths) + right]

    def top(self) -> List[str]:
        return self._border(BOX_TOP)

    def header_separator(self) -> List[str]:
        return self._border(BOX_HEADER)

    def bottom(self) -> List[str]:
        return self._border(BOX_BOTTOM)

    def slice_field(self, text: str, width: int) -> Tuple[str, str, int]:
        """Cut the longest prefix of ``text`` that fits in ``width`` columns.

        Returns:
            Tuple of (piece, rest, width). ``width`` comes back larger when
            not even the first character fits.
        """
        if not text:
            return "", "", width

        first = self.measurer.width(text[0])
        if first > width:
            width = first

        used = 0
        taken = 0
        for ch in text:
            w = self.measurer.width(ch)
            if used + w > width:
                break
            used += w
            taken += 1
        return text[:taken], text[taken:], width

    def _pad(self, piece: str, width: int, numeric: bool) -> str:
        fill = " " * max(width - self.measurer.width(piece), 0)
        return fill + piece if numeric else piece + fill

    def _assemble(self, cells: List[str]) -> str:
        if self.boxed:
            inner = BOX_VERTICAL.join(f" {cell} " for cell in cells)
            return BOX_VERTICAL + inner + BOX_VERTICAL
        join = self.state.join
        return join.lstrip() + join.join(cells) + join.rstrip()

    def _layouts_for(self, cells: List[str]) -> List[ColumnLayout]:
        layouts = list(self.state.columns)
        limit = self.state.width_limit
        for extra in cells[len(layouts):]:
            width = self.measurer.width(extra)
            if limit is not None:
                width = min(width, limit)
            layouts.append(ColumnLayout(width=width))
        return layouts

    def render_row(
        self, fields: Sequence[str], lineno: Optional[int] = None
    ) -> List[str]:
        """Render one logical row.

        Args:
            fields: Output fields of the row
            lineno: Input line number to show (None leaves the cell blank)

        Returns:
            Printed lines: none for an all-empty row, exactly one in
            truncate mode, one or more in wrap mode
        """
        cells = [field.strip() for field in fields]
        if len(cells) < len(self.state.columns):
            cells.extend([""] * (len(self.state.columns) - len(cells)))
        if not any(cells):
            return []

        layouts = self._layouts_for(cells)
        widths = [layout.width for layout in layouts]
        number = "" if lineno is None else str(lineno)

        lines: List[str] = []
        while True:
            pieces = []
            for i, layout in enumerate(layouts):
                piece, cells[i], widths[i] = self.slice_field(cells[i], widths[i])
                pieces.append(self._pad(piece, widths[i], layout.numeric))
            if self.state.line_numbers:
                pieces.insert(0, number.rjust(self.state.number_width))
                number = ""
            lines.append(self._assemble(pieces))

            if self.state.truncate or not any(cells):
                break

        return lines


__all__ = [
    "BOX_BOTTOM",
    "BOX_HEADER",
    "BOX_TOP",
    "BOX_VERTICAL",
    "TableRenderer",
]
