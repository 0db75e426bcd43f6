"""Terminal display width measurement.

Two measurers are available:
- CharCountMeasurer: one column per code point (plain ASCII terminals)
- WcwidthMeasurer: East Asian wide characters count as two columns,
  combining marks and zero-width joiners as none

The measurer is picked once by ``select_measurer`` and handed to the
profiler and renderer; nothing probes for wide-character support later.
"""

from typing import Protocol

import wcwidth as _wcwidth


class WidthMeasurer(Protocol):
    """Anything that can tell how many terminal columns a string occupies."""

    def width(self, text: str) -> int: ...


class CharCountMeasurer:
    """Count every character as one column."""

    def width(self, text: str) -> int:
        return len(text)


class WcwidthMeasurer:
    """Measure with the ``wcwidth`` tables."""

    def width(self, text: str) -> int:
        if not text:
            return 0

        # Fast path for plain ASCII without control characters
        if text.isascii() and text.isprintable():
            return len(text)

        total = _wcwidth.wcswidth(text)
        if total >= 0:
            return total

        # wcswidth gives up on control characters; count them as zero
        return sum(max(_wcwidth.wcwidth(ch), 0) for ch in text)


def select_measurer(wide_chars: bool = True) -> WidthMeasurer:
    """Return the measurer for this run.

    Args:
        wide_chars: Use wcwidth-aware measurement (default) instead of
            counting characters

    Returns:
        A WidthMeasurer instance
    """
    if wide_chars:
        return WcwidthMeasurer()
    return CharCountMeasurer()


__all__ = [
    "CharCountMeasurer",
    "WcwidthMeasurer",
    "WidthMeasurer",
    "select_measurer",
]
