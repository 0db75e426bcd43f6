"""Delimiter detection over a bounded sample of input lines."""

import sys
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .grammar import numeric_comma_count

# Candidate separators in tie-break order
CANDIDATES = ("\t", ";", "|", ":", ",")

DEFAULT_SEPARATOR = ","


@dataclass(frozen=True)
class SniffResult:
    """Outcome of the sniffing phase."""

    separator: str
    lines: List[str]
    exhausted: bool
    """True when the input ended before the sample bound was reached."""


def read_sample(stream: Iterator[str], limit: int) -> Tuple[List[str], bool]:
    """Buffer up to ``limit`` lines from ``stream`` (0 = everything).

    The stream is left positioned after the last buffered line so the
    caller can keep reading from it; nothing is ever re-read.

    Returns:
        Tuple of (lines, exhausted)
    """
    lines: List[str] = []
    for line in stream:
        lines.append(line)
        if limit and len(lines) >= limit:
            return lines, False
    return lines, True


def count_candidates(lines: List[str]) -> Dict[str, int]:
    """Total occurrences of each candidate separator across ``lines``."""
    counts = dict.fromkeys(CANDIDATES, 0)
    for line in lines:
        line = line.rstrip("\r\n")
        for sep in CANDIDATES:
            counts[sep] += line.count(sep)
    return counts


def choose_separator(counts: Dict[str, int], numeric_commas: int = 0) -> str:
    """Pick a separator from raw counts.

    Args:
        counts: Occurrences per candidate separator
        numeric_commas: Commas found inside comma-formatted numbers

    Returns:
        The chosen separator; "," when nothing was observed

    Rules:
    - A comma competing with another candidate loses the commas that sit
      inside numbers; at zero or below it drops out
    - A colon drops out unless it is the only candidate left
    - Tab beats everything, then the highest count, then candidate order
    """
    candidates = {sep: n for sep, n in counts.items() if n > 0}

    if "," in candidates and len(candidates) > 1:
        adjusted = candidates[","] - numeric_commas
        if adjusted > 0:
            candidates[","] = adjusted
        else:
            del candidates[","]

    if len(candidates) > 1:
        candidates.pop(":", None)

    if not candidates:
        return DEFAULT_SEPARATOR
    if "\t" in candidates:
        return "\t"
    return max(CANDIDATES, key=lambda sep: candidates.get(sep, -1))


def sniff(
    stream: Iterator[str],
    limit: int = 1000,
    override: Optional[str] = None,
    verbose: bool = False,
) -> SniffResult:
    """Buffer the sample and choose the field separator.

    Args:
        stream: Line iterator; consumed only up to the sample bound
        limit: Sample size in lines (0 = unbounded)
        override: Fixed separator that skips detection
        verbose: Print the counts to stderr

    Returns:
        SniffResult with the separator and the buffered lines
    """
    lines, exhausted = read_sample(stream, limit)

    if override is not None:
        return SniffResult(separator=override, lines=lines, exhausted=exhausted)

    counts = count_candidates(lines)
    others = [sep for sep in CANDIDATES if sep != ","]
    numeric_commas = sum(numeric_comma_count(line, others) for line in lines)
    separator = choose_separator(counts, numeric_commas)

    if verbose:
        shown = ", ".join(f"{sep!r}={n}" for sep, n in counts.items() if n)
        print(
            f"Sniffed {len(lines)} lines: {shown or 'no candidates'}; "
            f"numeric commas={numeric_commas}; separator={separator!r}",
            file=sys.stderr,
        )

    return SniffResult(separator=separator, lines=lines, exhausted=exhausted)


__all__ = [
    "CANDIDATES",
    "DEFAULT_SEPARATOR",
    "SniffResult",
    "choose_separator",
    "count_candidates",
    "read_sample",
    "sniff",
]
