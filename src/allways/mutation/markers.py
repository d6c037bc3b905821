"""
Locate the `# allways: start` / `# allways: end` comment pair.
"""

from typing import Iterator, List, Optional, Tuple

from allways.exceptions import MalformedMarkerError
from allways.schemas import MarkerProblem, MarkerSpan

START_MARKER = "# allways: start"
END_MARKER = "# allways: end"


def _iter_lines(text: str) -> Iterator[Tuple[int, int, int, str]]:
    """Yield (lineno, line_start, line_end, content) with line_end past the newline."""
    offset = 0
    length = len(text)
    for lineno, line in enumerate(text.split("\n"), start=1):
        if offset >= length and not line:
            return
        line_end = min(offset + len(line) + 1, length)
        yield lineno, offset, line_end, line
        offset = line_end


def find_marker_span(text: str, file_path: str = "<string>") -> Optional[MarkerSpan]:
    """
    Find the existing generated block.

    Returns:
        MarkerSpan, or None when the text has neither marker

    Raises:
        MalformedMarkerError: For an unpaired, repeated or reversed marker
    """
    starts: List[Tuple[int, int, int]] = []
    ends: List[Tuple[int, int, int]] = []

    for lineno, line_start, line_end, line in _iter_lines(text):
        stripped = line.rstrip()
        if stripped == START_MARKER:
            starts.append((lineno, line_start, line_end))
        elif stripped == END_MARKER:
            ends.append((lineno, line_start, line_end))

    if not starts and not ends:
        return None

    if len(starts) > 1 or len(ends) > 1:
        lines = ", ".join(str(m[0]) for m in sorted(starts + ends))
        raise MalformedMarkerError(
            MarkerProblem.DUPLICATE,
            f"expected one start and one end marker, found markers on lines {lines}",
            file_path,
        )
    if not ends:
        raise MalformedMarkerError(
            MarkerProblem.MISSING_END,
            f"'{START_MARKER}' on line {starts[0][0]} has no matching '{END_MARKER}'",
            file_path,
        )
    if not starts:
        raise MalformedMarkerError(
            MarkerProblem.MISSING_START,
            f"'{END_MARKER}' on line {ends[0][0]} has no preceding '{START_MARKER}'",
            file_path,
        )

    start_lineno, _, start_line_end = starts[0]
    end_lineno, end_line_start, _ = ends[0]
    if end_lineno < start_lineno:
        raise MalformedMarkerError(
            MarkerProblem.OUT_OF_ORDER,
            f"'{END_MARKER}' on line {end_lineno} comes before '{START_MARKER}' on line {start_lineno}",
            file_path,
        )

    return MarkerSpan(
        body_start=start_line_end,
        body_end=end_line_start,
        start_line=start_lineno,
        end_line=end_lineno,
    )
