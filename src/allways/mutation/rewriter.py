"""
Marker-Block Rewriter: render the __all__ assignment and splice it in.
"""

from typing import List, Sequence, Tuple

from allways.logging_config import logger
from allways.parser.scanner import EXPORT_LIST_NAME
from .markers import END_MARKER, START_MARKER, find_marker_span

INDENT = "    "


def detect_line_ending(content: str) -> str:
    """'\\r\\n' if the text already uses CRLF, '\\n' otherwise."""
    if "\r\n" in content:
        return "\r\n"
    return "\n"


def render_assignment(names: Sequence[str], newline: str = "\n") -> str:
    """
    Render `__all__ = [...]` with one double-quoted name per line.

    The names are identifiers, so no escaping is needed.
    """
    if not names:
        return f"{EXPORT_LIST_NAME} = []{newline}"
    lines = [f"{EXPORT_LIST_NAME} = ["]
    lines.extend(f'{INDENT}"{name}",' for name in names)
    lines.append("]")
    return newline.join(lines) + newline


def render_block(names: Sequence[str], newline: str = "\n") -> str:
    """Full generated block including both marker lines."""
    return f"{START_MARKER}{newline}{render_assignment(names, newline)}{END_MARKER}{newline}"


def rewrite_source(text: str, names: List[str], file_path: str = "<string>") -> Tuple[str, bool]:
    """
    Produce new file text carrying `names` in the generated block.

    An existing block has its body replaced in place. Otherwise a new
    block is appended at end of file after two blank lines.

    Returns:
        (new_text, block_created)

    Raises:
        MalformedMarkerError: If the marker pair is unusable
    """
    newline = detect_line_ending(text)
    span = find_marker_span(text, file_path)

    if span is not None:
        logger.debug(f"Replacing allways block on lines {span.start_line}-{span.end_line} of {file_path}")
        new_text = (
            text[:span.body_start]
            + render_assignment(names, newline)
            + text[span.body_end:]
        )
        return new_text, False

    logger.debug(f"Appending new allways block to {file_path}")
    block = render_block(names, newline)
    if not text:
        return block, True
    if not text.endswith("\n"):
        text += newline
    return text + newline + newline + block, True
