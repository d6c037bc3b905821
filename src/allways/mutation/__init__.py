"""
Mutation package: locate, render and splice the generated __all__ block.

Edits are span replacements on the original text, so everything outside
the marker pair is left byte-for-byte as it was.
"""

from .editor import SourceEditor
from .markers import END_MARKER, START_MARKER, find_marker_span
from .rewriter import detect_line_ending, render_assignment, render_block, rewrite_source

__all__ = [
    "END_MARKER",
    "START_MARKER",
    "SourceEditor",
    "detect_line_ending",
    "find_marker_span",
    "render_assignment",
    "render_block",
    "rewrite_source",
]
