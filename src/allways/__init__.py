"""
allways - keep `__all__` in sync with what a module imports and defines.

Scans the top-level imports, functions and classes of a Python module and
rewrites a marker-delimited `__all__` block to list every public name.
"""

__version__ = "0.2.0"

from allways.driver import process_file, process_files
from allways.exceptions import (
    AllwaysError,
    ConfigError,
    FileAccessError,
    MalformedMarkerError,
    ParseFailure,
)
from allways.pipeline import compute_exports, process_source
from allways.schemas import FileResult, ProcessResult, RunSummary


# allways: start
__all__ = [
    "AllwaysError",
    "ConfigError",
    "FileAccessError",
    "FileResult",
    "MalformedMarkerError",
    "ParseFailure",
    "ProcessResult",
    "RunSummary",
    "compute_exports",
    "process_file",
    "process_files",
    "process_source",
]
# allways: end
