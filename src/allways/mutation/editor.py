"""
SourceEditor: read and atomically write source files without touching
their line endings.
"""

import difflib
import os
import shutil
import tempfile
from pathlib import Path
from typing import List

from allways.exceptions import FileAccessError
from allways.logging_config import logger


class SourceEditor:
    """
    Read/write helper for the file driver.

    Features:
    - UTF-8 text with newline translation disabled, so CRLF survives
    - Atomic writes (temp file + rename) keeping the original file mode
    - Unified diffs for --diff output
    """

    encoding = "utf-8"

    def read(self, file_path: str) -> str:
        """
        Read a file exactly as stored.

        Raises:
            FileAccessError: If the path is missing, unreadable or not UTF-8
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileAccessError(str(path), "no such file")
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(str(path), str(e)) from e

    def write(self, file_path: str, content: str) -> None:
        """
        Write file atomically using temp file + rename.

        Raises:
            FileAccessError: If the temp file cannot be created or replaced
        """
        path = Path(file_path)

        try:
            # Temp file in the target's directory so the rename stays on one filesystem
            fd, temp_path = tempfile.mkstemp(
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp"
            )
        except OSError as e:
            raise FileAccessError(str(path), f"failed to create temp file: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
            shutil.copymode(str(path), temp_path)
            os.replace(temp_path, str(path))
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise FileAccessError(str(path), f"failed during atomic write: {e}") from e

        logger.debug(f"Atomic write completed: {file_path}")

    def generate_unified_diff(
        self,
        file_path: str,
        original_content: str,
        modified_content: str,
    ) -> str:
        """
        Generate unified diff between original and modified content.

        Args:
            file_path: Path to file (for diff header)
            original_content: Original file content
            modified_content: Modified file content

        Returns:
            Unified diff string, empty when the contents are equal
        """
        original_lines = original_content.splitlines(keepends=True)
        modified_lines = modified_content.splitlines(keepends=True)
        diff_lines: List[str] = list(difflib.unified_diff(
            original_lines,
            modified_lines,
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
        ))
        # A last line without newline would run into the next hunk header
        return "".join(line if line.endswith("\n") else line + "\n" for line in diff_lines)
