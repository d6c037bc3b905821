"""
allways Path Configuration

All paths are relative to the project root (current working directory).

Directory Structure:
.allways/
├── config.json          # Project-local configuration
└── logs/                # Log files (opt-in)
"""

from pathlib import Path
from typing import Optional


class AllwaysPaths:
    """
    Centralized path configuration for allways.

    All paths are lazily resolved relative to project_root.
    Default project_root is current working directory.
    """

    ALLWAYS_DIR = ".allways"
    GLOBAL_DIR = Path.home() / ".allways"

    CONFIG_NAME = "config.json"
    LOG_NAME = "allways.log"
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None):
        self._project_root = project_root

    @property
    def project_root(self) -> Path:
        if self._project_root is not None:
            return self._project_root
        return Path.cwd()

    @property
    def allways_dir(self) -> Path:
        return self.project_root / self.ALLWAYS_DIR

    @property
    def local_config(self) -> Path:
        return self.allways_dir / self.CONFIG_NAME

    @property
    def global_config(self) -> Path:
        return self.GLOBAL_DIR / self.CONFIG_NAME

    @property
    def logs_dir(self) -> Path:
        return self.allways_dir / self.LOGS_DIR

    @property
    def log_file(self) -> Path:
        return self.logs_dir / self.LOG_NAME

    def ensure_dirs(self) -> None:
        """Create the local data directories if they do not exist."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)


def get_paths(project_root: Optional[Path] = None) -> AllwaysPaths:
    """Get a paths object for the given (or current) project root."""
    return AllwaysPaths(project_root)
