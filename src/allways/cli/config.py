"""
CLI Configuration

Centralized configuration for the allways CLI.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Machine mode (plain, markup-free output)
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: Optional[bool]) -> None:
        """Set machine mode; None falls back to the environment."""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Human mode is the default. ALLWAYS_MACHINE_MODE=1 opts in.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        return os.getenv("ALLWAYS_MACHINE_MODE", "").lower() in ("1", "true", "yes")
