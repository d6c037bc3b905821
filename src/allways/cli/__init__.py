"""
CLI support modules: output helpers and CLI-wide configuration.
"""

from allways.cli import config, output

__all__ = ["config", "output"]
