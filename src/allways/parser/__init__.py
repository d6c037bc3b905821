"""
This facade exposes the public API for the parser module.
"""
from .collector import collect_names, existing_export_names, filter_public, is_private
from .scanner import EXPORT_LIST_NAME, parse_module, scan_statements

__all__ = [
    "EXPORT_LIST_NAME",
    "collect_names",
    "existing_export_names",
    "filter_public",
    "is_private",
    "parse_module",
    "scan_statements",
]
