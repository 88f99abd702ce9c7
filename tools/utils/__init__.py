"""Shared utilities module."""

__all__ = [
    "cli_common",
    "config",
    "file_utils",
    "render",
    "serialization",
    "stat_mappings",
    "stat_thresholds",
]
