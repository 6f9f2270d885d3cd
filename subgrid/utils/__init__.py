"""
Utilities package for subgrid.

Exports shared helpers for logging and profiling. Keep this package
lightweight and free of domain-specific logic.
"""

from subgrid.utils.logging import configure_logging, get_logger
from subgrid.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
