"""
Error kinds raised by the table engine.

The engine degrades gracefully for plausible-but-odd input (unknown sort
columns, out-of-range pages, selections of unknown ids). Only caller contract
violations surface as exceptions, and they do so at the mutator boundary.
"""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a view parameter or record set violates the engine contract."""


__all__ = ["InvalidConfiguration"]
