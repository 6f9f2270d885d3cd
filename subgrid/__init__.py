"""
subgrid - an in-memory filter, sort, paginate, and select engine for
subscription tables.

This package derives the exact page of rows a subscription table should
render from a record set and a view state:

- Filter: case-insensitive text search plus status and category facets
- Sort: typed per-column comparators with a deterministic id tie-break
- Paginate: 1-based page slicing and page-count arithmetic
- Select: id-keyed selection that survives filtering, sorting, and paging

Everything runs synchronously over locally held data; the host feeds in
records and view-state changes and pulls a RenderFrame back out.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from subgrid.config import Settings, get_settings
from subgrid.domain.models import Category, ColumnId, Record, SortDirection, Status
from subgrid.errors import InvalidConfiguration
from subgrid.pipeline import RenderFrame, recompute
from subgrid.stages.abstract import AbstractPipelineStage, PipelineStage
from subgrid.table import SubscriptionTable
from subgrid.utils.logging import configure_logging, get_logger
from subgrid.view_state import ViewState

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Category",
    "ColumnId",
    "Record",
    "SortDirection",
    "Status",
    # Engine
    "InvalidConfiguration",
    "RenderFrame",
    "SubscriptionTable",
    "ViewState",
    "recompute",
    # Stage abstractions
    "AbstractPipelineStage",
    "PipelineStage",
    # Logging
    "configure_logging",
    "get_logger",
]
