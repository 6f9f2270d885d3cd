"""
Stages package for subgrid.

Re-exports the stage interfaces and the concrete filter, sort, and paginate
stages so downstream code can import from `subgrid.stages` directly.
"""

from subgrid.stages.abstract import AbstractPipelineStage, PipelineStage
from subgrid.stages.filtering import FilterStage, filter_records
from subgrid.stages.pagination import PaginateStage, paginate, total_pages
from subgrid.stages.sorting import SortStage, sort_records

__all__ = [
    # Abstracts
    "AbstractPipelineStage",
    "PipelineStage",
    # Concrete stages
    "FilterStage",
    "PaginateStage",
    "SortStage",
    # Pure functions
    "filter_records",
    "paginate",
    "sort_records",
    "total_pages",
]
