"""
Pipeline stage interfaces for subgrid.

Concrete stages (filter, sort, paginate) implement the PipelineStage
protocol: a pure transformation from an ordered record sequence and the
current ViewState to a new ordered record sequence. Stages never mutate the
records or the state they are handed.
"""

from __future__ import annotations

import abc
from typing import Protocol, Sequence, Tuple, runtime_checkable

from subgrid.domain.models import Record
from subgrid.view_state import ViewState


@runtime_checkable
class PipelineStage(Protocol):
    """
    Common interface all pipeline stages implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the transformation.
    """

    name: str
    description: str

    def apply(self, records: Sequence[Record], state: ViewState) -> Tuple[Record, ...]:
        """
        Transform `records` according to `state`.

        Returns
        -------
        tuple[Record, ...]
            A new ordered sequence; the input is left untouched.
        """
        ...


class AbstractPipelineStage(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses set `name` and `description` and implement `apply`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def apply(
        self, records: Sequence[Record], state: ViewState
    ) -> Tuple[Record, ...]:  # pragma: no cover - interface only
        """Run the stage and return the derived records."""
        raise NotImplementedError


__all__ = ["AbstractPipelineStage", "PipelineStage"]
