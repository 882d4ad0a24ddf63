"""Base reporter class for filter state output.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boolfilter.domain.model.bool_filter import BoolFilterState


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol."""

    @abstractmethod
    def report(self, state: BoolFilterState) -> str:
        """Render filter state.

        Args:
            state: Snapshot from BoolFilter.freeze()

        Returns:
            Rendered output. Caller decides destination.
        """


def format_bool(value: bool) -> str:
    """Format bool the way clauses spell it."""
    return "true" if value else "false"


def format_accepted(state: BoolFilterState) -> str:
    """Format accepted set, True first: {true, false}."""
    return "{" + ", ".join(format_bool(v) for v in sorted(state.accepted, reverse=True)) + "}"
