"""Reporter protocol for rendering filter state.

NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from boolfilter.domain.model.bool_filter import BoolFilterState


class ReporterProtocol(Protocol):
    """Contract for reporters.

    boolfilter provides ConsoleReporter and JSONReporter as defaults.

    Example:
        class OneLineReporter:
            def report(self, state: BoolFilterState) -> str:
                return ",".join(str(v).lower() for v in sorted(state.accepted))
    """

    def report(self, state: BoolFilterState) -> str:
        """Render filter state.

        Output is str, not print(). Caller decides destination.

        Args:
            state: Snapshot from BoolFilter.freeze()
        """
        ...
