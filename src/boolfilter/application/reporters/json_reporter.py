"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from boolfilter.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from boolfilter.domain.model.bool_filter import BoolFilterState


class JSONReporter(BaseReporter):
    """JSON reporter for CI/CD integration or structured logging."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def report(self, state: BoolFilterState) -> str:
        """Report filter state as JSON document."""
        return json.dumps(self._state_to_dict(state), indent=self._indent)

    def _state_to_dict(self, state: BoolFilterState) -> dict[str, object]:
        """Convert BoolFilterState to JSON-serializable dict."""
        return {
            "accepted": sorted(state.accepted),
            "active": state.active,
            "value": state.value(),
            "match_if_key_missing": state.match_if_key_missing(),
            "matches": {
                "true": state.filter(True),
                "false": state.filter(False),
            },
        }
