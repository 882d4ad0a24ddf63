"""Console reporter: BoolFilterState → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from boolfilter.application.reporters._base import BaseReporter, format_accepted, format_bool

if TYPE_CHECKING:
    from boolfilter.domain.model.bool_filter import BoolFilterState


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        title: Table title.
        width: Console width in columns (must be > 0).
        show_matches: Show filter() results for both subjects and missing key.
        color: Emit ANSI styles. False = plain text.
    """

    title: str = "Bool filter"
    width: int = 120
    show_matches: bool = True
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted table.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, state: BoolFilterState) -> str:
        """Format filter state as rich table.

        Args:
            state: Filter snapshot to format.

        Returns:
            Formatted string, with colors unless config.color is False.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )
        console.print(self._build_table(state))
        return output.getvalue()

    def _build_table(self, state: BoolFilterState) -> Table:
        table = Table(title=self._config.title)
        table.add_column("Property", style="bold")
        table.add_column("Value")

        table.add_row("accepted", format_accepted(state))
        table.add_row("active", self._styled(state.active))
        table.add_row("value", self._styled(state.value()))

        if self._config.show_matches:
            table.add_row("filter(true)", self._styled(state.filter(True)))
            table.add_row("filter(false)", self._styled(state.filter(False)))
            table.add_row("missing key", self._styled(state.match_if_key_missing()))

        return table

    def _styled(self, value: bool) -> str:
        color = "green" if value else "red"
        return f"[{color}]{format_bool(value)}[/{color}]"
