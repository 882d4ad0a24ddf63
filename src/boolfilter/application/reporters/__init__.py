"""Reporters for filter state.

ConsoleReporter renders with rich; JSONReporter uses stdlib only.
Users can implement custom reporters via ReporterProtocol.
"""

from boolfilter.application.reporters._base import BaseReporter
from boolfilter.application.reporters.console import ConsoleConfig, ConsoleReporter
from boolfilter.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
