"""Domain ports: contracts implemented outside the domain."""

from boolfilter.domain.ports.reporter import ReporterProtocol

__all__ = ["ReporterProtocol"]
