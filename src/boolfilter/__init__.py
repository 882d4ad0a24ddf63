"""boolfilter - boolean filter expressions for CLI --filter flags."""

__version__ = "0.1.0"

from boolfilter.domain.exceptions import BoolFilterError, InvalidExpressionError
from boolfilter.domain.model.bool_filter import BoolFilter, BoolFilterState

__all__ = [
    "BoolFilter",
    "BoolFilterError",
    "BoolFilterState",
    "InvalidExpressionError",
    "__version__",
]
