"""Domain exceptions."""

from boolfilter.domain.exceptions.base import BoolFilterError
from boolfilter.domain.exceptions.expression import InvalidExpressionError

__all__ = [
    "BoolFilterError",
    "InvalidExpressionError",
]
