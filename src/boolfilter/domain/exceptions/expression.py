"""Filter expression exceptions."""

from boolfilter.domain.exceptions.base import BoolFilterError


class InvalidExpressionError(BoolFilterError):
    """Clause cannot be interpreted as a filter expression.

    Raised by BoolFilter.parse() for an empty clause.
    Filter state is left unchanged when raised.

    Attributes:
        expression: Offending clause (may be empty)
        reason: Why clause is invalid (must not be empty)
    """

    def __init__(self, expression: str, reason: str) -> None:
        # FAIL-FIRST validation
        if expression is None:
            raise TypeError("expression must not be None")
        if not reason:
            raise ValueError("reason must not be empty")

        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid filter expression '{expression}': {reason}")
