"""Clause grammar for boolean filter expressions.

One clause contributes exactly one boolean outcome:

    =true        -> True
    =false       -> False
    !=true       -> False
    !=false      -> True
    not-<token>  -> False
    <token>      -> True   (presence token, e.g. "dangling")
    ""           -> InvalidExpressionError

Forms are checked in the order above. Matching is exact and case-sensitive,
so "=TRUE" is a presence token.
"""

from enum import Enum, auto

from boolfilter.domain.exceptions.expression import InvalidExpressionError

EQUALS_TRUE = "=true"
EQUALS_FALSE = "=false"
NOT_EQUALS_TRUE = "!=true"
NOT_EQUALS_FALSE = "!=false"
NEGATION_PREFIX = "not-"


class ClauseForm(Enum):
    """Recognized clause shape."""

    EQUALS_TRUE = auto()
    EQUALS_FALSE = auto()
    NOT_EQUALS_TRUE = auto()
    NOT_EQUALS_FALSE = auto()
    NEGATED_TOKEN = auto()  # not-<token>
    PRESENCE_TOKEN = auto()  # any other non-empty string

    @property
    def outcome(self) -> bool:
        """Boolean outcome this form adds to the accepted set."""
        return _OUTCOMES[self]


_OUTCOMES: dict[ClauseForm, bool] = {
    ClauseForm.EQUALS_TRUE: True,
    ClauseForm.EQUALS_FALSE: False,
    ClauseForm.NOT_EQUALS_TRUE: False,
    ClauseForm.NOT_EQUALS_FALSE: True,
    ClauseForm.NEGATED_TOKEN: False,
    ClauseForm.PRESENCE_TOKEN: True,
}

_EXACT_FORMS: dict[str, ClauseForm] = {
    EQUALS_TRUE: ClauseForm.EQUALS_TRUE,
    EQUALS_FALSE: ClauseForm.EQUALS_FALSE,
    NOT_EQUALS_TRUE: ClauseForm.NOT_EQUALS_TRUE,
    NOT_EQUALS_FALSE: ClauseForm.NOT_EQUALS_FALSE,
}


def classify_clause(clause: str) -> ClauseForm:
    """Determine the form of a clause.

    Args:
        clause: Raw clause, already isolated from any key=value syntax.

    Returns:
        Matching ClauseForm.

    Raises:
        TypeError: If clause is not a str.
        InvalidExpressionError: If clause is empty.
    """
    if not isinstance(clause, str):
        raise TypeError(f"clause must be str, got {type(clause).__name__}")
    if not clause:
        raise InvalidExpressionError(clause, "empty expression")

    form = _EXACT_FORMS.get(clause)
    if form is not None:
        return form
    if clause.startswith(NEGATION_PREFIX):
        return ClauseForm.NEGATED_TOKEN
    return ClauseForm.PRESENCE_TOKEN


def clause_outcome(clause: str) -> bool:
    """Boolean outcome of a clause. Raises like classify_clause()."""
    return classify_clause(clause).outcome
