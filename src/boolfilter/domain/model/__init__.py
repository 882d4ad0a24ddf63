"""Domain model: clause grammar and the boolean matcher."""

from boolfilter.domain.model.bool_filter import BoolFilter, BoolFilterState
from boolfilter.domain.model.clause import ClauseForm, classify_clause, clause_outcome

__all__ = [
    "BoolFilter",
    "BoolFilterState",
    "ClauseForm",
    "classify_clause",
    "clause_outcome",
]
