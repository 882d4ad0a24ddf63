"""Infrastructure layer: BoolFilter as plain predicate functions.

Predicates are pure functions: True = include subject, False = exclude.

Usage:
    from boolfilter.infrastructure.filters import matches_or_missing

    flt = BoolFilter.from_clauses("dangling")
    keep = matches_or_missing(flt)
    selected = [img for img in images if keep(getattr(img, "dangling", None))]
"""

from boolfilter.infrastructure.filters.bool_ import matches, matches_or_missing
from boolfilter.infrastructure.filters.composite import any_of, negate
from boolfilter.infrastructure.filters.types import BoolPredicate, PropertyPredicate

__all__ = [
    "BoolPredicate",
    "PropertyPredicate",
    "any_of",
    "matches",
    "matches_or_missing",
    "negate",
]
