"""BoolFilter adapters.

Wrap a BoolFilter as a predicate usable with filter(), sorted() keys, etc.
Adapters read the filter live: later parse() calls are visible.
Clone the filter first for a fixed view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boolfilter.domain.model.bool_filter import BoolFilter
    from boolfilter.infrastructure.filters.types import BoolPredicate, PropertyPredicate


def matches(flt: BoolFilter) -> BoolPredicate:
    """Create predicate that tests observed values against flt.

    Args:
        flt: Filter to delegate to.

    Returns:
        Predicate equivalent to flt.filter.
    """

    def _predicate(subject: bool) -> bool:
        return flt.filter(subject)

    return _predicate


def matches_or_missing(flt: BoolFilter) -> PropertyPredicate:
    """Create predicate for properties that may be absent.

    Args:
        flt: Filter to delegate to.

    Returns:
        Predicate that answers None with flt.match_if_key_missing()
        and any bool with flt.filter().
    """

    def _predicate(subject: bool | None) -> bool:
        if subject is None:
            return flt.match_if_key_missing()
        return flt.filter(subject)

    return _predicate
