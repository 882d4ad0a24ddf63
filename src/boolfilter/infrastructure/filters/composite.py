"""Composite predicates: OR, NOT composition.

No AND: filters only ever widen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boolfilter.infrastructure.filters.types import PropertyPredicate


def any_of(*predicates: PropertyPredicate) -> PropertyPredicate:
    """Create predicate that requires ANY predicate to pass (OR).

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate that returns True if any predicate returns True.
        Empty predicates = always False.
    """

    def _predicate(subject: bool | None) -> bool:
        return any(p(subject) for p in predicates)

    return _predicate


def negate(predicate: PropertyPredicate) -> PropertyPredicate:
    """Create predicate that negates another predicate (NOT).

    Args:
        predicate: Predicate to negate.

    Returns:
        Predicate that returns opposite of input predicate.
    """

    def _predicate(subject: bool | None) -> bool:
        return not predicate(subject)

    return _predicate
