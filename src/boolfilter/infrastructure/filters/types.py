"""Predicate type aliases.

PEP 695 type alias syntax.
BoolPredicate: takes an observed value, returns True to include.
PropertyPredicate: None stands for a property missing from the subject.
"""

from collections.abc import Callable

type BoolPredicate = Callable[[bool], bool]
type PropertyPredicate = Callable[[bool | None], bool]
