"""Accumulating boolean filter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from boolfilter.domain.model.clause import clause_outcome


@dataclass(frozen=True, slots=True)
class BoolFilterState:
    """Immutable snapshot of BoolFilter.

    Created by BoolFilter.freeze(). Safe to share between threads.

    Attributes:
        accepts_true: True is in the accepted set
        accepts_false: False is in the accepted set
        active: Filter was enabled when the snapshot was taken
    """

    accepts_true: bool
    accepts_false: bool
    active: bool

    @property
    def accepted(self) -> frozenset[bool]:
        """Accepted outcomes as a set."""
        return _as_set(self.accepts_true, self.accepts_false)

    def is_empty(self) -> bool:
        """No outcome accepted."""
        return not (self.accepts_true or self.accepts_false)

    def value(self) -> bool:
        """Same as BoolFilter.value()."""
        return self.accepts_true

    def filter(self, subject: bool) -> bool:
        """Same as BoolFilter.filter()."""
        return self.accepts_true if subject else self.accepts_false

    def match_if_key_missing(self) -> bool:
        """Same as BoolFilter.match_if_key_missing()."""
        return not self.accepts_true


@dataclass(slots=True)
class BoolFilter:
    """Matcher over boolean values built from textual clauses.

    Each parse() unions one outcome into the accepted set; outcomes are
    never removed, so repeated clauses widen the match. enable() marks
    the filter ready for evaluation.

    NOT frozen: parse() and enable() mutate in place.
    NOT thread-safe: callers serialize writers.

    Example:
        flt = BoolFilter()
        flt.parse("not-dangling")
        flt.enable()
        flt.filter(False)  # True
    """

    _accepts_true: bool = False
    _accepts_false: bool = False
    _active: bool = False

    @classmethod
    def from_clauses(cls, *clauses: str) -> BoolFilter:
        """Create filter and parse all clauses. Not enabled.

        Raises:
            InvalidExpressionError: If any clause is empty.
        """
        flt = cls()
        flt.parse_all(clauses)
        return flt

    def parse(self, clause: str) -> None:
        """Union the outcome of one clause into the accepted set.

        Args:
            clause: Filter clause, e.g. "=true", "!=false", "not-dangling".

        Raises:
            TypeError: If clause is not a str.
            InvalidExpressionError: If clause is empty. State is unchanged.
        """
        self._accept(clause_outcome(clause))

    def parse_all(self, clauses: Iterable[str]) -> None:
        """Parse several clauses atomically.

        All clauses are classified before any is applied: on error
        the accepted set is unchanged.

        Raises:
            TypeError: If any clause is not a str.
            InvalidExpressionError: If any clause is empty.
        """
        outcomes = [clause_outcome(clause) for clause in clauses]
        for outcome in outcomes:
            self._accept(outcome)

    def enable(self) -> None:
        """Mark filter ready for evaluation. Idempotent.

        Does not change the accepted set. parse() remains allowed afterwards.
        """
        self._active = True

    @property
    def is_active(self) -> bool:
        """enable() has been called."""
        return self._active

    @property
    def accepted(self) -> frozenset[bool]:
        """Accepted outcomes as a set (copy)."""
        return _as_set(self._accepts_true, self._accepts_false)

    def is_empty(self) -> bool:
        """No clause parsed yet: matches nothing."""
        return not (self._accepts_true or self._accepts_false)

    def value(self) -> bool:
        """Representative value: True if True is accepted.

        Empty filter yields False. When both outcomes are accepted, True wins.
        """
        return self._accepts_true

    def filter(self, subject: bool) -> bool:
        """Check whether subject is in the accepted set.

        Raises:
            TypeError: If subject is not a bool.
        """
        if not isinstance(subject, bool):
            raise TypeError(f"subject must be bool, got {type(subject).__name__}")
        return self._accepts_true if subject else self._accepts_false

    def match_if_key_missing(self) -> bool:
        """Match result for a subject that lacks the property entirely.

        Absence counts as False, but True is never inferred from absence:
        matches only when True is not accepted.
        """
        return not self._accepts_true

    def clone(self) -> BoolFilter:
        """Independent copy. Later parse() on either side is not shared."""
        return BoolFilter(
            _accepts_true=self._accepts_true,
            _accepts_false=self._accepts_false,
            _active=self._active,
        )

    def freeze(self) -> BoolFilterState:
        """Create immutable snapshot."""
        return BoolFilterState(
            accepts_true=self._accepts_true,
            accepts_false=self._accepts_false,
            active=self._active,
        )

    def __copy__(self) -> BoolFilter:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, object]) -> BoolFilter:
        return self.clone()

    def _accept(self, outcome: bool) -> None:
        if outcome:
            self._accepts_true = True
        else:
            self._accepts_false = True


def _as_set(accepts_true: bool, accepts_false: bool) -> frozenset[bool]:
    outcomes: set[bool] = set()
    if accepts_true:
        outcomes.add(True)
    if accepts_false:
        outcomes.add(False)
    return frozenset(outcomes)
