"""Tests for domain/exceptions/expression.py."""

import pytest

from boolfilter.domain.exceptions.base import BoolFilterError
from boolfilter.domain.exceptions.expression import InvalidExpressionError


class TestInvalidExpressionError:
    """Tests for InvalidExpressionError exception."""

    def test_is_boolfilter_error(self) -> None:
        assert issubclass(InvalidExpressionError, BoolFilterError)

    def test_has_expression_attribute(self) -> None:
        err = InvalidExpressionError("", "empty expression")
        assert err.expression == ""

    def test_has_reason_attribute(self) -> None:
        err = InvalidExpressionError("", "empty expression")
        assert err.reason == "empty expression"

    def test_message_format(self) -> None:
        err = InvalidExpressionError("", "empty expression")
        assert str(err) == "Invalid filter expression '': empty expression"

    def test_none_expression_raises(self) -> None:
        with pytest.raises(TypeError, match="expression"):
            InvalidExpressionError(None, "reason")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            InvalidExpressionError("", "")

    def test_can_catch_as_boolfilter_error(self) -> None:
        with pytest.raises(BoolFilterError) as exc_info:
            raise InvalidExpressionError("", "empty expression")
        assert isinstance(exc_info.value, InvalidExpressionError)
