"""Base exceptions for boolfilter domain."""


class BoolFilterError(Exception):
    """Root exception for all boolfilter errors.

    All domain exceptions inherit from this.
    Allows catching all boolfilter-specific errors.
    """
