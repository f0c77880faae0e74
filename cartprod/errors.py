"""Exceptions raised by cartprod.

Exhaustion of a product is not an error: iterators signal it with
``StopIteration``. Overflow while estimating a product's size is not an
error either; it degrades the estimate instead.
"""

from __future__ import annotations


class CartProdError(Exception):
    """Base exception for cartprod errors."""

    pass


class ArityError(CartProdError, ValueError):
    """Exception raised when a product receives the wrong number of sources.

    Parameters
    ----------
    expected
        Human-readable description of the accepted arity, e.g. ``"at least 2"``.
    actual
        Number of sources that were supplied.

    Attributes
    ----------
    expected : str
        Accepted arity.
    actual : int
        Supplied arity.

    Examples
    --------
    >>> try:
    ...     raise ArityError("at least 2", 1)
    ... except ArityError as e:
    ...     print(e)
    expected at least 2 source sequences, got 1
    """

    def __init__(self, expected: str, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} source sequences, got {actual}")


class SequenceError(CartProdError, ValueError):
    """Exception raised when a source sequence cannot be built.

    Parameters
    ----------
    message
        Error message describing the problem.
    text
        The expression that caused the error. None if not built from text.

    Attributes
    ----------
    text : str | None
        Expression that caused the error.
    """

    def __init__(self, message: str, text: str | None = None) -> None:
        self.text = text
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message."""
        message = super().__str__()
        if self.text is not None:
            return f"{message}: {self.text!r}"
        return message
