"""Size estimates for lazy sequences and products.

Counts are bounded by a representable maximum (``USIZE_MAX`` unless told
otherwise). Lower bounds saturate at that maximum; upper bounds that would
exceed it become unknown (``None``).
"""

from __future__ import annotations

from typing import NamedTuple

USIZE_MAX = 2**64 - 1


class SizeHint(NamedTuple):
    """Bounds on the number of items a sequence has left.

    Attributes
    ----------
    lower : int
        Items guaranteed to remain.
    upper : int | None
        Most items that may remain, or None if unknown.

    Examples
    --------
    >>> SizeHint(4, 4) == (4, 4)
    True
    >>> SizeHint.exact(3).is_exact
    True
    """

    lower: int
    upper: int | None

    @classmethod
    def exact(cls, count: int) -> SizeHint:
        """Return a hint for exactly ``count`` items."""
        return cls(count, count)

    @classmethod
    def unknown(cls) -> SizeHint:
        """Return a hint that promises nothing."""
        return cls(0, None)

    @property
    def is_exact(self) -> bool:
        """Whether both bounds agree."""
        return self.upper is not None and self.lower == self.upper

    def contains(self, count: int) -> bool:
        """Return whether ``count`` lies within the bounds."""
        if count < self.lower:
            return False
        return self.upper is None or count <= self.upper


def saturating_add(a: int, b: int, limit: int = USIZE_MAX) -> int:
    """Add two counts, clamping at ``limit``."""
    return min(a + b, limit)


def saturating_mul(a: int, b: int, limit: int = USIZE_MAX) -> int:
    """Multiply two counts, clamping at ``limit``.

    Examples
    --------
    >>> saturating_mul(2**40, 2**40)
    18446744073709551615
    """
    return min(a * b, limit)


def checked_add(a: int | None, b: int | None, limit: int = USIZE_MAX) -> int | None:
    """Add two counts, or return None if either is unknown or the sum overflows."""
    if a is None or b is None:
        return None
    total = a + b
    return total if total <= limit else None


def checked_mul(a: int | None, b: int | None, limit: int = USIZE_MAX) -> int | None:
    """Multiply two counts, or return None if either is unknown or the product overflows.

    Examples
    --------
    >>> checked_mul(3, 4)
    12
    >>> checked_mul(2**40, 2**40) is None
    True
    >>> checked_mul(3, None) is None
    True
    """
    if a is None or b is None:
        return None
    product = a * b
    return product if product <= limit else None

