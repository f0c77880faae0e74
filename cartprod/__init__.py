"""Lazy N-ary Cartesian products over homogeneous sequences.

Tuples are produced one at a time in odometer order, with the last source
varying fastest, and without materializing any source.

Examples
--------
>>> from cartprod import cart_prod
>>> list(cart_prod([0, 1], [0, 1]))
[(0, 0), (0, 1), (1, 0), (1, 1)]
"""

from __future__ import annotations

__version__ = "0.1.0"

from cartprod.errors import ArityError, CartProdError, SequenceError
from cartprod.product import Hom2CartProd, Hom3CartProd, HomCartProd, cart_prod
from cartprod.sequences import (
    CountSequence,
    Lookahead,
    SliceSequence,
    SourceSequence,
    TeeSequence,
    as_sequence,
)
from cartprod.size_hint import USIZE_MAX, SizeHint

__all__ = [
    # Products
    "HomCartProd",
    "Hom2CartProd",
    "Hom3CartProd",
    "cart_prod",
    # Sequences
    "SourceSequence",
    "SliceSequence",
    "TeeSequence",
    "CountSequence",
    "Lookahead",
    "as_sequence",
    # Estimates
    "SizeHint",
    "USIZE_MAX",
    # Errors
    "CartProdError",
    "ArityError",
    "SequenceError",
]
