"""
Domain models and value objects.

Contains the Number value type (signed-magnitude integer, base 2^64)
and the arithmetic engine over it.
"""

from src.core.domain.number import Number
from src.core.domain.signed_arithmetic import (
    ZERO,
    Ordering,
    add,
    compare,
    compare_magnitude,
    construct,
    from_int,
    negate,
    normalize,
    subtract,
    to_int,
)

__all__ = [
    # Number model
    "Number",
    # Signed Arithmetic — Constants
    "ZERO",
    # Signed Arithmetic — Types
    "Ordering",
    # Signed Arithmetic — Functions
    "add",
    "compare",
    "compare_magnitude",
    "construct",
    "from_int",
    "negate",
    "normalize",
    "subtract",
    "to_int",
]
