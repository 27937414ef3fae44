"""
Core math modules

Примитивы длинной арифметики base 2^64: операции над limb и нормализация.
"""

# Limb Arithmetic
from src.core.math.limb_arithmetic import (
    # Limb constants
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MAX,
    # Validation
    is_valid_limb,
    validate_limb,
    # Primitives
    LimbOp,
    apply_limb_op,
    borrowing_sub,
    carrying_add,
    select_limb_op,
)

# Normalization
from src.core.math.normalization import (
    normalize_parts,
    strip_leading_zeros,
)

__all__ = [
    # Limb Arithmetic — Constants
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MAX",
    # Limb Arithmetic — Validation
    "is_valid_limb",
    "validate_limb",
    # Limb Arithmetic — Primitives
    "LimbOp",
    "apply_limb_op",
    "borrowing_sub",
    "carrying_add",
    "select_limb_op",
    # Normalization
    "normalize_parts",
    "strip_leading_zeros",
]
