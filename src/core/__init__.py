"""
Core domain models, arithmetic primitives, and invariants.

This module contains the foundational building blocks of the signed-magnitude
integer engine: the Number value type, limb primitives, and data contracts.
"""
