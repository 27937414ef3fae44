"""
Contract Validation Module

Модуль для валидации JSON контрактов dict-формы Number.
"""

from .validators import (
    NumberValidator,
    SchemaLoader,
    number_from_payload,
    number_to_payload,
    validate_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "NumberValidator",
    # Functions
    "validate_number",
    "number_to_payload",
    "number_from_payload",
]
