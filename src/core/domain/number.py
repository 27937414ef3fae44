"""
Number — знаковое целое произвольной точности (sign-magnitude, base 2^64)

Immutable Pydantic модель. Каждый экземпляр проходит нормализацию при
валидации, поэтому наблюдаемое значение всегда каноническое.

ИНВАРИАНТЫ:
1. digits никогда не пуст
2. Нет старших нулевых limb; ноль ровно (0,)
3. Ноль всегда неотрицательный (sign=True)
4. Одно представление на одно целое: равенство = совпадение sign и digits

Избыточные формы ((False, [0]), [], [7, 0, 0]) канонизируются молча.
Некорректные по типу входы (не-bool sign, limb вне [0, 2^64 - 1]) → ValidationError.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from src.core.math.limb_arithmetic import is_valid_limb, validate_limb
from src.core.math.normalization import normalize_parts


def _is_digit_iterable(value: Any) -> bool:
    # str/bytes/Mapping отвергаются валидацией поля, не материализуются
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)


class Number(BaseModel):
    """
    Целое произвольной точности в sign-magnitude представлении.

    Immutable модель (frozen=True): операции не изменяют операнды,
    а возвращают новый экземпляр.
    """

    sign: bool = Field(..., strict=True, description="True для неотрицательного, False для отрицательного")
    digits: tuple[StrictInt, ...] = Field(
        ..., description="Цифры base 2^64, младшая первой"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """
        Нормализация сырой пары (sign, digits) до валидации полей.

        Некорректные входы пропускаются без изменений: их отвергает
        валидация полей.
        """
        if not isinstance(data, dict):
            return data

        sign = data.get("sign")
        digits = data.get("digits")
        if not isinstance(sign, bool) or not _is_digit_iterable(digits):
            return data

        # Генераторы, deque, range и т.п. материализуются до нормализации
        digits = tuple(digits)
        if not all(is_valid_limb(d) for d in digits):
            return {**data, "digits": digits}

        sign, digits = normalize_parts(sign, digits)
        return {**data, "sign": sign, "digits": digits}

    @field_validator("digits")
    @classmethod
    def validate_limb_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждый limb в диапазоне [0, LIMB_MAX]."""
        for index, digit in enumerate(v):
            validate_limb(digit, f"digits[{index}]")
        return v

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def is_negative(self) -> bool:
        return not self.sign

    # -------------------------------------------------------------------------
    # Операторы (делегируют в src.core.domain.signed_arithmetic)
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        from src.core.domain.signed_arithmetic import Ordering, compare

        if not isinstance(other, Number):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        from src.core.domain.signed_arithmetic import Ordering, compare

        if not isinstance(other, Number):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        from src.core.domain.signed_arithmetic import Ordering, compare

        if not isinstance(other, Number):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        from src.core.domain.signed_arithmetic import Ordering, compare

        if not isinstance(other, Number):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    def __add__(self, other: object) -> "Number":
        from src.core.domain.signed_arithmetic import add

        if not isinstance(other, Number):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: object) -> "Number":
        from src.core.domain.signed_arithmetic import subtract

        if not isinstance(other, Number):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self) -> "Number":
        from src.core.domain.signed_arithmetic import negate

        return negate(self)

    def __int__(self) -> int:
        from src.core.domain.signed_arithmetic import to_int

        return to_int(self)
