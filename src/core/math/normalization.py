"""
Normalization — каноническая форма (sign, digits)

Любая пара (sign, digits) приводится к единственному представлению:
- Пустой список цифр → положительный ноль (True, (0,))
- Старшие нулевые limb удаляются, но всегда остаётся хотя бы один
- Ноль всегда неотрицательный (нет "-0")

Нормализация тотальна: избыточные формы не являются ошибкой,
они молча канонизируются.
"""

import logging
from typing import Sequence

logger = logging.getLogger(__name__)


def strip_leading_zeros(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Удаление старших нулевых limb (минимум один limb остаётся).

    Args:
        digits: Цифры, младшая первой

    Returns:
        Кортеж цифр без старших нулей; для пустого входа (0,)

    Examples:
        >>> strip_leading_zeros([5, 0, 0])
        (5,)
        >>> strip_leading_zeros([0, 0])
        (0,)
        >>> strip_leading_zeros([])
        (0,)
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1

    if end == 0:
        return (0,)
    return tuple(digits[:end])


def normalize_parts(sign: bool, digits: Sequence[int]) -> tuple[bool, tuple[int, ...]]:
    """
    Приведение сырой пары (sign, digits) к канонической форме.

    Алгоритм:
        1. Пустые digits → (True, (0,))
        2. Удаление старших нулевых limb (не ниже одного)
        3. Единственный нулевой limb → sign = True

    Идемпотентна: normalize_parts(*normalize_parts(s, d)) == normalize_parts(s, d)

    Args:
        sign: True для неотрицательного, False для отрицательного
        digits: Цифры base 2^64, младшая первой

    Returns:
        (sign, digits) в канонической форме
    """
    canonical_digits = strip_leading_zeros(digits)
    canonical_sign = True if canonical_digits == (0,) else sign

    if canonical_sign != sign or len(canonical_digits) != len(digits):
        logger.debug(
            "canonicalized redundant number form: sign=%s limbs=%d -> sign=%s limbs=%d",
            sign,
            len(digits),
            canonical_sign,
            len(canonical_digits),
        )

    return canonical_sign, canonical_digits
