"""
Signed Arithmetic — сравнение, сложение, отрицание и вычитание Number

Модуль реализует длинную арифметику над sign-magnitude значениями base 2^64:
- Полный порядок (compare) и сравнение модулей (compare_magnitude)
- Сложение через распространение carry/borrow по limb
- Отрицание с повторной нормализацией (нет "-0")
- Вычитание как a + (-b), без отдельного алгоритма
- Конверсия в/из встроенного int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции тотальны и не изменяют операнды
2. Результат каждой операции нормализован
3. Переполнение limb никогда не теряется: перенос расширяет результат на один limb
4. Примитив (carry-add / borrow-sub) выбирается один раз на вызов
"""

import logging
from enum import Enum
from typing import Final, Sequence

from src.core.domain.number import Number
from src.core.math.limb_arithmetic import (
    LIMB_BITS,
    LIMB_MAX,
    apply_limb_op,
    select_limb_op,
)
from src.core.math.normalization import normalize_parts

logger = logging.getLogger(__name__)


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(int, Enum):
    """Результат сравнения двух значений."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


def _cmp(a: int, b: int) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def construct(sign: bool, digits: Sequence[int]) -> Number:
    """
    Построение канонического Number из сырой пары (sign, digits).

    Избыточные формы канонизируются, не отвергаются.

    Args:
        sign: True для неотрицательного, False для отрицательного
        digits: Цифры base 2^64, младшая первой

    Returns:
        Нормализованный Number

    Raises:
        pydantic.ValidationError: Если sign не bool или limb вне [0, 2^64 - 1]

    Examples:
        >>> construct(False, [0]) == construct(True, [])
        True
        >>> construct(True, [7, 0, 0]).digits
        (7,)
    """
    return Number(sign=sign, digits=tuple(digits))


def normalize(number: Number) -> Number:
    """
    Повторная нормализация уже построенного значения.

    Для любого Number возвращает идентичное значение (идемпотентность).
    """
    sign, digits = normalize_parts(number.sign, number.digits)
    return Number(sign=sign, digits=digits)


ZERO: Final[Number] = construct(True, [0])


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> Ordering:
    """
    Сравнение модулей, заданных нормализованными последовательностями limb.

    Длины не обязаны совпадать: при разной длине больше модуль с большим
    числом limb (старших нулей нет), иначе решает первый различный limb
    от старшего к младшему.

    Args:
        a: Цифры первого модуля, младшая первой
        b: Цифры второго модуля, младшая первой

    Returns:
        Ordering для |a| относительно |b|

    Examples:
        >>> compare_magnitude([5], [0, 1])
        <Ordering.LESS: -1>
        >>> compare_magnitude([0, 1], [1])
        <Ordering.GREATER: 1>
    """
    length_order = _cmp(len(a), len(b))
    if length_order is not Ordering.EQUAL:
        return length_order

    for digit_a, digit_b in zip(reversed(a), reversed(b)):
        if digit_a != digit_b:
            return _cmp(digit_a, digit_b)

    return Ordering.EQUAL


def compare(a: Number, b: Number) -> Ordering:
    """
    Полный порядок над Number, согласованный с целым значением.

    Алгоритм:
        1. Разные знаки → неотрицательное больше
        2. Одинаковые знаки → сравнение модулей (длина, затем limb от старшего)
        3. Оба отрицательные → результат сравнения модулей инвертируется

    Examples:
        >>> compare(construct(False, [1]), construct(True, [0]))
        <Ordering.LESS: -1>
        >>> compare(construct(False, [1]), construct(False, [2]))
        <Ordering.GREATER: 1>
    """
    if a.sign != b.sign:
        return Ordering.GREATER if a.sign else Ordering.LESS

    magnitude_order = compare_magnitude(a.digits, b.digits)
    if a.sign:
        return magnitude_order
    return magnitude_order.reverse()


# =============================================================================
# ОТРИЦАНИЕ
# =============================================================================


def negate(a: Number) -> Number:
    """
    Отрицание: противоположный знак, тот же модуль.

    Результат нормализуется повторно, поэтому -0 == 0 (sign=True).

    Examples:
        >>> negate(ZERO) == ZERO
        True
        >>> negate(construct(True, [5])).sign
        False
    """
    return Number(sign=not a.sign, digits=a.digits)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(a: Number, b: Number) -> Number:
    """
    Сложение двух Number через распространение carry/borrow по limb.

    Алгоритм:
        1. bigger: операнд с большим модулем; при равенстве модулей
           bigger = b (a выбирается только при строго большем модуле)
        2. Одинаковые знаки → CARRY_ADD, разные → BORROW_SUB (один раз)
        3. Цикл от младшего limb, пока остаются limb меньшего операнда
           или висит carry/borrow; limb большего дополняются нулями
        4. Знак результата равен знаку bigger
        5. Нормализация результата

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Нормализованная сумма a + b

    Examples:
        >>> add(construct(True, [LIMB_MAX]), construct(True, [LIMB_MAX])).digits
        (18446744073709551614, 1)
        >>> add(construct(False, [100]), construct(True, [40])) == construct(False, [60])
        True
    """
    if compare_magnitude(a.digits, b.digits) is Ordering.GREATER:
        bigger, smaller = a, b
    else:
        bigger, smaller = b, a

    op = select_limb_op(bigger.sign, smaller.sign)
    logger.debug(
        "add: op=%s bigger_limbs=%d smaller_limbs=%d",
        op.value,
        len(bigger.digits),
        len(smaller.digits),
    )

    # Рабочая копия limb большего операнда; сам операнд не изменяется
    result = list(bigger.digits)
    smaller_digits = smaller.digits

    flag = False
    i = 0
    while i < len(smaller_digits) or flag:
        if i == len(result):
            result.append(0)
        digit_smaller = smaller_digits[i] if i < len(smaller_digits) else 0
        result[i], flag = apply_limb_op(op, result[i], digit_smaller, flag)
        i += 1

    return construct(bigger.sign, result)


def subtract(a: Number, b: Number) -> Number:
    """
    Вычитание: a - b = a + (-b).

    Examples:
        >>> subtract(construct(True, [0, 1]), construct(True, [1])).digits
        (18446744073709551615,)
        >>> subtract(construct(True, [1]), construct(True, [0, 1])) == construct(False, [LIMB_MAX])
        True
    """
    return add(a, negate(b))


# =============================================================================
# КОНВЕРСИЯ В/ИЗ INT
# =============================================================================


def from_int(value: int) -> Number:
    """
    Построение Number из встроенного int.

    Args:
        value: Произвольное целое

    Returns:
        Нормализованный Number с тем же значением

    Raises:
        TypeError: Если value не int (bool отвергается)

    Examples:
        >>> from_int(-(1 << 64)).digits
        (0, 1)
        >>> from_int(0) == ZERO
        True
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")

    magnitude = abs(value)
    digits = []
    while magnitude:
        digits.append(magnitude & LIMB_MAX)
        magnitude >>= LIMB_BITS

    return construct(value >= 0, digits)


def to_int(number: Number) -> int:
    """
    Конверсия Number во встроенный int.

    Examples:
        >>> to_int(construct(False, [0, 1]))
        -18446744073709551616
    """
    magnitude = 0
    for digit in reversed(number.digits):
        magnitude = (magnitude << LIMB_BITS) | digit

    return magnitude if number.sign else -magnitude
