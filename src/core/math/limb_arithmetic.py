"""
Limb Arithmetic — примитивы над одной цифрой (limb) base 2^64

Модуль содержит примитивы, из которых собирается длинная арифметика:
- Параметры limb (разрядность, основание, максимум)
- Валидация limb
- Сложение с переносом (carry) и вычитание с заёмом (borrow)
- Выбор примитива по знакам операндов (один раз на вызов, не на каждый limb)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат примитива всегда в диапазоне [0, LIMB_MAX]
2. Переполнение никогда не теряется: оно возвращается как выходной carry/borrow
3. carry/borrow: ровно один бит (bool)
"""

from enum import Enum
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ LIMB
# =============================================================================

# Разрядность одной цифры
LIMB_BITS: Final[int] = 64

# Основание системы счисления
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Максимальное значение одной цифры
LIMB_MAX: Final[int] = LIMB_BASE - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_limb(value: object) -> bool:
    """
    Проверка, является ли значение корректным limb.

    bool отвергается явно: в Python bool является подклассом int.

    Returns:
        True если value является int в диапазоне [0, LIMB_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= LIMB_MAX


def validate_limb(value: object, name: str = "limb") -> None:
    """
    Валидация одного limb.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или вне [0, LIMB_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if not 0 <= value <= LIMB_MAX:
        raise ValueError(f"{name} must be in [0, {LIMB_MAX}], got {value}")


# =============================================================================
# ПРИМИТИВЫ С ПЕРЕНОСОМ / ЗАЁМОМ
# =============================================================================


def carrying_add(a: int, b: int, carry: bool) -> tuple[int, bool]:
    """
    Сложение двух limb с входным переносом.

    Эквивалентно 65-битному промежуточному результату a + b + carry,
    разбитому на (младшие 64 бита, бит переполнения).

    Args:
        a: Первый limb
        b: Второй limb
        carry: Входной перенос (1 бит)

    Returns:
        (digit, carry_out)

    Raises:
        ValueError: Если a или b не являются корректными limb

    Examples:
        >>> carrying_add(5, 7, False)
        (12, False)
        >>> carrying_add(LIMB_MAX, LIMB_MAX, False)
        (18446744073709551614, True)
        >>> carrying_add(LIMB_MAX, 0, True)
        (0, True)
    """
    validate_limb(a, "a")
    validate_limb(b, "b")

    total = a + b + int(carry)
    return total & LIMB_MAX, total > LIMB_MAX


def borrowing_sub(a: int, b: int, borrow: bool) -> tuple[int, bool]:
    """
    Вычитание limb с входным заёмом.

    Вычисляет a - b - borrow по модулю 2^64; выходной borrow
    выставляется, если результат ушёл ниже нуля.

    Args:
        a: Уменьшаемое
        b: Вычитаемое
        borrow: Входной заём (1 бит)

    Returns:
        (digit, borrow_out)

    Raises:
        ValueError: Если a или b не являются корректными limb

    Examples:
        >>> borrowing_sub(12, 7, False)
        (5, False)
        >>> borrowing_sub(0, 1, False)
        (18446744073709551615, True)
        >>> borrowing_sub(0, LIMB_MAX, True)
        (0, True)
    """
    validate_limb(a, "a")
    validate_limb(b, "b")

    diff = a - b - int(borrow)
    return diff & LIMB_MAX, diff < 0


# =============================================================================
# ВЫБОР ПРИМИТИВА
# =============================================================================


class LimbOp(str, Enum):
    """Примитив, применяемый к каждому limb при сложении."""

    CARRY_ADD = "carry_add"
    BORROW_SUB = "borrow_sub"


def select_limb_op(bigger_sign: bool, smaller_sign: bool) -> LimbOp:
    """
    Выбор примитива по знакам операндов.

    Одинаковые знаки → модули складываются (CARRY_ADD).
    Разные знаки → из большего модуля вычитается меньший (BORROW_SUB).

    Args:
        bigger_sign: Знак операнда с большим модулем
        smaller_sign: Знак операнда с меньшим модулем

    Returns:
        LimbOp для всего цикла по limb
    """
    if bigger_sign == smaller_sign:
        return LimbOp.CARRY_ADD
    return LimbOp.BORROW_SUB


def apply_limb_op(op: LimbOp, a: int, b: int, flag: bool) -> tuple[int, bool]:
    """
    Применение выбранного примитива к одной паре limb.

    Args:
        op: Примитив (см. select_limb_op)
        a: Limb большего операнда
        b: Limb меньшего операнда
        flag: Входной carry/borrow

    Returns:
        (digit, flag_out)
    """
    if op is LimbOp.CARRY_ADD:
        return carrying_add(a, b, flag)
    return borrowing_sub(a, b, flag)
