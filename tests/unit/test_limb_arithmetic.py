"""
Тесты для Limb Arithmetic — примитивы над одной цифрой base 2^64

Проверяемые инварианты:
1. Результат примитива всегда в [0, LIMB_MAX]
2. Переполнение/заём возвращаются как выходной бит, не теряются
3. Эквивалентность 65-битному промежуточному вычислению
4. Выбор примитива по знакам операндов
5. Валидация limb
"""

import pytest

from src.core.math.limb_arithmetic import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MAX,
    LimbOp,
    apply_limb_op,
    borrowing_sub,
    carrying_add,
    is_valid_limb,
    select_limb_op,
    validate_limb,
)


# =============================================================================
# ТЕСТЫ: Параметры limb
# =============================================================================


class TestLimbConstants:
    """Тесты параметров limb."""

    def test_limb_parameters(self) -> None:
        """Base 2^64, максимум 2^64 - 1."""
        assert LIMB_BITS == 64
        assert LIMB_BASE == 18446744073709551616
        assert LIMB_MAX == 18446744073709551615


# =============================================================================
# ТЕСТЫ: Валидация
# =============================================================================


class TestValidateLimb:
    """Тесты validate_limb / is_valid_limb."""

    def test_boundaries_accepted(self) -> None:
        """0 и LIMB_MAX — корректные limb."""
        validate_limb(0)
        validate_limb(LIMB_MAX)
        assert is_valid_limb(0)
        assert is_valid_limb(LIMB_MAX)

    def test_out_of_range_rejected(self) -> None:
        """Отрицательные и >= 2^64 значения отвергаются."""
        with pytest.raises(ValueError, match="must be in"):
            validate_limb(-1)

        with pytest.raises(ValueError, match="must be in"):
            validate_limb(LIMB_BASE)

        assert not is_valid_limb(-1)
        assert not is_valid_limb(LIMB_BASE)

    def test_non_int_rejected(self) -> None:
        """bool, float и str не являются limb."""
        for value in (True, 1.0, "1", None):
            with pytest.raises(ValueError, match="must be an int"):
                validate_limb(value)
            assert not is_valid_limb(value)

    def test_name_in_message(self) -> None:
        """Имя параметра попадает в сообщение об ошибке."""
        with pytest.raises(ValueError, match="digits\\[3\\]"):
            validate_limb(-5, "digits[3]")


# =============================================================================
# ТЕСТЫ: Сложение с переносом
# =============================================================================


class TestCarryingAdd:
    """Тесты carrying_add."""

    def test_no_overflow(self) -> None:
        """5 + 7 = 12 без переноса."""
        assert carrying_add(5, 7, False) == (12, False)

    def test_incoming_carry(self) -> None:
        """Входной перенос добавляет единицу."""
        assert carrying_add(5, 7, True) == (13, False)

    def test_overflow_produces_carry(self) -> None:
        """MAX + MAX = (MAX - 1, carry)."""
        assert carrying_add(LIMB_MAX, LIMB_MAX, False) == (LIMB_MAX - 1, True)

    def test_carry_chain_wraps_to_zero(self) -> None:
        """MAX + 0 + carry = (0, carry)."""
        assert carrying_add(LIMB_MAX, 0, True) == (0, True)

    def test_maximum_input(self) -> None:
        """MAX + MAX + 1 = (MAX, carry) — максимум 65-битного результата."""
        assert carrying_add(LIMB_MAX, LIMB_MAX, True) == (LIMB_MAX, True)

    @pytest.mark.parametrize(
        "a,b,carry",
        [
            (0, 0, False),
            (1, LIMB_MAX, False),
            (1 << 63, 1 << 63, False),
            (123456789, LIMB_MAX - 5, True),
        ],
    )
    def test_matches_wide_addition(self, a: int, b: int, carry: bool) -> None:
        """Результат совпадает с разбиением a + b + carry на (low, high)."""
        digit, carry_out = carrying_add(a, b, carry)
        assert digit + (int(carry_out) << LIMB_BITS) == a + b + int(carry)
        assert 0 <= digit <= LIMB_MAX

    def test_invalid_limb_rejected(self) -> None:
        """Некорректный limb → ValueError."""
        with pytest.raises(ValueError):
            carrying_add(LIMB_BASE, 0, False)


# =============================================================================
# ТЕСТЫ: Вычитание с заёмом
# =============================================================================


class TestBorrowingSub:
    """Тесты borrowing_sub."""

    def test_no_borrow(self) -> None:
        """12 - 7 = 5 без заёма."""
        assert borrowing_sub(12, 7, False) == (5, False)

    def test_incoming_borrow(self) -> None:
        """Входной заём вычитает единицу."""
        assert borrowing_sub(12, 7, True) == (4, False)

    def test_underflow_produces_borrow(self) -> None:
        """0 - 1 = (MAX, borrow)."""
        assert borrowing_sub(0, 1, False) == (LIMB_MAX, True)

    def test_borrow_chain_through_zero(self) -> None:
        """0 - 0 - borrow = (MAX, borrow)."""
        assert borrowing_sub(0, 0, True) == (LIMB_MAX, True)

    def test_minimum_input(self) -> None:
        """0 - MAX - 1 = (0, borrow)."""
        assert borrowing_sub(0, LIMB_MAX, True) == (0, True)

    def test_equal_limbs_cancel(self) -> None:
        """a - a = 0 без заёма."""
        assert borrowing_sub(LIMB_MAX, LIMB_MAX, False) == (0, False)

    @pytest.mark.parametrize(
        "a,b,borrow",
        [
            (0, LIMB_MAX, False),
            (LIMB_MAX, 0, True),
            (1 << 63, (1 << 63) + 1, False),
            (42, 42, True),
        ],
    )
    def test_matches_wide_subtraction(self, a: int, b: int, borrow: bool) -> None:
        """digit - borrow_out * 2^64 == a - b - borrow."""
        digit, borrow_out = borrowing_sub(a, b, borrow)
        assert digit - (int(borrow_out) << LIMB_BITS) == a - b - int(borrow)
        assert 0 <= digit <= LIMB_MAX

    def test_invalid_limb_rejected(self) -> None:
        """Отрицательный limb → ValueError."""
        with pytest.raises(ValueError):
            borrowing_sub(0, -1, False)


# =============================================================================
# ТЕСТЫ: Выбор примитива
# =============================================================================


class TestSelectLimbOp:
    """Тесты select_limb_op / apply_limb_op."""

    @pytest.mark.parametrize(
        "bigger_sign,smaller_sign,expected",
        [
            (True, True, LimbOp.CARRY_ADD),
            (False, False, LimbOp.CARRY_ADD),
            (True, False, LimbOp.BORROW_SUB),
            (False, True, LimbOp.BORROW_SUB),
        ],
    )
    def test_selection_by_signs(
        self, bigger_sign: bool, smaller_sign: bool, expected: LimbOp
    ) -> None:
        """Одинаковые знаки → CARRY_ADD, разные → BORROW_SUB."""
        assert select_limb_op(bigger_sign, smaller_sign) is expected

    def test_apply_dispatches(self) -> None:
        """apply_limb_op вызывает соответствующий примитив."""
        assert apply_limb_op(LimbOp.CARRY_ADD, LIMB_MAX, 1, False) == (0, True)
        assert apply_limb_op(LimbOp.BORROW_SUB, 0, 1, False) == (LIMB_MAX, True)
