# supplytoken/tests/test_arithmetic.py

import pytest
from decimal import Decimal
from supplytoken.core.arithmetic import (
    UINT256_MAX, checked_add, checked_sub, max_value, validate_amount
)
from supplytoken.core.errors import SupplyOverflowError, TokenError

def test_max_value():
    assert max_value() == UINT256_MAX == 2**256 - 1
    assert max_value(8) == 255

def test_checked_add_at_limit():
    assert checked_add(UINT256_MAX - 1, 1) == UINT256_MAX

def test_checked_add_overflow():
    """Overflow fails loudly instead of wrapping."""
    with pytest.raises(SupplyOverflowError):
        checked_add(2**255, 2**255)

def test_overflow_error_is_builtin_overflow():
    with pytest.raises(OverflowError):
        checked_add(255, 1, bits=8)
    assert issubclass(SupplyOverflowError, TokenError)

def test_checked_sub():
    assert checked_sub(10, 10) == 0
    with pytest.raises(ArithmeticError):
        checked_sub(1, 2)

@pytest.mark.parametrize("amount", [-1, 1.5, Decimal('1'), True, "10"])
def test_validate_amount_rejects(amount):
    with pytest.raises(ValueError):
        validate_amount(amount)

def test_validate_amount_accepts_zero():
    assert validate_amount(0) == 0

def test_validate_amount_over_width_is_overflow():
    with pytest.raises(SupplyOverflowError):
        validate_amount(2**256)
    with pytest.raises(OverflowError):
        validate_amount(256, bits=8)
