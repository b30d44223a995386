# supplytoken/core/arithmetic.py

from .errors import SupplyOverflowError

UINT256_BITS = 256
UINT256_MAX = 2 ** UINT256_BITS - 1


def max_value(bits: int = UINT256_BITS) -> int:
    """Largest value representable by an unsigned integer of the given width."""
    if bits <= 0:
        raise ValueError("Width must be positive")
    return 2 ** bits - 1

def validate_amount(amount: int, bits: int = UINT256_BITS) -> int:
    """
    Check that amount is an unsigned integer of the given width.
    Floats, Decimals and bools are refused so nothing is silently truncated.
    Amounts wider than the token raise SupplyOverflowError, not ValueError.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Amount must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError("Amount must be non-negative")
    if amount > max_value(bits):
        raise SupplyOverflowError(f"Amount does not fit in uint{bits}")
    return amount

def checked_add(a: int, b: int, bits: int = UINT256_BITS) -> int:
    """
    Add two unsigned integers, failing instead of wrapping.

    Raises:
        SupplyOverflowError: if the sum exceeds 2**bits - 1
    """
    result = a + b
    if result > max_value(bits):
        raise SupplyOverflowError(f"uint{bits} overflow: {a} + {b}")
    return result

def checked_sub(a: int, b: int) -> int:
    """Subtract two unsigned integers, failing instead of going negative."""
    if b > a:
        raise ArithmeticError(f"Unsigned underflow: {a} - {b}")
    return a - b
