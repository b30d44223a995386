# supplytoken/core/errors.py


class TokenError(Exception):
    """Base class for every failure raised by the token and its proxy."""
    pass

class AuthorizationError(TokenError):
    """Raised when the caller does not hold the role an operation requires."""
    pass

class SupplyOverflowError(TokenError, OverflowError):
    """Raised when an increase would exceed the representable range."""
    pass

class InsufficientBalanceError(TokenError):
    """Raised when an address has insufficient balance for a debit."""
    pass

class AlreadyInitializedError(TokenError):
    pass

class NotInitializedError(TokenError):
    pass

class UnknownOperationError(TokenError):
    pass

class LayoutMismatchError(TokenError):
    """Raised when an upgrade would reorder or retype existing state slots."""
    pass

class MigrationError(TokenError):
    pass

class ReconciliationError(TokenError):
    """Raised when the event log disagrees with stored balances."""
    pass
