# supplytoken/core/ledger.py

import logging
from typing import Dict, List

from .arithmetic import UINT256_BITS, checked_add, checked_sub, validate_amount
from .errors import InsufficientBalanceError
from .events import (
    ZERO_ADDRESS,
    Event,
    create_supply_decreased_event,
    create_supply_increased_event,
    create_transfer_event,
)
from .state import TokenState

logger = logging.getLogger(__name__)

class Ledger:
    """
    Balance table plus total supply, stored in the proxy's TokenState.
    Similar to an ERC-20 without approvals. Every mutation validates first
    and writes second, so a failed call leaves the state untouched.
    Mutations return the events they produced instead of logging them,
    the caller decides when they are committed.
    """
    def __init__(self, state: TokenState, bits: int = UINT256_BITS):
        self._state = state
        self._bits = bits

    @property
    def _balances(self) -> Dict[str, int]:
        return self._state.read("balances")

    def balance_of(self, address: str) -> int:
        """Get the balance of an address."""
        return self._balances.get(address, 0)

    def total_supply(self) -> int:
        """Get total supply of tokens in the system."""
        return self._state.read("total_supply")

    def increase_supply(self, to_address: str, amount: int) -> List[Event]:
        """
        Create new tokens and assign them to an address.
        Total supply is checked before the recipient balance; either
        overflow raises SupplyOverflowError.
        """
        validate_amount(amount, self._bits)

        new_total = checked_add(self.total_supply(), amount, self._bits)
        new_balance = checked_add(self.balance_of(to_address), amount, self._bits)

        self._balances[to_address] = new_balance
        self._state.write("total_supply", new_total)

        logger.info("Supply increased by %d to %s (total supply %d)", amount, to_address, new_total)
        return [
            create_supply_increased_event(to_address, amount),
            create_transfer_event(ZERO_ADDRESS, to_address, amount),
        ]

    def decrease_supply(self, from_address: str, amount: int) -> List[Event]:
        """
        Destroy tokens held by an address.
        """
        validate_amount(amount, self._bits)

        current_balance = self.balance_of(from_address)
        if current_balance < amount:
            raise InsufficientBalanceError(
                f"Insufficient balance: {current_balance} < {amount}")

        # total supply >= any single balance, so this cannot underflow
        new_total = checked_sub(self.total_supply(), amount)

        self._balances[from_address] = current_balance - amount
        self._state.write("total_supply", new_total)

        logger.info("Supply decreased by %d from %s (total supply %d)", amount, from_address, new_total)
        return [
            create_supply_decreased_event(from_address, amount),
            create_transfer_event(from_address, ZERO_ADDRESS, amount),
        ]

    def transfer(self, from_address: str, to_address: str, amount: int) -> List[Event]:
        """
        Transfer tokens from one address to another.
        """
        validate_amount(amount, self._bits)

        if to_address == ZERO_ADDRESS:
            raise ValueError("Cannot transfer to the zero address")

        from_balance = self.balance_of(from_address)
        if from_balance < amount:
            raise InsufficientBalanceError(
                f"Insufficient balance: {from_balance} < {amount}")

        if from_address != to_address:
            to_balance = checked_add(self.balance_of(to_address), amount, self._bits)
            self._balances[from_address] = from_balance - amount
            self._balances[to_address] = to_balance

        logger.debug("Transferred %d from %s to %s", amount, from_address, to_address)
        return [create_transfer_event(from_address, to_address, amount)]
