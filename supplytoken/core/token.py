# supplytoken/core/token.py

import logging

from .errors import AlreadyInitializedError, NotInitializedError
from .events import ZERO_ADDRESS
from .ledger import Ledger
from .logic import LogicImplementation, Receipt, operation, view
from .roles import RoleRegistry
from .state import TOKEN_LAYOUT_V1

logger = logging.getLogger(__name__)

class SupplyControlledToken(LogicImplementation):
    """
    Fungible token whose supply is changed only by the Supply Controller.

    The caller's identity is passed explicitly to every state-changing
    operation. Each one checks authorization, applies the ledger change and
    returns its events in a Receipt. Atomicity across the whole call is
    provided by the proxy, which runs it against a working copy of state.
    """
    VERSION = "1"
    STATE_LAYOUT = TOKEN_LAYOUT_V1

    def __init__(self, state, config=None):
        super().__init__(state, config)
        self.ledger = Ledger(state, self.config.bits)
        self.roles = RoleRegistry(state)

    def _require_initialized(self):
        if not self.state.read("initialized"):
            raise NotInitializedError("Token not initialized")

    @operation("initialize")
    def initialize(self, caller: str) -> Receipt:
        """One-time setup: the caller becomes Owner and Supply Controller."""
        if self.state.read("initialized"):
            raise AlreadyInitializedError("Token already initialized")
        if not caller or caller == ZERO_ADDRESS:
            raise ValueError("Token cannot be initialized by the zero address")

        self.roles.assign(owner=caller, supply_controller=caller)
        self.state.write("initialized", True)

        logger.info("Token initialized by %s", caller)
        return Receipt(result=True)

    @view("owner")
    def owner(self) -> str:
        return self.roles.owner()

    @view("supplyController")
    def supply_controller(self) -> str:
        return self.roles.supply_controller()

    @view("totalSupply")
    def total_supply(self) -> int:
        return self.ledger.total_supply()

    @view("balanceOf")
    def balance_of(self, address: str) -> int:
        return self.ledger.balance_of(address)

    @operation("increaseSupply")
    def increase_supply(self, caller: str, amount: int) -> Receipt:
        """Mint amount to the Supply Controller's own balance."""
        self._require_initialized()
        self.roles.require_supply_controller(caller)
        events = self.ledger.increase_supply(caller, amount)
        return Receipt(result=True, events=events)

    @operation("decreaseSupply")
    def decrease_supply(self, caller: str, amount: int) -> Receipt:
        """Burn amount from the Supply Controller's own balance."""
        self._require_initialized()
        self.roles.require_supply_controller(caller)
        events = self.ledger.decrease_supply(caller, amount)
        return Receipt(result=True, events=events)

    @operation("setSupplyController")
    def set_supply_controller(self, caller: str, new_controller: str) -> Receipt:
        self._require_initialized()
        event = self.roles.set_supply_controller(caller, new_controller)
        return Receipt(result=True, events=[event])

    @operation("transferOwnership")
    def transfer_ownership(self, caller: str, new_owner: str) -> Receipt:
        self._require_initialized()
        event = self.roles.transfer_ownership(caller, new_owner)
        return Receipt(result=True, events=[event])

    @operation("transfer")
    def transfer(self, caller: str, to_address: str, amount: int) -> Receipt:
        self._require_initialized()
        events = self.ledger.transfer(caller, to_address, amount)
        return Receipt(result=True, events=events)
