# supplytoken/core/roles.py

import logging

from .errors import AuthorizationError
from .events import (
    ZERO_ADDRESS,
    Event,
    create_ownership_transferred_event,
    create_supply_controller_set_event,
)
from .state import TokenState

logger = logging.getLogger(__name__)

class RoleRegistry:
    """
    Owner and Supply Controller identities, read from the proxy's state on
    every check so a role change applies to the very next call.
    """
    def __init__(self, state: TokenState):
        self._state = state

    def owner(self) -> str:
        return self._state.read("owner")

    def supply_controller(self) -> str:
        return self._state.read("supply_controller")

    def assign(self, owner: str, supply_controller: str):
        """Set both roles directly. Only used by one-time initialization."""
        self._state.write("owner", owner)
        self._state.write("supply_controller", supply_controller)

    def require_owner(self, caller: str):
        if caller != self.owner():
            logger.warning("Rejected owner-only call from %s", caller)
            raise AuthorizationError(f"{caller} is not the owner")

    def require_supply_controller(self, caller: str):
        if caller != self.supply_controller():
            logger.warning("Rejected supply-controller call from %s", caller)
            raise AuthorizationError(f"{caller} is not the supply controller")

    def set_supply_controller(self, caller: str, new_controller: str) -> Event:
        """
        Replace the Supply Controller. Only the Owner may do this; the
        outgoing controller has no say in its own replacement.
        """
        self.require_owner(caller)
        if not new_controller or new_controller == ZERO_ADDRESS:
            raise ValueError("New supply controller cannot be the zero address")

        old_controller = self.supply_controller()
        self._state.write("supply_controller", new_controller)

        logger.info("Supply controller changed from %s to %s", old_controller, new_controller)
        return create_supply_controller_set_event(old_controller, new_controller)

    def transfer_ownership(self, caller: str, new_owner: str) -> Event:
        self.require_owner(caller)
        if new_owner == ZERO_ADDRESS:
            raise ValueError("New owner cannot be the zero address")

        previous_owner = self.owner()
        self._state.write("owner", new_owner)

        logger.info("Ownership transferred from %s to %s", previous_owner, new_owner)
        return create_ownership_transferred_event(previous_owner, new_owner)
