# supplytoken/tests/test_roles.py

import pytest
from supplytoken.core.errors import AuthorizationError
from supplytoken.core.events import ZERO_ADDRESS
from supplytoken.core.roles import RoleRegistry
from supplytoken.core.state import TokenState

@pytest.fixture
def roles():
    registry = RoleRegistry(TokenState())
    registry.assign(owner="owner", supply_controller="owner")
    return registry

def test_unassigned_roles_are_zero_address():
    registry = RoleRegistry(TokenState())
    assert registry.owner() == ZERO_ADDRESS
    assert registry.supply_controller() == ZERO_ADDRESS

def test_require_checks(roles):
    roles.require_owner("owner")
    roles.require_supply_controller("owner")
    with pytest.raises(AuthorizationError):
        roles.require_owner("mallory")
    with pytest.raises(AuthorizationError):
        roles.require_supply_controller("mallory")

def test_set_supply_controller(roles):
    event = roles.set_supply_controller("owner", "controller")
    assert roles.supply_controller() == "controller"
    assert event.name == "SupplyControllerSet"
    assert event.params == {
        "oldSupplyController": "owner",
        "newSupplyController": "controller",
    }

def test_revocation_is_immediate(roles):
    roles.set_supply_controller("owner", "controller")
    with pytest.raises(AuthorizationError):
        roles.require_supply_controller("owner")
    roles.require_supply_controller("controller")

def test_controller_cannot_replace_itself(roles):
    roles.set_supply_controller("owner", "controller")
    with pytest.raises(AuthorizationError):
        roles.set_supply_controller("controller", "other")
    assert roles.supply_controller() == "controller"

def test_transfer_ownership(roles):
    event = roles.transfer_ownership("owner", "new_owner")
    assert roles.owner() == "new_owner"
    assert event.params == {"previousOwner": "owner", "newOwner": "new_owner"}
    with pytest.raises(AuthorizationError):
        roles.set_supply_controller("owner", "other")

def test_transfer_ownership_rejects_zero_address(roles):
    with pytest.raises(ValueError):
        roles.transfer_ownership("owner", ZERO_ADDRESS)
    assert roles.owner() == "owner"

@pytest.mark.parametrize("new_controller", [ZERO_ADDRESS, None, ""])
def test_set_supply_controller_rejects_zero_address(roles, new_controller):
    with pytest.raises(ValueError):
        roles.set_supply_controller("owner", new_controller)
    assert roles.supply_controller() == "owner"
