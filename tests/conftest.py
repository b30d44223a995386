# supplytoken/tests/conftest.py

import pytest
from supplytoken.core.proxy import UpgradeProxy
from supplytoken.core.token import SupplyControlledToken

OWNER = "0x" + "11" * 20
NEW_SUPPLY_CONTROLLER = "0x" + "22" * 20
OTHER_ADDRESS = "0x" + "33" * 20
ADMIN = "0x" + "aa" * 20

@pytest.fixture
def proxy():
    """Token deployed behind a proxy, not yet initialized."""
    return UpgradeProxy("0x" + "99" * 20, SupplyControlledToken, admin=ADMIN)

@pytest.fixture
def token(proxy):
    """Proxied token initialized by OWNER."""
    proxy.forward(OWNER, "initialize")
    return proxy
