# supplytoken/core/audit.py

from typing import Dict, Iterable

import numpy as np

from .errors import ReconciliationError
from .events import ZERO_ADDRESS, Event

def replay_balances(events: Iterable[Event]) -> Dict[str, int]:
    """
    Rebuild balances from Transfer events alone.
    Mints and burns appear as transfers from and to the zero address.
    """
    balances: Dict[str, int] = {}
    for event in events:
        if event.name != "Transfer":
            continue
        value = event.params["value"]
        sender, recipient = event.params["from"], event.params["to"]
        if sender != ZERO_ADDRESS:
            balances[sender] = balances.get(sender, 0) - value
        if recipient != ZERO_ADDRESS:
            balances[recipient] = balances.get(recipient, 0) + value
    return balances

def supply_timeline(events: Iterable[Event]) -> np.ndarray:
    """
    Total supply after each SupplyIncreased / SupplyDecreased event.

    Returns:
        Array of Python ints (object dtype, so 256-bit values stay exact)
    """
    deltas = []
    for event in events:
        if event.name == "SupplyIncreased":
            deltas.append(event.params["value"])
        elif event.name == "SupplyDecreased":
            deltas.append(-event.params["value"])
    if not deltas:
        return np.array([], dtype=object)
    return np.cumsum(np.array(deltas, dtype=object))

def reconcile(proxy) -> bool:
    """
    Check a proxy's stored balances and total supply against its event log.

    Raises:
        ReconciliationError: if any stored value disagrees with the replay
    """
    events = proxy.event_log.get_events()
    storage = proxy.storage()

    replayed = {address: value for address, value in replay_balances(events).items() if value}
    stored = {address: value for address, value in storage["balances"].items() if value}
    if replayed != stored:
        raise ReconciliationError(f"Balances differ: replayed {replayed}, stored {stored}")

    timeline = supply_timeline(events)
    expected_supply = int(timeline[-1]) if len(timeline) else 0
    if expected_supply != storage["total_supply"]:
        raise ReconciliationError(
            f"Total supply differs: replayed {expected_supply}, stored {storage['total_supply']}")

    if sum(stored.values()) != storage["total_supply"]:
        raise ReconciliationError("Sum of balances does not equal total supply")
    return True
