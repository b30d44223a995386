# supplytoken/core/events.py

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime

ZERO_ADDRESS = "0x" + "0" * 40

@dataclass
class Event:
    """Base class for all events in the system."""
    name: str
    params: Dict[str, Any]
    timestamp: datetime = field(default=None, compare=False)

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now()

class EventLog:
    """Maintains an append-only log of all committed events."""
    def __init__(self):
        self._events: List[Event] = []

    def emit(self, event: Event):
        """Add an event to the log."""
        self._events.append(event)

    def extend(self, events: Iterable[Event]):
        """Append a batch of events, preserving their order."""
        self._events.extend(events)

    def get_events(self, event_name: Optional[str] = None) -> List[Event]:
        """
        Retrieve events from the log.
        If event_name is provided, only returns events with that name.
        """
        if event_name is None:
            return self._events.copy()
        return [e for e in self._events if e.name == event_name]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self):
        """Clear all events from the log."""
        self._events = []

# Common event factories
def create_transfer_event(from_address: str, to_address: str, value: int) -> Event:
    return Event(
        name="Transfer",
        params={
            "from": from_address,
            "to": to_address,
            "value": value
        }
    )

def create_supply_increased_event(to_address: str, value: int) -> Event:
    return Event(
        name="SupplyIncreased",
        params={
            "to": to_address,
            "value": value
        }
    )

def create_supply_decreased_event(from_address: str, value: int) -> Event:
    return Event(
        name="SupplyDecreased",
        params={
            "from": from_address,
            "value": value
        }
    )

def create_supply_controller_set_event(old_controller: str, new_controller: str) -> Event:
    return Event(
        name="SupplyControllerSet",
        params={
            "oldSupplyController": old_controller,
            "newSupplyController": new_controller
        }
    )

def create_ownership_transferred_event(previous_owner: str, new_owner: str) -> Event:
    return Event(
        name="OwnershipTransferred",
        params={
            "previousOwner": previous_owner,
            "newOwner": new_owner
        }
    )

def create_upgraded_event(implementation: str, version: str) -> Event:
    return Event(
        name="Upgraded",
        params={
            "implementation": implementation,
            "version": version
        }
    )
