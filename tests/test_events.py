# supplytoken/tests/test_events.py

import pytest
from datetime import datetime
from supplytoken.core.events import (
    ZERO_ADDRESS, Event, EventLog,
    create_transfer_event, create_supply_increased_event,
    create_supply_controller_set_event, create_ownership_transferred_event
)

def test_event_creation():
    """Test basic event creation."""
    event = Event("TestEvent", {"param1": "value1"})
    assert event.name == "TestEvent"
    assert event.params["param1"] == "value1"
    assert isinstance(event.timestamp, datetime)

def test_event_equality_ignores_timestamp():
    a = create_transfer_event("alice", "bob", 5)
    b = create_transfer_event("alice", "bob", 5)
    assert a == b

def test_event_log():
    """Test EventLog basic functionality."""
    log = EventLog()
    log.emit(Event("Event1", {"param1": "value1"}))
    log.extend([Event("Event2", {"param2": "value2"}), Event("Event3", {})])

    events = log.get_events()
    assert len(log) == 3
    assert [e.name for e in events] == ["Event1", "Event2", "Event3"]

def test_get_events_returns_copy():
    log = EventLog()
    log.emit(Event("Event1", {}))
    log.get_events().clear()
    assert len(log) == 1

def test_event_filtering():
    """Test filtering events by name."""
    log = EventLog()
    log.emit(Event("TypeA", {"value": 1}))
    log.emit(Event("TypeB", {"value": 2}))
    log.emit(Event("TypeA", {"value": 3}))

    type_a_events = log.get_events("TypeA")
    assert len(type_a_events) == 2
    assert all(e.name == "TypeA" for e in type_a_events)

def test_supply_event_factories():
    minted = create_supply_increased_event("alice", 100)
    assert minted.name == "SupplyIncreased"
    assert minted.params == {"to": "alice", "value": 100}

    transfer = create_transfer_event(ZERO_ADDRESS, "alice", 100)
    assert transfer.params["from"] == ZERO_ADDRESS

def test_role_event_factories():
    event = create_supply_controller_set_event("alice", "bob")
    assert event.params["oldSupplyController"] == "alice"
    assert event.params["newSupplyController"] == "bob"

    event = create_ownership_transferred_event("alice", "carol")
    assert event.name == "OwnershipTransferred"
    assert event.params["previousOwner"] == "alice"

def test_event_log_clear():
    """Test clearing the event log."""
    log = EventLog()
    log.emit(Event("Event1", {"param1": "value1"}))
    log.clear()
    assert len(log.get_events()) == 0
