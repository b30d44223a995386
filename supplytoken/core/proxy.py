# supplytoken/core/proxy.py

import copy
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from .config import TokenConfig
from .errors import (
    AuthorizationError,
    LayoutMismatchError,
    MigrationError,
    UnknownOperationError,
)
from .events import EventLog, create_upgraded_event
from .logic import LogicImplementation, Receipt
from .state import Layout, TokenState, is_prefix_compatible

logger = logging.getLogger(__name__)

@dataclass
class Migration:
    """
    Explicit old -> new slot mapping applied when an upgrade changes the layout.

    Attributes:
        field_map: every slot of the old layout mapped to a slot of the new one
        initial: values for new slots that receive no old data
    """
    field_map: Dict[str, str]
    initial: Dict[str, Any] = field(default_factory=dict)

    def validate(self, old: Layout, new: Layout):
        old_types = {slot.name: slot.type for slot in old}
        new_types = {slot.name: slot.type for slot in new}

        missing = [name for name in old_types if name not in self.field_map]
        if missing:
            raise MigrationError(f"Old slots not mapped: {missing}")

        targets = list(self.field_map.values())
        if len(set(targets)) != len(targets):
            raise MigrationError("Two old slots map to the same new slot")

        for old_name, new_name in self.field_map.items():
            if old_name not in old_types:
                raise MigrationError(f"Unknown old slot: {old_name}")
            if new_name not in new_types:
                raise MigrationError(f"Unknown new slot: {new_name}")
            if old_types[old_name] != new_types[new_name]:
                raise MigrationError(
                    f"Type change {old_name}:{old_types[old_name]} -> "
                    f"{new_name}:{new_types[new_name]}")

        for name in self.initial:
            if name not in new_types:
                raise MigrationError(f"Unknown new slot: {name}")
            if name in targets:
                raise MigrationError(f"Slot {name} is both migrated and initialized")

    def apply(self, state: TokenState, new_layout: Layout) -> TokenState:
        migrated = TokenState(new_layout)
        for old_name, new_name in self.field_map.items():
            migrated.write(new_name, copy.deepcopy(state.read(old_name)))
        for name, value in self.initial.items():
            migrated.write(name, copy.deepcopy(value))
        return migrated

class UpgradeProxy:
    """
    Fixed-address facade over replaceable token logic.

    The proxy owns the persistent state and the event log; the current
    implementation only ever runs against a working copy of that state,
    which replaces the stored state once the call succeeds. The
    implementation pointer and admin live on the proxy itself, outside
    TokenState, so logic slots can never shadow them.
    """
    def __init__(self,
                 address: str,
                 implementation: Type[LogicImplementation],
                 admin: str,
                 config: Optional[TokenConfig] = None):
        self.address = address
        self.config = config or TokenConfig()
        self.event_log = EventLog()
        self._admin = admin
        self._implementation = implementation
        self._state = TokenState(implementation.STATE_LAYOUT)
        self._lock = threading.RLock()

    def implementation(self) -> str:
        return self._implementation.address()

    def version(self) -> str:
        return self._implementation.VERSION

    def admin(self) -> str:
        return self._admin

    def storage(self) -> Dict[str, Any]:
        """Copy of the stored slot values, in layout order."""
        with self._lock:
            return self._state.snapshot()

    def forward(self, caller: str, operation: str, *args) -> Receipt:
        """
        Run a public operation of the current implementation in the proxy's
        storage context. State and event log change only if the call succeeds.
        """
        with self._lock:
            table = self._implementation.operations()
            if operation not in table:
                raise UnknownOperationError(
                    f"{self.implementation()} has no operation {operation!r}")
            method_name, mutating = table[operation]

            logger.debug("%s -> %s.%s%r", caller, self.address, operation, args)

            if not mutating:
                logic = self._implementation(self._state, self.config)
                return Receipt(result=getattr(logic, method_name)(*args))

            working = self._state.copy()
            logic = self._implementation(working, self.config)
            receipt = getattr(logic, method_name)(caller, *args)

            self._state = working
            self.event_log.extend(receipt.events)
            return receipt

    def call(self, operation: str, *args) -> Any:
        """Shorthand for read-only operations, returning the bare value."""
        entry = self._implementation.operations().get(operation)
        if entry is not None and entry[1]:
            raise UnknownOperationError(
                f"{operation!r} changes state; use forward() with a caller")
        return self.forward(None, operation, *args).result

    def upgrade(self,
                caller: str,
                new_implementation: Type[LogicImplementation],
                migration: Optional[Migration] = None) -> Receipt:
        """
        Point the proxy at new logic. Without a migration the new layout must
        keep every existing slot in place; with one, the migration's mapping
        is checked against both layouts and applied before the swap.
        """
        with self._lock:
            if caller != self._admin:
                logger.warning("Rejected upgrade from %s", caller)
                raise AuthorizationError(f"{caller} is not the proxy admin")

            old_layout = self._state.layout
            new_layout = tuple(new_implementation.STATE_LAYOUT)

            if migration is None:
                if not is_prefix_compatible(old_layout, new_layout):
                    raise LayoutMismatchError(
                        f"{new_implementation.address()} does not preserve the existing slot layout")
                upgraded = _with_new_slots(self._state.copy(), old_layout, new_layout)
            else:
                migration.validate(old_layout, new_layout)
                upgraded = migration.apply(self._state, new_layout)

            self._state = upgraded
            self._implementation = new_implementation

            event = create_upgraded_event(new_implementation.address(), new_implementation.VERSION)
            self.event_log.emit(event)
            logger.info("Proxy %s upgraded to %s (version %s)",
                        self.address, new_implementation.address(), new_implementation.VERSION)
            return Receipt(result=True, events=[event])

    def change_admin(self, caller: str, new_admin: str):
        with self._lock:
            if caller != self._admin:
                raise AuthorizationError(f"{caller} is not the proxy admin")
            logger.info("Proxy admin changed from %s to %s", self._admin, new_admin)
            self._admin = new_admin

def _with_new_slots(state: TokenState, old: Layout, new: Layout) -> TokenState:
    extended = TokenState(new)
    for slot in old:
        extended.write(slot.name, state.read(slot.name))
    return extended
