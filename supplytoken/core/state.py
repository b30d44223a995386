# supplytoken/core/state.py

import copy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from .events import ZERO_ADDRESS

BOOL = "bool"
ADDRESS = "address"
UINT256 = "uint256"
BALANCE_MAPPING = "mapping(address=>uint256)"

_DEFAULTS = {
    BOOL: lambda: False,
    ADDRESS: lambda: ZERO_ADDRESS,
    UINT256: lambda: 0,
    BALANCE_MAPPING: dict,
}

@dataclass(frozen=True)
class Slot:
    """A named, typed position in persistent storage."""
    name: str
    type: str

    def default(self) -> Any:
        if self.type not in _DEFAULTS:
            raise ValueError(f"Unsupported slot type: {self.type}")
        return _DEFAULTS[self.type]()

Layout = Tuple[Slot, ...]

# Slot order is part of the persistent format and must never change;
# later versions may only append.
TOKEN_LAYOUT_V1: Layout = (
    Slot("initialized", BOOL),
    Slot("owner", ADDRESS),
    Slot("supply_controller", ADDRESS),
    Slot("total_supply", UINT256),
    Slot("balances", BALANCE_MAPPING),
)

class TokenState:
    """
    Ordered slot storage held by the proxy.
    Logic code reads and writes slots by name; it never owns the storage.
    """
    def __init__(self, layout: Iterable[Slot] = TOKEN_LAYOUT_V1):
        self.layout: Layout = tuple(layout)
        names = [slot.name for slot in self.layout]
        if len(set(names)) != len(names):
            raise ValueError("Duplicate slot names in layout")
        self._slots: Dict[str, Any] = {slot.name: slot.default() for slot in self.layout}

    def read(self, name: str) -> Any:
        """Read a slot value. Unknown slots are a programming error."""
        if name not in self._slots:
            raise KeyError(f"No slot named {name!r} in layout")
        return self._slots[name]

    def write(self, name: str, value: Any):
        if name not in self._slots:
            raise KeyError(f"No slot named {name!r} in layout")
        self._slots[name] = value

    def slot(self, name: str) -> Slot:
        for slot in self.layout:
            if slot.name == name:
                return slot
        raise KeyError(f"No slot named {name!r} in layout")

    def copy(self) -> "TokenState":
        """Independent working copy, used to apply an operation atomically."""
        clone = TokenState.__new__(TokenState)
        clone.layout = self.layout
        clone._slots = copy.deepcopy(self._slots)
        return clone

    def snapshot(self) -> Dict[str, Any]:
        """Plain dict of slot values in layout order."""
        return {slot.name: copy.deepcopy(self._slots[slot.name]) for slot in self.layout}

def is_prefix_compatible(old: Layout, new: Layout) -> bool:
    """True if new keeps every slot of old at the same position with the same type."""
    if len(new) < len(old):
        return False
    return all(a == b for a, b in zip(old, new))
