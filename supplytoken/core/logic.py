# supplytoken/core/logic.py

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from .config import TokenConfig
from .events import Event
from .state import Layout, TokenState

@dataclass
class Receipt:
    """Outcome of one operation: its return value plus the events it produced, in order."""
    result: Any = None
    events: List[Event] = field(default_factory=list)

    @property
    def logs(self) -> List[Event]:
        return self.events

def operation(name: str) -> Callable:
    """Publish a method as a state-changing operation. It receives the caller first."""
    def decorate(func):
        func._operation = (name, True)
        return func
    return decorate

def view(name: str) -> Callable:
    """Publish a method as a read-only operation."""
    def decorate(func):
        func._operation = (name, False)
        return func
    return decorate

class LogicImplementation(ABC):
    """
    Replaceable logic executed by an UpgradeProxy against the proxy's state.
    Subclasses declare VERSION and STATE_LAYOUT and publish their public
    operations with @operation / @view.
    """
    VERSION: str = ""
    STATE_LAYOUT: Layout = ()

    def __init__(self, state: TokenState, config: TokenConfig = None):
        self.state = state
        self.config = config or TokenConfig()

    @classmethod
    def address(cls) -> str:
        """Stable identifier of this implementation."""
        return f"{cls.__module__}.{cls.__qualname__}"

    @classmethod
    def operations(cls) -> Dict[str, Tuple[str, bool]]:
        """Map public operation name to (method name, mutating)."""
        table = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                published = getattr(value, "_operation", None)
                if published is not None:
                    name, mutating = published
                    table[name] = (attr, mutating)
        return table
