"""Variable scopes."""

from typing import Dict, Optional

from .value import NOTHING, Value


class Scope:
    """
    Maps names to values.

    Lookups fall through to the parent scope and read as Nothing when no
    scope defines the name. Assignments always write to this scope.
    """

    def __init__(self, parent: Optional['Scope'] = None):
        self.values: Dict[str, Value] = {}
        self.parent = parent

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        if self.parent is not None:
            return self.parent.get(name)
        return NOTHING

    def set(self, name: str, value: Value):
        self.values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values or (self.parent is not None and name in self.parent)

    def __repr__(self):
        return f"Scope({len(self.values)} names)"
