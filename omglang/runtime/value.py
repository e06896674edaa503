"""
Runtime values for the O.M.G. language.

The value set is closed: Nothing, Number (64-bit float), True, False and a
reference to a native function. Values are immutable.

Arithmetic and ordering are only defined on two Numbers; any other operand
pair yields Nothing instead of raising. Equality is structural over every
value pair and follows IEEE rules for numbers (NaN is never equal).
"""

import math
from decimal import Decimal
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .natives import Native


class ValueKind(Enum):
    """Runtime value kinds."""
    NOTHING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NATIVE = auto()


def format_number(value: float) -> str:
    """Render a float the way `print` shows it: 42, 0.5, 0.0000001, inf, NaN."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    return format(Decimal(repr(value)).normalize(), 'f')


class Value:
    """Base class for all runtime values."""
    kind: ValueKind

    __slots__ = ()

    def to_string(self) -> str:
        raise NotImplementedError

    def is_number(self) -> bool:
        return self.kind == ValueKind.NUMBER

    def _numbers(self, other: 'Value'):
        if self.is_number() and other.is_number():
            return self.value, other.value
        return None

    def add(self, other: 'Value') -> 'Value':
        pair = self._numbers(other)
        return Number(pair[0] + pair[1]) if pair else NOTHING

    def subtract(self, other: 'Value') -> 'Value':
        pair = self._numbers(other)
        return Number(pair[0] - pair[1]) if pair else NOTHING

    def multiply(self, other: 'Value') -> 'Value':
        pair = self._numbers(other)
        return Number(pair[0] * pair[1]) if pair else NOTHING

    def divide(self, other: 'Value') -> 'Value':
        pair = self._numbers(other)
        return Number(ieee_divide(*pair)) if pair else NOTHING

    def equal(self, other: 'Value') -> 'Value':
        return from_bool(self == other)

    def greater_than(self, other: 'Value') -> 'Value':
        pair = self._numbers(other)
        return from_bool(pair[0] > pair[1]) if pair else NOTHING

    def less_than(self, other: 'Value') -> 'Value':
        pair = self._numbers(other)
        return from_bool(pair[0] < pair[1]) if pair else NOTHING

    def __str__(self):
        return self.to_string()


def ieee_divide(a: float, b: float) -> float:
    """Float division that yields inf/NaN on a zero divisor instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Nothing(Value):
    """The absence of a value."""
    kind = ValueKind.NOTHING

    __slots__ = ()

    def to_string(self) -> str:
        return "Nothing"

    def __eq__(self, other):
        return isinstance(other, Nothing)

    def __hash__(self):
        return hash(ValueKind.NOTHING)

    def __repr__(self):
        return "Nothing"


class Number(Value):
    """A 64-bit float."""
    kind = ValueKind.NUMBER

    __slots__ = ('value',)

    def __init__(self, value: float):
        self.value = float(value)

    def to_string(self) -> str:
        return format_number(self.value)

    def __eq__(self, other):
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"


class Boolean(Value):
    """True or False. Use the TRUE and FALSE singletons."""

    __slots__ = ('kind',)

    def __init__(self, flag: bool):
        self.kind = ValueKind.TRUE if flag else ValueKind.FALSE

    def to_string(self) -> str:
        return "True" if self.kind == ValueKind.TRUE else "False"

    def __bool__(self):
        return self.kind == ValueKind.TRUE

    def __eq__(self, other):
        return isinstance(other, Boolean) and self.kind == other.kind

    def __hash__(self):
        return hash(self.kind)

    def __repr__(self):
        return self.to_string()


class NativeFunctionRef(Value):
    """Reference to a host-implemented function."""
    kind = ValueKind.NATIVE

    __slots__ = ('native',)

    def __init__(self, native: 'Native'):
        self.native = native

    def to_string(self) -> str:
        return "BuiltIn function"

    def __eq__(self, other):
        return isinstance(other, NativeFunctionRef) and self.native == other.native

    def __hash__(self):
        return hash(self.native)

    def __repr__(self):
        return f"NativeFunctionRef({self.native.name})"


NOTHING = Nothing()
TRUE = Boolean(True)
FALSE = Boolean(False)


def from_bool(flag: bool) -> Boolean:
    return TRUE if flag else FALSE
