"""O.M.G. runtime values, scopes and native functions.

The evaluator itself lives in `omglang.runtime.runtime`.
"""

from .value import (
    Value, ValueKind, Nothing, Number, Boolean, NativeFunctionRef,
    NOTHING, TRUE, FALSE, from_bool,
)
from .scope import Scope
from .natives import Native, call_native, std_lib

__all__ = [
    'Value', 'ValueKind', 'Nothing', 'Number', 'Boolean', 'NativeFunctionRef',
    'NOTHING', 'TRUE', 'FALSE', 'from_bool',
    'Scope',
    'Native', 'call_native', 'std_lib',
]
