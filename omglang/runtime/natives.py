"""
Native (host-implemented) functions.

Natives are identified by a closed enum and invoked through a single
dispatch function, so adding one means adding an enum member, a case in
`call_native` and an entry in NATIVE_NAMES.
"""

import sys
from enum import Enum, auto
from typing import List, Optional, TextIO

from .value import NOTHING, NativeFunctionRef, Value
from .scope import Scope


class Native(Enum):
    """Native function ids."""
    PRINT = auto()


# Name each native is bound to in the module scope
NATIVE_NAMES = {
    'print': Native.PRINT,
}


def call_native(native: Native, args: List[Value], out: Optional[TextIO] = None) -> Value:
    """Invoke `native` with already evaluated arguments."""
    if native == Native.PRINT:
        return native_print(args, out)
    raise ValueError(f"Unknown native function: {native}")


def native_print(args: List[Value], out: Optional[TextIO] = None) -> Value:
    """Write the arguments separated by spaces, then a newline."""
    line = ' '.join(arg.to_string() for arg in args)
    print(line, file=out if out is not None else sys.stdout)
    return NOTHING


def std_lib() -> Scope:
    """Build the module scope holding every native function."""
    module = Scope()
    for name, native in NATIVE_NAMES.items():
        module.set(name, NativeFunctionRef(native))
    return module
