"""
Abstract Syntax Tree node definitions for O.M.G.

Each node represents an expression and records the position it starts at.
"""

from enum import Enum, auto
from typing import List

from ..errors import Position
from ..runtime.value import Value


class NodeType(Enum):
    """AST node types."""
    BLOCK = auto()       # e1; e2; ...
    CALL = auto()        # name(arg, ...)
    LITERAL = auto()     # 42, true, false
    ASSIGNMENT = auto()  # name = exp
    VARIABLE = auto()    # name
    OPERATOR = auto()    # lhs op rhs


class OpType(Enum):
    """Binary operators."""
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    EQUAL = auto()
    GREATER_THAN = auto()
    LESS_THAN = auto()


class ASTNode:
    """Base class for all AST nodes."""
    node_type: NodeType

    def __init__(self, pos: Position):
        self.pos = pos

    @property
    def line(self) -> int:
        return self.pos.line

    @property
    def column(self) -> int:
        return self.pos.column

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}(...)"


class BlockNode(ASTNode):
    """Sequence of statements; evaluates to Nothing."""
    node_type = NodeType.BLOCK

    def __init__(self, statements: List[ASTNode], pos: Position):
        super().__init__(pos)
        self.statements = statements

    def __repr__(self):
        return f"Block({self.statements!r})"


class CallNode(ASTNode):
    """Function call: name(arg1, arg2, ...)"""
    node_type = NodeType.CALL

    def __init__(self, name: str, args: List[ASTNode], pos: Position):
        super().__init__(pos)
        self.name = name
        self.args = args

    def __repr__(self):
        return f"Call({self.name}, {self.args!r})"


class LiteralNode(ASTNode):
    """Literal value."""
    node_type = NodeType.LITERAL

    def __init__(self, value: Value, pos: Position):
        super().__init__(pos)
        self.value = value

    def __repr__(self):
        return f"Literal({self.value!r})"


class AssignmentNode(ASTNode):
    """Assignment: name = value"""
    node_type = NodeType.ASSIGNMENT

    def __init__(self, name: str, value: ASTNode, pos: Position):
        super().__init__(pos)
        self.name = name
        self.value = value

    def __repr__(self):
        return f"Assignment({self.name}, {self.value!r})"


class VariableNode(ASTNode):
    """Variable reference."""
    node_type = NodeType.VARIABLE

    def __init__(self, name: str, pos: Position):
        super().__init__(pos)
        self.name = name

    def __repr__(self):
        return f"Variable({self.name})"


class OperatorNode(ASTNode):
    """Binary operation; positioned at its left operand."""
    node_type = NodeType.OPERATOR

    def __init__(self, op_type: OpType, lhs: ASTNode, rhs: ASTNode, pos: Position):
        super().__init__(pos)
        self.op_type = op_type
        self.lhs = lhs
        self.rhs = rhs

    def __repr__(self):
        return f"Operator({self.op_type.name}, {self.lhs!r}, {self.rhs!r})"
