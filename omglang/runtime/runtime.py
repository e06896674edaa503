"""
Tree-walking evaluator for O.M.G. programs.
"""

from typing import List, Optional, TextIO

from ..errors import EvaluationError
from ..parser.ast_nodes import (
    ASTNode, AssignmentNode, BlockNode, CallNode, NodeType, OperatorNode, OpType,
)
from .natives import call_native, std_lib
from .scope import Scope
from .value import NOTHING, NativeFunctionRef, Value


class Runtime:
    """
    Evaluates AST nodes against a scope of its own.

    The runtime's scope is created empty with `module` (the native functions
    by default) as its parent, so assignments never leak between runtimes.
    """

    def __init__(self, module: Optional[Scope] = None, out: Optional[TextIO] = None):
        self.module = module if module is not None else std_lib()
        self.scope = Scope(self.module)
        self.out = out

    def run(self, exp: ASTNode) -> Value:
        """Evaluate `exp` and return its value. Raises EvaluationError."""
        node_type = exp.node_type

        if node_type == NodeType.CALL:
            return self.run_call(exp)
        elif node_type == NodeType.BLOCK:
            return self.run_block(exp)
        elif node_type == NodeType.LITERAL:
            return exp.value
        elif node_type == NodeType.ASSIGNMENT:
            return self.run_assignment(exp)
        elif node_type == NodeType.VARIABLE:
            return self.scope.get(exp.name)
        elif node_type == NodeType.OPERATOR:
            return self.run_operator(exp)

        raise TypeError(f"Unknown node type: {node_type}")

    def run_call(self, call: CallNode) -> Value:
        function = self.scope.get(call.name)
        if not isinstance(function, NativeFunctionRef):
            raise EvaluationError(
                f"Can't find function named {call.name} to call", call.pos
            )

        args: List[Value] = [self.run(arg) for arg in call.args]
        return call_native(function.native, args, self.out)

    def run_block(self, block: BlockNode) -> Value:
        for statement in block.statements:
            self.run(statement)
        return NOTHING

    def run_assignment(self, assignment: AssignmentNode) -> Value:
        value = self.run(assignment.value)
        self.scope.set(assignment.name, value)
        return NOTHING

    def run_operator(self, operator: OperatorNode) -> Value:
        # Walk the right-nested chain iteratively; operands still run left to right
        pending = []
        node = operator
        while node.node_type == NodeType.OPERATOR:
            pending.append((node.op_type, self.run(node.lhs)))
            node = node.rhs

        result = self.run(node)
        for op_type, lhs in reversed(pending):
            result = apply_operator(op_type, lhs, result)
        return result


def apply_operator(op_type: OpType, lhs: Value, rhs: Value) -> Value:
    """Combine two evaluated operands."""
    if op_type == OpType.ADD:
        return lhs.add(rhs)
    elif op_type == OpType.SUBTRACT:
        return lhs.subtract(rhs)
    elif op_type == OpType.MULTIPLY:
        return lhs.multiply(rhs)
    elif op_type == OpType.DIVIDE:
        return lhs.divide(rhs)
    elif op_type == OpType.EQUAL:
        return lhs.equal(rhs)
    elif op_type == OpType.GREATER_THAN:
        return lhs.greater_than(rhs)
    elif op_type == OpType.LESS_THAN:
        return lhs.less_than(rhs)

    raise TypeError(f"Unknown operator: {op_type}")
