"""Tests for the O.M.G. parser."""

import math

import pytest

from omglang.errors import ParseError, Position
from omglang.lexer import Tokens, TokenType
from omglang.parser import (
    AssignmentNode, BlockNode, CallNode, LiteralNode, OperatorNode, OpType,
    Parser, VariableNode, parse, parse_block, parse_source,
)
from omglang.runtime import FALSE, TRUE, Number


def shape(node):
    """Strip positions so trees can be compared structurally."""
    if isinstance(node, BlockNode):
        return ('block', [shape(s) for s in node.statements])
    if isinstance(node, CallNode):
        return ('call', node.name, [shape(a) for a in node.args])
    if isinstance(node, LiteralNode):
        return node.value
    if isinstance(node, AssignmentNode):
        return ('assign', node.name, shape(node.value))
    if isinstance(node, VariableNode):
        return ('var', node.name)
    if isinstance(node, OperatorNode):
        return (node.op_type, shape(node.lhs), shape(node.rhs))
    raise AssertionError(f"unexpected node {node!r}")


def parse_exp(source):
    return parse(Tokens.lex(source))


class TestOperands:
    """Left-hand operands."""

    @pytest.mark.parametrize("text", ["0", "7", "42", "1234567890"])
    def test_number_literal(self, text):
        node = parse_exp(text)
        assert isinstance(node, LiteralNode)
        assert node.value == Number(float(text))

    def test_huge_number_is_infinite(self):
        node = parse_exp("9" * 400)
        assert math.isinf(node.value.value)

    def test_booleans(self):
        assert parse_exp("true").value == TRUE
        assert parse_exp("false").value == FALSE

    def test_variable(self):
        node = parse_exp("answer")
        assert isinstance(node, VariableNode)
        assert node.name == "answer"

    def test_literal_position(self):
        tokens = Tokens.lex("  42", "t.omg")
        assert parse(tokens).pos == Position("t.omg", 1, 3)

    def test_unexpected_leading_token(self):
        with pytest.raises(ParseError) as excinfo:
            parse_exp("(1)")
        assert excinfo.value.msg == "Expected identifier or number found ("

    def test_invalid_number_text(self):
        parser = Parser(Tokens.lex("x"))
        with pytest.raises(ParseError) as excinfo:
            parser.parse_number("1.2.3")
        assert excinfo.value.msg.startswith("Unable to convert 1.2.3 into a number")


class TestCalls:
    """Function call parsing."""

    def test_no_arguments(self):
        tokens = Tokens.lex("f()")
        node = parse(tokens)
        assert shape(node) == ('call', 'f', [])
        assert tokens.current().type == TokenType.RPAREN

    def test_arguments_in_order(self):
        node = parse_exp("f(1, x, true, g(2))")
        assert shape(node) == ('call', 'f', [
            Number(1), ('var', 'x'), TRUE, ('call', 'g', [Number(2)]),
        ])

    def test_operator_arguments(self):
        node = parse_exp("print(1 + 2, 3)")
        assert shape(node) == ('call', 'print', [
            (OpType.ADD, Number(1), Number(2)), Number(3),
        ])

    def test_call_position_is_name(self):
        node = parse(Tokens.lex("   foo(1)", "t.omg"))
        assert node.pos == Position("t.omg", 1, 4)

    def test_missing_separator(self):
        with pytest.raises(ParseError) as excinfo:
            parse_exp("f(1 2)")
        assert excinfo.value.msg == "Expected ) or , found 2"

    def test_unterminated_call(self):
        with pytest.raises(ParseError) as excinfo:
            parse_exp("f(1")
        assert excinfo.value.msg == "Expected ) or , found "

    def test_dangling_comma(self):
        with pytest.raises(ParseError):
            parse_exp("f(1,)")


class TestOperators:
    """Binary operators share one precedence level and nest to the right."""

    @pytest.mark.parametrize("symbol,op_type", [
        ("+", OpType.ADD),
        ("-", OpType.SUBTRACT),
        ("*", OpType.MULTIPLY),
        ("/", OpType.DIVIDE),
        ("==", OpType.EQUAL),
        (">", OpType.GREATER_THAN),
        ("<", OpType.LESS_THAN),
    ])
    def test_each_operator(self, symbol, op_type):
        node = parse_exp(f"1 {symbol} 2")
        assert shape(node) == (op_type, Number(1), Number(2))

    def test_right_associative_subtraction(self):
        node = parse_exp("1-2-3")
        assert shape(node) == (
            OpType.SUBTRACT, Number(1), (OpType.SUBTRACT, Number(2), Number(3)),
        )

    def test_no_precedence(self):
        """2 * 3 + 4 groups as 2 * (3 + 4)."""
        node = parse_exp("2 * 3 + 4")
        assert shape(node) == (
            OpType.MULTIPLY, Number(2), (OpType.ADD, Number(3), Number(4)),
        )

    def test_operator_position_is_lhs(self):
        node = parse(Tokens.lex(" a + b", "t.omg"))
        assert node.pos == Position("t.omg", 1, 2)
        assert node.rhs.pos == Position("t.omg", 1, 6)

    def test_missing_rhs(self):
        with pytest.raises(ParseError) as excinfo:
            parse_exp("1 +")
        assert excinfo.value.msg == "Expected identifier or number found "


class TestAssignment:

    def test_simple(self):
        node = parse_exp("x = 42")
        assert shape(node) == ('assign', 'x', Number(42))

    def test_value_is_full_expression(self):
        node = parse_exp("x = y + 1")
        assert shape(node) == ('assign', 'x', (OpType.ADD, ('var', 'y'), Number(1)))

    def test_chained(self):
        node = parse_exp("a = b = 1")
        assert shape(node) == ('assign', 'a', ('assign', 'b', Number(1)))

    def test_position_is_name(self):
        node = parse(Tokens.lex("\nvalue = 1", "t.omg"))
        assert node.pos == Position("t.omg", 2, 1)


class TestBlocks:
    """Program-level statement lists."""

    def test_statements_in_order(self):
        block = parse_source("a = 1; print(a); 2 + 3;")
        assert shape(block) == ('block', [
            ('assign', 'a', Number(1)),
            ('call', 'print', [('var', 'a')]),
            (OpType.ADD, Number(2), Number(3)),
        ])

    def test_block_position(self):
        block = parse_source("\n  x;", "t.omg")
        assert block.pos == Position("t.omg", 2, 3)

    def test_unterminated_final_statement_is_dropped(self):
        block = parse_source("a; b")
        assert shape(block) == ('block', [('var', 'a')])

    def test_missing_semicolon_between_statements(self):
        with pytest.raises(ParseError) as excinfo:
            parse_source("print(1) print(2);", "t.omg")
        assert excinfo.value.msg == "Expected ; found print"
        assert excinfo.value.pos == Position("t.omg", 1, 10)

    def test_empty_program(self):
        with pytest.raises(ParseError):
            parse_source("")

    def test_empty_statement(self):
        with pytest.raises(ParseError):
            parse_source("a;;")

    def test_parse_block_function(self):
        block = parse_block(Tokens.lex("1;"))
        assert isinstance(block, BlockNode)
        assert len(block.statements) == 1

    def test_nodes_compare_structurally(self):
        assert parse_source("f(1, x);") == parse_source("f(1, x);")
        assert parse_source("f(1, x);") != parse_source("f(1, y);")


def test_long_operator_chain():
    """Chains far longer than the host recursion limit still nest to the right."""
    node = parse_exp(" + ".join(["1"] * 3000))
    depth = 0
    while isinstance(node, OperatorNode):
        assert node.op_type == OpType.ADD
        assert node.lhs.value == Number(1)
        node = node.rhs
        depth += 1
    assert depth == 2999
    assert node.value == Number(1)


def test_assignment_inside_chain_takes_the_rest():
    node = parse_exp("1 + x = 2 + 3")
    assert shape(node) == (
        OpType.ADD, Number(1), ('assign', 'x', (OpType.ADD, Number(2), Number(3))),
    )
