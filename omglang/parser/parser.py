"""
O.M.G. Parser - Builds Abstract Syntax Tree from tokens.

Grammar (recursive descent, no error recovery):

    block      := (expression ';')* EOF
    expression := operand (binop expression)?
    operand    := identifier | call | assignment | NUMBER | 'true' | 'false'
    call       := IDENTIFIER '(' (expression (',' expression)*)? ')'
    assignment := IDENTIFIER '=' expression

All binary operators share one precedence level and nest to the right, so
``1 - 2 - 3`` parses as ``1 - (2 - 3)``.
"""

from ..errors import ParseError
from ..lexer import Tokens, TokenType
from ..runtime.value import FALSE, TRUE, Number
from .ast_nodes import *


BINARY_OPERATORS = {
    TokenType.OP_ADD: OpType.ADD,
    TokenType.OP_SUB: OpType.SUBTRACT,
    TokenType.OP_MUL: OpType.MULTIPLY,
    TokenType.OP_DIV: OpType.DIVIDE,
    TokenType.OP_EQ: OpType.EQUAL,
    TokenType.OP_GT: OpType.GREATER_THAN,
    TokenType.OP_LT: OpType.LESS_THAN,
}


class Parser:
    """Parses O.M.G. tokens into an Abstract Syntax Tree."""

    def __init__(self, tokens: Tokens):
        self.tokens = tokens

    def error(self, message: str):
        """Raise a parser error at the current token."""
        raise ParseError(message, self.tokens.position())

    def parse_block(self) -> BlockNode:
        """Parse the whole program as a block of ';'-terminated statements."""
        tokens = self.tokens
        pos = tokens.position()
        statements = []

        while True:
            exp = self.parse()
            tokens.next()
            token_type = tokens.current().type
            if token_type == TokenType.SEMICOLON:
                statements.append(exp)
                tokens.next()
            elif token_type != TokenType.EOF:
                self.error(f"Expected ; found {tokens.slice()}")

            if tokens.current().type == TokenType.EOF:
                break

        return BlockNode(statements, pos)

    def parse(self) -> ASTNode:
        """
        Parse one expression starting at the current token.

        Operator chains are collected in a loop and folded from the right,
        so ``a - b - c`` becomes ``a - (b - c)``. Leaves the cursor on the
        last token of the expression.
        """
        tokens = self.tokens
        operands = [self.parse_operand()]
        op_types = []

        while True:
            op_type = BINARY_OPERATORS.get(tokens.peek().type)
            if op_type is None:
                break
            tokens.next()  # operator
            tokens.next()  # start of right-hand side
            op_types.append(op_type)
            operands.append(self.parse_operand())

        exp = operands.pop()
        while op_types:
            lhs = operands.pop()
            exp = OperatorNode(op_types.pop(), lhs, exp, lhs.pos)
        return exp

    def parse_operand(self) -> ASTNode:
        """Parse an identifier form or a literal."""
        token = self.tokens.current()

        if token.type == TokenType.IDENTIFIER:
            return self.parse_identifier()
        elif token.type == TokenType.NUMBER:
            return LiteralNode(self.parse_number(token.slice), token.position)
        elif token.type == TokenType.TRUE:
            return LiteralNode(TRUE, token.position)
        elif token.type == TokenType.FALSE:
            return LiteralNode(FALSE, token.position)

        self.error(f"Expected identifier or number found {token.slice}")

    def parse_number(self, text: str) -> Number:
        try:
            return Number(float(text))
        except ValueError as e:
            self.error(f"Unable to convert {text} into a number: {e}")

    def parse_identifier(self) -> ASTNode:
        """Parse a call, an assignment or a variable reference."""
        tokens = self.tokens
        lookahead = tokens.peek().type

        if lookahead == TokenType.LPAREN:
            return self.parse_call()

        if lookahead == TokenType.ASSIGN:
            name = tokens.slice()
            pos = tokens.position()
            tokens.next()  # =
            tokens.next()  # start of value
            value = self.parse()
            return AssignmentNode(name, value, pos)

        return VariableNode(tokens.slice(), tokens.position())

    def parse_call(self) -> CallNode:
        """Parse name(arg, ...); leaves the cursor on the closing paren."""
        tokens = self.tokens
        pos = tokens.position()
        name = tokens.slice()
        tokens.next()  # (
        args = []

        if not tokens.expect(TokenType.RPAREN):
            while True:
                tokens.next()
                args.append(self.parse())
                tokens.next()
                token_type = tokens.current().type
                if token_type == TokenType.RPAREN:
                    break
                if token_type != TokenType.COMMA:
                    self.error(f"Expected ) or , found {tokens.slice()}")

        return CallNode(name, args, pos)


def parse_block(tokens: Tokens) -> BlockNode:
    """Parse a token cursor into a program block."""
    return Parser(tokens).parse_block()


def parse(tokens: Tokens) -> ASTNode:
    """Parse a single expression from a token cursor."""
    return Parser(tokens).parse()


def parse_source(source: str, filename: str = "<input>") -> BlockNode:
    """Lex and parse O.M.G. source code."""
    return parse_block(Tokens.lex(source, filename))
