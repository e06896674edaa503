"""Read-only cursor over a lexed token sequence."""

from typing import List

from ..errors import Position
from .lexer import Lexer, Token, TokenType


class Tokens:
    """
    Sequential access to tokens with one token of lookahead.

    The last token is always EOF. Moving or peeking past it stays on it.
    """

    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token sequence must end with EOF")
        self.tokens = tokens
        self.index = 0

    @classmethod
    def lex(cls, source: str, filename: str = "<input>") -> 'Tokens':
        """Tokenize `source` and wrap the result in a cursor."""
        return cls(Lexer(source, filename).tokenize())

    def __len__(self):
        return len(self.tokens)

    def get(self, index: int) -> Token:
        if index >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[index]

    def current(self) -> Token:
        return self.tokens[self.index]

    def peek(self) -> Token:
        """Token after the current one, without moving."""
        return self.get(self.index + 1)

    def next(self):
        """Move to the next token, stopping at EOF."""
        self.index = min(self.index + 1, len(self.tokens) - 1)

    def expect(self, token_type: TokenType) -> bool:
        """Advance onto the next token only if it has type `token_type`."""
        if self.peek().type == token_type:
            self.next()
            return True
        return False

    def position(self) -> Position:
        return self.current().position

    def slice(self) -> str:
        return self.current().slice
