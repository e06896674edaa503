"""
O.M.G. Lexer - Tokenizes source code into tokens.

Handles:
- Identifiers and the reserved words true/false
- Integer digit runs (converted to numbers by the parser)
- Punctuation ( ) , ; and the operators = + - * / == > <
- Whitespace and newlines (position tracking only)

Lexing is all-or-nothing: the first unrecognized character aborts with a
LexError.
"""

import string
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, List

from ..errors import LexError, Position


class TokenType(Enum):
    """O.M.G. token types."""
    # Literals
    IDENTIFIER = auto()  # name
    NUMBER = auto()      # 123
    TRUE = auto()        # true
    FALSE = auto()       # false

    # Punctuation
    LPAREN = auto()      # (
    RPAREN = auto()      # )
    COMMA = auto()       # ,
    SEMICOLON = auto()   # ;
    ASSIGN = auto()      # =

    # Binary operators
    OP_ADD = auto()      # +
    OP_SUB = auto()      # -
    OP_MUL = auto()      # *
    OP_DIV = auto()      # /
    OP_EQ = auto()       # ==
    OP_GT = auto()       # >
    OP_LT = auto()       # <

    EOF = auto()
    ERROR = auto()       # never emitted; the lexer raises LexError instead


@dataclass(frozen=True)
class Token:
    """Represents a single token and where it starts."""
    type: TokenType
    slice: str
    position: Position

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __repr__(self):
        return f"Token({self.type.name}, {self.slice!r}, {self.line}:{self.column})"


IDENT_START = string.ascii_letters + '_'
IDENT_CHARS = IDENT_START + string.digits

KEYWORDS = {
    'true': TokenType.TRUE,
    'false': TokenType.FALSE,
}

PUNCTUATION = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    ',': TokenType.COMMA,
    ';': TokenType.SEMICOLON,
    '=': TokenType.ASSIGN,
    '+': TokenType.OP_ADD,
    '-': TokenType.OP_SUB,
    '*': TokenType.OP_MUL,
    '/': TokenType.OP_DIV,
    '>': TokenType.OP_GT,
    '<': TokenType.OP_LT,
}


class Lexer:
    """Tokenizes O.M.G. source code."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.position = Position.start(filename)
        self.tokens: List[Token] = []

    def error(self, message: str, position: Position):
        """Raise a lexer error with location information."""
        raise LexError(message, position)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character at current position + offset."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        ch = self.source[self.pos]
        self.pos += 1

        if ch == '\n':
            self.position = self.position.newline()
        else:
            self.position = self.position.advance()

        return ch

    def skip_whitespace(self):
        """Skip spaces, tabs, carriage returns and newlines."""
        while self.peek() is not None and self.peek() in ' \t\r\n':
            self.advance()

    def read_while(self, chars: str) -> str:
        """Consume the longest run of characters drawn from `chars`."""
        start = self.pos
        while self.peek() is not None and self.peek() in chars:
            self.advance()
        return self.source[start:self.pos]

    def emit(self, token_type: TokenType, text: str, start: Position):
        self.tokens.append(Token(token_type, text, start))

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source code."""
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            ch = self.peek()
            start = self.position

            if ch in IDENT_START:
                word = self.read_while(IDENT_CHARS)
                self.emit(KEYWORDS.get(word, TokenType.IDENTIFIER), word, start)

            elif ch in string.digits:
                self.emit(TokenType.NUMBER, self.read_while(string.digits), start)

            # == must win over =
            elif ch == '=' and self.peek(1) == '=':
                self.advance()
                self.advance()
                self.emit(TokenType.OP_EQ, '==', start)

            elif ch in PUNCTUATION:
                self.advance()
                self.emit(PUNCTUATION[ch], ch, start)

            else:
                self.error(f'Found unknown character in "{ch}" in file.', start)

        self.emit(TokenType.EOF, '', self.position)
        return self.tokens


def tokenize(source: str, filename: str = "<input>") -> List[Token]:
    """Convenience function to tokenize O.M.G. source code."""
    lexer = Lexer(source, filename)
    return lexer.tokenize()
