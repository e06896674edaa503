"""O.M.G. Lexer - Converts source text into tokens."""

from .lexer import Lexer, Token, TokenType, tokenize
from .tokens import Tokens

__all__ = ['Lexer', 'Token', 'TokenType', 'Tokens', 'tokenize']
