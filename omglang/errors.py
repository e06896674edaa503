"""
Diagnostics for the O.M.G. language.

Every error raised by the lexer, parser, runtime or driver carries the
source position it refers to, rendered as ``source:line:column``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A (source, line, column) coordinate. Lines and columns start at 1."""
    src: str
    line: int = 1
    column: int = 1

    @classmethod
    def start(cls, src: str) -> 'Position':
        """Position of the first character of a source."""
        return cls(src, 1, 1)

    def advance(self, columns: int = 1) -> 'Position':
        """Return the position `columns` characters further along the line."""
        return Position(self.src, self.line, self.column + columns)

    def newline(self) -> 'Position':
        """Return the position at the start of the next line."""
        return Position(self.src, self.line + 1, 1)

    def __str__(self):
        return f"{self.src}:{self.line}:{self.column}"


class OmgError(Exception):
    """Base class for all O.M.G. diagnostics."""

    def __init__(self, msg: str, pos: Position):
        super().__init__(msg)
        self.msg = msg
        self.pos = pos

    def __str__(self):
        return f"{self.pos}: {self.msg}"


class LexError(OmgError):
    """Unrecognized character in the source."""
    pass


class ParseError(OmgError):
    """Token sequence does not match the grammar."""
    pass


class EvaluationError(OmgError):
    """Failure while running a program (e.g. calling an undefined function)."""
    pass


class LoadError(OmgError):
    """Source file could not be read."""
    pass


class NestingError(OmgError):
    """Program nests calls or assignments deeper than the host stack allows."""
    pass
