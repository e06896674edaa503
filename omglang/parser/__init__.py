"""O.M.G. Parser - Builds Abstract Syntax Tree from tokens."""

from .parser import Parser, parse, parse_block, parse_source
from .ast_nodes import *

__all__ = ['Parser', 'parse', 'parse_block', 'parse_source']
