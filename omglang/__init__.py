"""
O.M.G. Language (omglang) - A small scripting language interpreter.

This package lexes source text into tokens, parses the tokens into an
abstract syntax tree and evaluates the tree with a tree-walking runtime.
"""

__version__ = "0.1.0"
__author__ = "O.M.G. Language Project"
