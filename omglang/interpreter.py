"""
O.M.G. interpreter driver.

Coordinates loading, lexing, parsing and evaluation.
"""

import sys
from typing import Optional, TextIO

from . import __version__
from .errors import LoadError, NestingError, OmgError, Position
from .lexer import Tokens
from .parser import parse_block
from .runtime import Value, std_lib
from .runtime.runtime import Runtime


class OmgLang:
    """Runs O.M.G. programs against a shared module of native functions."""

    def __init__(self, verbose: bool = False, out: Optional[TextIO] = None):
        self.verbose = verbose
        self.out = out
        self.module = std_lib()

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[omg] {message}", file=sys.stderr)

    def run_file(self, path: str) -> Value:
        """
        Run an O.M.G. source file.

        Args:
            path: Path to the .omg file

        Returns:
            The program's value (always Nothing)

        Raises:
            OmgError: if the file cannot be read, lexed, parsed or run
        """
        self.log(f"Reading {path}...")
        source = self.load_file(path)
        return self.run_string(source, path)

    def run_string(self, source: str, name: str = "<input>") -> Value:
        """Lex, parse and run `source`; `name` is used in diagnostics."""
        try:
            return self._run(source, name)
        except RecursionError as e:
            raise NestingError("Program is nested too deeply", Position.start(name)) from e

    def _run(self, source: str, name: str) -> Value:
        tokens = Tokens.lex(source, name)
        self.log(f"Lexed {len(tokens)} tokens from {name}")

        program = parse_block(tokens)
        self.log(f"Parsed {len(program.statements)} statements")

        runtime = Runtime(self.module, self.out)
        self.log("Running...")
        return runtime.run(program)

    def load_file(self, path: str) -> str:
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise LoadError(f"Can't open {path}, io error: {e}", Position.start(path)) from e

        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise LoadError(
                f"Can't open {path}, file is not valid utf8. {e}", Position.start(path)
            ) from e


def main(argv=None):
    """Command-line interface for the interpreter."""
    import argparse

    parser = argparse.ArgumentParser(
        prog='omg',
        description='O.M.G. Language - run an .omg program'
    )
    parser.add_argument('src_file', metavar='SRC_FILE', help='the .omg file to run')
    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    lang = OmgLang(verbose=args.verbose)
    try:
        lang.run_file(args.src_file)
    except OmgError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == '__main__':
    main()
