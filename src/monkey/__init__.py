# src/monkey/__init__.py
"""
Monkey language interpreter: lexer, parser and tree-walking evaluator.
"""

__version__ = "0.1.0"

from .lexer import Lexer
from .parser import Parser
from .environment import Environment
from .evaluator import Evaluator, evaluate
from .error_reporter import MonkeySyntaxError


class ParseError(Exception):
    """Raised by run_source when the parser reports syntax errors."""
    def __init__(self, errors):
        super().__init__("\n".join(errors))
        self.errors = list(errors)


def parse_source(source, filename="<stdin>"):
    parser = Parser(Lexer(source, filename=filename))
    program = parser.parse_program()
    if parser.errors:
        raise ParseError(parser.errors)
    return program


def run_source(source, env=None, filename="<stdin>", output=None):
    """Lex, parse and evaluate ``source``; returns the resulting object."""
    program = parse_source(source, filename=filename)
    if env is None:
        env = Environment.new_global()
    return evaluate(program, env, output=output)


__all__ = [
    "Lexer", "Parser", "Environment", "Evaluator", "evaluate",
    "MonkeySyntaxError", "ParseError", "parse_source", "run_source",
]
