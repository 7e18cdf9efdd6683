"""
Interpreter front-end for a small language with let bindings and fn literals.

Provides the lexer that turns source text into tokens for a parser.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import ConfigError, IntegerOverflowError, InterpreterError, LexError
from .core.lexer import Lexer, tokenize
from .core.tokens import Token, TokenKind

__version__ = get_version()

__all__ = [
    "__version__",
    "Lexer",
    "tokenize",
    "Token",
    "TokenKind",
    "InterpreterError",
    "LexError",
    "IntegerOverflowError",
    "ConfigError",
]
