"""Core interpreter front-end: token model, lexer, errors, environment configuration."""

from .errors import ConfigError, IntegerOverflowError, InterpreterError, LexError
from .lexer import Lexer, tokenize
from .tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenKind",
    "InterpreterError",
    "LexError",
    "IntegerOverflowError",
    "ConfigError",
]
