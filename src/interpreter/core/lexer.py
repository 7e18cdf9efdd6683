"""
Lexer for the interpreter front-end.

Converts source text into a lazily produced stream of tokens. Whitespace is
discarded; every other character ends up in exactly one token's text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .environment import MIN_INT_BITS, get_int_bits
from .errors import ConfigError, make_overflow_error
from .tokens import (
    SYMBOLS,
    EndOfInput,
    Illegal,
    IntegerLiteral,
    Token,
    lookup_ident,
)

logger = logging.getLogger(__name__)


def is_letter(ch: str) -> bool:
    """ASCII letters and underscore. Digits never continue an identifier."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """
    Lexer for the interpreter language.

    Holds a cursor over the input and hands out one token per call to
    ``next_token()``. Iterating a lexer yields tokens up to and including
    the first EndOfInput. A lexer is not safe to share between threads;
    build one per input.
    """

    def __init__(self, text: str, *, int_bits: int | None = None):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            int_bits: Width of the signed integer type literals must fit.
                Defaults to INTERPRETER_INT_BITS, or 64.

        Raises:
            ConfigError: If int_bits is smaller than two
        """
        if int_bits is None:
            int_bits = get_int_bits()
        elif int_bits < MIN_INT_BITS:
            raise ConfigError(f"int_bits must be at least {MIN_INT_BITS}, got {int_bits}")

        self.text = text
        self.int_bits = int_bits
        self.int_max = 2 ** (int_bits - 1) - 1
        self.pos = 0  # index of ch
        self.read_pos = 0  # index of the next character to read
        self.ch: str | None = None
        self.read_char()

    def read_char(self) -> None:
        """Move the lookahead to the next character, or None at end."""
        if self.read_pos < len(self.text):
            self.ch = self.text[self.read_pos]
        else:
            self.ch = None
        self.pos = self.read_pos
        self.read_pos += 1

    def skip_whitespace(self) -> None:
        """Skip a maximal run of whitespace characters."""
        while self.ch is not None and self.ch.isspace():
            self.read_char()

    def read_identifier(self) -> str:
        """Read a maximal run of letters and underscores."""
        start = self.pos
        while self.ch is not None and is_letter(self.ch):
            self.read_char()
        return self.text[start : self.pos]

    def read_number(self) -> str:
        """Read a maximal run of ASCII digits."""
        start = self.pos
        while self.ch is not None and is_digit(self.ch):
            self.read_char()
        return self.text[start : self.pos]

    def parse_integer(self, digits: str) -> int | None:
        """Parse a digit run, or return None if it does not fit int_bits."""
        # Compare lengths first so huge runs never reach int().
        significant = digits.lstrip("0") or "0"
        if len(significant) > len(str(self.int_max)):
            return None
        value = int(significant)
        return value if value <= self.int_max else None

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns EndOfInput with empty text once the input is exhausted, and
        keeps returning it on every later call.

        Raises:
            IntegerOverflowError: If an integer literal does not fit in
                ``int_bits``. The digits are consumed first, so scanning can
                continue after the error is handled.
        """
        self.skip_whitespace()

        ch = self.ch
        if ch is None:
            return Token(kind=EndOfInput(), text="")

        kind = SYMBOLS.get(ch)
        if kind is not None:
            self.read_char()
            return Token(kind=kind, text=ch)

        if is_letter(ch):
            word = self.read_identifier()
            return Token(kind=lookup_ident(word), text=word)

        if is_digit(ch):
            digits = self.read_number()
            value = self.parse_integer(digits)
            if value is None:
                logger.debug("Integer literal %s overflows %d bits", digits, self.int_bits)
                raise make_overflow_error(digits, self.int_bits)
            return Token(kind=IntegerLiteral(value=value), text=digits)

        logger.debug("Illegal character %r at offset %d", ch, self.pos)
        self.read_char()
        return Token(kind=Illegal(), text=ch)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return


def tokenize(text: str, *, int_bits: int | None = None) -> list[Token]:
    """
    Tokenize source text into a list of tokens ending with EndOfInput.

    Raises:
        IntegerOverflowError: If an integer literal is too wide
    """
    return list(Lexer(text, int_bits=int_bits))
