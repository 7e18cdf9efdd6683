"""
Token types for the interpreter front-end.

A token kind is a closed set of variants, two of which carry data:

- Identifier: the name that was scanned
- IntegerLiteral: the parsed integer value

Every variant is a frozen model with a literal ``tag`` so a parser can match
on the class (or the tag) exhaustively, and tokens round-trip through JSON.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Token kinds
# ---------------------------------------------------------------------------


class KindBase(BaseModel):
    """Common base for token kind variants."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return type(self).__name__


class Illegal(KindBase):
    """An unrecognized single character."""

    tag: Literal["illegal"] = "illegal"


class EndOfInput(KindBase):
    """Sentinel returned once the input is exhausted."""

    tag: Literal["eof"] = "eof"


class Identifier(KindBase):
    """A letter/underscore run that is not a reserved word."""

    tag: Literal["ident"] = "ident"
    name: str = Field(description="The identifier as written")

    def __str__(self) -> str:
        return f"Identifier({self.name!r})"


class IntegerLiteral(KindBase):
    """A maximal run of decimal digits."""

    tag: Literal["int"] = "int"
    value: int = Field(description="Parsed integer value")

    def __str__(self) -> str:
        return f"IntegerLiteral({self.value})"


class Assign(KindBase):
    tag: Literal["assign"] = "assign"


class Plus(KindBase):
    tag: Literal["plus"] = "plus"


class Comma(KindBase):
    tag: Literal["comma"] = "comma"


class Semicolon(KindBase):
    tag: Literal["semicolon"] = "semicolon"


class LParen(KindBase):
    tag: Literal["lparen"] = "lparen"


class RParen(KindBase):
    tag: Literal["rparen"] = "rparen"


class LBrace(KindBase):
    tag: Literal["lbrace"] = "lbrace"


class RBrace(KindBase):
    tag: Literal["rbrace"] = "rbrace"


class FunctionKeyword(KindBase):
    """Reserved word ``fn``."""

    tag: Literal["fn"] = "fn"


class LetKeyword(KindBase):
    """Reserved word ``let``."""

    tag: Literal["let"] = "let"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

TokenKind = Annotated[
    Illegal
    | EndOfInput
    | Identifier
    | IntegerLiteral
    | Assign
    | Plus
    | Comma
    | Semicolon
    | LParen
    | RParen
    | LBrace
    | RBrace
    | FunctionKeyword
    | LetKeyword,
    Field(discriminator="tag"),
]


class Token(BaseModel):
    """
    A single token scanned from source text.

    Attributes:
        kind: Lexical category, with payload for identifiers and integers
        text: Exact source substring (empty for EndOfInput)
    """

    kind: TokenKind
    text: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Token({self.kind}, {self.text!r})"

    @property
    def is_eof(self) -> bool:
        """True for the end-of-input sentinel."""
        return isinstance(self.kind, EndOfInput)

    @property
    def is_illegal(self) -> bool:
        return isinstance(self.kind, Illegal)


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

SYMBOLS: dict[str, KindBase] = {
    "=": Assign(),
    "+": Plus(),
    ",": Comma(),
    ";": Semicolon(),
    "(": LParen(),
    ")": RParen(),
    "{": LBrace(),
    "}": RBrace(),
}

KEYWORDS: dict[str, KindBase] = {
    "fn": FunctionKeyword(),
    "let": LetKeyword(),
}


def lookup_ident(text: str) -> KindBase:
    """Classify a scanned word as a keyword or an identifier."""
    keyword = KEYWORDS.get(text)
    if keyword is not None:
        return keyword
    return Identifier(name=text)
