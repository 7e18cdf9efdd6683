"""
Interpreter CLI - Entry point.

Scans a source string (or file) and prints every token until EndOfInput.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from interpreter._version import get_version
from interpreter.core.environment import get_log_level
from interpreter.core.errors import InterpreterError
from interpreter.core.lexer import Lexer
from interpreter.core.tokens import Identifier, IntegerLiteral, Token

logger = logging.getLogger(__name__)

console = Console()

DEMO_SOURCE = "let five = 5 + 10;"


class OutputFormat(StrEnum):
    """How the tokens command prints tokens."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"interpreter {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_log_level())
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="Lexer for a small language with let bindings and fn literals.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Interpreter CLI main callback for global options."""
    pass


def _payload(token: Token) -> str:
    if isinstance(token.kind, Identifier):
        return token.kind.name
    if isinstance(token.kind, IntegerLiteral):
        return str(token.kind.value)
    return ""


def _print_table(tokens: Iterable[Token]) -> None:
    table = Table(title="Tokens")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    table.add_column("Value")
    for index, token in enumerate(tokens):
        style = "red" if token.is_illegal else None
        table.add_row(
            str(index),
            type(token.kind).__name__,
            Text(repr(token.text)),
            _payload(token),
            style=style,
        )
    console.print(table)


def _read_source(source: str | None, file: Path | None) -> str:
    if source is not None and file is not None:
        typer.echo("Pass either SOURCE or --file, not both", err=True)
        raise typer.Exit(code=2)
    if file is not None:
        return file.read_text(encoding="utf-8")
    if source is not None:
        return source
    return DEMO_SOURCE


@app.command(name="tokens")
def tokens_command(
    source: str | None = typer.Argument(
        None,
        help=f"Source text to scan (default: {DEMO_SOURCE!r})",
    ),
    file: Path | None = typer.Option(  # noqa: B008
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        help="Read source text from a UTF-8 file",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-o",
        help="Output format: text, json or table",
    ),
    int_bits: int | None = typer.Option(
        None,
        "--int-bits",
        help="Signed width integer literals must fit (default: INTERPRETER_INT_BITS or 64)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 1 if any illegal character was found",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
) -> None:
    """Print every token in SOURCE until end of input."""
    configure_logging(verbose)
    text = _read_source(source, file)

    illegal = 0
    collected: list[Token] = []
    try:
        for token in Lexer(text, int_bits=int_bits):
            if token.is_illegal:
                illegal += 1
            if output_format == OutputFormat.TEXT:
                typer.echo(str(token))
            elif output_format == OutputFormat.JSON:
                typer.echo(token.model_dump_json())
            else:
                collected.append(token)
    except InterpreterError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == OutputFormat.TABLE:
        _print_table(collected)

    logger.debug("Scanned %d illegal character(s)", illegal)
    if strict and illegal:
        typer.echo(f"Found {illegal} illegal character(s)", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
