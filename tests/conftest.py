"""Shared pytest fixtures for interpreter tests."""

import pytest

from interpreter.core.environment import INT_BITS_VAR, LOG_LEVEL_VAR

PROGRAM = (
    "let five = 5;\n"
    "let ten = 10;\n"
    "let add = fn(x, y) {\n"
    "    x + y;\n"
    "};\n"
    "let result = add(five, ten);\n"
)


@pytest.fixture
def program_source() -> str:
    """Return a small program exercising every token kind except Illegal."""
    return PROGRAM


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the caller's shell out of the tests."""
    monkeypatch.delenv(INT_BITS_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
