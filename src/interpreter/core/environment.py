"""
Environment configuration for the interpreter.

Settings are read from environment variables on demand so tests and the CLI
can change them without reloading anything.

Environment values:
    - INTERPRETER_INT_BITS: width of the signed integer type that integer
      literals must fit (default: 64)
    - INTERPRETER_LOG_LEVEL: log level used by the CLI (default: WARNING)

Usage:
    from interpreter.core.environment import get_int_bits

    lexer = Lexer(source, int_bits=get_int_bits())
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

INT_BITS_VAR = "INTERPRETER_INT_BITS"
LOG_LEVEL_VAR = "INTERPRETER_LOG_LEVEL"

DEFAULT_INT_BITS = 64
DEFAULT_LOG_LEVEL = "WARNING"

# A signed type needs a sign bit and at least one value bit.
MIN_INT_BITS = 2

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_int_bits() -> int:
    """Get the integer literal width from INTERPRETER_INT_BITS.

    Returns:
        int: The configured width. Defaults to 64 if the variable is unset,
        not a number, or smaller than two bits.

    Examples:
        >>> import os
        >>> os.environ["INTERPRETER_INT_BITS"] = "32"
        >>> get_int_bits()
        32
    """
    raw = os.environ.get(INT_BITS_VAR, "").strip()
    if not raw:
        return DEFAULT_INT_BITS

    try:
        bits = int(raw)
    except ValueError:
        logger.warning(
            "Invalid %s value '%s'. Expected an integer. Defaulting to %d.",
            INT_BITS_VAR,
            raw,
            DEFAULT_INT_BITS,
        )
        return DEFAULT_INT_BITS

    if bits < MIN_INT_BITS:
        logger.warning(
            "%s must be at least %d, got %d. Defaulting to %d.",
            INT_BITS_VAR,
            MIN_INT_BITS,
            bits,
            DEFAULT_INT_BITS,
        )
        return DEFAULT_INT_BITS
    return bits


def get_log_level() -> str:
    """Get the CLI log level name from INTERPRETER_LOG_LEVEL."""
    raw = os.environ.get(LOG_LEVEL_VAR, "").upper().strip()
    if not raw:
        return DEFAULT_LOG_LEVEL
    if raw in _LOG_LEVELS:
        return raw

    logger.warning(
        "Unknown %s value '%s'. Valid values: %s. Defaulting to %s.",
        LOG_LEVEL_VAR,
        raw,
        ", ".join(_LOG_LEVELS),
        DEFAULT_LOG_LEVEL,
    )
    return DEFAULT_LOG_LEVEL
