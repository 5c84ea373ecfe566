"""Shared constants for bytecomb.

This module provides centralized configuration constants used by the
parser entry points and tracing helpers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: Memory bounds for the run()/parse() entry points
- Tracing: Output bounds for debug logging

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_INPUT_SIZE",
    # Tracing
    "TRACE_PREVIEW_LENGTH",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum input size in bytes (64 MB) accepted by run() and parse().
# Parsers applied directly to a Cursor are not limited.
# Pass max_input_size=0 to disable the check.
MAX_INPUT_SIZE: int = 64 * 1024 * 1024

# ============================================================================
# TRACING
# ============================================================================

# Number of upcoming bytes shown in traced() log lines.
TRACE_PREVIEW_LENGTH: int = 16
