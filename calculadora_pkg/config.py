"""Centralized configuration for Calculadora.

This module defines:
- Input validation limits (length, nesting depth)
- Output formatting precision
- Package version

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with CALCULADORA_)
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("calculadora")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("CALCULADORA_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPRESSION_DEPTH = int(
    os.getenv("CALCULADORA_MAX_EXPRESSION_DEPTH", "100")
)  # nested parentheses / stacked unary minus

# Output formatting
OUTPUT_PRECISION = int(
    os.getenv("CALCULADORA_OUTPUT_PRECISION", "12")
)  # significant digits
