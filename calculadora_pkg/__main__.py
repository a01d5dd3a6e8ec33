"""Main entry point for running calculadora_pkg as a module.

This allows running Calculadora with:
    python -m calculadora_pkg
    python -m calculadora_pkg --health-check
    python -m calculadora_pkg -e "2+2"

This is equivalent to running:
    python -m calculadora_pkg.cli
    python calculadora.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
