#!/usr/bin/env python3
"""
Calculadora - Arithmetic Calculator

Thin wrapper that delegates all functionality to the calculadora_pkg package.

Usage:
    python calculadora.py                    # Interactive REPL
    python calculadora.py -e "2+2"           # Evaluate expression
    python calculadora.py --help             # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Calculadora.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from calculadora_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import calculadora_pkg: {e}")
        print("Please ensure the package is installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
