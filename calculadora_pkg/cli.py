from __future__ import annotations

import argparse
import json
import sys

from . import config
from .api import evaluate, evaluate_expression
from .logging_config import get_logger, setup_logging
from .types import EvalResult, EvaluationError

logger = get_logger("cli")

# (expression, expected value or expected error code)
HEALTH_CHECKS = [
    ("2 + 3 * 4", 14.0),
    ("10 - 2 - 3", 5.0),
    ("(2 + 3) * 4", 20.0),
    ("-5 + 3", -2.0),
    ("--5", 5.0),
    ("1.5 * 2", 3.0),
    ("5 / 0", "DIVISION_BY_ZERO"),
    ("5 + ", "UNEXPECTED_END"),
    ("(2 + 3", "UNMATCHED_PARENTHESIS"),
    ("5 $ 3", "UNEXPECTED_CHARACTER"),
]


def _health_check() -> int:
    """Run the bundled expression table through the pipeline.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Calculadora health check...")
    print("-" * 50)

    for expression, expected in HEALTH_CHECKS:
        try:
            outcome: object = evaluate_expression(expression)
        except EvaluationError as e:
            outcome = e.code
        if outcome == expected:
            print(f"[OK] {expression!r} -> {outcome}")
            checks_passed += 1
        else:
            print(f"[FAIL] {expression!r}: expected {expected}, got {outcome}")
            checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" or "human"
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), allow_nan=False))
    elif res.ok:
        print(res.result)
    else:
        print(f"Error: {res.error}")


def print_help_text() -> None:
    print("Enter an arithmetic expression and press Enter, e.g. (2 + 3) * 4")
    print("Supported: numbers like 12 or 1.5, + - * /, parentheses, unary minus.")
    print("Commands: help, quit, exit")


def repl_loop(output_format: str = "human") -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print("Calculadora - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        command = raw.lower()
        if command in ("quit", "exit"):
            print("Goodbye.")
            break
        if command == "help":
            print_help_text()
            continue
        print_result_pretty(evaluate(raw), output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Calculadora CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="calculadora")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Emit JSON for machine parsing (same as --format json)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Set maximum nesting depth of parentheses and unary minus (default: 100)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Evaluate a table of known expressions and report the outcome",
    )
    args = parser.parse_args(argv)

    output_format = args.format
    if args.json:
        output_format = "json"

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.max_depth and args.max_depth > 0:
        config.MAX_EXPRESSION_DEPTH = int(args.max_depth)
    logger.debug(
        "Configuration: precision=%s max_depth=%s max_input=%s",
        config.OUTPUT_PRECISION,
        config.MAX_EXPRESSION_DEPTH,
        config.MAX_INPUT_LENGTH,
    )

    if args.version:
        print(config.VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        # Remove ">>>" prompt if present
        if expr.startswith(">>>"):
            expr = expr[3:].strip()
        if not expr:
            print("Error: Empty input. Please enter an arithmetic expression.")
            return 1
        res = evaluate(expr)
        print_result_pretty(res, output_format)
        return 0 if res.ok else 1

    repl_loop(output_format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
