"""Calculadora package: lexer, parser and evaluator for arithmetic expressions, plus CLI."""

__all__ = [
    "config",
    "lexer",
    "nodes",
    "parser",
    "evaluator",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate_expression",
    "evaluate",
    "validate_expression",
    "format_number",
]
