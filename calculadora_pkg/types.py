"""Error taxonomy and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    value: float | None = None
    result: str | None = None
    error: str | None = None
    error_code: str | None = None
    position: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.position is not None:
            result_dict["position"] = self.position
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error_code={self.error_code!r}, error={self.error!r})"
        return f"EvalResult(ok=True, result={self.result!r})"


class EvaluationError(Exception):
    """Base class for every failure the pipeline can report."""

    def __init__(
        self, message: str, code: str = "EVALUATION_ERROR", position: int | None = None
    ):
        self.message = message
        self.code = code
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(EvaluationError):
    """Raised when input is rejected before lexing (e.g. too long)."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)


class LexError(EvaluationError):
    """Raised when the input holds characters or numerals that cannot be tokenized.

    Codes: UNEXPECTED_CHARACTER, INVALID_NUMBER, NUMBER_OUT_OF_RANGE.
    """

    def __init__(
        self,
        message: str,
        code: str = "UNEXPECTED_CHARACTER",
        position: int | None = None,
        char: str | None = None,
    ):
        self.char = char
        super().__init__(message, code, position)


class ParseError(EvaluationError):
    """Raised when the token sequence does not form a valid expression."""

    def __init__(
        self,
        message: str,
        code: str = "UNEXPECTED_TOKEN",
        position: int | None = None,
        token: Any = None,
    ):
        self.token = token
        super().__init__(message, code, position)


class EvalError(EvaluationError):
    """Raised when a well-formed expression cannot be reduced to a number.

    Codes: DIVISION_BY_ZERO, OVERFLOW (a result outside the float64 range).
    """

    def __init__(self, message: str, code: str = "DIVISION_BY_ZERO"):
        super().__init__(message, code)
