"""
Error types for prattcalc tokenizing, parsing, and evaluation.
"""

from dataclasses import dataclass
from typing import Optional


class CalcError(Exception):
    """Base exception for all prattcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with location if available."""
        if self.context:
            return f"{self.context.location()}: {self.message}"
        return self.message

    def format_detail(self) -> str:
        """Message plus the offending source line with a caret marker."""
        if self.context and self.context.snippet is not None:
            return f"{self}\n{self.context.format_snippet()}"
        return str(self)


class LexError(CalcError):
    """
    Raised when source text cannot be split into tokens.

    Examples:
    - Unrecognized character
    - Decimal point without a following digit
    """

    pass


class ParseError(CalcError):
    """
    Raised when a token stream does not form a valid expression.

    Examples:
    - Unexpected token in prefix or infix position
    - Missing opening or closing parenthesis
    - Premature end of input
    - Tokens left over after a complete expression
    """

    pass


class EvalError(CalcError):
    """Raised when an expression tree cannot be reduced to a number."""

    pass


class UnknownFunctionError(EvalError):
    """Raised when a call names a function outside the built-in table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function '{name}'")


class InternalEvalError(EvalError):
    """
    Raised when the evaluator meets an operator it cannot apply.

    A tree produced by the parser never triggers this; seeing it means the
    parser and evaluator disagree about the operator set.
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Source line containing the error, if known
    """

    line: int
    column: int
    snippet: str | None = None

    def location(self) -> str:
        return f"{self.line}:{self.column}"

    def format_snippet(self) -> str:
        """Format the source line with a marker under the error column."""
        if self.snippet is None:
            return ""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{self.snippet}\n{marker}"


def make_context(source: str, line: int, column: int) -> ErrorContext:
    """
    Build an ErrorContext for a position in ``source``.

    Args:
        source: Full source text
        line: Line number (1-indexed)
        column: Column number (1-indexed)

    Returns:
        ErrorContext carrying the text of the offending line
    """
    lines = source.split("\n")
    snippet = lines[line - 1] if 0 < line <= len(lines) else None
    return ErrorContext(line=line, column=column, snippet=snippet)
