"""
prattcalc - arithmetic expression calculator.

Tokenizes, parses (Pratt / precedence climbing), and evaluates single-line
arithmetic expressions with IEEE-754 double semantics.

Usage:
    import prattcalc

    prattcalc.evaluate("1 + 2 * 3")          # 7.0
    prattcalc.try_evaluate("foo(1)").error   # "Unknown function 'foo'"
"""

from __future__ import annotations

from ._version import __version__

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    CalcError,
    EvalError,
    InternalEvalError,
    LexError,
    ParseError,
    UnknownFunctionError,
)
from .core.expression_lang import (
    EvaluationResult,
    parse_expr,
    tokenize,
    try_evaluate,
)
from .core.expression_lang import evaluate_source as evaluate

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "try_evaluate",
    "parse_expr",
    "tokenize",
    "EvaluationResult",
    "CalcError",
    "LexError",
    "ParseError",
    "EvalError",
    "UnknownFunctionError",
    "InternalEvalError",
]
