"""Core prattcalc functionality: IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .errors import (
    CalcError,
    ErrorContext,
    EvalError,
    InternalEvalError,
    LexError,
    ParseError,
    UnknownFunctionError,
)

__all__ = [
    "ir",
    "CalcError",
    "ErrorContext",
    "EvalError",
    "InternalEvalError",
    "LexError",
    "ParseError",
    "UnknownFunctionError",
]
