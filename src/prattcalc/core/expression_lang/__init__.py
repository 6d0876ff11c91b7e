"""
prattcalc expression language.

Tokenizer, Pratt parser, and evaluator for single-line arithmetic
expressions.

Usage:
    from prattcalc.core.expression_lang import evaluate_source

    evaluate_source("1 + 2 * 3")   # 7.0
    evaluate_source("2 ^ 3 ^ 2")   # 512.0
    evaluate_source("cos(pi)")     # -1.0
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from prattcalc.core.errors import CalcError
from prattcalc.core.expression_lang.evaluator import evaluate
from prattcalc.core.expression_lang.parser import parse_expr
from prattcalc.core.expression_lang.tokenizer import Tokenizer, tokenize


class EvaluationResult(BaseModel):
    """Outcome of evaluating one line: either a value or an error message."""

    source: str
    value: float | None = None
    error: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate_source(source: str) -> float:
    """Tokenize, parse, and evaluate ``source``.

    Raises:
        CalcError: LexError, ParseError, or EvalError describing the failure.
    """
    return evaluate(parse_expr(source))


def try_evaluate(source: str) -> EvaluationResult:
    """Evaluate ``source``, capturing any CalcError as a message."""
    try:
        value = evaluate_source(source)
    except CalcError as e:
        return EvaluationResult(source=source, error=str(e))
    return EvaluationResult(source=source, value=value)


__all__ = [
    "EvaluationResult",
    "Tokenizer",
    "evaluate",
    "evaluate_source",
    "parse_expr",
    "tokenize",
    "try_evaluate",
]
