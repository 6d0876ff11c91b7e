"""
Expression evaluator for the prattcalc expression language.

Reduces an expression tree to a float. Pure evaluation: no I/O, no side
effects, no use of Python's eval(). Arithmetic follows IEEE-754, so
division by zero and out-of-domain function arguments produce inf or nan
rather than errors.
"""

from __future__ import annotations

import logging

from prattcalc.core.errors import InternalEvalError, UnknownFunctionError
from prattcalc.core.expression_lang.functions import FUNCTIONS, divide, power
from prattcalc.core.ir.expressions import (
    BinaryExpr,
    Expr,
    FuncCall,
    NumberLiteral,
    UnaryExpr,
)
from prattcalc.core.ir.tokens import TokenKind

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    Operands are evaluated depth-first, left before right, with no
    short-circuiting.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        UnknownFunctionError: If a call names a function outside the table.
        InternalEvalError: If an operator token is not valid for its node.
    """
    return _interpret(expr)


def _interpret(expr: Expr) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, NumberLiteral):
        return expr.value

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr)

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr)

    if isinstance(expr, FuncCall):
        return _interpret_func_call(expr)

    raise _internal(f"Unknown expression type: {type(expr).__name__}")


def _interpret_unary(expr: UnaryExpr) -> float:
    val = _interpret(expr.operand)
    if expr.op.kind == TokenKind.MINUS:
        return -val
    if expr.op.kind == TokenKind.PLUS:
        return val
    raise _internal(f"Not a unary operator: {expr.op.describe()}")


def _interpret_binary(expr: BinaryExpr) -> float:
    left = _interpret(expr.left)
    right = _interpret(expr.right)

    kind = expr.op.kind
    if kind == TokenKind.PLUS:
        return left + right
    if kind == TokenKind.MINUS:
        return left - right
    if kind == TokenKind.STAR:
        return left * right
    if kind == TokenKind.SLASH:
        return divide(left, right)
    if kind == TokenKind.CARET:
        return power(left, right)

    raise _internal(f"Not a binary operator: {expr.op.describe()}")


def _interpret_func_call(expr: FuncCall) -> float:
    """Evaluate a built-in function call (closed set, no user-defined functions)."""
    func = FUNCTIONS.get(expr.name)
    if func is None:
        raise UnknownFunctionError(expr.name)

    arg = _interpret(expr.argument)
    result = func(arg)
    logger.debug("%s(%r) = %r", expr.name, arg, result)
    return result


def _internal(message: str) -> InternalEvalError:
    logger.error("Evaluator contract violation: %s", message)
    return InternalEvalError(message)
