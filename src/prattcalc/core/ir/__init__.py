"""
prattcalc Intermediate Representation (IR) types.

Tokens and the expression tree built from them. All types are re-exported
from this package.
"""

from .expressions import (
    BinaryExpr,
    Expr,
    FuncCall,
    NumberLiteral,
    UnaryExpr,
)
from .tokens import Token, TokenKind

__all__ = [
    "BinaryExpr",
    "Expr",
    "FuncCall",
    "NumberLiteral",
    "Token",
    "TokenKind",
    "UnaryExpr",
]
