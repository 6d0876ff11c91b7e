"""
Expression tree types for prattcalc.

The parser builds these bottom-up and the evaluator consumes them. Every
node is frozen: once built, a tree is never mutated, and each parent owns
its children exclusively.

Supports:
- Numeric literals (including the constants e and pi, folded at parse time)
- Unary sign: -x, +x
- Binary arithmetic: +, -, *, /, ^
- Single-argument function calls: cos(x), log2(x)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from prattcalc.core.ir.tokens import Token

# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """A numeric literal value."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: Token
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.op.text}{self.operand})"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    op: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.text} {self.right})"


class FuncCall(BaseModel):
    """
    Function application: name(argument).

    Built-in functions: abs, acos, asin, atan, ceil, cos, floor, ln,
    log (base 10), log2, sin, tan.
    """

    name: str = Field(description="Function name")
    argument: Expr = Field(description="The single argument")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name}({self.argument})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLiteral | UnaryExpr | BinaryExpr | FuncCall

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
FuncCall.model_rebuild()
