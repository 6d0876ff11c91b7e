"""
Pratt (precedence climbing) parser for the prattcalc expression language.

Binding powers (higher binds tighter):

    +  -     10   left associative
    *  /     20   left associative
    ^        30   right associative
    (        40
    )  EOF    0   terminates a subexpression

Grammar:
    expr        → prefix (infix)*
    prefix      → NUMBER | constant | IDENT "(" expr ")" | "(" expr ")"
                | ("+" | "-") expr
    infix       → ("+" | "-" | "*" | "/") expr(bp) | "^" expr(bp - 1)

A prefix sign parses its operand at binding power 0, so it binds loosest:
"-2+3" is "-(2+3)".
"""

from __future__ import annotations

import logging
import math

from prattcalc.core.errors import ParseError, make_context
from prattcalc.core.expression_lang.functions import CONSTANTS
from prattcalc.core.expression_lang.tokenizer import Tokenizer
from prattcalc.core.ir.expressions import (
    BinaryExpr,
    Expr,
    FuncCall,
    NumberLiteral,
    UnaryExpr,
)
from prattcalc.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

BINDING_POWERS: dict[TokenKind, int] = {
    TokenKind.EOF: 0,
    TokenKind.RPAREN: 0,
    TokenKind.PLUS: 10,
    TokenKind.MINUS: 10,
    TokenKind.STAR: 20,
    TokenKind.SLASH: 20,
    TokenKind.CARET: 30,
    TokenKind.LPAREN: 40,
}

# Operands in infix position bind tightest so they are reported as errors
_OPERAND_BINDING_POWER = 100

UNARY_BINDING_POWER = 0

_LEFT_ASSOCIATIVE = (TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH)

_PUNCTUATION: dict[TokenKind, str] = {
    TokenKind.LPAREN: "'('",
    TokenKind.RPAREN: "')'",
}


def binding_power(tok: Token) -> int:
    return BINDING_POWERS.get(tok.kind, _OPERAND_BINDING_POWER)


class Parser:
    """Pratt parser over a lazy token stream."""

    def __init__(self, tokenizer: Tokenizer) -> None:
        self.tokens = tokenizer
        self.source = tokenizer.source

    def parse(self) -> Expr:
        """Parse a complete expression, requiring that every token is consumed."""
        try:
            expr = self.expr(0)
        except RecursionError:
            raise ParseError("Expression nested too deeply") from None

        tok = self.tokens.peek()
        if tok.kind != TokenKind.EOF:
            raise self._error(f"Unexpected token after expression: {tok.describe()}", tok)
        return expr

    def expr(self, min_bp: int) -> Expr:
        left = self.nud(self.tokens.next())

        while binding_power(self.tokens.peek()) > min_bp:
            op = self.tokens.next()
            left = self.led(left, op)

        return left

    # -- Null denotation (prefix position) --

    def nud(self, tok: Token) -> Expr:
        if tok.kind == TokenKind.NUMBER:
            return self._number(tok)

        if tok.kind in (TokenKind.PLUS, TokenKind.MINUS):
            operand = self.expr(UNARY_BINDING_POWER)
            return UnaryExpr(op=tok, operand=operand)

        if tok.kind == TokenKind.IDENT:
            if tok.text in CONSTANTS:
                return NumberLiteral(value=CONSTANTS[tok.text])
            return self._func_call(tok)

        if tok.kind == TokenKind.LPAREN:
            inner = self.expr(0)
            self.expect(TokenKind.RPAREN)
            return inner

        if tok.kind == TokenKind.EOF:
            raise self._error("Unexpected end of input", tok)

        raise self._error(f"Unexpected token: {tok.describe()}", tok)

    def _number(self, tok: Token) -> NumberLiteral:
        value = float(tok.text)
        if not math.isfinite(value):
            raise self._error(f"Number literal out of range: {tok.text}", tok)
        return NumberLiteral(value=value)

    def _func_call(self, name_tok: Token) -> FuncCall:
        """IDENT '(' expr ')'"""
        self.expect(TokenKind.LPAREN)
        argument = self.expr(0)
        self.expect(TokenKind.RPAREN)
        return FuncCall(name=name_tok.text, argument=argument)

    # -- Left denotation (infix position) --

    def led(self, left: Expr, op: Token) -> Expr:
        bp = binding_power(op)

        if op.kind in _LEFT_ASSOCIATIVE:
            right = self.expr(bp)
            return BinaryExpr(left=left, op=op, right=right)

        if op.kind == TokenKind.CARET:
            right = self.expr(bp - 1)
            return BinaryExpr(left=left, op=op, right=right)

        raise self._error(f"Unexpected token after operand: {op.describe()}", op)

    # -- Helpers --

    def expect(self, kind: TokenKind) -> Token:
        tok = self.tokens.next()
        if tok.kind != kind:
            raise self._error(f"Expected {_PUNCTUATION.get(kind, kind)}, got {tok.describe()}", tok)
        return tok

    def _error(self, message: str, tok: Token) -> ParseError:
        return ParseError(message, make_context(self.source, tok.line, tok.column))


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "1 + 2 * cos(pi)")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the token stream is not a valid expression.
        LexError: If tokenization fails.
    """
    expr = Parser(Tokenizer(source)).parse()
    logger.debug("Parsed %r as %s", source, expr)
    return expr
