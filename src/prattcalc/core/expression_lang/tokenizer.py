"""
Tokenizer for the prattcalc expression language.

Converts an expression string into a lazy stream of position-annotated
tokens with one token of cached lookahead.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from prattcalc.core.errors import LexError, make_context
from prattcalc.core.ir.tokens import Token, TokenKind

_WHITESPACE = " \t\r\n"

# ASCII digits only; "\d" would also accept other scripts' digits
_DIGITS_RE = re.compile(r"[0-9]+")
# A letter followed by letters or digits, so "log2" is one name; no underscore
_IDENT_RE = re.compile(r"[^\W\d_][^\W_]*")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class Tokenizer:
    """
    Lazy tokenizer with single-token lookahead.

    ``peek()`` scans at most once per token and caches the result, so
    repeated peeks are idempotent. ``next()`` hands out the cached token
    when there is one. Once the end of input is reached both keep
    returning the same EOF token.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self._pending: Token | None = None

    def peek(self) -> Token:
        if self._pending is None:
            self._pending = self._scan()
        return self._pending

    def next(self) -> Token:
        tok = self.peek()
        if tok.kind != TokenKind.EOF:
            self._pending = None
        return tok

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next()
            if tok.kind == TokenKind.EOF:
                return
            yield tok

    # -- Scanning --

    def _advance(self, count: int = 1) -> None:
        for c in self.source[self.pos : self.pos + count]:
            if c == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += count

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos] in _WHITESPACE:
            self._advance()

    def _make(self, kind: TokenKind, length: int) -> Token:
        start = self.pos
        tok = Token(
            kind=kind,
            text=self.source[start : start + length],
            start=start,
            end=start + length,
            line=self.line,
            column=self.column,
        )
        self._advance(length)
        return tok

    def _error(self, message: str) -> LexError:
        return LexError(message, make_context(self.source, self.line, self.column))

    def _scan(self) -> Token:
        self._skip_whitespace()

        if self.pos >= len(self.source):
            return Token(
                kind=TokenKind.EOF,
                start=self.pos,
                end=self.pos,
                line=self.line,
                column=self.column,
            )

        c = self.source[self.pos]

        if c in _SINGLE_CHAR:
            return self._make(_SINGLE_CHAR[c], 1)

        if _DIGITS_RE.match(c):
            return self._scan_number()

        m = _IDENT_RE.match(self.source, self.pos)
        if m is not None:
            return self._make(TokenKind.IDENT, m.end() - self.pos)

        raise self._error(f"Unexpected character: {c!r}")

    def _scan_number(self) -> Token:
        """digit+ ('.' digit+)?"""
        m = _DIGITS_RE.match(self.source, self.pos)
        assert m is not None
        end = m.end()

        if end < len(self.source) and self.source[end] == ".":
            frac = _DIGITS_RE.match(self.source, end + 1)
            if frac is None:
                # Point at the '.' itself
                self._advance(end - self.pos)
                raise self._error("Expected digit after decimal point")
            end = frac.end()

        return self._make(TokenKind.NUMBER, end - self.pos)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens, excluding EOF."""
    return list(Tokenizer(source))
