"""
Token types shared by the tokenizer, parser, and expression tree.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = auto()
    IDENT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token(BaseModel):
    """A single lexeme with its position in the source."""

    kind: TokenKind
    text: str = Field(default="", description="Exact lexeme; empty for EOF")
    start: int = Field(ge=0, description="Offset of the first character")
    end: int = Field(ge=0, description="Offset one past the last character")
    line: int = Field(default=1, ge=1)
    column: int = Field(default=1, ge=1)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.text or self.kind.value

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.line}:{self.column})"

    def describe(self) -> str:
        """Human-readable name used in error messages."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        return f"{self.kind} ({self.text!r})"
