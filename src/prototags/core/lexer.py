"""
Lexer for .proto schema text.

Turns the comment-free character stream from ``CharSource`` into
identifiers and the handful of punctuation characters the scanner cares
about. Everything else (whitespace, parentheses, commas, angle
brackets, string placeholders) is discarded.
"""

from dataclasses import dataclass
from enum import Enum

from .source import EOF, CharSource


class TokenType(Enum):
    """Token types seen by the statement parser."""

    IDENTIFIER = "IDENTIFIER"
    EOF = "EOF"

    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    SEMICOLON = ";"
    DOT = "."
    EQUALS = "="


PUNCTUATION = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ".": TokenType.DOT,
    "=": TokenType.EQUALS,
}


def is_identifier_char(ch: str) -> bool:
    """ASCII letter, digit or underscore."""
    return ch == "_" or (ch.isascii() and ch.isalnum())


@dataclass
class Token:
    """
    A single token.

    Attributes:
        type: Type of token
        value: Identifier text or punctuation character ("" for EOF)
        line: Line number (1-indexed) where the token starts
    """

    type: TokenType
    value: str
    line: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line})"


class Lexer:
    """
    Pull-style lexer over a ``CharSource``.

    Each call to ``next()`` returns a fresh ``Token``; the lexer keeps no
    token state of its own.
    """

    def __init__(self, source: CharSource):
        self.source = source

    def next(self) -> Token:
        """Read and return the next token."""
        while True:
            ch = self.source.getc()
            line = self.source.line

            if ch == EOF:
                return Token(TokenType.EOF, "", line)

            token_type = PUNCTUATION.get(ch)
            if token_type is not None:
                return Token(token_type, ch, line)

            if is_identifier_char(ch):
                return Token(TokenType.IDENTIFIER, self._read_identifier(ch), line)

            # Not significant to the scanner

    def _read_identifier(self, first: str) -> str:
        chars = [first]
        ch = self.source.getc()
        while ch != EOF and is_identifier_char(ch):
            chars.append(ch)
            ch = self.source.getc()
        self.unget(ch)
        return "".join(chars)

    def unget(self, ch: str) -> None:
        """Push one raw character back onto the source."""
        self.source.ungetc(ch)


def tokenize(text: str) -> list[Token]:
    """
    Tokenize a whole schema text.

    Returns:
        List of tokens ending with a single EOF token
    """
    lexer = Lexer(CharSource(text))
    tokens = []
    while True:
        token = lexer.next()
        tokens.append(token)
        if token.type == TokenType.EOF:
            return tokens
