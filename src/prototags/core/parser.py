"""
Statement parser and scan driver for .proto files.

This is not a grammar. The driver looks for a handful of keywords, hands
each one to ``StatementParser.parse_statement`` to pick up the name that
follows, and otherwise skips tokens until the next ``;``, ``{`` or ``}``.
Anything it does not understand is skipped the same way, so malformed
input never raises.
"""

from pathlib import Path

from .kinds import EntityKind, KindSelection
from .lexer import Lexer, Token, TokenType
from .sink import TagSink
from .source import CharSource
from .tags import Tag

KEYWORD_KINDS: dict[str, EntityKind] = {
    "package": EntityKind.PACKAGE,
    "message": EntityKind.MESSAGE,
    "enum": EntityKind.ENUM,
    "repeated": EntityKind.FIELD,
    "optional": EntityKind.FIELD,
    "required": EntityKind.FIELD,
    "service": EntityKind.SERVICE,
    "rpc": EntityKind.RPC,
}

# Tokens that end a statement or open/close a body
STATEMENT_BOUNDARIES = (TokenType.SEMICOLON, TokenType.LBRACE, TokenType.RBRACE)


class StatementParser:
    """
    Parses one keyword-introduced statement at a time.

    Owns the current token. The scan driver shares it through ``token``,
    ``advance`` and ``skip_until``.
    """

    def __init__(
        self,
        lexer: Lexer,
        sink: TagSink,
        kinds: KindSelection,
        file: Path | None = None,
    ):
        """
        Initialize parser.

        Args:
            lexer: Token source
            sink: Receives emitted tags
            kinds: Kinds that are emitted; other kinds are parsed and dropped
            file: Source file path recorded on each tag
        """
        self.lexer = lexer
        self.sink = sink
        self.kinds = kinds
        self.file = file
        self.token = Token(TokenType.EOF, "", 1)

    def advance(self) -> Token:
        """Read the next token and make it current."""
        self.token = self.lexer.next()
        return self.token

    def match(self, *token_types: TokenType) -> bool:
        return self.token.type in token_types

    def at_end(self) -> bool:
        return self.token.type == TokenType.EOF

    def skip_until(self, *token_types: TokenType) -> None:
        """Advance until the current token is one of ``token_types`` or EOF."""
        while not self.at_end() and not self.match(*token_types):
            self.advance()

    def is_keyword(self, word: str) -> bool:
        """Current token is the identifier ``word`` (case-sensitive)."""
        return self.token.type == TokenType.IDENTIFIER and self.token.value == word

    def make_tag(self, name: str, kind: EntityKind, line: int) -> None:
        """Emit a tag unless its kind is switched off."""
        if self.kinds.is_enabled(kind):
            self.sink.emit(Tag(name=name, kind=kind, line=line, file=self.file))

    def skip_type(self) -> bool:
        """
        Skip a field type such as ``int32``, ``Sub`` or ``.pkg.Sub``.

        Returns:
            False if the type path is missing an identifier
        """
        while True:
            if self.match(TokenType.DOT):
                self.advance()
            if not self.match(TokenType.IDENTIFIER):
                return False
            self.advance()
            if not self.match(TokenType.DOT):
                return True

    def parse_statement(self, kind: EntityKind) -> None:
        """
        Parse the statement introduced by the keyword just seen.

        Emits at most one tag of ``kind``; for enums, continues into the
        body to pick up the enum constants.
        """
        self.advance()

        if kind == EntityKind.FIELD and not self.skip_type():
            return

        if not self.match(TokenType.IDENTIFIER):
            return

        self.make_tag(self.token.value, kind, self.token.line)
        self.advance()

        if kind == EntityKind.ENUM:
            self.parse_enum_constants()

    def parse_enum_constants(self) -> None:
        """
        Parse an enum body, emitting each ``NAME = value`` constant.

        Leaves the closing ``}`` (or EOF) as the current token.
        """
        if not self.match(TokenType.LBRACE):
            return
        self.advance()

        while not self.at_end() and not self.match(TokenType.RBRACE):
            if self.match(TokenType.IDENTIFIER) and not self.is_keyword("option"):
                name, line = self.token.value, self.token.line
                self.advance()
                if self.match(TokenType.EQUALS):
                    self.make_tag(name, EntityKind.ENUMERATOR, line)

            self.skip_until(TokenType.SEMICOLON, TokenType.RBRACE)

            if self.match(TokenType.SEMICOLON):
                self.advance()


class ProtobufScanner:
    """
    Scan driver: finds keywords and resynchronizes on statement boundaries.

    A scanner can be reused; every ``scan`` starts from fresh lexer and
    parser state.
    """

    def __init__(
        self,
        sink: TagSink,
        kinds: KindSelection | None = None,
        file: Path | None = None,
    ):
        self.sink = sink
        self.kinds = kinds if kinds is not None else KindSelection.default()
        self.file = file

    def scan(self, text: str) -> None:
        """Scan one schema text from start to end of input."""
        parser = StatementParser(Lexer(CharSource(text)), self.sink, self.kinds, self.file)
        parser.advance()

        while not parser.at_end():
            kind = self._keyword_kind(parser.token)
            if kind is not None:
                parser.parse_statement(kind)

            parser.skip_until(*STATEMENT_BOUNDARIES)
            parser.advance()

    @staticmethod
    def _keyword_kind(token: Token) -> EntityKind | None:
        if token.type != TokenType.IDENTIFIER:
            return None
        return KEYWORD_KINDS.get(token.value)
