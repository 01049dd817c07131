"""
Character source for .proto text.

Feeds the lexer one character at a time with comments and quoted string
contents already removed, so no token can ever start inside either.
Supports pushing back a single character.
"""

EOF = ""

# Stands in for a whole quoted string. Not an identifier character and not
# significant punctuation, so the lexer discards it.
STRING_PLACEHOLDER = '"'


class CharSource:
    """
    Comment and string aware reader over schema text.

    - ``/* ... */`` reads as a single space
    - ``// ...`` is dropped up to the end of the line
    - ``"..."`` and ``'...'`` read as ``STRING_PLACEHOLDER``
    """

    def __init__(self, text: str):
        """
        Initialize character source.

        Args:
            text: Schema source text
        """
        self.text = text
        self.pos = 0
        self.line = 1
        self._pushback: tuple[str, int] | None = None
        # Line of the character most recently handed out
        self._next_line = 1

    def _raw(self) -> str:
        """Next raw character, updating line tracking."""
        if self.pos >= len(self.text):
            return EOF
        ch = self.text[self.pos]
        self.pos += 1
        line = self._next_line
        if ch == "\n":
            self._next_line += 1
        self.line = line
        return ch

    def _peek_raw(self) -> str:
        if self.pos >= len(self.text):
            return EOF
        return self.text[self.pos]

    def _skip_block_comment(self) -> None:
        """Skip to just past the closing ``*/`` (or to end of input)."""
        while True:
            ch = self._raw()
            if ch == EOF:
                return
            if ch == "*" and self._peek_raw() == "/":
                self._raw()
                return

    def _skip_line_comment(self) -> None:
        """Skip up to, but not including, the newline."""
        while self._peek_raw() not in (EOF, "\n"):
            self._raw()

    def _skip_string(self, quote: str) -> None:
        """Skip a quoted string body including its closing quote."""
        while True:
            ch = self._peek_raw()
            if ch in (EOF, "\n"):
                # Unterminated; the newline is left for the caller
                return
            self._raw()
            if ch == "\\":
                if self._peek_raw() not in (EOF, "\n"):
                    self._raw()
            elif ch == quote:
                return

    def getc(self) -> str:
        """
        Return the next significant character, or ``EOF`` at end of input.
        """
        if self._pushback is not None:
            ch, self.line = self._pushback
            self._pushback = None
            return ch

        ch = self._raw()
        if ch == "/":
            nxt = self._peek_raw()
            if nxt == "*":
                start_line = self.line
                self._raw()
                self._skip_block_comment()
                self.line = start_line
                return " "
            if nxt == "/":
                self._skip_line_comment()
                return " "
        elif ch in ('"', "'"):
            start_line = self.line
            self._skip_string(ch)
            self.line = start_line
            return STRING_PLACEHOLDER
        return ch

    def ungetc(self, ch: str) -> None:
        """
        Push back one character so the next ``getc()`` returns it.

        Raises:
            RuntimeError: If a character is already pushed back
        """
        if ch == EOF:
            return
        if self._pushback is not None:
            raise RuntimeError("CharSource supports only one character of pushback")
        self._pushback = (ch, self.line)
