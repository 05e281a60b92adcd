""" SCSS SCANNING

Splits SCSS source into comments and the statements between them. Statements are
not tokenized any further, the construct parsers work on their raw text.

<comment>// line comment</comment>
<comment>/* block comment */</comment>
<comment>/** doc comment */</comment>
<statement>
    $var: value !default;
    @mixin name($param: default) { ... }
    selector { ... }
</statement>

References:
    - [comments](https://sass-lang.com/documentation/syntax/comments/)
    - [url tokens](https://www.w3.org/TR/css-syntax-3/#consume-url-token)
"""

from __future__ import annotations
import logging

from scssdoc.scss.tokens import Comment, EOF, Span, Statement

__all__ = ["Check", "Lexer", "ParseError"]

logger = logging.getLogger(__name__)

class Check:
    @staticmethod
    def doc_comment(span: Span | str) -> bool:
        """A block comment opening with `/**`, except for the empty `/**/`."""
        raw = span.raw if isinstance(span, Span) else span
        return raw.startswith("/**") and not raw.startswith("/**/")

    @staticmethod
    def comment_start(current: str | None, next: str | None) -> bool:
        return current == "/" and next is not None and next in "*/"

    @staticmethod
    def quote(current: str | None) -> bool:
        return current is not None and current in "'\""

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in "\t\n\r\f "

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (current.isalnum() or current in "-_")

class Lexer:
    """Lazily split SCSS source into `Comment` and `Statement` spans.

    Args
        source (str): The SCSS source. It is never normalized, spans slice it verbatim.

    Non fatal problems, like an unclosed comment, are collected in `errors`.
    """

    def __init__(self, source: str) -> None:
        if not isinstance(source, str):
            raise TypeError(f"Expected SCSS source as a string, got {type(source).__name__}")
        self.source = source
        self.index = 0
        self.line = 1
        self.errors: list[ParseError] = []

    def __iter__(self):
        return self

    def __next__(self) -> Comment | Statement:
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Comment | Statement]:
        """Scans the entire source at once."""
        return [span for span in self]

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead."""
        index = self.index + amount - 1
        if index < len(self.source):
            return self.source[index]
        return None

    def error(self, error: ParseError):
        logger.debug("%s at line %d", error, self.line)
        self.errors.append(error)

    def _span_(self, cls: type[Span], start: int) -> Span:
        raw = self.source[start:self.index]
        span = cls(raw, start, self.line)
        self.line += raw.count("\n")
        return span

    def _consume_block_comment_(self) -> Comment:
        start = self.index
        end = self.source.find("*/", start + 2)
        if end == -1:
            self.error(ParseError("Comment not closed"))
            self.index = len(self.source)
        else:
            self.index = end + 2
        return self._span_(Comment, start)

    def _consume_line_comment_(self) -> Comment:
        start = self.index
        end = self.source.find("\n", start)
        self.index = len(self.source) if end == -1 else end
        return self._span_(Comment, start)

    def _consume_string_(self):
        """Skip past a quoted string, the opening quote is the current code point."""
        ending = self.source[self.index]
        self.index += 1
        escaped = False
        while (next := self.peek()) is not None:
            if escaped:
                escaped = False
            elif next == "\\":
                escaped = True
            elif next == "\n":
                self.error(ParseError("String literal not closed"))
                return
            elif next == ending:
                self.index += 1
                return
            self.index += 1
        self.error(ParseError("String was not closed"))

    def _consume_url_(self):
        """Skip past the argument of an unquoted `url(`, the `(` is the current code point."""
        self.index += 1
        while Check.whitespace(self.peek()):
            self.index += 1
        if Check.quote(self.peek()):
            return
        end = self.source.find(")", self.index)
        newline = self.source.find("\n", self.index)
        if end == -1 or newline != -1 and newline < end:
            self.error(ParseError("Url not closed"))
            self.index = len(self.source) if newline == -1 else newline
        else:
            self.index = end + 1

    def _url_start_(self) -> bool:
        if self.source[self.index:self.index + 4].lower() != "url(":
            return False
        return self.index == 0 or not Check.ident(self.source[self.index - 1])

    def _consume_statement_(self) -> Statement:
        start = self.index
        while (next := self.peek()) is not None:
            if Check.comment_start(next, self.peek(2)):
                break
            elif Check.quote(next):
                self._consume_string_()
            elif next in "uU" and self._url_start_():
                self.index += 3
                self._consume_url_()
            else:
                self.index += 1
        return self._span_(Statement, start)

    def consume(self) -> Span:
        """Consume code points and return the next span."""
        next = self.peek()
        if next is None:
            return EOF('', self.index, self.line)
        elif next == "/" and self.peek(2) == "*":
            return self._consume_block_comment_()
        elif next == "/" and self.peek(2) == "/":
            return self._consume_line_comment_()
        return self._consume_statement_()

class ParseError(Exception): pass
