""" SCSS doc comment parser

Pairs every `/** ... */` doc comment with the construct following it:

    /** A variable */
    $var: 10px !default;        -> css_var

    /** A mixin */
    @mixin name($a, $b: 2px) {  -> css_mixin
        /** Nested docs */
        color: $a;              -> property
    }

    /** Anything else */
    .selector { ... }           -> property
"""

from __future__ import annotations
from abc import abstractmethod
from collections.abc import Iterator
from enum import Enum
from functools import cache
import logging
import re

from scssdoc.options import OptionalOptions, Options, default_options
from scssdoc.scss.lexer import Check, Lexer, ParseError
from scssdoc.scss.splitter import PAIRS, find_closing, find_top_level, split_top_level
from scssdoc.scss.tokens import (
    Comment,
    Construct,
    CssMixin,
    CssVar,
    DocBlock,
    Param,
    Property,
)
from scssdoc.scss.types import infer_type

__all__ = [
    "ConstructParser",
    "VariableParser",
    "MixinParser",
    "GenericParser",
    "DocExtractor",
    "State",
    "parse",
]

logger = logging.getLogger(__name__)

VARIABLE = re.compile(r"(\$[\w-]+)\s*:")
MIXIN = re.compile(r"@mixin\s+(-?[a-zA-Z_][\w-]*)")
PARAM = re.compile(r"(\$[\w-]+(?:\.\.\.)?)\s*(?::(.*))?", re.DOTALL)

# `#{...}` interpolation may hold a `;` that does not end the declaration
VALUE_PAIRS = {**PAIRS, "{": "}"}

@cache
def flags_pattern(flags: tuple[str, ...]) -> re.Pattern[str]:
    names = "|".join(re.escape(flag) for flag in flags)
    return re.compile(rf"(?:\s*!\s*(?:{names}))+\s*$")

def strip_flags(value: str, flags: tuple[str, ...]) -> str:
    """Trim the value and drop trailing `!default` / `!global` style flags."""
    value = value.strip()
    if len(flags) == 0:
        return value
    return flags_pattern(flags).sub("", value).strip()

class ConstructParser:
    """Parse the text of a statement into a construct record.

    Returns None from `parse` to decline, letting the next parser try.
    """

    def __init__(self, options: Options, errors: list[ParseError] | None = None) -> None:
        self.options = options
        self.errors = errors if errors is not None else []

    def error(self, error: ParseError):
        logger.debug("%s", error)
        self.errors.append(error)

    @abstractmethod
    def parse(self, text: str) -> Construct | None:
        ...

class VariableParser(ConstructParser):
    def parse(self, text: str) -> CssVar | None:
        if not text.startswith("$"):
            return None
        if (match := VARIABLE.match(text)) is None:
            return None

        end = find_top_level(text, ";", match.end(), VALUE_PAIRS)
        value = text[match.end():] if end == -1 else text[match.end():end]
        default = strip_flags(value, self.options["flags"])
        if default == "":
            return {"tagname": "css_var", "name": match.group(1), "default": None, "type": None}
        return {
            "tagname": "css_var",
            "name": match.group(1),
            "default": default,
            "type": infer_type(default, self.options),
        }

class MixinParser(ConstructParser):
    def parse(self, text: str) -> CssMixin | None:
        if (match := MIXIN.match(text)) is None:
            return None

        index = match.end()
        while index < len(text) and Check.whitespace(text[index]):
            index += 1

        params: list[Param] = []
        if index < len(text) and text[index] == "(":
            params = self.parse_params(self.params_source(text, index))

        return {
            "tagname": "css_mixin",
            "name": match.group(1),
            "params": params,
        }

    def params_source(self, text: str, opening: int) -> str:
        """Text between the parentheses of the parameter list opened at `opening`."""
        closing = find_closing(text, opening)
        if closing != -1:
            return text[opening + 1:closing]

        self.error(ParseError(f"Parameter list of {text[:opening]!r} not closed"))
        body = find_top_level(text, "{", opening + 1)
        return text[opening + 1:] if body == -1 else text[opening + 1:body]

    def parse_params(self, source: str) -> list[Param]:
        params: list[Param] = []
        for piece in split_top_level(source, ","):
            piece = piece.strip()
            if piece == "":
                continue
            params.append(self.parse_param(piece))
        return params

    def parse_param(self, piece: str) -> Param:
        if (match := PARAM.fullmatch(piece)) is None:
            self.error(ParseError(f"Invalid mixin parameter {piece!r}"))
            return {"name": piece, "default": None}

        default = (match.group(2) or "").strip()
        if default == "":
            return {"name": match.group(1), "default": None}
        return {
            "name": match.group(1),
            "default": default,
            "type": infer_type(default, self.options),
        }

class GenericParser(ConstructParser):
    def parse(self, text: str) -> Property:
        return {"tagname": "property"}

class State(Enum):
    ExpectComment = 0
    InDocComment = 1
    ExpectConstruct = 2
    InConstruct = 3

class DocExtractor:
    """Walk the spans of a source and emit a `DocBlock` per doc comment, in source order.

    Args
        source (str): The SCSS source.
        options (OptionalOptions | None): Overrides for `DEFAULTS`.
    """

    def __init__(self, source: str, options: OptionalOptions | None = None) -> None:
        self.lexer = Lexer(source)
        self.options = default_options(options)
        self.errors: list[ParseError] = self.lexer.errors
        self.state = State.ExpectComment
        # Tried in order, the generic parser never declines
        self.parsers: list[ConstructParser] = [
            VariableParser(self.options, self.errors),
            MixinParser(self.options, self.errors),
            GenericParser(self.options, self.errors),
        ]

    def __iter__(self) -> Iterator[DocBlock]:
        return self.extract()

    def process(self) -> list[DocBlock]:
        return list(self.extract())

    def parse_construct(self, text: str) -> Construct:
        text = text.lstrip()
        for parser in self.parsers:
            if (code := parser.parse(text)) is not None:
                return code
        return {"tagname": "property"}

    def doc_block(self, comment: Comment, text: str) -> DocBlock:
        if text.strip() == "":
            logger.debug("No construct follows the doc comment at line %d", comment.line)
        return {
            "comment": comment.raw,
            "code": self.parse_construct(text),
            "linenr": comment.line,
        }

    @staticmethod
    def complete(text: str) -> bool:
        """Whether the construct text reaches its closing `;` or its block."""
        return find_top_level(text, ";{", 0, VALUE_PAIRS) != -1

    def extract(self) -> Iterator[DocBlock]:
        pending: Comment | None = None
        # Statement text of the construct, with the comments inside it left out
        gathered: list[str] = []
        for span in self.lexer:
            if isinstance(span, Comment) and Check.doc_comment(span):
                if pending is not None:
                    yield self.doc_block(pending, "".join(gathered))
                pending, gathered = span, []
                self.state = State.InDocComment
                continue
            elif self.state is State.ExpectComment:
                continue

            if isinstance(span, Comment):
                if self.state is State.InConstruct:
                    # A block comment separates tokens like whitespace
                    gathered.append(" " if span.raw.startswith("/*") else "")
                else:
                    self.state = State.ExpectConstruct
                continue
            elif self.state is not State.InConstruct and span.blank:
                self.state = State.ExpectConstruct
                continue

            self.state = State.InConstruct
            gathered.append(span.raw)
            if self.complete("".join(gathered)):
                yield self.doc_block(pending, "".join(gathered))
                pending, gathered = None, []
                self.state = State.ExpectComment

        if pending is not None:
            yield self.doc_block(pending, "".join(gathered))
        self.state = State.ExpectComment

def parse(source: str, options: OptionalOptions | None = None) -> list[DocBlock]:
    """Extract the documented constructs of an SCSS source.

    Args
        source (str): The SCSS source.
        options (OptionalOptions | None): Overrides for the color tables, null literals
            and declaration flags.

    Returns:
        list[DocBlock]: One record per `/**` doc comment, in source order.
    """
    return DocExtractor(source, options).process()
