from __future__ import annotations

from scssdoc.options import DEFAULTS, OptionalOptions, Options, default_options
from scssdoc.scss import (
    Check,
    DocExtractor,
    Lexer,
    ParseError,
    infer_type,
    parse,
    split_top_level,
)
from scssdoc.scss.tokens import CssMixin, CssVar, DocBlock, Param, Property, ValueType

__version__ = "0.1.0"

__all__ = [
    "parse",
    "DocExtractor",
    "Lexer",
    "Check",
    "ParseError",
    "infer_type",
    "split_top_level",
    "DEFAULTS",
    "Options",
    "OptionalOptions",
    "default_options",
    "DocBlock",
    "CssVar",
    "CssMixin",
    "Property",
    "Param",
    "ValueType",
]
