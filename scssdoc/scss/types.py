""" Best effort type detection for SCSS value expressions.

The value of a variable or a mixin parameter default is never parsed, it is only
classified with an ordered list of rules where the first match wins:

1. `true` / `false`                              -> boolean
2. `null` (or `none`)                            -> None
3. number with an optional unit or `%`           -> number
4. hex code, color function call, color keyword  -> color
5. top level comma or whitespace separated items -> list
6. anything else                                 -> string

Quoted strings are opaque at every step, `"10px"` is a string and `"a, b"` is not a list.
"""

from __future__ import annotations
import re

from scssdoc.colors import Color
from scssdoc.options import Options, default_options
from scssdoc.scss.splitter import find_closing, split_top_level
from scssdoc.scss.tokens import ValueType

__all__ = ["infer_type", "Infer"]

NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?(?:[a-zA-Z]+|%)?")
CALL = re.compile(r"-?[a-zA-Z_][\w.-]*(?=\()")

class Infer:
    """Guard clauses of the type detection, in the order they are applied."""

    @staticmethod
    def boolean(expr: str) -> bool:
        return expr in ("true", "false")

    @staticmethod
    def null(expr: str, options: Options) -> bool:
        return expr in options["null_literals"]

    @staticmethod
    def number(expr: str) -> bool:
        return NUMBER.fullmatch(expr) is not None

    @staticmethod
    def call(expr: str) -> str | None:
        """Name of the function when the whole expression is a single call."""
        if (match := CALL.match(expr)) is None:
            return None
        if find_closing(expr, match.end()) != len(expr) - 1:
            return None
        return match.group()

    @staticmethod
    def color(expr: str, options: Options) -> bool:
        if expr.startswith("#"):
            return Color.hex(expr)
        if (name := Infer.call(expr)) is not None:
            return Color.function(name, options["color_functions"])
        return Color.keyword(expr, options["color_keywords"])

    @staticmethod
    def list(expr: str) -> bool:
        if expr.startswith("(") and find_closing(expr, 0) == len(expr) - 1:
            inner = expr[1:-1].strip()
            if inner == "" or len(split_top_level(inner, ",")) > 1:
                return True
        return (
            len(split_top_level(expr, ",")) > 1
            or len(split_top_level(expr, None)) > 1
        )

def infer_type(expr: str, options: Options | None = None) -> ValueType:
    """Detect the type of a raw value expression.

    Args
        expr (str): The value expression, surrounding whitespace is ignored.
        options (Options | None): Color tables and null literals. Defaults to `DEFAULTS`.

    Returns:
        ValueType: One of `number`, `string`, `color`, `boolean`, `list` or None for null.
    """
    options = options or default_options()
    expr = expr.strip()

    if Infer.boolean(expr):
        return "boolean"
    if Infer.null(expr, options):
        return None
    if Infer.number(expr):
        return "number"
    if Infer.color(expr, options):
        return "color"
    if Infer.list(expr):
        return "list"
    return "string"
