from __future__ import annotations
from typing import Literal, Union
from typing_extensions import NotRequired, TypeAliasType, TypedDict

__all__ = [
    "Span",
    "Comment",
    "Statement",
    "EOF",

    "ValueType",
    "Param",
    "CssVar",
    "CssMixin",
    "Property",
    "Construct",
    "DocBlock",
]

class Span:
    raw: str
    offset: int
    line: int
    def __init__(self, raw: str = '', offset: int = 0, line: int = 1):
        self.raw = raw
        self.offset = offset
        self.line = line

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r}, {self.offset})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Span):
            return (
                type(self) is type(__value)
                and self.raw == __value.raw
                and self.offset == __value.offset
            )
        return False

class Comment(Span): pass

class Statement(Span):
    @property
    def blank(self) -> bool:
        return self.raw.strip() == ""

class EOF(Span): pass

ValueType = TypeAliasType(
    "ValueType",
    Union[Literal["number", "string", "color", "boolean", "list"], None],
)

class Param(TypedDict):
    name: str
    default: str | None
    # Only present when default is not None
    type: NotRequired[ValueType]

class CssVar(TypedDict):
    tagname: Literal["css_var"]
    name: str
    default: str | None
    type: ValueType

class CssMixin(TypedDict):
    tagname: Literal["css_mixin"]
    name: str
    params: list[Param]

class Property(TypedDict):
    tagname: Literal["property"]

Construct = CssVar | CssMixin | Property

class DocBlock(TypedDict):
    comment: str
    code: Construct
    linenr: int
