"""
References:
    - [variables](https://sass-lang.com/documentation/variables/)
    - [mixins](https://sass-lang.com/documentation/at-rules/mixin/)
    - [comments](https://sass-lang.com/documentation/syntax/comments/)
    - [value types](https://sass-lang.com/documentation/values/)

<doc-comment>/** ... */</doc-comment>
<variable>$name: <value/> !default;</variable>
<mixin>
    @mixin name(<param/>, <param/>: <value/>) <block/>
</mixin>
<ruleset>
    <selector/> <block/>
</ruleset>

value => number, string, color, boolean, list, null,
param => $name with an optional default value,
block => `{}`, scanned for nested doc comments,
"""

from scssdoc.scss.lexer import Check, Lexer, ParseError
from scssdoc.scss.parser import DocExtractor, parse
from scssdoc.scss.splitter import split_top_level
from scssdoc.scss.types import infer_type

__all__ = ["Check", "Lexer", "ParseError", "DocExtractor", "parse", "split_top_level", "infer_type"]
