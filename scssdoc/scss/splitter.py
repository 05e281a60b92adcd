""" Nesting aware splitting of SCSS expressions.

Parameter lists and value expressions are split on separators that only count
at the top level, i.e. outside of `()`, `[]` and quoted strings.

    >>> split_top_level("$a, $b: fn(1, 2)")
    ['$a', ' $b: fn(1, 2)']
    >>> split_top_level("2px 'a b' (1 2)", None)
    ['2px', "'a b'", '(1 2)']
"""

from __future__ import annotations
from collections.abc import Iterator

__all__ = [
    "PAIRS",
    "QUOTES",
    "walk",
    "split_top_level",
    "find_top_level",
    "find_closing",
]

PAIRS: dict[str, str] = {"(": ")", "[": "]"}
QUOTES = "'\""

def walk(
    text: str,
    start: int = 0,
    pairs: dict[str, str] = PAIRS,
    quotes: str = QUOTES,
) -> Iterator[tuple[int, str, int]]:
    """Yield `(index, char, depth)` for every code point outside of a quoted string.

    Depth is the nesting level the char sits in. A group opener is reported at the
    depth outside of the group and its closer at the depth inside of it, so only
    unmatched closers show up at depth 0. Quote characters and their
    content are skipped entirely. An unterminated quote runs to the end of the text.
    Closers that do not match the innermost opener are treated as plain characters.
    """
    stack: list[str] = []
    quote: str | None = None
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char in quotes:
            quote = char
        elif char in pairs:
            yield index, char, len(stack)
            stack.append(pairs[char])
        elif len(stack) > 0 and char == stack[-1]:
            yield index, char, len(stack)
            stack.pop()
        else:
            yield index, char, len(stack)

def split_top_level(
    text: str,
    separator: str | None = ",",
    pairs: dict[str, str] = PAIRS,
    quotes: str = QUOTES,
) -> list[str]:
    """Split text on a top level separator.

    Args
        text (str): The text to split.
        separator (str | None): The separator char. `None` splits on runs of whitespace
            and drops empty pieces, like `str.split()`.
        pairs (dict[str, str]): Opening to closing nesting delimiters.
        quotes (str): Chars that open and close an opaque string.

    Returns:
        list[str]: The pieces, unstripped when splitting on a separator char.
    """
    if separator is None:
        cuts = [i for i, char, depth in walk(text, 0, pairs, quotes) if depth == 0 and char.isspace()]
    else:
        cuts = [i for i, char, depth in walk(text, 0, pairs, quotes) if depth == 0 and char == separator]

    pieces = []
    previous = 0
    for cut in cuts:
        pieces.append(text[previous:cut])
        previous = cut + 1
    pieces.append(text[previous:])

    if separator is None:
        return [piece for piece in pieces if piece != ""]
    return pieces

def find_top_level(
    text: str,
    stops: str,
    start: int = 0,
    pairs: dict[str, str] = PAIRS,
    quotes: str = QUOTES,
) -> int:
    """Index of the first top level char in `stops`, or `-1`."""
    for index, char, depth in walk(text, start, pairs, quotes):
        if depth == 0 and char in stops:
            return index
    return -1

def find_closing(
    text: str,
    start: int,
    pairs: dict[str, str] = PAIRS,
    quotes: str = QUOTES,
) -> int:
    """Index of the delimiter closing the opener at `text[start]`, or `-1` if it is never closed."""
    closer = pairs[text[start]]
    for index, char, depth in walk(text, start + 1, pairs, quotes):
        if depth == 0 and char == closer:
            return index
    return -1
