from __future__ import annotations
from typing import TypedDict

from scssdoc.colors import Color

__all__ = ["Options", "OptionalOptions", "DEFAULTS", "default_options"]

class Options(TypedDict):
    color_keywords: frozenset[str]
    color_functions: frozenset[str]
    null_literals: tuple[str, ...]
    flags: tuple[str, ...]

class OptionalOptions(TypedDict, total=False):
    color_keywords: frozenset[str]
    color_functions: frozenset[str]
    null_literals: tuple[str, ...]
    flags: tuple[str, ...]

DEFAULTS: Options = {
    "color_keywords": Color.keywords(),
    "color_functions": Color.functions(),
    "null_literals": ("null", "none"),
    "flags": ("default", "global"),
}

def default_options(origin: OptionalOptions | dict | None = None) -> Options:
    """Fill in every option missing from `origin` with its default.

    Unknown keys are dropped and set-like values are normalized to lowercase frozensets.
    A new dict is returned, `origin` is left untouched.
    """
    origin = origin or {}
    options: dict = {}
    for key, value in DEFAULTS.items():
        options[key] = origin.get(key, value)

    options["color_keywords"] = frozenset(name.lower() for name in options["color_keywords"])
    options["color_functions"] = frozenset(name.lower() for name in options["color_functions"])
    options["null_literals"] = tuple(options["null_literals"])
    options["flags"] = tuple(flag.lstrip("!") for flag in options["flags"])
    return options  # type: ignore[return-value]
