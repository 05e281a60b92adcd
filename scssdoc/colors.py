from __future__ import annotations
from functools import cache
import re

__all__ = ["Color", "KEYWORDS", "FUNCTIONS"]

# https://www.w3.org/TR/css-color-4/#named-colors
KEYWORDS = (
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure",
    "beige", "bisque", "black", "blanchedalmond", "blue", "blueviolet", "brown", "burlywood",
    "cadetblue", "chartreuse", "chocolate", "coral", "cornflowerblue", "cornsilk", "crimson", "cyan",
    "darkblue", "darkcyan", "darkgoldenrod", "darkgray", "darkgreen", "darkgrey", "darkkhaki",
    "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred", "darksalmon",
    "darkseagreen", "darkslateblue", "darkslategray", "darkslategrey", "darkturquoise",
    "darkviolet", "deeppink", "deepskyblue", "dimgray", "dimgrey", "dodgerblue",
    "firebrick", "floralwhite", "forestgreen", "fuchsia",
    "gainsboro", "ghostwhite", "gold", "goldenrod", "gray", "green", "greenyellow", "grey",
    "honeydew", "hotpink",
    "indianred", "indigo", "ivory",
    "khaki",
    "lavender", "lavenderblush", "lawngreen", "lemonchiffon", "lightblue", "lightcoral",
    "lightcyan", "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey", "lightpink",
    "lightsalmon", "lightseagreen", "lightskyblue", "lightslategray", "lightslategrey",
    "lightsteelblue", "lightyellow", "lime", "limegreen", "linen",
    "magenta", "maroon", "mediumaquamarine", "mediumblue", "mediumorchid", "mediumpurple",
    "mediumseagreen", "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "navy",
    "oldlace", "olive", "olivedrab", "orange", "orangered", "orchid",
    "palegoldenrod", "palegreen", "paleturquoise", "palevioletred", "papayawhip", "peachpuff",
    "peru", "pink", "plum", "powderblue", "purple",
    "rebeccapurple", "red", "rosybrown", "royalblue",
    "saddlebrown", "salmon", "sandybrown", "seagreen", "seashell", "sienna", "silver", "skyblue",
    "slateblue", "slategray", "slategrey", "snow", "springgreen", "steelblue",
    "tan", "teal", "thistle", "tomato", "transparent", "turquoise",
    "violet",
    "wheat", "white", "whitesmoke",
    "yellow", "yellowgreen",
)

# CSS color constructors and the Sass color functions that return a color
FUNCTIONS = (
    "rgb", "rgba", "hsl", "hsla", "hwb", "lab", "lch", "oklab", "oklch", "color",
    "mix", "adjust-hue", "lighten", "darken", "saturate", "desaturate", "grayscale",
    "complement", "invert", "opacify", "fade-in", "transparentize", "fade-out",
    "adjust-color", "scale-color", "change-color", "tint", "shade",
    "color.adjust", "color.scale", "color.change", "color.mix", "color.complement",
    "color.grayscale", "color.invert",
)

HEX = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")

class Color:
    """Helper class to recognize SCSS color literals."""

    @staticmethod
    @cache
    def keywords() -> frozenset[str]:
        return frozenset(KEYWORDS)

    @staticmethod
    @cache
    def functions() -> frozenset[str]:
        return frozenset(FUNCTIONS)

    @staticmethod
    def hex(code: str) -> bool:
        """Whether the code is a `#` prefixed hex color of 3 or 6 digits."""
        return HEX.fullmatch(code) is not None

    @staticmethod
    def keyword(name: str, keywords: frozenset[str] | None = None) -> bool:
        return name.lower() in (keywords if keywords is not None else Color.keywords())

    @staticmethod
    def function(name: str, functions: frozenset[str] | None = None) -> bool:
        return name.lower() in (functions if functions is not None else Color.functions())
