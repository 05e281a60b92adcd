"""Tests for value type detection."""

import pytest

from scssdoc import default_options, infer_type, parse


def detect(expr):
    return parse(f"/** */ $var: {expr};")[0]["code"]["type"]


class TestDetectType:
    """Type of a variable default, as seen through the parser."""

    @pytest.mark.parametrize("expr", ["3.14", "10%", "15px", "-2", ".5em", "+1.5rem", "1e3", "-2.5E-2px"])
    def test_number(self, expr):
        assert detect(expr) == "number"

    @pytest.mark.parametrize("expr", ["bold", '"blah blah"', "'10px'", "sans-serif"])
    def test_string(self, expr):
        assert detect(expr) == "string"

    @pytest.mark.parametrize(
        "expr",
        [
            "orange",
            "#ff00cc",
            "#0f0",
            "rgba(255, 0, 0, 0.5)",
            "hsl(0, 100%, 50%)",
            "fade-in(#cc00cc, 0.2)",
            "darken($base, 10%)",
            "Transparent",
        ],
    )
    def test_color(self, expr):
        assert detect(expr) == "color"

    @pytest.mark.parametrize("expr", ["true", "false"])
    def test_boolean(self, expr):
        assert detect(expr) == "boolean"

    @pytest.mark.parametrize(
        "expr",
        [
            "'Arial', Verdana, sans-serif",
            "2px 4px 2px 4px",
            "(a, b)",
            "()",
        ],
    )
    def test_list(self, expr):
        assert detect(expr) == "list"

    @pytest.mark.parametrize("expr", ["null", "none"])
    def test_null(self, expr):
        assert detect(expr) is None


class TestInferType:
    """Direct calls to `infer_type`."""

    def test_surrounding_whitespace(self):
        assert infer_type("  15px \n") == "number"

    def test_quoted_number_is_string(self):
        """Test that quoted content is never read as a number."""
        assert infer_type('"15px"') == "string"

    def test_quoted_comma_is_string(self):
        """Test that quoted content is never split."""
        assert infer_type('"a, b c"') == "string"

    def test_hex_with_wrong_length(self):
        assert infer_type("#ff00") == "string"

    def test_call_followed_by_more(self):
        """Test that a color call must make up the whole expression."""
        assert infer_type("rgb(0, 0, 0) 1px") == "list"

    def test_non_color_call(self):
        assert infer_type("url(image.png)") == "string"

    def test_color_keyword_in_list(self):
        assert infer_type("red blue") == "list"

    def test_empty(self):
        assert infer_type("") == "string"

    def test_custom_null_literals(self):
        options = default_options({"null_literals": ("null",)})

        assert infer_type("none", options) == "string"

    def test_custom_color_functions(self):
        options = default_options({"color_functions": {"Brand-Color"}})

        assert infer_type("brand-color(1)", options) == "color"
        assert infer_type("rgb(0, 0, 0)", options) == "string"


class TestOptions:
    """Tests for option defaults."""

    def test_defaults(self):
        options = default_options()

        assert "orange" in options["color_keywords"]
        assert "fade-in" in options["color_functions"]
        assert options["flags"] == ("default", "global")

    def test_unknown_keys_dropped(self):
        assert "colour" not in default_options({"colour": "red"})

    def test_flags_without_bang(self):
        assert default_options({"flags": ["!default"]})["flags"] == ("default",)
