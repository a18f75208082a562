"""Tests for the selector decomposer."""

import pytest

from css2scss.model import Component, ComponentKind
from css2scss.parser import MalformedInputError, parse_selector


def _texts(source: str) -> list[str]:
    return [c.text for c in parse_selector(source)]


def _kinds(source: str) -> list[ComponentKind]:
    return [c.kind for c in parse_selector(source)]


# ---------------------------------------------------------------------------
# Single components
# ---------------------------------------------------------------------------


class TestSimpleComponents:
    def test_tag(self):
        assert parse_selector("a") == [Component("a", ComponentKind.TAG)]

    def test_id(self):
        assert parse_selector("#content") == [Component("#content", ComponentKind.ID)]

    def test_class(self):
        assert parse_selector(".header") == [Component(".header", ComponentKind.CLASS)]

    def test_pseudo_class(self):
        assert parse_selector(":hover") == [
            Component(":hover", ComponentKind.PSEUDO_CLASS)
        ]

    def test_universal(self):
        assert parse_selector("*") == [Component("*", ComponentKind.TAG)]

    def test_attribute(self):
        assert parse_selector("[disabled]") == [
            Component("[disabled]", ComponentKind.ATTRIBUTE)
        ]

    def test_hyphen_and_underscore_names(self):
        assert _texts(".main-nav__item") == [".main-nav__item"]

    def test_empty_chain(self):
        assert parse_selector("") == []


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    def test_two_classes(self):
        assert _texts(".header.mobile") == [".header", ".mobile"]
        assert _kinds(".header.mobile") == [ComponentKind.CLASS, ComponentKind.CLASS]

    def test_tag_with_id_and_class(self):
        assert _texts("div#main.wide") == ["div", "#main", ".wide"]
        assert _kinds("div#main.wide") == [
            ComponentKind.TAG,
            ComponentKind.ID,
            ComponentKind.CLASS,
        ]

    def test_class_with_pseudo_class(self):
        assert _texts(".button:active") == [".button", ":active"]

    def test_pseudo_class_with_arguments(self):
        components = parse_selector(".button:not(:active)")
        assert [c.text for c in components] == [".button", ":not(:active)"]
        assert components[1].kind is ComponentKind.PSEUDO_CLASS

    def test_chained_pseudo_functions(self):
        assert _texts(".button:not(:active):not(:focus)") == [
            ".button",
            ":not(:active)",
            ":not(:focus)",
        ]

    def test_nth_child_arguments_kept_verbatim(self):
        assert _texts("li:nth-child(2n+1)") == ["li", ":nth-child(2n+1)"]

    def test_pseudo_element(self):
        components = parse_selector("p::first-line")
        assert [c.text for c in components] == ["p", "::first-line"]
        assert components[1].kind is ComponentKind.PSEUDO_CLASS

    def test_universal_with_class(self):
        assert _texts("*.note") == ["*", ".note"]


# ---------------------------------------------------------------------------
# Combinators and whitespace
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_descendant_keeps_leading_space(self):
        assert _texts(".header .nav") == [".header", " .nav"]

    def test_child_combinator(self):
        assert _texts(".header > nav") == [".header", " > nav"]

    def test_child_chain(self):
        assert _texts(".header > nav > li") == [".header", " > nav", " > li"]

    def test_unspaced_child_combinator(self):
        assert _texts("ul>li") == ["ul", ">li"]

    def test_adjacent_and_general_siblings(self):
        assert _texts("h1 + p ~ span") == ["h1", " + p", " ~ span"]

    def test_combinator_before_class(self):
        assert _texts(".a > .b") == [".a", " > .b"]

    def test_tab_and_newline_preserved(self):
        assert _texts(".a\t.b\n.c") == [".a", "\t.b", "\n.c"]

    def test_concatenated_text_reconstructs_source(self):
        source = "div#main > ul.menu li:nth-child(2) a[href]:hover"
        assert "".join(_texts(source)) == source


# ---------------------------------------------------------------------------
# Attribute selectors
# ---------------------------------------------------------------------------


class TestAttributes:
    def test_attribute_after_tag(self):
        components = parse_selector("a[href]")
        assert [c.text for c in components] == ["a", "[href]"]
        assert components[1].kind is ComponentKind.ATTRIBUTE

    def test_attribute_with_operator_and_quotes(self):
        assert _texts('a[href^="http"]') == ["a", '[href^="http"]']

    def test_quoted_bracket_passes_through(self):
        assert _texts("[data-x='a]b']") == ["[data-x='a]b']"]

    def test_attribute_followed_by_pseudo_class(self):
        assert _texts("input[type=text]:focus") == [
            "input",
            "[type=text]",
            ":focus",
        ]

    def test_descendant_attribute(self):
        assert _texts("form [required]") == ["form", " [required]"]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestMalformedSelectors:
    def test_double_marker(self):
        with pytest.raises(MalformedInputError) as info:
            parse_selector("a..b")
        assert info.value.char == "."
        assert info.value.source == "a..b"
        assert info.value.line is None
        assert str(info.value) == "Unexpected character '.' in 'a..b'"

    def test_unknown_character(self):
        with pytest.raises(MalformedInputError) as info:
            parse_selector("a&b")
        assert info.value.char == "&"

    def test_parenthesis_on_tag(self):
        with pytest.raises(MalformedInputError) as info:
            parse_selector("a(b)")
        assert info.value.char == "("

    def test_dangling_marker(self):
        with pytest.raises(MalformedInputError) as info:
            parse_selector(".header.")
        assert info.value.char == ""
        assert str(info.value) == "Unexpected end of input in '.header.'"

    def test_dangling_combinator(self):
        with pytest.raises(MalformedInputError):
            parse_selector("a >")

    def test_unterminated_attribute(self):
        with pytest.raises(MalformedInputError):
            parse_selector("a[href")

    def test_nested_attribute_bracket(self):
        with pytest.raises(MalformedInputError) as info:
            parse_selector("a[b[c]]")
        assert info.value.char == "["

    def test_empty_attribute(self):
        with pytest.raises(MalformedInputError):
            parse_selector("a[]")

    def test_unterminated_pseudo_arguments(self):
        with pytest.raises(MalformedInputError):
            parse_selector(":not(.a")

    def test_nested_parentheses_unsupported(self):
        with pytest.raises(MalformedInputError) as info:
            parse_selector(":not(:nth-child(2))")
        assert info.value.char == ")"
