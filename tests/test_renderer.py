"""Tests for the consent markup renderer."""

import pytest

from consentdoc import parse
from consentdoc.nodes import (
    Frontmatter,
    Markdown,
    NonEmptySelection,
    ParseResult,
    RequiredOption,
    Section,
    Select,
    SelectionOption,
    Signature,
    Toggle,
)
from consentdoc.renderers import MarkupRenderer, ResultRenderer, to_markup


class TestMarkupRenderer:
    def test_empty_result(self) -> None:
        assert to_markup(ParseResult()) == ""

    def test_toggle_uses_explicit_closing_tag(self) -> None:
        result = parse("<toggle id=t1 expected-value=true>I agree</>")
        assert to_markup(result) == "<toggle id=t1 expected-value=true>I agree</toggle>\n"

    def test_toggle_initial_value(self) -> None:
        result = ParseResult(sections=(Toggle(id="t", prompt="OK", initial_value=True),))
        assert to_markup(result) == "<toggle id=t initial-value=true>OK</toggle>\n"

    def test_signature_self_closes(self) -> None:
        assert to_markup(ParseResult(sections=(Signature("sig"),))) == "<signature id=sig />\n"

    def test_values_that_are_not_names_are_quoted(self) -> None:
        result = ParseResult(sections=(Signature("my signature"), Signature("data-sharing")))
        assert to_markup(result) == (
            '<signature id="my signature" />\n\n<signature id=data-sharing />\n'
        )

    def test_select(self) -> None:
        select = Select(
            id="s",
            prompt="Pick one",
            options=(SelectionOption("a", "Alpha"), SelectionOption("b", "Beta")),
            initial_value=SelectionOption("a", "Alpha"),
            expected_selection=NonEmptySelection(),
        )
        assert to_markup(ParseResult(sections=(select,))) == (
            '<select id=s initial-value=a expected-value="*">\n'
            "Pick one\n"
            "<option id=a>Alpha</option>\n"
            "<option id=b>Beta</option>\n"
            "</select>\n"
        )

    def test_select_required_option(self) -> None:
        select = Select(
            id="s",
            prompt="",
            options=(SelectionOption("a", "Alpha"),),
            expected_selection=RequiredOption("a"),
        )
        assert to_markup(ParseResult(sections=(select,))) == (
            "<select id=s expected-value=a>\n<option id=a>Alpha</option>\n</select>\n"
        )

    def test_frontmatter_and_sections(self) -> None:
        result = ParseResult(
            frontmatter=Frontmatter({"title": "abc", "keyOnly": ""}),
            sections=(Markdown("Body"), Signature("sig")),
        )
        assert to_markup(result) == (
            "---\ntitle: abc\nkeyOnly:\n---\n\nBody\n\n<signature id=sig />\n"
        )

    def test_unknown_section_type(self) -> None:
        with pytest.raises(TypeError, match="Cannot render section"):
            to_markup(ParseResult(sections=(Section(),)))

    def test_conforms_to_renderer_protocol(self) -> None:
        renderer: ResultRenderer = MarkupRenderer()
        assert renderer.render(ParseResult(sections=(Markdown("Hi"),))) == "Hi\n"


class TestRoundTrip:
    """Rendered markup parses back to an equal result."""

    def test_mixed_document(self, mixed_content: str) -> None:
        result = parse(mixed_content)
        assert parse(to_markup(result)) == result

    def test_frontmatter_document(self, frontmatter_document: str) -> None:
        result = parse(frontmatter_document)
        assert parse(to_markup(result)) == result

    def test_interleaved_select_prompt(self) -> None:
        source = (
            "<select id=s>\nPlease select\n<option id=o1>T1</>\n"
            "your preferred option\n<option id=o2>T2</>\n</select>"
        )
        result = parse(source)
        assert parse(to_markup(result)) == result
