"""Property-based tests for parser invariants using Hypothesis.

These tests verify properties that hold for any input:
1. Parsing either succeeds or raises ConsentParseError, nothing else
2. Parsing is deterministic
3. Markdown sections are never empty and never padded with whitespace
4. Error locations never point past the end of the input
5. Rendered markup parses back to the same result
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from consentdoc import parse, to_markup
from consentdoc.config import ParseConfig, parse_config_context
from consentdoc.errors import ConsentParseError
from consentdoc.location import SourceLocation
from consentdoc.nodes import (
    Markdown,
    ParseResult,
    Select,
    SelectionOption,
    Signature,
    Toggle,
)

pytestmark = pytest.mark.properties

# Text biased towards the characters the grammar cares about
markup_text = st.text(
    alphabet=st.sampled_from(list('<>/="\\-*: \n\r\tabcdeiostgl0123456789')) | st.characters(),
    max_size=300,
)

element_sources = st.builds(
    lambda name, attrs, body, close: f"<{name}{attrs}>{body}{close}",
    st.sampled_from(["toggle", "select", "signature", "option", "x"]),
    st.sampled_from(["", " id=a", ' id="a b"', " id=a initial-value=true", " id=", " /"]),
    st.text(alphabet="ab <>/\n", max_size=20),
    st.sampled_from(["", "</>", "</toggle>", "</select>", "</signature>"]),
)

documents = st.lists(st.one_of(markup_text, element_sources), max_size=6).map("\n".join)

ids = st.from_regex(r"[a-z][a-z0-9-]{0,8}", fullmatch=True)
prompts = st.text(alphabet="abcdefgh XYZ.,?", min_size=1, max_size=30).map(str.strip).filter(bool)


def _parse_outcome(source: str) -> ParseResult | ConsentParseError:
    try:
        return parse(source)
    except ConsentParseError as e:
        return e


class TestParserInvariants:
    @given(documents)
    @settings(max_examples=300)
    def test_only_parse_errors_escape(self, source: str) -> None:
        """Any input parses or fails with ConsentParseError."""
        outcome = _parse_outcome(source)
        assert isinstance(outcome, ParseResult | ConsentParseError)

    @given(documents)
    @settings(max_examples=200)
    def test_deterministic(self, source: str) -> None:
        """Parsing the same input twice gives equal results or equal errors."""
        assert _parse_outcome(source) == _parse_outcome(source)

    @given(documents)
    @settings(max_examples=200)
    def test_markdown_sections_are_trimmed_and_non_empty(self, source: str) -> None:
        outcome = _parse_outcome(source)
        if isinstance(outcome, ConsentParseError):
            return
        for section in outcome.sections:
            if isinstance(section, Markdown):
                assert section.text
                assert section.text == section.text.strip()

    @given(documents)
    @settings(max_examples=200)
    def test_error_location_within_input(self, source: str) -> None:
        outcome = _parse_outcome(source)
        if isinstance(outcome, ConsentParseError):
            assert outcome.location <= SourceLocation.from_offset(source, len(source))

    @given(markup_text)
    @settings(max_examples=100)
    def test_disabled_custom_elements_never_fail(self, source: str) -> None:
        """Without custom elements, any text is markdown plus one signature."""
        with parse_config_context(ParseConfig(custom_elements_enabled=False)):
            result = parse(source)
        assert result.sections[-1] == Signature(id="default-signature")
        assert len(result.sections) in (1, 2)


class TestRoundTripProperties:
    @given(
        st.lists(
            st.one_of(
                st.builds(
                    Toggle,
                    id=ids,
                    prompt=prompts,
                    initial_value=st.booleans(),
                    expected_value=st.none() | st.booleans(),
                ),
                st.builds(Signature, id=ids),
            ),
            max_size=5,
        )
    )
    @settings(max_examples=100)
    def test_rendered_sections_parse_back(self, sections: list[Toggle | Signature]) -> None:
        result = ParseResult(sections=tuple(sections))
        assert parse(to_markup(result)) == result

    @given(
        option_ids=st.lists(ids, min_size=1, max_size=4, unique=True),
        prompt=st.none() | prompts,
        data=st.data(),
    )
    @settings(max_examples=100)
    def test_rendered_select_parses_back(
        self, option_ids: list[str], prompt: str | None, data: st.DataObject
    ) -> None:
        options = tuple(SelectionOption(id=i, title=i.upper()) for i in option_ids)
        initial = data.draw(st.none() | st.sampled_from(options))
        select = Select(id="s", prompt=prompt or "", options=options, initial_value=initial)
        result = ParseResult(sections=(Markdown("Choose wisely."), select))
        assert parse(to_markup(result)) == result
