"""Tests for ParseResult JSON serialization."""

import json

import pytest

from consentdoc import parse
from consentdoc.nodes import (
    AnySelection,
    Frontmatter,
    Markdown,
    NonEmptySelection,
    ParseResult,
    RequiredOption,
    Select,
    SelectionOption,
    Signature,
    Toggle,
)
from consentdoc.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    def test_type_discriminator(self) -> None:
        assert to_dict(Signature(id="sig")) == {"_type": "Signature", "id": "sig"}

    def test_toggle_fields(self) -> None:
        data = to_dict(Toggle(id="t", prompt="OK", initial_value=True))
        assert data == {
            "_type": "Toggle",
            "id": "t",
            "prompt": "OK",
            "initial_value": True,
            "expected_value": None,
        }

    def test_select_nests_options_and_expectation(self) -> None:
        select = Select(
            id="s",
            prompt="Pick",
            options=(SelectionOption("a", "A"),),
            initial_value=SelectionOption("a", "A"),
            expected_selection=RequiredOption("a"),
        )
        data = to_dict(select)
        assert data["options"] == [{"_type": "SelectionOption", "id": "a", "title": "A"}]
        assert data["expected_selection"] == {"_type": "RequiredOption", "option_id": "a"}

    def test_frontmatter_entries(self) -> None:
        data = to_dict(ParseResult(frontmatter=Frontmatter({"title": "abc"})))
        assert data["frontmatter"] == {"_type": "Frontmatter", "entries": {"title": "abc"}}
        assert data["sections"] == []


class TestFromDict:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"id": "sig"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Checkbox", "id": "c"})

    @pytest.mark.parametrize(
        "node",
        [
            AnySelection(),
            NonEmptySelection(),
            RequiredOption("o1"),
            Markdown("text"),
            Signature(id="sig"),
        ],
    )
    def test_restores_node(self, node: object) -> None:
        assert from_dict(to_dict(node)) == node


class TestJsonRoundTrip:
    def test_mixed_document(self, mixed_content: str) -> None:
        result = parse(mixed_content)
        assert from_json(to_json(result)) == result

    def test_frontmatter_document(self, frontmatter_document: str) -> None:
        result = parse(frontmatter_document)
        restored = from_json(to_json(result))
        assert restored == result
        assert restored.frontmatter.version == (1, 0, 2)

    def test_output_is_deterministic(self, mixed_content: str) -> None:
        result = parse(mixed_content)
        assert to_json(result) == to_json(parse(mixed_content))

    def test_keys_are_sorted(self) -> None:
        text = to_json(ParseResult(sections=(Toggle(id="t", prompt="OK"),)))
        toggle_keys = list(json.loads(text)["sections"][0])
        assert toggle_keys == sorted(toggle_keys)

    def test_indent(self) -> None:
        assert "\n" in to_json(ParseResult(), indent=2)

    def test_non_result_json_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Expected ParseResult"):
            from_json(json.dumps(to_dict(Markdown("text"))))
