"""Tests for consentdoc.utils and the markup writer."""

import logging

from consentdoc.renderers.writer import MarkupWriter, format_attribute
from consentdoc.utils import get_logger


class TestGetLogger:
    def test_prefixes_foreign_names(self) -> None:
        assert get_logger("mymodule").name == "consentdoc.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("consentdoc").name == "consentdoc"
        assert get_logger("consentdoc.parser").name == "consentdoc.parser"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestFormatAttribute:
    def test_bare_name(self) -> None:
        assert format_attribute("id", "opt-1") == " id=opt-1"

    def test_quoted_when_not_a_name(self) -> None:
        assert format_attribute("expected-value", "*") == ' expected-value="*"'
        assert format_attribute("id", "1st") == ' id="1st"'
        assert format_attribute("id", "two words") == ' id="two words"'

    def test_empty_value_is_quoted(self) -> None:
        assert format_attribute("id", "") == ' id=""'


class TestMarkupWriter:
    def test_self_closing_tag(self) -> None:
        out = MarkupWriter()
        out.open_tag("signature", [("id", "sig")], self_closing=True)
        assert out.getvalue() == "<signature id=sig />"

    def test_element_with_content(self) -> None:
        out = MarkupWriter()
        out.open_tag("toggle", [("id", "t"), ("initial-value", "true")]).write("OK")
        out.close_tag("toggle")
        assert out.getvalue() == "<toggle id=t initial-value=true>OK</toggle>"

    def test_line(self) -> None:
        out = MarkupWriter()
        out.line("---").line()
        assert out.getvalue() == "---\n\n"

    def test_empty_writes_are_skipped(self) -> None:
        out = MarkupWriter()
        out.write("")
        assert not out
        assert out.getvalue() == ""
