"""Consent markup renderer: turns a ParseResult back into source text.

Output uses explicit closing tags for toggles, selects and options, and
the self-closing form for signatures. Attribute values that are valid
names are written bare, anything else is double-quoted.

For documents whose markdown has no line starting with ``<`` and whose
prompts and attribute values contain no ``<`` or ``"``, parsing the
rendered markup reproduces an equal ParseResult.

Example:
    >>> from consentdoc import parse
    >>> to_markup(parse("<toggle id=t1 expected-value=true>I agree</>"))
    '<toggle id=t1 expected-value=true>I agree</toggle>\\n'
"""

from __future__ import annotations

from consentdoc.nodes import (
    AnySelection,
    Markdown,
    NonEmptySelection,
    ParseResult,
    RequiredOption,
    Section,
    Select,
    Signature,
    Toggle,
)
from consentdoc.parsing.frontmatter import FRONTMATTER_DELIMITER
from consentdoc.parsing.sections import ANY_OPTION_WILDCARD, ID_ATTRIBUTE
from consentdoc.renderers.writer import MarkupWriter


class MarkupRenderer:
    """Render a ParseResult as consent markup."""

    __slots__ = ()

    def render(self, result: ParseResult) -> str:
        """Render frontmatter and sections, separated by blank lines."""
        out = MarkupWriter()
        if result.frontmatter:
            out.line(FRONTMATTER_DELIMITER)
            for key, value in result.frontmatter.items():
                out.line(f"{key}: {value}" if value else f"{key}:")
            out.line(FRONTMATTER_DELIMITER)

        for section in result.sections:
            if out:
                out.line()
            self._render_section(section, out)
            out.line()
        return out.getvalue()

    def _render_section(self, section: Section, out: MarkupWriter) -> None:
        match section:
            case Markdown(text=text):
                out.write(text)
            case Toggle():
                attributes = [(ID_ATTRIBUTE, section.id)]
                if section.initial_value:
                    attributes.append(("initial-value", "true"))
                if section.expected_value is not None:
                    attributes.append(("expected-value", str(section.expected_value).lower()))
                out.open_tag("toggle", attributes).write(section.prompt).close_tag("toggle")
            case Select():
                self._render_select(section, out)
            case Signature():
                out.open_tag("signature", [(ID_ATTRIBUTE, section.id)], self_closing=True)
            case _:
                msg = f"Cannot render section of type {type(section).__name__}"
                raise TypeError(msg)

    def _render_select(self, select: Select, out: MarkupWriter) -> None:
        attributes = [(ID_ATTRIBUTE, select.id)]
        if select.initial_value is not None:
            attributes.append(("initial-value", select.initial_value.id))
        match select.expected_selection:
            case AnySelection():
                pass
            case NonEmptySelection():
                attributes.append(("expected-value", ANY_OPTION_WILDCARD))
            case RequiredOption(option_id=option_id):
                attributes.append(("expected-value", option_id))

        out.open_tag("select", attributes).line()
        if select.prompt:
            out.line(select.prompt)
        for option in select.options:
            out.open_tag("option", [(ID_ATTRIBUTE, option.id)]).write(option.title)
            out.close_tag("option").line()
        out.close_tag("select")


def to_markup(result: ParseResult) -> str:
    """Render a ParseResult as consent markup.

    Args:
        result: Parsed document

    Returns:
        Markup text that parses back to an equivalent result
    """
    return MarkupRenderer().render(result)
