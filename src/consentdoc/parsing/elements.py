"""Custom element parsing for consentdoc.

Recursive descent over HTML-like custom elements embedded in markdown:

    <name attr=value attr="quoted value" flag>content</name>
    <name attr=value>content</>
    <name attr=value />

Content is a sequence of trimmed text runs and nested elements. Runs that
are only whitespace are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from consentdoc.cursor import is_ident_start
from consentdoc.errors import ParseErrorKind
from consentdoc.nodes import ElementContent, ElementText, ParsedElement

if TYPE_CHECKING:
    from consentdoc.config import ParseConfig
    from consentdoc.cursor import Cursor

SHORTHAND_CLOSING_TAG = "</>"


class ElementParsingMixin:
    """Mixin for custom element parsing.

    Required Host Attributes:
        - _cursor: Cursor
        - _config: ParseConfig
        - _depth: int

    Required Host Methods:
        - _parse_identifier() -> str
        - _parse_name() -> str
        - _parse_attribute_value() -> str
    """

    _cursor: Cursor
    _config: ParseConfig
    _depth: int

    def _parse_custom_element(self) -> ParsedElement | None:
        """Parse a custom element starting at the cursor.

        Returns:
            The parsed element, or None (nothing consumed) if the cursor is
            not at ``<`` followed by an identifier start.

        Raises:
            ConsentParseError: UNEXPECTED_CHARACTER for malformed attributes,
                EOF inside an unterminated string literal, OTHER if the
                element is never closed or nests too deeply
        """
        cursor = self._cursor
        next_char = cursor.peek()
        if cursor.current_char != "<" or next_char is None or not is_ident_start(next_char):
            return None

        if self._depth >= self._config.max_element_depth:
            raise cursor.error(
                ParseErrorKind.OTHER,
                f"element nesting exceeds {self._config.max_element_depth} levels",
            )

        self._depth += 1
        try:
            return self._parse_element_body()
        finally:
            self._depth -= 1

    def _parse_element_body(self) -> ParsedElement:
        cursor = self._cursor
        cursor.expect_and_consume("<")
        name = self._parse_identifier()
        attributes: list[tuple[str, str]] = []

        # Opening tag
        while (char := cursor.current_char) is not None:
            if char == ">":
                cursor.consume()
                break
            if char == "/":
                cursor.consume()
                if cursor.current_char == ">":
                    cursor.consume()
                    return ParsedElement(name=name, attributes=tuple(attributes))
            elif char.isspace():
                cursor.consume()
            else:
                attr_name = self._parse_name()
                attr_value = ""
                if cursor.current_char == "=":
                    cursor.consume()
                    attr_value = self._parse_attribute_value()
                attributes.append((attr_name, attr_value))

        if self._try_consume_closing_tag(name):
            return ParsedElement(name=name, attributes=tuple(attributes))

        # Content
        content: list[ElementContent] = []
        while True:
            child = self._parse_custom_element()
            if child is not None:
                content.append(child)
                continue
            start = cursor.position
            text = self._parse_element_text()
            if text:
                content.append(ElementText(text))
                continue
            if cursor.position > start:
                # Whitespace only; a nested element may follow
                continue
            if self._try_consume_closing_tag(name):
                cursor.consume_while(str.isspace)
                return ParsedElement(
                    name=name,
                    attributes=tuple(attributes),
                    content=tuple(content),
                )
            raise cursor.error(ParseErrorKind.OTHER, f"unable to close <{name}>")

    def _try_consume_closing_tag(self, name: str) -> bool:
        """Consume ``</>`` or ``</name>`` if the input continues with either."""
        cursor = self._cursor
        for tag in (SHORTHAND_CLOSING_TAG, f"</{name}>"):
            if cursor.starts_with(tag):
                cursor.consume(len(tag))
                return True
        return False

    def _parse_element_text(self) -> str:
        """Consume the text up to the next ``<`` and return it trimmed."""
        cursor = self._cursor
        start = cursor.position
        cursor.consume_while(lambda char: char != "<")
        return cursor.source[start : cursor.position].strip()
