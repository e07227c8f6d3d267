"""Identifier, integer and string literal scanning.

Shared by frontmatter keys and custom element names and attributes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from consentdoc.cursor import is_ident_char, is_ident_start, is_name_char
from consentdoc.errors import ParseErrorKind

if TYPE_CHECKING:
    from consentdoc.cursor import Cursor


class ScalarParsingMixin:
    """Mixin for scanning the scalar tokens of the consent grammar.

    Required Host Attributes:
        - _cursor: Cursor
    """

    _cursor: Cursor

    def _try_parse_identifier(self) -> str | None:
        """Scan an identifier (``[A-Za-z_][A-Za-z0-9_]*``).

        Returns:
            The identifier, or None (nothing consumed) if the cursor is not
            at an identifier start.
        """
        return self._scan_word(is_ident_char)

    def _try_parse_name(self) -> str | None:
        """Scan an attribute name or bare value (``[A-Za-z_][A-Za-z0-9_-]*``)."""
        return self._scan_word(is_name_char)

    def _scan_word(self, is_continuation: Callable[[str], bool]) -> str | None:
        cursor = self._cursor
        char = cursor.current_char
        if char is None or not is_ident_start(char):
            return None
        start = cursor.position
        cursor.consume()
        cursor.consume_while(is_continuation)
        return cursor.source[start : cursor.position]

    def _parse_identifier(self) -> str:
        """Scan an identifier, failing if there is none.

        Raises:
            ConsentParseError: UNEXPECTED_CHARACTER if the cursor is not at
                an identifier start
        """
        identifier = self._try_parse_identifier()
        if identifier is None:
            raise self._cursor.error(ParseErrorKind.UNEXPECTED_CHARACTER)
        return identifier

    def _parse_name(self) -> str:
        """Scan an attribute name, failing if there is none.

        Raises:
            ConsentParseError: UNEXPECTED_CHARACTER if the cursor is not at
                an identifier start
        """
        name = self._try_parse_name()
        if name is None:
            raise self._cursor.error(ParseErrorKind.UNEXPECTED_CHARACTER)
        return name

    def _try_parse_integer(self) -> int | None:
        """Scan an optionally negative decimal integer.

        Returns:
            The value, or None with the cursor restored if no digit follows.
        """
        cursor = self._cursor
        start = cursor.position
        negative = cursor.current_char == "-"
        if negative:
            cursor.consume()
        digits_start = cursor.position
        cursor.consume_while(lambda char: "0" <= char <= "9")
        if cursor.position == digits_start:
            cursor.reset(start)
            return None
        value = int(cursor.source[digits_start : cursor.position])
        return -value if negative else value

    def _parse_string_literal(self) -> str:
        """Scan a double-quoted string literal.

        A quote preceded by an odd number of backslashes is part of the
        literal. Escape sequences are kept verbatim in the returned text.

        Raises:
            ConsentParseError: EOF if the input ends before the closing quote
        """
        cursor = self._cursor
        cursor.expect_and_consume('"')
        chars: list[str] = []
        while True:
            char = cursor.current_char
            if char is None:
                raise cursor.error(ParseErrorKind.EOF)
            if char == '"' and _trailing_backslashes(chars) % 2 == 0:
                break
            chars.append(char)
            cursor.consume()
        cursor.expect_and_consume('"')
        return "".join(chars)

    def _parse_attribute_value(self) -> str:
        """Scan an attribute value: string literal, bare name or integer.

        Returns:
            The value as text; "" (nothing consumed) if no value syntax matches.
        """
        if self._cursor.current_char == '"':
            return self._parse_string_literal()
        name = self._try_parse_name()
        if name is not None:
            return name
        integer = self._try_parse_integer()
        if integer is not None:
            return str(integer)
        return ""


def _trailing_backslashes(chars: list[str]) -> int:
    count = 0
    for char in reversed(chars):
        if char != "\\":
            break
        count += 1
    return count
