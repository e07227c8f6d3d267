"""Frontmatter parsing for consentdoc.

Handles the optional ``---`` delimited key/value block at the top of a
consent document:

    ---
    title: Study Consent
    version: 1.0.2
    ---
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from consentdoc.cursor import NEWLINE_CHARS
from consentdoc.errors import ParseErrorKind
from consentdoc.nodes import Frontmatter

if TYPE_CHECKING:
    from consentdoc.cursor import Cursor

FRONTMATTER_DELIMITER = "---"


class FrontmatterParsingMixin:
    """Mixin for frontmatter parsing.

    Required Host Attributes:
        - _cursor: Cursor

    Required Host Methods:
        - _try_parse_identifier() -> str | None
    """

    _cursor: Cursor

    def _parse_frontmatter(self) -> Frontmatter:
        """Parse the frontmatter block, if the input starts with one.

        Each entry is ``key: value``. The value may be empty; the space after
        the colon may then be omitted as well. The loop stops at the first
        line that does not start with an identifier, which must be the
        closing ``---``.

        Returns:
            Parsed Frontmatter, empty if the input has no frontmatter block

        Raises:
            ConsentParseError: UNEXPECTED_CHARACTER for a malformed entry,
                OTHER if the closing delimiter is missing
        """
        cursor = self._cursor
        if cursor.current_line != FRONTMATTER_DELIMITER:
            return Frontmatter()
        cursor.consume_line()

        entries: dict[str, str] = {}
        while (key := self._try_parse_identifier()) is not None:
            cursor.expect_and_consume(":")
            char = cursor.current_char
            if char is not None and char not in NEWLINE_CHARS:
                cursor.expect_and_consume(" ")
            entries[key] = cursor.current_line or ""
            cursor.consume_line()

        if cursor.current_line != FRONTMATTER_DELIMITER:
            raise cursor.error(ParseErrorKind.OTHER, "Unable to find end of frontmatter")
        cursor.consume_line()
        return Frontmatter(entries)
