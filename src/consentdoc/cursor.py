"""Character cursor over consent markup source.

The cursor is the only mutable state of a parse: an index into the source
string plus bounds-checked navigation helpers. Characters are Unicode code
points (Python ``str`` items); every predicate and every consumption step
uses that granularity.

Only ``\\n`` and ``\\r`` are line breaks, and ``\\r\\n`` counts as one. They
decide ``is_at_beginning_of_line`` and the line numbers of SourceLocation.
Other Unicode separators (VT, FF, U+0085, U+2028, U+2029) are ordinary
characters.

Thread Safety:
Cursor instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from consentdoc.errors import ConsentParseError, ParseErrorKind
from consentdoc.location import SourceLocation

NEWLINE_CHARS = frozenset("\n\r")


def is_ident_start(char: str) -> bool:
    """ASCII letter or underscore."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_ident_char(char: str) -> bool:
    """ASCII letter, digit or underscore."""
    return is_ident_start(char) or ("0" <= char <= "9")


def is_name_char(char: str) -> bool:
    """Identifier character or hyphen.

    Allowed after the first character of attribute names and bare
    attribute values (``initial-value``).
    """
    return is_ident_char(char) or char == "-"


class Cursor:
    """Bounds-checked, forward-only scanner over a source string.

    Usage:
        >>> cursor = Cursor("ab\\ncd")
        >>> cursor.consume_line()
        >>> cursor.current_char
        'c'
        >>> cursor.is_at_beginning_of_line
        True

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize cursor at the start of source.

        Args:
            source: Consent markup text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def position(self) -> int:
        """Current code point offset into the source."""
        return self._pos

    @property
    def source(self) -> str:
        return self._source

    @property
    def is_at_end(self) -> bool:
        return self._pos >= self._source_len

    @property
    def current_char(self) -> str | None:
        """Character at the cursor, or None at end of input."""
        if self._pos >= self._source_len:
            return None
        return self._source[self._pos]

    def peek(self, offset: int = 1) -> str | None:
        """Look ahead ``offset`` characters without consuming.

        Returns:
            The character, or None if that position is outside the input.
        """
        index = self._pos + offset
        if index < 0 or index >= self._source_len:
            return None
        return self._source[index]

    @property
    def is_at_beginning_of_line(self) -> bool:
        """True at the start of input or right after a line break."""
        if self._pos == 0:
            return self._source_len > 0
        return self._source[self._pos - 1] in NEWLINE_CHARS

    @property
    def current_line(self) -> str | None:
        """Text from the cursor up to (excluding) the next line break.

        Returns:
            The rest of the current line, or None at end of input.
        """
        if self._pos >= self._source_len:
            return None
        end = self._pos
        while end < self._source_len and self._source[end] not in NEWLINE_CHARS:
            end += 1
        return self._source[self._pos : end]

    def starts_with(self, text: str) -> bool:
        """Whether the unconsumed input begins with ``text``."""
        return self._source.startswith(text, self._pos)

    # =========================================================================
    # Consumption
    # =========================================================================

    def consume(self, count: int = 1) -> None:
        """Advance by up to ``count`` characters, clamped to end of input."""
        if count <= 0:
            return
        self._pos = min(self._source_len, self._pos + count)

    def consume_while(self, predicate: Callable[[str], bool]) -> None:
        """Advance while ``predicate`` holds for the current character."""
        while self._pos < self._source_len and predicate(self._source[self._pos]):
            self._pos += 1

    def consume_line(self) -> None:
        """Advance past the rest of the line, including its line break.

        A ``\\r\\n`` pair counts as one line break.
        """
        self.consume_while(lambda char: char not in NEWLINE_CHARS)
        if self._pos < self._source_len:
            if self._source.startswith("\r\n", self._pos):
                self._pos += 2
            else:
                self._pos += 1

    def expect_and_consume(self, char: str) -> None:
        """Consume ``char``, or fail if the current character is something else.

        Raises:
            ConsentParseError: UNEXPECTED_CHARACTER if the current character
                differs, including at end of input
        """
        if self.current_char != char:
            raise self.error(ParseErrorKind.UNEXPECTED_CHARACTER)
        self._pos += 1

    def reset(self, position: int) -> None:
        """Move back to a position previously read from ``position``."""
        self._pos = position

    # =========================================================================
    # Diagnostics
    # =========================================================================

    @property
    def current_location(self) -> SourceLocation:
        """Line and column of the cursor. O(position); use on error paths only."""
        return SourceLocation.from_offset(self._source, self._pos)

    def error(self, kind: ParseErrorKind, message: str | None = None) -> ConsentParseError:
        """Build a ConsentParseError located at the cursor.

        Callers raise the returned exception.
        """
        return ConsentParseError(
            kind,
            self.current_location,
            message,
            source_file=self._source_file,
        )
