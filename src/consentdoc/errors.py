"""Exception classes for consentdoc.

Provides standardized exceptions for error handling throughout consentdoc.
Every parse failure is reported as a single ConsentParseError carrying the
location at which parsing stopped; there is no partial result.
"""

from __future__ import annotations

from enum import Enum

from consentdoc.location import SourceLocation


class ConsentError(Exception):
    """Base exception for all consentdoc errors.
    
    Subclass this for specific error categories.
    """

    pass


class ParseErrorKind(Enum):
    """The category of a ConsentParseError."""

    NON_UTF8_INPUT = "non-utf8-input"
    """The input bytes were not valid UTF-8."""

    EOF = "eof"
    """The input ended while more content was expected."""

    UNEXPECTED_CHARACTER = "unexpected-character"
    """The parser ran into a character the grammar does not allow here."""

    OTHER = "other"
    """Any other failure; details are in the error's message."""


class ConsentParseError(ConsentError):
    """Error during consent markup parsing.
    
    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        location: SourceLocation,
        message: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error.
        
        Args:
            kind: Error category
            location: Where the error occurred (0-indexed line and column)
            message: Error description (required in practice for OTHER)
            source_file: Path to source file (optional)
        """
        self.kind = kind
        self.location = location
        self.message = message
        self.source_file = source_file

        prefix = f"{source_file}:{location}" if source_file else str(location)
        detail = message if message is not None else kind.value.replace("-", " ")
        super().__init__(f"{prefix} {detail}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConsentParseError):
            return NotImplemented
        return (self.kind, self.location, self.message) == (
            other.kind,
            other.location,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.location, self.message))


class SectionConstructionError(ConsentError):
    """A parsed custom element does not satisfy its section's schema.

    Raised by the section builder; the parser wraps it in a
    ConsentParseError (kind OTHER) that names the offending element.
    """

    pass


class MissingAttributeError(SectionConstructionError):
    """A required attribute is absent or empty."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"missing attribute '{attribute}'")


class MissingFieldError(SectionConstructionError):
    """Required element content (e.g. a prompt) is missing."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing field '{field}'")


class UnexpectedElementError(SectionConstructionError):
    """A nested element is not allowed where it appears."""

    def __init__(self, element_name: str) -> None:
        self.element_name = element_name
        super().__init__(f"unexpected element <{element_name}>")


class UnknownOptionReferenceError(SectionConstructionError):
    """A select's initial or expected value names an option it does not contain."""

    def __init__(self, attribute: str, option_id: str) -> None:
        self.attribute = attribute
        self.option_id = option_id
        super().__init__(f"'{attribute}' references unknown option '{option_id}'")


class DuplicateElementIdError(ConsentError):
    """Two interactive sections of one document share the same id."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(f"Duplicate custom element id '{element_id}'")
