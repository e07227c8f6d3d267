"""Recursive descent parser producing the consent document model.

Walks the source once, interleaving literal markdown with custom elements
that start at the beginning of a line.

Parser is assembled from one mixin per grammar layer:
- `ScalarParsingMixin`: Identifiers and attribute values
- `FrontmatterParsingMixin`: Leading ``---`` metadata block
- `ElementParsingMixin`: Custom elements and their nested content
- `SectionBuildingMixin`: Schema validation into typed sections

A Parser is used once. Options come from the ParseConfig active when it
is constructed, and the ParseResult it returns is immutable.

"""

from __future__ import annotations

from consentdoc.config import ParseConfig, get_parse_config
from consentdoc.cursor import Cursor
from consentdoc.errors import ConsentParseError, ParseErrorKind
from consentdoc.location import SourceLocation
from consentdoc.nodes import Frontmatter, Markdown, ParseResult, Section, Signature
from consentdoc.parsing import (
    ElementParsingMixin,
    FrontmatterParsingMixin,
    ScalarParsingMixin,
    SectionBuildingMixin,
)
from consentdoc.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    ScalarParsingMixin,
    FrontmatterParsingMixin,
    ElementParsingMixin,
    SectionBuildingMixin,
):
    """Recursive descent parser for consent markup.

    Usage:
        >>> parser = Parser("Intro\\n<signature id=sig />")
        >>> parser.parse().sections
        (Markdown(text='Intro'), Signature(id='sig'))

    Not thread-safe; create one Parser per document.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_cursor",
        "_config",
        "_depth",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Prepare to parse ``source`` under the currently active ParseConfig.

        Args:
            source: Consent markup text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._cursor = Cursor(source, source_file=source_file)
        self._config: ParseConfig = get_parse_config()
        self._depth = 0

    def parse(self) -> ParseResult:
        """Parse the source into frontmatter and sections.

        Returns:
            ParseResult with markdown runs and typed sections in source order

        Raises:
            ConsentParseError: on the first syntax or validation error
        """
        if not self._config.custom_elements_enabled:
            return self._parse_plain()

        frontmatter = self._parse_frontmatter()
        cursor = self._cursor
        sections: list[Section] = []
        markdown: list[str] = []
        try:
            while (char := cursor.current_char) is not None:
                if (
                    char == "<"
                    and cursor.is_at_beginning_of_line
                    and (element := self._parse_custom_element()) is not None
                ):
                    sections.append(Markdown("".join(markdown).strip()))
                    markdown.clear()
                    sections.append(self._build_section(element))
                else:
                    markdown.append(char)
                    cursor.consume()
        except ConsentParseError as e:
            # Running out of input mid-element ends the document
            if e.kind is not ParseErrorKind.EOF:
                raise
            logger.debug("Input ended inside a custom element at %s", e.location)
        sections.append(Markdown("".join(markdown).strip()))

        result = ParseResult(
            frontmatter=frontmatter,
            sections=tuple(s for s in sections if not (isinstance(s, Markdown) and not s.text)),
        )
        logger.debug(
            "Parsed consent document %s: %d frontmatter entries, %d sections",
            self._source_file or "<string>",
            len(result.frontmatter),
            len(result.sections),
        )
        return result

    def _parse_plain(self) -> ParseResult:
        """Treat the source, untrimmed, as markdown followed by a default signature.

        Blank input yields only the signature.
        """
        sections: list[Section] = []
        if self._source.strip():
            sections.append(Markdown(self._source))
        sections.append(Signature(id=self._config.default_signature_id))
        return ParseResult(frontmatter=Frontmatter(), sections=tuple(sections))


def decode_source(data: bytes, *, source_file: str | None = None) -> str:
    """Decode raw consent markup, which must be UTF-8.

    Raises:
        ConsentParseError: NON_UTF8_INPUT (at 0:0) if data is not valid UTF-8
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConsentParseError(
            ParseErrorKind.NON_UTF8_INPUT,
            SourceLocation.zero(),
            source_file=source_file,
        ) from e
