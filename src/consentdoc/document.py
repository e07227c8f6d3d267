"""Consent documents with user response state.

A ConsentDocument wraps a ParseResult and tracks the values a user enters
into its toggles, selects and signatures, so callers can ask whether the
form is complete.

Example:
    >>> doc = ConsentDocument.from_markdown(
    ...     "<toggle id=share expected-value=true>Share my data</toggle>"
    ... )
    >>> doc.completion_state
    Incomplete(first_incomplete_id='share')
    >>> doc.set_value("share", True)
    >>> doc.completion_state
    Complete()

Thread Safety:
    ConsentDocument holds mutable response state and is not thread-safe.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, TypeAlias

from consentdoc.config import get_parse_config, parse_config_context
from consentdoc.errors import DuplicateElementIdError
from consentdoc.nodes import (
    EMPTY_SELECTION,
    Frontmatter,
    InteractiveSection,
    ParseResult,
    PersonName,
    Section,
    Select,
    Signature,
    SignatureResponse,
    Toggle,
)
from consentdoc.parser import Parser, decode_source
from consentdoc.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Complete:
    """Every interactive section holds an acceptable value."""


@dataclass(frozen=True, slots=True)
class Incomplete:
    """At least one section is unanswered or holds an unexpected value."""

    first_incomplete_id: str


CompletionState: TypeAlias = Complete | Incomplete


def _initial_response(section: InteractiveSection, initial_name: PersonName | None) -> Any:
    match section:
        case Toggle():
            return section.initial_value
        case Select():
            return section.initial_value.id if section.initial_value else EMPTY_SELECTION
        case Signature():
            return SignatureResponse(name=initial_name or PersonName())
    msg = f"Unsupported interactive section: {type(section).__name__}"
    raise TypeError(msg)


class ConsentDocument:
    """A parsed consent form plus the user's responses to it.

    Interactive section ids must be unique across the document.

    """

    __slots__ = ("_result", "_sections_by_id", "_responses", "custom_elements_enabled")

    def __init__(
        self,
        result: ParseResult,
        *,
        initial_name: PersonName | None = None,
        custom_elements_enabled: bool = True,
    ) -> None:
        """Register every interactive section with its initial response.

        Args:
            result: Parsed document
            initial_name: Name pre-filled into every signature section
            custom_elements_enabled: Whether result was parsed with custom
                elements enabled (informational)

        Raises:
            DuplicateElementIdError: Two interactive sections share an id
        """
        self._result = result
        self.custom_elements_enabled = custom_elements_enabled
        self._sections_by_id: dict[str, InteractiveSection] = {}
        self._responses: dict[str, Any] = {}
        for section in result.interactive_sections:
            if section.id in self._sections_by_id:
                raise DuplicateElementIdError(section.id)
            self._sections_by_id[section.id] = section
            self._responses[section.id] = _initial_response(section, initial_name)

    @classmethod
    def from_markdown(
        cls,
        markdown: str,
        *,
        initial_name: PersonName | None = None,
        enable_custom_elements: bool = True,
        source_file: str | None = None,
    ) -> ConsentDocument:
        """Parse consent markup into a document.

        With ``enable_custom_elements=False`` the text is taken verbatim as
        markdown and a single default signature section is appended.

        Raises:
            ConsentParseError: The markup could not be parsed
            DuplicateElementIdError: Two interactive sections share an id
        """
        config = replace(get_parse_config(), custom_elements_enabled=enable_custom_elements)
        if not enable_custom_elements:
            logger.debug("Custom elements disabled; treating input as plain markdown")
        with parse_config_context(config):
            result = Parser(markdown, source_file=source_file).parse()
        return cls(
            result,
            initial_name=initial_name,
            custom_elements_enabled=enable_custom_elements,
        )

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        *,
        initial_name: PersonName | None = None,
        enable_custom_elements: bool = True,
        source_file: str | None = None,
    ) -> ConsentDocument:
        """Decode UTF-8 markup and parse it.

        Raises:
            ConsentParseError: NON_UTF8_INPUT if data is not valid UTF-8
        """
        return cls.from_markdown(
            decode_source(data, source_file=source_file),
            initial_name=initial_name,
            enable_custom_elements=enable_custom_elements,
            source_file=source_file,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        initial_name: PersonName | None = None,
        enable_custom_elements: bool = True,
    ) -> ConsentDocument:
        """Read and parse a consent markup file.

        Raises:
            OSError: The file could not be read
            ConsentParseError: The file's content could not be parsed
        """
        path = Path(path)
        return cls.from_bytes(
            path.read_bytes(),
            initial_name=initial_name,
            enable_custom_elements=enable_custom_elements,
            source_file=str(path),
        )

    # =========================================================================
    # Content
    # =========================================================================

    @property
    def result(self) -> ParseResult:
        return self._result

    @property
    def frontmatter(self) -> Frontmatter:
        return self._result.frontmatter

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._result.sections

    @property
    def title(self) -> str | None:
        """The document's title, from its frontmatter."""
        return self._result.frontmatter.title

    @property
    def version(self) -> tuple[int, int, int] | None:
        """The document's version, from its frontmatter."""
        return self._result.frontmatter.version

    def section(self, section_id: str) -> InteractiveSection:
        """Look up an interactive section by id.

        Raises:
            KeyError: No interactive section has this id
        """
        return self._sections_by_id[section_id]

    # =========================================================================
    # Responses
    # =========================================================================

    def value_for(self, section_id: str) -> Any:
        """Current response of a section.

        Toggles hold a bool, selects the selected option id ("" for none),
        signatures a SignatureResponse.

        Raises:
            KeyError: No interactive section has this id
        """
        return self._responses[section_id]

    def set_value(self, section_id: str, value: Any) -> None:
        """Record the user's response for a section.

        Raises:
            KeyError: No interactive section has this id
            ValueError: A select value that is neither "" nor one of its options
        """
        section = self._sections_by_id[section_id]
        if (
            isinstance(section, Select)
            and value != EMPTY_SELECTION
            and section.option(value) is None
        ):
            msg = f"'{value}' is not an option of select '{section_id}'"
            raise ValueError(msg)
        self._responses[section_id] = value

    @property
    def completion_state(self) -> CompletionState:
        """The first section (in document order) lacking an acceptable value."""
        for section in self._result.interactive_sections:
            if not section.value_matches_expected(self._responses[section.id]):
                return Incomplete(first_incomplete_id=section.id)
        return Complete()
