"""
consentdoc: consent form markup parser

Parses consent documents written in markdown extended with a small set of
interactive custom elements (toggles, single-choice selects and signature
fields) into a typed, immutable document model.

Quick Start:
    >>> from consentdoc import parse
    >>> result = parse('''---
    ... title: Study Consent
    ... ---
    ... Please read carefully.
    ... <toggle id=share expected-value=true>I agree to share my data</toggle>
    ... <signature id=sig />
    ... ''')
    >>> result.frontmatter.title
    'Study Consent'
    >>> [type(s).__name__ for s in result.sections]
    ['Markdown', 'Toggle', 'Signature']

    >>> # Track user responses
    >>> from consentdoc import ConsentDocument
    >>> doc = ConsentDocument.from_markdown("<toggle id=t expected-value=true>OK?</>")
    >>> doc.set_value("t", True)
    >>> doc.completion_state
    Complete()
"""

from pathlib import Path

from consentdoc.cache import DictParseCache, ParseCache, hash_config, hash_content
from consentdoc.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from consentdoc.cursor import Cursor
from consentdoc.document import Complete, CompletionState, ConsentDocument, Incomplete
from consentdoc.errors import (
    ConsentError,
    ConsentParseError,
    DuplicateElementIdError,
    MissingAttributeError,
    MissingFieldError,
    ParseErrorKind,
    SectionConstructionError,
    UnexpectedElementError,
    UnknownOptionReferenceError,
)
from consentdoc.location import SourceLocation
from consentdoc.nodes import (
    AnySelection,
    ElementText,
    ExpectedSelection,
    Frontmatter,
    InteractiveSection,
    Markdown,
    NonEmptySelection,
    ParsedElement,
    ParseResult,
    PersonName,
    RequiredOption,
    Section,
    Select,
    SelectionOption,
    Signature,
    SignatureResponse,
    Toggle,
)
from consentdoc.parser import Parser, decode_source
from consentdoc.renderers import MarkupRenderer, to_markup
from consentdoc.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    cache: ParseCache | None = None,
) -> ParseResult:
    """Parse consent markup into frontmatter and sections.

    Uses the ParseConfig active in the current context (see
    parse_config_context).

    Args:
        source: Consent markup text
        source_file: Optional source file path for error messages
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result.

    Returns:
        ParseResult

    Raises:
        ConsentParseError: The markup is malformed or an element is invalid

    Example:
        >>> parse("<signature id=sig></signature>").sections
        (Signature(id='sig'),)
    """
    if cache is None:
        return Parser(source, source_file=source_file).parse()

    config_hash = hash_config(get_parse_config())
    content_hash = hash_content(source)
    cached = cache.get(content_hash, config_hash)
    if cached is not None:
        return cached

    result = Parser(source, source_file=source_file).parse()
    cache.put(content_hash, config_hash, result)
    return result


def parse_bytes(
    data: bytes,
    *,
    source_file: str | None = None,
    cache: ParseCache | None = None,
) -> ParseResult:
    """Parse UTF-8 encoded consent markup.

    Raises:
        ConsentParseError: NON_UTF8_INPUT if data is not valid UTF-8, or any
            error parse() raises
    """
    return parse(decode_source(data, source_file=source_file), source_file=source_file, cache=cache)


def parse_file(path: str | Path, *, cache: ParseCache | None = None) -> ParseResult:
    """Read and parse a consent markup file.

    I/O failures are not wrapped: they propagate as OSError.

    Raises:
        OSError: The file could not be read
        ConsentParseError: The file's content could not be parsed
    """
    path = Path(path)
    return parse_bytes(path.read_bytes(), source_file=str(path), cache=cache)


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_bytes",
    "parse_file",
    "decode_source",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Document model
    "Frontmatter",
    "ParseResult",
    "Section",
    "InteractiveSection",
    "Markdown",
    "Toggle",
    "Select",
    "SelectionOption",
    "ExpectedSelection",
    "AnySelection",
    "NonEmptySelection",
    "RequiredOption",
    "Signature",
    "SignatureResponse",
    "PersonName",
    # Parser components
    "Cursor",
    "Parser",
    "ParsedElement",
    "ElementText",
    # Documents with responses
    "ConsentDocument",
    "CompletionState",
    "Complete",
    "Incomplete",
    # Rendering + serialization
    "MarkupRenderer",
    "to_markup",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "ConsentError",
    "ConsentParseError",
    "ParseErrorKind",
    "SectionConstructionError",
    "MissingAttributeError",
    "MissingFieldError",
    "UnexpectedElementError",
    "UnknownOptionReferenceError",
    "DuplicateElementIdError",
    # Location
    "SourceLocation",
]
