"""Typed document model for consentdoc.

Sections and their parts are frozen, slotted dataclasses, so a parsed
document can be hashed, compared, cached and taken apart with ``match``.
Frontmatter is a read-only Mapping.

Node Hierarchy:
Section (base)
├── Markdown
└── InteractiveSection (has an id)
    ├── Toggle
    ├── Select
    └── Signature

Intermediate parser output:
ParsedElement
└── content: ElementText | ParsedElement

"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

# Empty string stands for "nothing selected" in select responses
EMPTY_SELECTION = ""

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


# =============================================================================
# Frontmatter
# =============================================================================


class Frontmatter(Mapping[str, str]):
    """Read-only key/value metadata from a document's ``---`` prologue.

    Keys are case-sensitive. A key written without a value maps to "".

    Example:
        >>> fm = Frontmatter({"title": "Study Consent", "version": "1.0.2"})
        >>> fm.title
        'Study Consent'
        >>> fm.version
        (1, 0, 2)

    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"Frontmatter({self._entries!r})"

    @property
    def title(self) -> str | None:
        """The document's title, if present."""
        return self._entries.get("title")

    @property
    def version(self) -> tuple[int, int, int] | None:
        """The document's ``MAJOR.MINOR.PATCH`` version, if present and valid."""
        raw = self._entries.get("version")
        if raw is None:
            return None
        match = _VERSION_RE.match(raw.strip())
        if match is None:
            return None
        major, minor, patch = (int(part) for part in match.groups())
        return (major, minor, patch)


# =============================================================================
# Parsed elements (untyped intermediate tree)
# =============================================================================


@dataclass(frozen=True, slots=True)
class ElementText:
    """A literal text run inside a custom element, trimmed of whitespace."""

    text: str


@dataclass(frozen=True, slots=True)
class ParsedElement:
    """An HTML-like custom element before schema validation.

    Markup: <name attr=value ...>content</name>

    Attributes keep encounter order; duplicates are allowed and the first
    occurrence wins on lookup.

    """

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    content: tuple[ElementContent, ...] = ()

    def attribute(self, *keys: str) -> str | None:
        """Look up an attribute value, trying each key in turn.

        Args:
            keys: Attribute names to try, e.g. ("initial-value", "initialValue")

        Returns:
            The first matching attribute's value, or None if none is present
        """
        for key in keys:
            for name, value in self.attributes:
                if name == key:
                    return value
        return None

    def describe(self) -> str:
        """Render the opening tag for diagnostics, e.g. ``<toggle id=a>``."""
        parts = [self.name]
        parts.extend(f"{name}={value!r}" if value else name for name, value in self.attributes)
        return f"<{' '.join(parts)}>"


ElementContent: TypeAlias = ElementText | ParsedElement


# =============================================================================
# Sections
# =============================================================================


@dataclass(frozen=True, slots=True)
class Section:
    """Base class for all document sections."""


@dataclass(frozen=True, slots=True)
class Markdown(Section):
    """A run of literal markdown prose between interactive elements."""

    text: str


@dataclass(frozen=True, slots=True)
class InteractiveSection(Section):
    """A section the user fills in, identified by a document-unique id."""

    id: str

    def value_matches_expected(self, value: Any) -> bool:
        """Whether a user response is acceptable for this section.

        Subclasses implement this; the base class raises NotImplementedError.
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Toggle(InteractiveSection):
    """A boolean yes/no input.

    Markup: <toggle id=... initial-value=true expected-value=true>Prompt</toggle>

    """

    prompt: str
    initial_value: bool = False
    expected_value: bool | None = None

    def value_matches_expected(self, value: bool) -> bool:
        """Whether ``value`` satisfies the toggle's expectation, if it has one."""
        if self.expected_value is None:
            return True
        return value == self.expected_value


@dataclass(frozen=True, slots=True)
class SelectionOption:
    """One choice of a select section."""

    id: str
    title: str


@dataclass(frozen=True, slots=True)
class AnySelection:
    """No constraint: any option, or no selection at all, is accepted."""

    def matches(self, value: str) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NonEmptySelection:
    """Any option is accepted, but something must be selected.

    Markup: expected-value="*"

    """

    def matches(self, value: str) -> bool:
        return value != EMPTY_SELECTION


@dataclass(frozen=True, slots=True)
class RequiredOption:
    """Only the option with ``option_id`` is accepted."""

    option_id: str

    def matches(self, value: str) -> bool:
        return value != EMPTY_SELECTION and value == self.option_id


ExpectedSelection: TypeAlias = AnySelection | NonEmptySelection | RequiredOption


@dataclass(frozen=True, slots=True)
class Select(InteractiveSection):
    """A single-choice selection among options.

    Markup:
        <select id=... initial-value=o1 expected-value=o2>
            Prompt text
            <option id=o1>Title 1</option>
            <option id=o2>Title 2</option>
        </select>

    """

    prompt: str
    options: tuple[SelectionOption, ...]
    initial_value: SelectionOption | None = None
    expected_selection: ExpectedSelection = field(default_factory=AnySelection)

    def option(self, option_id: str) -> SelectionOption | None:
        """Find one of this select's options by id."""
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def value_matches_expected(self, value: str) -> bool:
        """Whether the selected option id (or "" for none) is acceptable."""
        return self.expected_selection.matches(value)


@dataclass(frozen=True, slots=True)
class PersonName:
    """A signer's name, as entered next to a signature."""

    given_name: str = ""
    family_name: str = ""


@dataclass(frozen=True, slots=True)
class SignatureResponse:
    """What the user entered into a signature section.

    ``signature`` is the captured signature payload (opaque to this
    library); it is empty until the user signs.
    """

    name: PersonName = field(default_factory=PersonName)
    signature: str = ""

    @property
    def did_enter_names(self) -> bool:
        return bool(self.name.given_name) and bool(self.name.family_name)

    @property
    def is_signed(self) -> bool:
        return bool(self.signature)


@dataclass(frozen=True, slots=True)
class Signature(InteractiveSection):
    """A signature capture slot.

    Markup: <signature id=... />

    """

    def value_matches_expected(self, value: SignatureResponse) -> bool:
        """A signature is complete once both names are entered and it is signed."""
        return value.did_enter_names and value.is_signed


# =============================================================================
# Parse result
# =============================================================================


@dataclass(frozen=True, slots=True)
class ParseResult:
    """A fully parsed consent document: frontmatter plus ordered sections."""

    frontmatter: Frontmatter = field(default_factory=Frontmatter)
    sections: tuple[Section, ...] = ()

    @property
    def interactive_sections(self) -> tuple[InteractiveSection, ...]:
        """The toggle, select and signature sections, in document order."""
        return tuple(s for s in self.sections if isinstance(s, InteractiveSection))
