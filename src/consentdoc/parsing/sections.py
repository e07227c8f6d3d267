"""Section construction from parsed custom elements.

Validates a ParsedElement against the schema of its tag and builds the
typed section. Attribute names are accepted in hyphenated and camelCase
spelling (``initial-value`` / ``initialValue``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from consentdoc.errors import (
    MissingAttributeError,
    MissingFieldError,
    ParseErrorKind,
    SectionConstructionError,
    UnexpectedElementError,
    UnknownOptionReferenceError,
)
from consentdoc.nodes import (
    AnySelection,
    ElementText,
    ExpectedSelection,
    NonEmptySelection,
    ParsedElement,
    RequiredOption,
    Section,
    Select,
    SelectionOption,
    Signature,
    Toggle,
)

if TYPE_CHECKING:
    from consentdoc.cursor import Cursor

ID_ATTRIBUTE = "id"
INITIAL_VALUE_ATTRIBUTES = ("initial-value", "initialValue")
EXPECTED_VALUE_ATTRIBUTES = ("expected-value", "expectedValue")

# expected-value="*": any option, but not the empty selection
ANY_OPTION_WILDCARD = "*"

# Paragraph break between prompt text runs interleaved with <option>s
PROMPT_SEPARATOR = "\n\n"


def _require_id(element: ParsedElement, attribute_label: str = ID_ATTRIBUTE) -> str:
    element_id = element.attribute(ID_ATTRIBUTE)
    if not element_id:
        raise MissingAttributeError(attribute_label)
    return element_id


def _first_text(element: ParsedElement, field_label: str) -> str:
    first = element.content[0] if element.content else None
    if not isinstance(first, ElementText):
        raise MissingFieldError(field_label)
    return first.text


def _parse_bool(value: str | None) -> bool | None:
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def build_toggle(element: ParsedElement) -> Toggle:
    """Build a Toggle from ``<toggle id=... initial-value=... expected-value=...>``.

    Raises:
        MissingAttributeError: id is absent or empty
        MissingFieldError: the element does not start with prompt text
    """
    element_id = _require_id(element)
    prompt = _first_text(element, "prompt")
    initial = _parse_bool(element.attribute(*INITIAL_VALUE_ATTRIBUTES))
    expected = _parse_bool(element.attribute(*EXPECTED_VALUE_ATTRIBUTES))
    return Toggle(
        id=element_id,
        prompt=prompt,
        initial_value=initial if initial is not None else False,
        expected_value=expected,
    )


def build_select(element: ParsedElement) -> Select:
    """Build a Select from ``<select>`` with nested ``<option>`` elements.

    Text runs between options are joined into the prompt. An initial or
    expected value must name one of the select's own options. An empty
    initial value means nothing is preselected; an empty expected value is
    rejected.

    Raises:
        MissingAttributeError: select or option id is absent or empty, or
            expected-value is given without a value
        MissingFieldError: an option has no title text
        UnexpectedElementError: a nested element other than ``<option>``
        UnknownOptionReferenceError: initial/expected value names no option
    """
    element_id = _require_id(element)
    prompt_parts: list[str] = []
    options: list[SelectionOption] = []
    for child in element.content:
        if isinstance(child, ElementText):
            prompt_parts.append(child.text)
            continue
        if child.name != "option":
            raise UnexpectedElementError(child.name)
        option_id = _require_id(child, "option.id")
        title = _first_text(child, "option.content")
        options.append(SelectionOption(id=option_id, title=title))

    def resolve(attribute: str, option_id: str) -> SelectionOption:
        for option in options:
            if option.id == option_id:
                return option
        raise UnknownOptionReferenceError(attribute, option_id)

    initial_value: SelectionOption | None = None
    initial_id = element.attribute(*INITIAL_VALUE_ATTRIBUTES)
    if initial_id:
        initial_value = resolve("initial-value", initial_id)

    expected: ExpectedSelection = AnySelection()
    expected_id = element.attribute(*EXPECTED_VALUE_ATTRIBUTES)
    if expected_id == "":
        raise MissingAttributeError("expected-value")
    if expected_id == ANY_OPTION_WILDCARD:
        expected = NonEmptySelection()
    elif expected_id is not None:
        expected = RequiredOption(resolve("expected-value", expected_id).id)

    return Select(
        id=element_id,
        prompt=PROMPT_SEPARATOR.join(prompt_parts),
        options=tuple(options),
        initial_value=initial_value,
        expected_selection=expected,
    )


def build_signature(element: ParsedElement) -> Signature:
    """Build a Signature from ``<signature id=... />``.

    Raises:
        MissingAttributeError: id is absent or empty
    """
    return Signature(id=_require_id(element))


class SectionBuildingMixin:
    """Mixin dispatching top-level custom elements to their section builders.

    Required Host Attributes:
        - _cursor: Cursor
    """

    _cursor: Cursor

    def _build_section(self, element: ParsedElement) -> Section:
        """Turn a top-level element into its typed section.

        Raises:
            ConsentParseError: OTHER for unknown element names and for
                elements that fail validation (the validation error is
                chained as ``__cause__``)
        """
        try:
            match element.name:
                case "toggle":
                    return build_toggle(element)
                case "select":
                    return build_select(element)
                case "signature":
                    return build_signature(element)
                case _:
                    raise self._cursor.error(
                        ParseErrorKind.OTHER,
                        f"Unexpected top-level custom element: {element.describe()}",
                    )
        except SectionConstructionError as e:
            raise self._cursor.error(
                ParseErrorKind.OTHER,
                f"Unable to construct {element.name.capitalize()} element "
                f"from {element.describe()}: {e}",
            ) from e
