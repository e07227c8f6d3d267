"""Parsing subsystem for consentdoc.

Provides mixin classes for modular parsing functionality:
- `ScalarParsingMixin`: Identifiers, integers, string literals
- `FrontmatterParsingMixin`: The optional ``---`` key/value prologue
- `ElementParsingMixin`: Recursive custom element parsing
- `SectionBuildingMixin`: Typed sections from parsed elements

Example:
    >>> from consentdoc.parsing import (
    ...     ScalarParsingMixin,
    ...     FrontmatterParsingMixin,
    ...     ElementParsingMixin,
    ...     SectionBuildingMixin,
    ... )
    >>> class Parser(
    ...     ScalarParsingMixin,
    ...     FrontmatterParsingMixin,
    ...     ElementParsingMixin,
    ...     SectionBuildingMixin,
    ... ):
    ...     pass

"""

from consentdoc.parsing.elements import ElementParsingMixin
from consentdoc.parsing.frontmatter import FrontmatterParsingMixin
from consentdoc.parsing.scalars import ScalarParsingMixin
from consentdoc.parsing.sections import (
    SectionBuildingMixin,
    build_select,
    build_signature,
    build_toggle,
)

__all__ = [
    "ScalarParsingMixin",
    "FrontmatterParsingMixin",
    "ElementParsingMixin",
    "SectionBuildingMixin",
    "build_select",
    "build_signature",
    "build_toggle",
]
