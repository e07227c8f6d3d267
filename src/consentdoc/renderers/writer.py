"""Output buffer for consent markup.

Collects text fragments in a list and joins them once, so rendering a
large form stays linear in its size. Knows just enough of the element
syntax to write tags with correctly quoted attributes.

Thread Safety:
MarkupWriter instances are local to each render() call.

"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Attribute values matching this are written bare; the parser reads them back
# as names
_BARE_VALUE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def format_attribute(name: str, value: str) -> str:
    """Render `` name=value``, quoting the value unless it is a bare name."""
    if _BARE_VALUE_RE.match(value):
        return f" {name}={value}"
    return f' {name}="{value}"'


class MarkupWriter:
    """Accumulates rendered markup.

    Usage:
        >>> out = MarkupWriter()
        >>> out.open_tag("signature", [("id", "sig")], self_closing=True).getvalue()
        '<signature id=sig />'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> MarkupWriter:
        if text:
            self._parts.append(text)
        return self

    def line(self, text: str = "") -> MarkupWriter:
        """Write ``text`` followed by a line break."""
        return self.write(text).write("\n")

    def open_tag(
        self,
        name: str,
        attributes: Iterable[tuple[str, str]] = (),
        *,
        self_closing: bool = False,
    ) -> MarkupWriter:
        self.write(f"<{name}")
        for attribute, value in attributes:
            self.write(format_attribute(attribute, value))
        return self.write(" />" if self_closing else ">")

    def close_tag(self, name: str) -> MarkupWriter:
        return self.write(f"</{name}>")

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
