"""JSON form of a parsed consent document.

Every model object becomes a dict tagged with its class name under
``_type``; tuples become lists and Frontmatter becomes a tagged dict of
its entries. Keys are sorted, so equal results always produce the same
text.

Example:
    >>> from consentdoc import parse
    >>> result = parse("<toggle id=t1>I agree</toggle>")
    >>> from_json(to_json(result)) == result
    True

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from consentdoc.nodes import (
    AnySelection,
    Frontmatter,
    Markdown,
    NonEmptySelection,
    ParseResult,
    RequiredOption,
    Select,
    SelectionOption,
    Signature,
    Toggle,
)

TYPE_KEY = "_type"
_FRONTMATTER_TAG = "Frontmatter"

_MODEL_CLASSES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        ParseResult,
        Markdown,
        Toggle,
        Select,
        Signature,
        SelectionOption,
        AnySelection,
        NonEmptySelection,
        RequiredOption,
    )
}


def to_dict(node: Any) -> dict[str, Any]:
    """Tagged dict for a ParseResult, a section, or any nested model value."""
    data: dict[str, Any] = {TYPE_KEY: type(node).__name__}
    for f in fields(node):
        data[f.name] = _encode(getattr(node, f.name))
    return data


def _encode(value: Any) -> Any:
    if isinstance(value, Frontmatter):
        return {TYPE_KEY: _FRONTMATTER_TAG, "entries": dict(value)}
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_encode(item) for item in value]
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Rebuild the model object described by a tagged dict.

    Fields missing from ``data`` take their dataclass defaults.

    Raises:
        ValueError: ``_type`` is absent or names no model class

    """
    tag = data.get(TYPE_KEY)
    if tag is None:
        msg = f"Missing '{TYPE_KEY}' field in serialized node"
        raise ValueError(msg)
    cls = _MODEL_CLASSES.get(tag)
    if cls is None:
        msg = f"Unknown node type: {tag!r}"
        raise ValueError(msg)
    kwargs = {f.name: _decode(data[f.name]) for f in fields(cls) if f.name in data}
    return cls(**kwargs)


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_decode(item) for item in value)
    if not isinstance(value, dict) or TYPE_KEY not in value:
        return value
    if value[TYPE_KEY] == _FRONTMATTER_TAG:
        return Frontmatter(value.get("entries", {}))
    return from_dict(value)


def to_json(result: ParseResult, *, indent: int | None = None) -> str:
    """Encode a ParseResult as JSON text with sorted keys."""
    return json.dumps(to_dict(result), sort_keys=True, indent=indent)


def from_json(data: str) -> ParseResult:
    """Decode JSON text produced by :func:`to_json`.

    Raises:
        ValueError: The text describes something other than a ParseResult

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, ParseResult):
        msg = f"Expected ParseResult, got {type(node).__name__}"
        raise ValueError(msg)
    return node
