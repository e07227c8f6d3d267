"""Content-addressed cache of parse results.

A consent form is usually parsed many times (once per participant, once
per render) while its text rarely changes. Results are cached under the
pair (hash of the markup, hash of the ParseConfig); ParseResult is
immutable, so one cached result can be handed to every caller.

Example:
    >>> from consentdoc import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> first = parse("<signature id=sig />", cache=cache)
    >>> parse("<signature id=sig />", cache=cache) is first
    True
"""

from __future__ import annotations

import hashlib
from dataclasses import astuple
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from consentdoc.config import ParseConfig
    from consentdoc.nodes import ParseResult


class ParseCache(Protocol):
    """Anything that stores ParseResults by (content_hash, config_hash)."""

    def get(self, content_hash: str, config_hash: str) -> ParseResult | None:
        """Return the stored result, or None on a miss."""
        ...

    def put(self, content_hash: str, config_hash: str, result: ParseResult) -> None:
        """Store a result."""
        ...


class DictParseCache:
    """Unbounded in-process ParseCache.

    Not thread-safe: guard get/put with a lock when parsing from several
    threads into one cache.
    """

    __slots__ = ("_results",)

    def __init__(self) -> None:
        self._results: dict[tuple[str, str], ParseResult] = {}

    def get(self, content_hash: str, config_hash: str) -> ParseResult | None:
        return self._results.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, result: ParseResult) -> None:
        self._results[(content_hash, config_hash)] = result

    def __len__(self) -> int:
        return len(self._results)


def _sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_content(source: str) -> str:
    """SHA-256 hex digest of consent markup."""
    return _sha256(source)


def hash_config(config: ParseConfig) -> str:
    """SHA-256 hex digest over every ParseConfig field, in field order."""
    return _sha256("|".join(repr(value) for value in astuple(config)))


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
