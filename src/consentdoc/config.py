"""Parse configuration for consentdoc, carried in a ContextVar.

A Parser never takes options as arguments; it reads the ParseConfig that
is active in the calling context when it is created. Each thread (and each
asyncio task) sees its own value, so concurrent parses with different
settings do not interfere.

Usage:
    from consentdoc.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(custom_elements_enabled=False)):
        result = parse(text)

    # Or, for longer-lived changes
    set_parse_config(ParseConfig(max_element_depth=8))
    try:
        result = parse(text)
    finally:
        reset_parse_config()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Settings that change how consent markup is parsed.

    The source file name is not part of the config: it belongs to a single
    parse call and is passed to the Parser directly.

    Attributes:
        custom_elements_enabled: Recognize frontmatter and custom elements.
            When False the whole input, untrimmed, is one markdown section
            (omitted if blank) followed by an implicit signature section.
        default_signature_id: Id of the implicit signature section added
            when custom elements are disabled
        max_element_depth: How deeply custom elements may nest before the
            parse fails

    """

    custom_elements_enabled: bool = True
    default_signature_id: str = "default-signature"
    max_element_depth: int = 32

    def __post_init__(self) -> None:
        if self.max_element_depth < 1:
            msg = f"max_element_depth must be at least 1, got {self.max_element_depth}"
            raise ValueError(msg)
        if not self.default_signature_id:
            msg = "default_signature_id must not be empty"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ParseConfig":
        """Build a ParseConfig from settings loaded elsewhere (files, CLI flags).

        Keys that do not name a ParseConfig field are dropped.

        Example:
            >>> ParseConfig.from_dict({"max_element_depth": 8, "theme": "dark"}).max_element_depth
            8

        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in config_dict.items() if key in known})


_DEFAULT_CONFIG = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "consentdoc_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Return the ParseConfig active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Make ``config`` the active ParseConfig of the current context.

    Other threads and tasks keep their own value.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Restore the default ParseConfig in the current context."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Activate ``config`` for the duration of a ``with`` block.

    The previously active config comes back when the block exits, also when
    it exits with an exception.

    Example:
        >>> with parse_config_context(ParseConfig(custom_elements_enabled=False)):
        ...     result = Parser("<toggle id=a>A</toggle>").parse()

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
