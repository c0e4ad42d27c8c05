"""ContextVar-based parse configuration for prettyparse.

Config is read by every Parser created in the current context, so nested
helpers never need it passed around explicitly.

Usage:
    # High-level
    from prettyparse import parse
    from prettyparse.config import ParseConfig

    fragment = parse("<icon>", config=ParseConfig(void_elements=frozenset({"icon"})))

    # Direct parser usage
    from prettyparse.config import parse_config_context
    from prettyparse.parser import Parser

    with parse_config_context(ParseConfig(max_depth=32)):
        fragment = Parser(source).parse()

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Elements that never take content, matched case-sensitively.
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

DEFAULT_MAX_DEPTH = 128


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        void_elements: Tag names whose content is never parsed
        max_depth: Element nesting depth past which content is not descended into

    """

    void_elements: frozenset[str] = VOID_ELEMENTS
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Unknown keys are ignored. ``void_elements`` may be any iterable
        of names.

        Example:
            >>> config = ParseConfig.from_dict({"max_depth": 10, "unknown": 1})
            >>> config.max_depth
            10

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "void_elements" in filtered:
            filtered["void_elements"] = frozenset(filtered["void_elements"])
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_depth=4)):
        ...     get_parse_config().max_depth
        4

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "VOID_ELEMENTS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
