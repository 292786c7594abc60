"""ContextVar-based configuration for marklet.

Parse configuration is set once per call (or per Markdown instance) and read
by every parser running in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and one thread's config never leaks into another's.

Usage:
    # High-level: pass config to parse()
    doc = parse(text, config=ParseConfig(text_transformer=str.upper))

    # Direct parser usage
    with parse_config_context(ParseConfig(text_transformer=str.upper)):
        blocks = Parser(text).parse()

"""

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from marklet.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is per-call state, not configuration. It stays on the
    Parser instance.

    Attributes:
        text_transformer: Optional callback applied to the content of every
            Text node, after adjacent text runs have been merged

    """

    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if self.text_transformer is not None and not callable(self.text_transformer):
            raise ConfigError("text_transformer", "must be callable or None")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ParseConfig":
        """Create ParseConfig from a mapping.

        Unknown keys are silently ignored so that a host application can pass
        its whole settings section through.

        Example:
            >>> config = ParseConfig.from_dict({"text_transformer": str.strip, "theme": "dark"})
            >>> config.text_transformer is str.strip
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


@dataclass(frozen=True, slots=True)
class TapConfig:
    """Settings for resolving taps on links and images.

    Attributes:
        internal_prefix: Hrefs starting with this prefix are in-app routes
            and resolve to navigation; anything else is copied
        copied_message: Notification text shown after copying a link

    """

    internal_prefix: str = "/pages/"
    copied_message: str = "Link copied"

    def __post_init__(self) -> None:
        if not isinstance(self.internal_prefix, str) or not self.internal_prefix:
            raise ConfigError("internal_prefix", "must be a non-empty string")
        if not isinstance(self.copied_message, str):
            raise ConfigError("copied_message", "must be a string")


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the module-level default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(text_transformer=str.upper)):
        ...     blocks = Parser("hello").parse()

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "TapConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
