"""
marklet: a small Markdown-subset parser producing a typed node tree

Parses headings, single-line paragraphs, horizontal rules, fenced code,
block quotes and lists (one level of nesting), plus inline bold, italic,
strikethrough, code, links and images. The result is an immutable tree of
frozen dataclasses, ready to be serialized for a template-driven renderer.

Parsing never raises: any input produces some tree.

Quick Start:
    >>> from marklet import parse
    >>> doc = parse("# Hello **World**")
    >>> doc.children[0].level
    1

    >>> # Template-ready dicts
    >>> from marklet import Markdown
    >>> md = Markdown()
    >>> md("Hi *there*")
    [{'type': 'paragraph', 'children': [{'type': 'text', 'content': 'Hi '}, {'type': 'italic', 'content': 'there'}]}]

Installation:
    pip install marklet              # Zero runtime dependencies
"""

from collections.abc import Iterable
from typing import Any

from marklet.cache import LRUParseCache, cache_key
from marklet.config import (
    ParseConfig,
    TapConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from marklet.errors import ConfigError, MarkletError, SerializationError
from marklet.interaction import (
    CopyToClipboard,
    Navigate,
    PreviewImage,
    iter_tap_targets,
    resolve_image_tap,
    resolve_link_tap,
    resolve_tap,
)
from marklet.location import SourceLocation
from marklet.nodes import (
    Block,
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Inline,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
)
from marklet.parser import Parser
from marklet.serialization import from_dict, from_json, to_dict, to_json
from marklet.text import extract_text
from marklet.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def _parse_document(source: str, source_file: str | None) -> Document:
    """Parse with config already set in the ContextVar."""
    blocks = Parser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        end_lineno=source.count("\n") + 1,
        source_file=source_file,
    )
    return Document(location=loc, children=tuple(blocks))


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse Markdown source into a typed AST.

    Args:
        source: Markdown source text
        source_file: Optional source file path recorded in node locations
        config: Parse configuration (defaults to ``ParseConfig()``)

    Returns:
        Document AST root node. Empty source gives a Document with no
        children.

    Example:
        >>> doc = parse("- a\\n- b")
        >>> len(doc.children[0].items)
        2

    """
    with parse_config_context(config or ParseConfig()):
        return _parse_document(source, source_file)


def parse_inline(text: str, *, config: ParseConfig | None = None) -> tuple[Inline, ...]:
    """Run only the inline tokenizer on text.

    Empty text gives a single empty Text node.

    Example:
        >>> [type(n).__name__ for n in parse_inline("a **b** c")]
        ['Text', 'Strong', 'Text']

    """
    with parse_config_context(config or ParseConfig()):
        return Parser(text).parse_inline(text)


class Markdown:
    """Reusable Markdown processor bound to one configuration.

    A rendering collaborator keeps one instance and calls it whenever its
    displayed content changes, replacing the previous tree wholesale.

    Usage:
        >>> md = Markdown()
        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

        >>> md("```py\\nprint(1)\\n```")
        [{'type': 'codeblock', 'language': 'py', 'content': 'print(1)'}]

    Thread Safety:
        The config is immutable and set per call through a ContextVar, so
        one instance may be used from several threads at once. The document
        cache is locked.

    """

    __slots__ = ("_cache", "_config")

    def __init__(
        self,
        *,
        config: ParseConfig | None = None,
        cache_size: int = 32,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            config: Parse configuration (defaults to ``ParseConfig()``)
            cache_size: How many recently parsed documents to keep, so that
                re-setting unchanged content is a lookup. 0 disables caching.

        Raises:
            ConfigError: If cache_size is negative.

        """
        if cache_size < 0:
            raise ConfigError("cache_size", "must be zero or positive")
        self._config = config or ParseConfig()
        self._cache = LRUParseCache(cache_size) if cache_size else None

    @property
    def config(self) -> ParseConfig:
        return self._config

    @property
    def cache(self) -> LRUParseCache | None:
        """Recently parsed documents, or None when caching is disabled."""
        return self._cache

    def __call__(self, source: str | None) -> list[dict[str, Any]]:
        """Parse and serialize to template-ready dicts.

        A None or empty source gives an empty list.

        """
        if not source:
            return []
        doc = self.parse(source)
        return [to_dict(block) for block in doc.children]

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse Markdown source into AST."""
        with parse_config_context(self._config):
            return self._parse_cached(source, source_file)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse multiple Markdown sources into AST documents.

        Sets config once, parses all, resets once. With caching enabled,
        duplicate sources within the batch are parsed once.

        """
        with parse_config_context(self._config):
            return [self._parse_cached(source, source_file) for source in sources]

    def _parse_cached(self, source: str, source_file: str | None) -> Document:
        if self._cache is None:
            return _parse_document(source, source_file)
        key = cache_key(source, source_file)
        doc = self._cache.get(key)
        if doc is None:
            doc = _parse_document(source, source_file)
            self._cache.put(key, doc)
        return doc


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_inline",
    "Markdown",
    "Parser",
    # Block nodes
    "Block",
    "BlockQuote",
    "Document",
    "FencedCode",
    "Heading",
    "List",
    "ListItem",
    "Paragraph",
    "ThematicBreak",
    # Inline nodes
    "Inline",
    "CodeSpan",
    "Emphasis",
    "Image",
    "Link",
    "Strikethrough",
    "Strong",
    "Text",
    # Location
    "SourceLocation",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "TapConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "MarkletError",
    "ConfigError",
    "SerializationError",
    # Parse cache
    "LRUParseCache",
    "cache_key",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Tree utilities
    "BaseVisitor",
    "transform",
    "extract_text",
    # Tap resolution
    "CopyToClipboard",
    "Navigate",
    "PreviewImage",
    "iter_tap_targets",
    "resolve_image_tap",
    "resolve_link_tap",
    "resolve_tap",
]
