"""Inline tokenization for marklet.

Turns one logical text string (a heading's text, a paragraph, a list item
label, a joined blockquote body) into a tuple of inline nodes.

Algorithm:
At each cursor position the rule table is tried in priority order; the first
rule whose pattern matches at the cursor wins and consumes exactly its match.
Priority is table order, not match length. When nothing matches, plain text
runs up to the next special character. A special character at the cursor
that starts no rule (an unpaired ``*``, say) is emitted alone, so every step
consumes at least one character. Adjacent text fragments are merged at the
end.

Thread Safety:
The rule table is immutable module state. All per-call state is local.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple

from marklet.nodes import (
    CodeSpan,
    Emphasis,
    Image,
    Inline,
    Link,
    Strikethrough,
    Strong,
    Text,
)
from marklet.parsing import patterns

if TYPE_CHECKING:
    from marklet.location import SourceLocation


class InlineRule(NamedTuple):
    """One entry of the inline rule table."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], SourceLocation], Inline]


INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule(
        "image",
        patterns.IMAGE,
        lambda m, loc: Image(location=loc, alt=m.group(1), src=m.group(2)),
    ),
    InlineRule(
        "link",
        patterns.LINK,
        lambda m, loc: Link(location=loc, text=m.group(1), href=m.group(2)),
    ),
    InlineRule(
        "code",
        patterns.CODE_SPAN,
        lambda m, loc: CodeSpan(location=loc, content=m.group(1)),
    ),
    InlineRule(
        "bold",
        patterns.STRONG,
        lambda m, loc: Strong(location=loc, content=m.group(2)),
    ),
    InlineRule(
        "italic",
        patterns.EMPHASIS,
        lambda m, loc: Emphasis(location=loc, content=m.group(2)),
    ),
    InlineRule(
        "strike",
        patterns.STRIKETHROUGH,
        lambda m, loc: Strikethrough(location=loc, content=m.group(1)),
    ),
)


class InlineParsingMixin:
    """Inline parsing methods for the Parser.

    Required Host Attributes:
        - _config: ParseConfig (read from the ContextVar)

    """

    def _parse_inline(self, text: str, location: SourceLocation) -> tuple[Inline, ...]:
        """Parse inline content into nodes.

        Empty text yields a single empty Text node, never an empty tuple;
        renderers may rely on at least one child.
        """
        if not text:
            return (Text(location=location, content=""),)

        tokens = self._tokenize_inline(text, location)
        return self._merge_text(tokens, location)

    def _tokenize_inline(self, text: str, location: SourceLocation) -> list[Inline]:
        """Split text into raw tokens; text fragments are not merged yet."""
        tokens: list[Inline] = []
        tokens_append = tokens.append
        pos = 0
        text_len = len(text)

        while pos < text_len:
            for rule in INLINE_RULES:
                match = rule.pattern.match(text, pos)
                if match is not None:
                    tokens_append(rule.build(match, location))
                    pos = match.end()
                    break
            else:
                special = patterns.INLINE_SPECIAL.search(text, pos)
                if special is None:
                    end = text_len
                elif special.start() == pos:
                    end = pos + 1
                else:
                    end = special.start()
                tokens_append(Text(location=location, content=text[pos:end]))
                pos = end

        return tokens

    def _merge_text(
        self, tokens: list[Inline], location: SourceLocation
    ) -> tuple[Inline, ...]:
        """Collapse runs of Text tokens into one node each.

        The configured text_transformer, if any, runs on each merged run.
        """
        transform = self._config.text_transformer
        merged: list[Inline] = []
        pending: list[str] = []

        def flush() -> None:
            if pending:
                content = "".join(pending)
                if transform is not None:
                    content = transform(content)
                merged.append(Text(location=location, content=content))
                pending.clear()

        for token in tokens:
            if isinstance(token, Text):
                pending.append(token.content)
            else:
                flush()
                merged.append(token)
        flush()

        return tuple(merged)
