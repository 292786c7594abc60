"""Parsing subsystem for marklet.

Provides mixin classes composed by ``marklet.parser.Parser``:
- `BlockParsingMixin`: line classification and block construction
- `InlineParsingMixin`: rule-table inline tokenization

Example:
    >>> from marklet.parsing import BlockParsingMixin, InlineParsingMixin
    >>> class Parser(InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from marklet.parsing.blocks import BlockParsingMixin
from marklet.parsing.inline import INLINE_RULES, InlineParsingMixin, InlineRule

__all__ = [
    "BlockParsingMixin",
    "INLINE_RULES",
    "InlineParsingMixin",
    "InlineRule",
]
