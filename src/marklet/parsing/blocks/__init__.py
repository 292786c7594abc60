"""Block parsing subsystem for marklet.

Architecture:
- core: block dispatch, headings, thematic breaks, fenced code, quotes,
  paragraphs
- list: ordered/unordered lists with one level of nesting

"""

from marklet.parsing.blocks.core import BlockParsingCoreMixin
from marklet.parsing.blocks.list import ListParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Required Host Attributes:
        - _lines: list[str]

    Required Host Methods:
        - _block_location(start, end) -> SourceLocation
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListParsingMixin",
]
