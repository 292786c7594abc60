"""Line-oriented parser producing a typed AST.

Parsing runs in two phases. The block phase walks the source line by line:
each step classifies the line under the cursor, builds one block (or skips a
blank line) and reports where the next unread line is. Every block that
carries text hands it to the inline phase, which produces the block's
children.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: rule-table inline tokenizer
- `BlockParsingMixin`: block dispatch, code fences, quotes, lists

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from collections.abc import Sequence

from marklet.config import ParseConfig, get_parse_config
from marklet.location import SourceLocation
from marklet.nodes import Block, Inline
from marklet.parsing import BlockParsingMixin, InlineParsingMixin
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Parser for the marklet Markdown subset.

    Usage:
        >>> parser = Parser("# Hello\\n\\nWorld")
        >>> blocks = parser.parse()
        >>> blocks[0].level
        1

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lines",
        "_line_offsets",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path recorded in locations

        """
        self._source = source
        self._source_file = source_file
        self._lines: list[str] = source.split("\n")

        offsets: list[int] = []
        offset = 0
        for line in self._lines:
            offsets.append(offset)
            offset += len(line) + 1
        self._line_offsets = offsets

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> Sequence[Block]:
        """Parse source into AST blocks.

        Never raises for any input: malformed constructs degrade to plain
        paragraphs or text.

        Returns:
            Tuple of Block nodes in document order

        """
        if not self._source:
            return ()

        blocks: list[Block] = []
        pos = 0
        line_count = len(self._lines)
        while pos < line_count:
            block, pos = self._parse_block(pos)
            if block is not None:
                blocks.append(block)

        logger.debug("Parsed %d line(s) into %d block(s)", line_count, len(blocks))
        return tuple(blocks)

    def parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Run only the inline phase on text.

        Nodes are located at the start of the parser's source.
        """
        location = SourceLocation(
            lineno=1,
            col_offset=1,
            offset=0,
            end_offset=len(text),
            source_file=self._source_file,
        )
        return self._parse_inline(text, location)

    def _line_location(self, index: int) -> SourceLocation:
        """Location covering the whole of line index (0-based)."""
        line = self._lines[index]
        return SourceLocation(
            lineno=index + 1,
            col_offset=1,
            offset=self._line_offsets[index],
            end_offset=self._line_offsets[index] + len(line),
            end_lineno=index + 1,
            end_col_offset=len(line) + 1,
            source_file=self._source_file,
        )

    def _block_location(self, start: int, end: int) -> SourceLocation:
        """Location spanning lines start..end inclusive (0-based)."""
        if end <= start:
            return self._line_location(start)
        return self._line_location(start).span_to(self._line_location(end))
