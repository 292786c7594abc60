"""Core block parsing for marklet.

Provides block dispatch and the simple blocks: headings, thematic breaks,
fenced code, block quotes and paragraphs. Lists live in ``list.py``.

Every ``_parse_*`` method takes the index of the line it starts on and
returns ``(node, next_index)``: the block it built and the first line it
did not consume.
"""

from __future__ import annotations

from marklet.nodes import (
    Block,
    BlockQuote,
    FencedCode,
    Heading,
    Paragraph,
    ThematicBreak,
)
from marklet.parsing import patterns
from marklet.parsing.patterns import trim
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class BlockParsingCoreMixin:
    """Block dispatch and single-construct block parsers.

    Required Host Attributes:
        - _lines: list[str]

    Required Host Methods:
        - _block_location(start, end) -> SourceLocation
        - _parse_inline(text, location) -> tuple[Inline, ...]
        - _parse_list(start) -> tuple[List, int]

    """

    def _parse_block(self, index: int) -> tuple[Block | None, int]:
        """Classify the line at index and parse the block it starts.

        Rules are tried in order on the trimmed line; the first match wins.
        Blank lines produce no node.
        """
        line = trim(self._lines[index])

        if not line:
            return None, index + 1

        if line.startswith(patterns.FENCE_MARKER):
            return self._parse_fenced_code(index)

        heading = patterns.HEADING.match(line)
        if heading is not None:
            location = self._block_location(index, index)
            return (
                Heading(
                    location=location,
                    level=len(heading.group(1)),  # type: ignore[arg-type]
                    children=self._parse_inline(heading.group(2), location),
                ),
                index + 1,
            )

        if patterns.THEMATIC_BREAK.match(line):
            return ThematicBreak(location=self._block_location(index, index)), index + 1

        if line.startswith(patterns.BLOCK_QUOTE_MARKER):
            return self._parse_block_quote(index)

        if patterns.ORDERED_ITEM.match(line) or patterns.UNORDERED_ITEM.match(line):
            return self._parse_list(index)

        location = self._block_location(index, index)
        return Paragraph(location=location, children=self._parse_inline(line, location)), index + 1

    def _parse_fenced_code(self, start: int) -> tuple[FencedCode, int]:
        """Parse a fenced code block opening at start.

        Content lines are kept verbatim: no trimming, no inline parsing.
        Without a closing fence the block runs to the end of the input.
        """
        lines = self._lines
        line_count = len(lines)
        language = trim(trim(lines[start])[len(patterns.FENCE_MARKER) :])

        pos = start + 1
        while pos < line_count and not trim(lines[pos]).startswith(patterns.FENCE_MARKER):
            pos += 1

        content = "\n".join(lines[start + 1 : pos])

        if pos < line_count:
            end = pos
        else:
            end = line_count - 1
            logger.debug(
                "Unterminated code fence at line %d; absorbed %d line(s) to end of input",
                start + 1,
                line_count - start - 1,
            )

        node = FencedCode(
            location=self._block_location(start, end),
            language=language,
            content=content,
        )
        return node, end + 1

    def _parse_block_quote(self, start: int) -> tuple[BlockQuote, int]:
        """Parse consecutive quote lines starting at start.

        A blank line stays inside the quote (as an empty line) only when the
        line right after it is another quote line.
        """
        lines = self._lines
        line_count = len(lines)
        marker = patterns.BLOCK_QUOTE_MARKER
        quote_lines: list[str] = []

        pos = start
        while pos < line_count:
            line = trim(lines[pos])
            if line.startswith(marker):
                quote_lines.append(trim(line[len(marker) :]))
                pos += 1
            elif not line and self._line_continues(pos, marker):
                quote_lines.append("")
                pos += 1
            else:
                break

        location = self._block_location(start, pos - 1)
        children = self._parse_inline("\n".join(quote_lines), location)
        return BlockQuote(location=location, children=children), pos

    def _line_continues(self, index: int, marker: str) -> bool:
        """Whether the line after index starts with marker once trimmed."""
        following = index + 1
        return following < len(self._lines) and trim(self._lines[following]).startswith(
            marker
        )
