"""List parsing for marklet.

One unified parser handles ordered and unordered lists. The first line's
marker fixes the list's kind (the *main* pattern). Directly after each item,
a run of lines using the other kind of marker becomes that item's nested
list. Nesting stops at one level: inside a nested run, a main-pattern line
ends the run and starts the next top-level item.

Blank lines:
A blank line is skipped when the very next line continues the list, so one
blank line between items keeps them in one list. Two blank lines in a row,
or a blank line followed by anything else, end it.
"""

from __future__ import annotations

import re

from marklet.nodes import List, ListItem
from marklet.parsing import patterns
from marklet.parsing.patterns import trim


class ListParsingMixin:
    """List parsing methods.

    Required Host Attributes:
        - _lines: list[str]

    Required Host Methods:
        - _block_location(start, end) -> SourceLocation
        - _parse_inline(text, location) -> tuple[Inline, ...]

    """

    def _parse_list(self, start: int) -> tuple[List, int]:
        """Parse a list whose first item is on line start."""
        lines = self._lines
        line_count = len(lines)

        ordered = patterns.ORDERED_ITEM.match(trim(lines[start])) is not None
        main = patterns.ORDERED_ITEM if ordered else patterns.UNORDERED_ITEM
        nested = patterns.UNORDERED_ITEM if ordered else patterns.ORDERED_ITEM

        items: list[ListItem] = []
        pos = start
        while pos < line_count:
            line = trim(lines[pos])
            match = main.match(line)
            if match is not None:
                item_start = pos
                label_location = self._block_location(pos, pos)
                children = self._parse_inline(match.group(1), label_location)

                nested_list, pos = self._parse_nested_list(pos + 1, main, nested, not ordered)
                item_end = nested_list.location.end_lineno - 1 if nested_list else item_start

                items.append(
                    ListItem(
                        location=self._block_location(item_start, item_end),
                        children=children,
                        nested_list=nested_list,
                    )
                )
            elif not line and self._list_continues(pos, main):
                pos += 1
            else:
                break

        node = List(
            location=self._block_location(start, pos - 1),
            items=tuple(items),
            ordered=ordered,
        )
        return node, pos

    def _parse_nested_list(
        self,
        start: int,
        main: re.Pattern[str],
        nested: re.Pattern[str],
        ordered: bool,
    ) -> tuple[List | None, int]:
        """Collect the nested-marker run following a top-level item.

        Returns the nested list (None when the run is empty) and the first
        line not consumed. Blank lines are consumed when followed by either
        kind of list line, even if no nested item follows.
        """
        lines = self._lines
        line_count = len(lines)
        nested_items: list[ListItem] = []
        first = last = -1

        pos = start
        while pos < line_count:
            line = trim(lines[pos])
            match = nested.match(line)
            if match is not None:
                location = self._block_location(pos, pos)
                nested_items.append(
                    ListItem(location=location, children=self._parse_inline(match.group(1), location))
                )
                if first < 0:
                    first = pos
                last = pos
                pos += 1
            elif not line and self._list_continues(pos, nested, main):
                pos += 1
            else:
                break

        if not nested_items:
            return None, pos

        node = List(
            location=self._block_location(first, last),
            items=tuple(nested_items),
            ordered=ordered,
        )
        return node, pos

    def _list_continues(self, index: int, *candidates: re.Pattern[str]) -> bool:
        """Whether the line right after index matches any candidate pattern."""
        following = index + 1
        if following >= len(self._lines):
            return False
        line = trim(self._lines[following])
        return any(pattern.match(line) for pattern in candidates)
