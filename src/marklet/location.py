"""Source location tracking for block nodes.

Every block node records the span of lines it consumed. Inline nodes share
the location of the block that owns them.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of source text covered by a node.

    Line and column numbers are 1-indexed. Offsets are 0-indexed character
    positions into the original source string.

    Attributes:
        lineno: First line of the node
        col_offset: Starting column
        offset: Absolute start offset in the source
        end_offset: Absolute end offset in the source (exclusive)
        end_lineno: Last line consumed by the node (optional)
        end_col_offset: Ending column (optional)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1, end_lineno=5)
        >>> str(loc)
        '3:1'

        >>> str(SourceLocation(1, 1, source_file="notes.md"))
        'notes.md:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def line_count(self) -> int:
        """Number of source lines spanned (at least 1)."""
        if self.end_lineno is None:
            return 1
        return max(1, self.end_lineno - self.lineno + 1)

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder location for synthetic nodes."""
        return cls(lineno=0, col_offset=0)
