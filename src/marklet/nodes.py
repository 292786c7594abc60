"""Typed AST nodes for marklet.

All AST nodes are frozen dataclasses with slots:
- Immutability: a node is never revisited after the parser returns it
- Pattern matching: match statements work naturally
- Memory efficiency: __slots__ keeps large documents small

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── FencedCode
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   └── ThematicBreak
└── Inline (inline elements)
    ├── Text
    ├── Strong
    ├── Emphasis
    ├── Strikethrough
    ├── CodeSpan
    ├── Link
    └── Image

Inline nodes carry flat string content. Emphasis markup does not nest, so
there is no inline child tuple anywhere below a block.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from marklet.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    Adjacent Text nodes never occur in a children sequence; the inline
    tokenizer merges them.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Bold text.

    Markdown: **text** or __text__

    """

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Italic text.

    Markdown: *text* or _text_

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Struck-out text.

    Markdown: ~~text~~

    """

    content: str


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`

    """

    content: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](href)

    """

    text: str
    href: str


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](src)

    """

    alt: str
    src: str


type Inline = Text | Strong | Emphasis | Strikethrough | CodeSpan | Link | Image


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: # Heading (one to six #)

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Single-line paragraph.

    Any non-blank line that matches no other block rule.

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class FencedCode(Node):
    """Fenced code block.

    Markdown:
        ```lang
        code
        ```

    ``content`` is the verbatim text between the fences, lines joined by
    ``\\n``. It is never inline-parsed.

    """

    language: str
    content: str


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text

    The quoted lines are joined into one string and inline-parsed, so the
    children are inline nodes. Blank lines between quote lines survive as
    empty lines inside Text content.

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Markdown: - item or 1. item

    Only items of a top-level list may carry a ``nested_list``.

    """

    children: tuple[Inline, ...]
    nested_list: List | None = None


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item / * item / + item, or 1. item

    """

    items: tuple[ListItem, ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Horizontal rule.

    Markdown: --- or *** or ___

    """


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node."""

    children: tuple[Block, ...]


type Block = (
    Document
    | Heading
    | Paragraph
    | FencedCode
    | BlockQuote
    | List
    | ListItem
    | ThematicBreak
)
