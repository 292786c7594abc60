"""AST Visitor and Transformer for marklet.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen ASTs.

Example: collect all link targets

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.hrefs.append(node.href)

    collector = LinkCollector()
    collector.visit(doc)

Example: demote headings

    def demote(node: Node) -> Node:
        if isinstance(node, Heading):
            return dataclasses.replace(node, level=min(node.level + 1, 6))
        return node

    new_doc = transform(doc, demote)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from marklet.location import SourceLocation
from marklet.nodes import (
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
)


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call; a list item's label
    comes before its nested list.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_fenced_code(self, node: FencedCode) -> T:
        return self.visit_default(node)

    def visit_block_quote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_thematic_break(self, node: ThematicBreak) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_strikethrough(self, node: Strikethrough) -> T:
        return self.visit_default(node)

    def visit_code_span(self, node: CodeSpan) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case FencedCode():
                return self.visit_fenced_code(node)
            case BlockQuote():
                return self.visit_block_quote(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case ThematicBreak():
                return self.visit_thematic_break(node)
            case Text():
                return self.visit_text(node)
            case Strong():
                return self.visit_strong(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case Strikethrough():
                return self.visit_strikethrough(node)
            case CodeSpan():
                return self.visit_code_span(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        match node:
            case Document(children=children) | Heading(children=children) | Paragraph(
                children=children
            ) | BlockQuote(children=children):
                for child in children:
                    self.visit(child)
            case ListItem(children=children, nested_list=nested_list):
                for child in children:
                    self.visit(child)
                if nested_list is not None:
                    self.visit(nested_list)
            case List(items=items):
                for item in items:
                    self.visit(item)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the AST, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree. Inline
    sequences are re-normalized afterwards: Text nodes left adjacent by a
    removal are merged, and a sequence emptied entirely gets one empty Text
    node. The root Document cannot be removed; returning None for it raises
    TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; removed nodes are dropped."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case Document(children=children):
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case Heading(children=children) | Paragraph(children=children) | BlockQuote(
            children=children
        ):
            new_children = _normalize_inline(_filtered(children), node.location)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case ListItem(children=children, nested_list=nested_list):
            new_children = _normalize_inline(_filtered(children), node.location)
            new_nested = _transform_node(nested_list, fn) if nested_list is not None else None
            if new_children != children or new_nested is not nested_list:
                return dataclasses.replace(node, children=new_children, nested_list=new_nested)
        case List(items=items):
            new_items = _filtered(items)
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case _:
            pass  # Leaf nodes: return as-is

    return node


def _normalize_inline(children: tuple[Node, ...], location: SourceLocation) -> tuple[Node, ...]:
    """Merge adjacent Text nodes; never return an empty sequence."""
    if not children:
        return (Text(location=location, content=""),)
    merged: list[Node] = []
    for child in children:
        if merged and isinstance(child, Text) and isinstance(merged[-1], Text):
            merged[-1] = Text(location=merged[-1].location, content=merged[-1].content + child.content)
        else:
            merged.append(child)
    return tuple(merged)
