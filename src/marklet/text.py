"""Extract plain text from marklet AST nodes.

Example:
    >>> from marklet import parse
    >>> from marklet.text import extract_text
    >>> doc = parse("# Hello **World**")
    >>> extract_text(doc.children[0])
    'Hello World'
"""

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


def extract_text(node: Node) -> str:
    """Extract plain text from any AST node.

    Inline markup is dropped and its visible text kept: a Link contributes
    its text, an Image its alt text. Sibling blocks, list items and a nested
    list are separated by newlines. A thematic break contributes nothing.

    Args:
        node: Any AST node (block or inline).

    Returns:
        Concatenated plain text from the node and its descendants.

    """
    match node:
        case Text() | Strong() | Emphasis() | Strikethrough() | CodeSpan():
            return node.content
        case Link():
            return node.text
        case Image():
            return node.alt
        case FencedCode():
            return node.content
        case ThematicBreak():
            return ""
        case Heading() | Paragraph() | BlockQuote():
            return "".join(extract_text(child) for child in node.children)
        case ListItem():
            label = "".join(extract_text(child) for child in node.children)
            if node.nested_list is None:
                return label
            return f"{label}\n{extract_text(node.nested_list)}"
        case List():
            return "\n".join(extract_text(item) for item in node.items)
        case Document():
            parts = (extract_text(child) for child in node.children)
            return "\n".join(part for part in parts if part)
        case _:
            return ""
