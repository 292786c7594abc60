"""Tests for BaseVisitor and transform."""

import dataclasses

import pytest

from marklet import parse
from marklet.nodes import (
    Emphasis,
    FencedCode,
    Heading,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strong,
    Text,
)
from marklet.visitor import BaseVisitor, transform


class _HrefCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.hrefs: list[str] = []

    def visit_link(self, node: Link) -> None:
        self.hrefs.append(node.href)


class _Counter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_default(self, node: Node) -> None:
        name = type(node).__name__
        self.counts[name] = self.counts.get(name, 0) + 1


class TestBaseVisitor:
    """Dispatch and automatic child walking."""

    def test_collects_links_in_document_order(self) -> None:
        doc = parse("[a](1)\n\n- [b](2)\n  1. [c](3)\n\n> [d](4)")
        collector = _HrefCollector()
        collector.visit(doc)
        assert collector.hrefs == ["1", "2", "3", "4"]

    def test_visits_every_node(self) -> None:
        doc = parse("# T\n- a\n  1. x\n```\ncode\n```")
        counter = _Counter()
        counter.visit(doc)
        assert counter.counts == {
            "Document": 1,
            "Heading": 1,
            "Text": 3,
            "List": 2,
            "ListItem": 2,
            "FencedCode": 1,
        }

    def test_visit_returns_dispatch_result(self) -> None:
        class LevelVisitor(BaseVisitor[int]):
            def visit_heading(self, node: Heading) -> int:
                return node.level

            def visit_default(self, node: Node) -> int:
                return 0

        doc = parse("### x")
        assert LevelVisitor().visit(doc.children[0]) == 3
        assert LevelVisitor().visit(doc) == 0


class TestTransform:
    """Immutable bottom-up rewriting."""

    def test_identity_returns_equal_tree(self) -> None:
        doc = parse("# a\n- b\n  1. c")
        assert transform(doc, lambda node: node) == doc

    def test_original_is_untouched(self) -> None:
        doc = parse("# a")

        def demote(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, level=min(node.level + 1, 6))
            return node

        new_doc = transform(doc, demote)
        assert new_doc.children[0].level == 2
        assert doc.children[0].level == 1

    def test_removal_merges_text(self) -> None:
        doc = parse("a *b* c")
        new_doc = transform(doc, lambda node: None if isinstance(node, Emphasis) else node)
        para = new_doc.children[0]
        assert isinstance(para, Paragraph)
        assert len(para.children) == 1
        assert para.children[0].content == "a  c"

    def test_removing_all_inline_leaves_empty_text(self) -> None:
        doc = parse("**x**")
        new_doc = transform(doc, lambda node: None if isinstance(node, Strong) else node)
        (child,) = new_doc.children[0].children
        assert isinstance(child, Text)
        assert child.content == ""

    def test_remove_blocks(self) -> None:
        doc = parse("# a\n```\nx\n```\ntext")
        new_doc = transform(doc, lambda node: None if isinstance(node, FencedCode) else node)
        assert [type(block) for block in new_doc.children] == [Heading, Paragraph]

    def test_nested_list_is_transformed(self) -> None:
        doc = parse("- a\n  1. x\n  2. y")

        def drop_second(node: Node) -> Node | None:
            if isinstance(node, ListItem) and node.children[0].content == "y":
                return None
            return node

        new_doc = transform(doc, drop_second)
        nested = new_doc.children[0].items[0].nested_list
        assert isinstance(nested, List)
        assert len(nested.items) == 1

    def test_nested_list_can_be_removed(self) -> None:
        doc = parse("- a\n  1. x")

        def drop_ordered(node: Node) -> Node | None:
            if isinstance(node, List) and node.ordered:
                return None
            return node

        new_doc = transform(doc, drop_ordered)
        assert new_doc.children[0].items[0].nested_list is None

    def test_root_cannot_be_removed(self) -> None:
        with pytest.raises(TypeError):
            transform(parse("x"), lambda node: None)
