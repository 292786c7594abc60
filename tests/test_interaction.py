"""Tests for tap resolution on links and images."""

import pytest

from marklet import parse
from marklet.config import TapConfig
from marklet.interaction import (
    CopyToClipboard,
    Navigate,
    PreviewImage,
    iter_tap_targets,
    resolve_image_tap,
    resolve_link_tap,
    resolve_tap,
)
from marklet.nodes import Image, Link


class TestLinkTaps:
    """resolve_link_tap()."""

    def test_internal_route_navigates(self) -> None:
        assert resolve_link_tap("/pages/detail/index?id=3") == Navigate(url="/pages/detail/index?id=3")

    @pytest.mark.parametrize("href", ["https://example.com", "mailto:a@b.c", "/other/path", "pages/x"])
    def test_anything_else_is_copied(self, href: str) -> None:
        action = resolve_link_tap(href)
        assert action == CopyToClipboard(text=href, message="Link copied")

    def test_empty_href_does_nothing(self) -> None:
        assert resolve_link_tap("") is None

    def test_custom_config(self) -> None:
        config = TapConfig(internal_prefix="app://", copied_message="Copied!")
        assert resolve_link_tap("app://home", config=config) == Navigate(url="app://home")
        assert resolve_link_tap("/pages/x", config=config) == CopyToClipboard(
            text="/pages/x", message="Copied!"
        )


class TestImageTaps:
    """resolve_image_tap()."""

    def test_preview(self) -> None:
        assert resolve_image_tap("cat.png") == PreviewImage(urls=("cat.png",), current="cat.png")

    def test_empty_src_does_nothing(self) -> None:
        assert resolve_image_tap("") is None


class TestTapTargets:
    """Walking a parsed document for tappable nodes."""

    def test_targets_in_document_order(self) -> None:
        doc = parse("# [h](/pages/h)\n\n![pic](p.png)\n- [i](https://i)\n  1. ![n](n.png)\n\n> [q](/pages/q)")
        targets = list(iter_tap_targets(doc))
        assert [type(t) for t in targets] == [Link, Image, Link, Image, Link]

    def test_resolve_each_target(self) -> None:
        doc = parse("[in](/pages/a) [out](https://b) ![img](c.png)")
        actions = [resolve_tap(target) for target in iter_tap_targets(doc)]
        assert actions == [
            Navigate(url="/pages/a"),
            CopyToClipboard(text="https://b", message="Link copied"),
            PreviewImage(urls=("c.png",), current="c.png"),
        ]

    def test_code_is_not_a_target(self) -> None:
        doc = parse("`[x](y)`\n```\n[x](y)\n```")
        assert list(iter_tap_targets(doc)) == []

    def test_other_nodes_are_not_tappable(self) -> None:
        doc = parse("# plain **bold**\n\n---")
        heading, rule = doc.children
        assert resolve_tap(heading) is None
        assert resolve_tap(rule) is None
        for node in heading.children:
            assert resolve_tap(node) is None

    def test_resolving_does_not_touch_tree(self) -> None:
        doc = parse("[a](/pages/a)")
        before = parse("[a](/pages/a)")
        for target in iter_tap_targets(doc):
            resolve_tap(target)
        assert doc == before
