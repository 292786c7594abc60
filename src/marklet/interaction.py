"""Tap resolution for rendering collaborators.

A renderer that draws links and images forwards taps on them here. The
resolvers decide *what* should happen and return a frozen action
descriptor; performing the action (navigating, writing the clipboard,
opening a preview) stays with the caller. Nothing here touches parser state.

Example:
    >>> resolve_link_tap("/pages/about/index")
    Navigate(url='/pages/about/index')
    >>> resolve_link_tap("https://example.com")
    CopyToClipboard(text='https://example.com', message='Link copied')
    >>> resolve_image_tap("https://example.com/cat.png")
    PreviewImage(urls=('https://example.com/cat.png',), current='https://example.com/cat.png')

"""

from collections.abc import Iterator
from dataclasses import dataclass

from marklet.config import TapConfig
from marklet.nodes import Image, Link, Node
from marklet.visitor import BaseVisitor

_DEFAULT_TAP_CONFIG = TapConfig()


@dataclass(frozen=True, slots=True)
class Navigate:
    """Open an in-app route."""

    url: str


@dataclass(frozen=True, slots=True)
class CopyToClipboard:
    """Copy text and show a short notification."""

    text: str
    message: str


@dataclass(frozen=True, slots=True)
class PreviewImage:
    """Open a full-screen preview of one or more images."""

    urls: tuple[str, ...]
    current: str


type TapAction = Navigate | CopyToClipboard | PreviewImage


def resolve_link_tap(href: str, *, config: TapConfig | None = None) -> Navigate | CopyToClipboard | None:
    """Decide what a tap on a link does.

    Args:
        href: The tapped link's ``href``
        config: Tap settings (defaults to ``TapConfig()``)

    Returns:
        ``Navigate`` for hrefs under the internal prefix, ``CopyToClipboard``
        for anything else, None for an empty href.

    """
    if not href:
        return None
    config = config or _DEFAULT_TAP_CONFIG
    if href.startswith(config.internal_prefix):
        return Navigate(url=href)
    return CopyToClipboard(text=href, message=config.copied_message)


def resolve_image_tap(src: str) -> PreviewImage | None:
    """Decide what a tap on an image does: preview it, unless src is empty."""
    if not src:
        return None
    return PreviewImage(urls=(src,), current=src)


def resolve_tap(node: Node, *, config: TapConfig | None = None) -> TapAction | None:
    """Resolve a tap on a Link or Image node by its payload.

    Any other node is not tappable and resolves to None.
    """
    if isinstance(node, Link):
        return resolve_link_tap(node.href, config=config)
    if isinstance(node, Image):
        return resolve_image_tap(node.src)
    return None


class _TapTargetCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.targets: list[Link | Image] = []

    def visit_link(self, node: Link) -> None:
        self.targets.append(node)

    def visit_image(self, node: Image) -> None:
        self.targets.append(node)


def iter_tap_targets(node: Node) -> Iterator[Link | Image]:
    """Yield every Link and Image under node, in document order."""
    collector = _TapTargetCollector()
    collector.visit(node)
    yield from collector.targets


__all__ = [
    "CopyToClipboard",
    "Navigate",
    "PreviewImage",
    "TapAction",
    "iter_tap_targets",
    "resolve_image_tap",
    "resolve_link_tap",
    "resolve_tap",
]
