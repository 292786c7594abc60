"""Typed AST: collect headings for a table of contents, then resolve link taps."""

from marklet import extract_text, iter_tap_targets, parse, resolve_tap
from marklet.nodes import Heading
from marklet.visitor import BaseVisitor


class TocCollector(BaseVisitor[None]):
    """Collect headings for a table of contents."""

    def __init__(self) -> None:
        self.headings: list[tuple[int, str]] = []

    def visit_heading(self, node: Heading) -> None:
        self.headings.append((node.level, extract_text(node)))


source = """# Introduction

Welcome to the [guide](/pages/guide/index).

## Getting Started

First steps, see [the site](https://example.com).

### Installation

![diagram](https://example.com/install.png)
"""

doc = parse(source)
collector = TocCollector()
collector.visit(doc)

print("Table of Contents:")
for level, text in collector.headings:
    indent = "  " * (level - 1)
    print(f"{indent}{'#' * level} {text}")

print()
print("Tap actions:")
for target in iter_tap_targets(doc):
    print(f"  {type(target).__name__}: {resolve_tap(target)}")
