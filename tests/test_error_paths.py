"""Degraded-input tests.

Malformed Markdown never raises: unterminated constructs stop or absorb
input, unpaired delimiters become text. Degraded cases are logged at DEBUG.
"""

import logging

import pytest

from marklet import parse, parse_inline
from marklet.errors import ConfigError, MarkletError, SerializationError
from marklet.nodes import BlockQuote, FencedCode, List, Paragraph, Text


class TestUnterminatedBlocks:
    """Blocks cut off by the end of input."""

    def test_fence_at_end_of_input(self) -> None:
        (block,) = parse("```").children
        assert isinstance(block, FencedCode)
        assert block.content == ""

    def test_fence_absorbs_following_blocks(self) -> None:
        (block,) = parse("```\n# h\n- l\n> q").children
        assert isinstance(block, FencedCode)
        assert block.content == "# h\n- l\n> q"

    def test_quote_at_end_of_input(self) -> None:
        (block,) = parse("> a\n").children
        assert isinstance(block, BlockQuote)

    def test_quote_trailing_blank_is_not_kept(self) -> None:
        (block,) = parse("> a\n\n").children
        assert block.children[0].content == "a"

    def test_list_trailing_blank(self) -> None:
        (block,) = parse("- a\n\n").children
        assert isinstance(block, List)
        assert len(block.items) == 1


class TestUnpairedInline:
    """Unpaired delimiters fall back to text."""

    @pytest.mark.parametrize("source", ["*", "**", "_a", "`", "~~x", "[x]", "[x](", "![x]", "!["])
    def test_single_text_paragraph(self, source: str) -> None:
        (block,) = parse(source).children
        assert isinstance(block, Paragraph)
        assert len(block.children) == 1
        assert isinstance(block.children[0], Text)
        assert block.children[0].content == source

    def test_long_run_of_specials(self) -> None:
        text = "*_~![" * 500
        nodes = parse_inline(text)
        assert "".join(node.content for node in nodes if isinstance(node, Text)) == text


class TestLogging:
    """Degraded input is logged, never raised."""

    def test_unterminated_fence_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="marklet"):
            parse("intro\n```py\nx = 1")
        assert "Unterminated code fence at line 2" in caplog.text

    def test_closed_fence_is_not_reported(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="marklet"):
            parse("```\nx\n```")
        assert "Unterminated" not in caplog.text

    def test_parse_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="marklet.parser"):
            parse("# a\nb")
        assert "Parsed 2 line(s) into 2 block(s)" in caplog.text

    def test_loggers_are_namespaced(self) -> None:
        from marklet.utils.logger import get_logger

        assert get_logger("custom").name == "marklet.custom"
        assert get_logger("marklet.parser").name == "marklet.parser"


class TestErrorHierarchy:
    """Errors raised outside parsing."""

    def test_subclasses(self) -> None:
        assert issubclass(SerializationError, MarkletError)
        assert issubclass(ConfigError, MarkletError)
        assert issubclass(SerializationError, ValueError)
        assert issubclass(ConfigError, ValueError)

    def test_config_error_message(self) -> None:
        err = ConfigError("internal_prefix", "must be a non-empty string")
        assert str(err) == "Config option 'internal_prefix': must be a non-empty string"
