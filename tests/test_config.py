"""Tests for ContextVar-based configuration."""

import pytest

from marklet import Markdown, parse, parse_inline
from marklet.config import (
    ParseConfig,
    TapConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from marklet.errors import ConfigError
from marklet.nodes import Emphasis, Text
from marklet.parser import Parser


class TestParseConfig:
    """ParseConfig construction."""

    def test_defaults(self) -> None:
        assert ParseConfig().text_transformer is None

    def test_is_frozen(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.text_transformer = str.upper  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"text_transformer": str.strip, "theme": "dark"})
        assert config.text_transformer is str.strip

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()

    def test_non_callable_transformer_rejected(self) -> None:
        with pytest.raises(ConfigError, match="text_transformer"):
            ParseConfig(text_transformer="upper")  # type: ignore[arg-type]


class TestTapConfig:
    """TapConfig validation."""

    def test_defaults(self) -> None:
        config = TapConfig()
        assert config.internal_prefix == "/pages/"
        assert config.copied_message == "Link copied"

    def test_empty_prefix_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            TapConfig(internal_prefix="")
        assert exc_info.value.option == "internal_prefix"

    def test_message_must_be_string(self) -> None:
        with pytest.raises(ValueError):
            TapConfig(copied_message=None)  # type: ignore[arg-type]


class TestContextVar:
    """Per-context configuration."""

    def test_context_manager_restores_previous(self) -> None:
        custom = ParseConfig(text_transformer=str.upper)
        before = get_parse_config()
        with parse_config_context(custom):
            assert get_parse_config() is custom
        assert get_parse_config() is before

    def test_context_manager_restores_on_error(self) -> None:
        before = get_parse_config()
        with pytest.raises(RuntimeError), parse_config_context(ParseConfig(text_transformer=str.upper)):
            raise RuntimeError("boom")
        assert get_parse_config() is before

    def test_set_and_reset(self) -> None:
        custom = ParseConfig(text_transformer=str.lower)
        set_parse_config(custom)
        try:
            assert get_parse_config() is custom
        finally:
            reset_parse_config()
        assert get_parse_config().text_transformer is None

    def test_parser_reads_context(self) -> None:
        with parse_config_context(ParseConfig(text_transformer=str.upper)):
            blocks = Parser("hello").parse()
        assert blocks[0].children[0].content == "HELLO"

    def test_parse_does_not_leak_config(self) -> None:
        parse("x", config=ParseConfig(text_transformer=str.upper))
        assert get_parse_config().text_transformer is None


class TestTextTransformer:
    """text_transformer applies to merged Text nodes only."""

    def test_applies_to_text_not_markup(self) -> None:
        doc = parse("hello *x* there", config=ParseConfig(text_transformer=str.upper))
        children = doc.children[0].children
        assert [type(node) for node in children] == [Text, Emphasis, Text]
        assert children[0].content == "HELLO "
        assert children[1].content == "x"
        assert children[2].content == " THERE"

    def test_runs_once_per_merged_run(self) -> None:
        calls: list[str] = []

        def record(text: str) -> str:
            calls.append(text)
            return text

        parse_inline("a * b ~ c", config=ParseConfig(text_transformer=record))
        assert calls == ["a * b ~ c"]

    def test_markdown_instance_config(self) -> None:
        md = Markdown(config=ParseConfig(text_transformer=lambda s: s.replace("a", "4")))
        assert md("banana") == [{"type": "paragraph", "children": [{"type": "text", "content": "b4n4n4"}]}]
        assert md.config.text_transformer is not None
