"""Tests for ContextVar-based highlighting configuration."""

import pytest

from custom_cpp_lexer.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)


class TestHighlightConfigDataclass:
    def test_default_values(self) -> None:
        config = HighlightConfig()
        assert config.css_class == "highlight"
        assert config.style == "default"
        assert config.wrap_code is True
        assert config.stdlib_highlighting is True
        assert config.tab_size == 4

    def test_immutability(self) -> None:
        config = HighlightConfig()
        with pytest.raises(AttributeError):
            config.style = "monokai"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = HighlightConfig.from_dict({"style": "monokai", "unknown_key": 1})
        assert config.style == "monokai"
        assert config.css_class == "highlight"

    def test_option_mappings(self) -> None:
        config = HighlightConfig(css_class="code", tab_size=8, wrap_code=False)
        assert config.lexer_options() == {"stdlibhighlighting": True, "tabsize": 8}
        assert config.formatter_options() == {
            "cssclass": "code",
            "style": "default",
            "wrapcode": False,
        }


class TestContextVarFunctions:
    def test_set_and_reset(self) -> None:
        set_highlight_config(HighlightConfig(style="monokai"))
        assert get_highlight_config().style == "monokai"
        reset_highlight_config()
        assert get_highlight_config() == HighlightConfig()

    def test_context_manager_restores(self) -> None:
        outer = HighlightConfig(css_class="outer")
        set_highlight_config(outer)
        with highlight_config_context(HighlightConfig(css_class="inner")) as inner:
            assert get_highlight_config() is inner
        assert get_highlight_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with highlight_config_context(HighlightConfig(css_class="inner")):
                raise RuntimeError("boom")
        assert get_highlight_config().css_class == "highlight"
