"""ContextVar-based highlighting configuration.

The active configuration is read by every call to
:func:`custom_cpp_lexer.highlighting.highlight`. Set it once per render
context, or scope it with the context manager:

    with highlight_config_context(HighlightConfig(style="monokai")):
        html = highlight(code, "cpp")
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlighting configuration.

    Attributes:
        css_class: Class on the wrapping ``<div>`` and stylesheet scope
        style: Pygments style name used for generated CSS
        wrap_code: Wrap the output in ``<code>`` inside ``<pre>``
        stdlib_highlighting: Tag C/C++ standard library types as types
        tab_size: Width tabs are expanded to before lexing (0 keeps tabs)
    """

    css_class: str = "highlight"
    style: str = "default"
    wrap_code: bool = True
    stdlib_highlighting: bool = True
    tab_size: int = 4

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HighlightConfig":
        """Create HighlightConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> HighlightConfig.from_dict({"style": "monokai", "x": 1}).style
            'monokai'
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def lexer_options(self) -> dict:
        return {
            "stdlibhighlighting": self.stdlib_highlighting,
            "tabsize": self.tab_size,
        }

    def formatter_options(self) -> dict:
        return {
            "cssclass": self.css_class,
            "style": self.style,
            "wrapcode": self.wrap_code,
        }


_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get the current highlighting configuration."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set the highlighting configuration for the current context."""
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Restore the default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[HighlightConfig]:
    """Apply ``config`` for the duration of the ``with`` block."""
    token = _highlight_config.set(config)
    try:
        yield config
    finally:
        _highlight_config.reset(token)
