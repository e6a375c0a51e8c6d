"""Named highlighter tags for a site-rendering pipeline.

A tag is the language identifier written on a fenced code block
(``cpp``, ``c++``, ...). Tags registered here take precedence over the
lexers Pygments ships, which is how the ``cpp`` tag is served by
:class:`~custom_cpp_lexer.lexer.CppCustomLexer`. Unknown tags degrade to
plain text; highlighting is cosmetic and never fails a render.

Usage:
    from custom_cpp_lexer.highlighting import highlight, register_lexer

    html = highlight("U32 count = 0;", "cpp")

    register_lexer("engine", MyEngineLexer)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from custom_cpp_lexer.config import get_highlight_config
from custom_cpp_lexer.lexer import CppCustomLexer
from custom_cpp_lexer.logger import get_logger

if TYPE_CHECKING:
    from pygments.token import _TokenType

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters consumed by the site renderer."""

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code with syntax colors.

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language. MUST NOT raise."""
        ...


_lexers: dict[str, type[Lexer]] = {}


def _normalize(tag: str) -> str:
    return tag.strip().lower()


def register_lexer(tag: str, lexer_cls: type[Lexer], *, replace: bool = True) -> None:
    """Serve ``tag`` with ``lexer_cls``.

    Args:
        tag: Language identifier as written on code blocks
        lexer_cls: Pygments lexer class
        replace: Overwrite an existing registration for ``tag``

    Raises:
        ValueError: If ``tag`` is blank, or already registered and
            ``replace`` is false.
    """
    key = _normalize(tag)
    if not key:
        raise ValueError("highlighter tag must not be blank")
    if key in _lexers and not replace:
        raise ValueError(f"highlighter tag already registered: {tag!r}")
    logger.debug("Registering tag %r -> %s", key, lexer_cls.__name__)
    _lexers[key] = lexer_cls


def unregister_lexer(tag: str) -> type[Lexer] | None:
    """Drop the registration for ``tag``; returns the removed lexer class."""
    return _lexers.pop(_normalize(tag), None)


def registered_tags() -> list[str]:
    return sorted(_lexers)


def get_lexer(language: str, **options) -> Lexer:
    """Return a lexer instance for ``language``.

    Registered tags are tried first, then the lexers known to Pygments
    (including plugins). Anything else gets a plain text lexer.
    """
    config_options = get_highlight_config().lexer_options()
    config_options.update(options)

    key = _normalize(language or "")
    lexer_cls = _lexers.get(key)
    if lexer_cls is not None:
        return lexer_cls(**config_options)
    if key:
        try:
            return get_lexer_by_name(key, **config_options)
        except ClassNotFound:
            logger.debug("No lexer for %r, falling back to plain text", language)
    return TextLexer(**config_options)


def supports_language(language: str) -> bool:
    key = _normalize(language or "")
    if not key:
        return False
    if key in _lexers:
        return True
    try:
        get_lexer_by_name(key)
    except ClassNotFound:
        return False
    return True


def _html_formatter(style: str, **options) -> HtmlFormatter:
    try:
        return HtmlFormatter(style=style, **options)
    except ClassNotFound:
        logger.debug("Unknown style %r, using the default style", style)
        return HtmlFormatter(style="default", **options)


def tokenize(code: str, language: str) -> list[tuple[_TokenType, str]]:
    """Classify ``code`` into ``(token type, text)`` pairs."""
    return list(get_lexer(language).get_tokens(code))


def highlight(
    code: str,
    language: str,
    *,
    hl_lines: list[int] | None = None,
    show_linenos: bool = False,
) -> str:
    """Highlight code as HTML using the active configuration.

    Args:
        code: Source code to highlight
        language: Language tag
        hl_lines: 1-indexed line numbers to emphasize (optional)
        show_linenos: Include line numbers in output

    Returns:
        HTML markup with CSS classes
    """
    options = get_highlight_config().formatter_options()
    formatter = _html_formatter(
        options.pop("style"),
        hl_lines=hl_lines or [],
        linenos="table" if show_linenos else False,
        **options,
    )
    return pygments_highlight(code, get_lexer(language), formatter)


def stylesheet(style: str | None = None) -> str:
    """CSS rules for the highlighted markup, scoped to the configured class."""
    config = get_highlight_config()
    formatter = _html_formatter(style or config.style, cssclass=config.css_class)
    return formatter.get_style_defs(f".{config.css_class}")


class PygmentsHighlighter:
    """Pygments-based highlighter implementing the Highlighter protocol."""

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        return highlight(code, language, hl_lines=hl_lines, show_linenos=show_linenos)

    def supports_language(self, language: str) -> bool:
        return supports_language(language)


for _tag in ("cpp", "c++", *CppCustomLexer.aliases):
    register_lexer(_tag, CppCustomLexer)
