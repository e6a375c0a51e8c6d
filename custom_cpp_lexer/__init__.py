"""
Syntax highlighting for the engine's C++ code blocks.

Provides a Pygments C++ lexer that recognizes the engine's types and
functions, named highlighter tags for the site renderer, and a PyScript
disclosure toggle for the rendered pages.
"""

from custom_cpp_lexer.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from custom_cpp_lexer.errors import CustomLexerError, RuleError
from custom_cpp_lexer.highlighting import (
    Highlighter,
    PygmentsHighlighter,
    get_lexer,
    highlight,
    register_lexer,
    registered_tags,
    stylesheet,
    supports_language,
    tokenize,
    unregister_lexer,
)
from custom_cpp_lexer.lexer import CppCustomLexer, make_lexer
from custom_cpp_lexer.rules import (
    DEFAULT_RULES,
    ClassificationRule,
    classify,
    prepend_rules,
    resolve_states,
    rule,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RULES",
    "ClassificationRule",
    "CppCustomLexer",
    "CustomLexerError",
    "HighlightConfig",
    "Highlighter",
    "PygmentsHighlighter",
    "RuleError",
    "classify",
    "get_highlight_config",
    "get_lexer",
    "highlight",
    "highlight_config_context",
    "make_lexer",
    "prepend_rules",
    "register_lexer",
    "registered_tags",
    "reset_highlight_config",
    "resolve_states",
    "rule",
    "set_highlight_config",
    "stylesheet",
    "supports_language",
    "tokenize",
    "unregister_lexer",
]
