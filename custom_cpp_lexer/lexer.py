"""
Pygments lexer for C++ with the engine's type and function vocabulary.

This lexer is used by the site's highlighting tags for the ``cpp`` code blocks.
"""

from __future__ import annotations

from collections.abc import Sequence

from pygments.lexer import RegexLexer
from pygments.lexers.c_cpp import CppLexer

from custom_cpp_lexer.rules import (
    DEFAULT_RULES,
    DEFAULT_STATES,
    ClassificationRule,
    prepend_rules,
)


class CppCustomLexer(CppLexer):
    """Pygments C++ lexer with the engine vocabulary tried first."""

    name = "C++ (custom)"
    aliases = ["cpp-custom", "cppcustom"]
    # Lookups by file name or mimetype stay with the stock C++ lexer
    filenames: list[str] = []
    mimetypes: list[str] = []

    tokens = prepend_rules(CppLexer, DEFAULT_RULES)


def make_lexer(
    rules: Sequence[ClassificationRule],
    base: type[RegexLexer] = CppLexer,
    *,
    name: str | None = None,
    aliases: Sequence[str] = (),
    states: Sequence[str] = DEFAULT_STATES,
) -> type[RegexLexer]:
    """Create a lexer class that tries ``rules`` before the rules of ``base``.

    Args:
        rules: Classification rules in priority order
        base: Lexer whose states are extended
        name: Human readable lexer name
        aliases: Short names for lookup
        states: Scanning states that receive the rules

    Returns:
        A new subclass of ``base``
    """
    attrs = {
        "__module__": __name__,
        "__doc__": f"{base.__name__} with {len(rules)} custom classification rules.",
        "name": name or f"{base.name} (custom)",
        "aliases": list(aliases),
        "filenames": [],
        "mimetypes": [],
        "tokens": prepend_rules(base, rules, states),
    }
    return type(base)(f"Custom{base.__name__}", (base,), attrs)
