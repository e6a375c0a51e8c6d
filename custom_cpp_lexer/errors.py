"""Exception classes for custom_cpp_lexer.

Highlighting itself never raises for source text; these errors only
surface while rule tables are being built.
"""

from __future__ import annotations


class CustomLexerError(Exception):
    """Base exception for all custom_cpp_lexer errors."""

    pass


class RuleError(CustomLexerError, ValueError):
    """Invalid classification rule or rule table.

    Raised for empty vocabularies, identifiers that could match zero-width
    input, and scanning states the base lexer does not define.
    """

    def __init__(self, message: str, state: str | None = None) -> None:
        self.message = message
        self.state = state
        prefix = f"state {state!r}: " if state else ""
        super().__init__(f"{prefix}{message}")
