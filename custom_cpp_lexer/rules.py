"""
Classification rules prepended to a Pygments lexer's scanning states.

A rule maps a fixed vocabulary of identifiers to a token type. Rule tables
are plain ordered lists: the custom rules come first, in declaration order,
followed by the base lexer's own rules for the same state. Nothing here
relies on Pygments' ``inherit`` marker, and the base lexer's token lists are
never modified.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pygments.lexer import RegexLexer, inherit, words
from pygments.token import Keyword, Name

from custom_cpp_lexer.errors import RuleError

if TYPE_CHECKING:
    from pygments.token import _TokenType

DEFAULT_STATES = ("root", "statements")

_IDENTIFIER = re.compile(r"\w+")


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """A vocabulary of literal identifiers tagged with one token type.

    Attributes:
        vocabulary: Identifiers matched as whole words
        category: Pygments token type assigned to every match
    """

    vocabulary: tuple[str, ...]
    category: _TokenType

    def __post_init__(self) -> None:
        if not self.vocabulary:
            raise RuleError(f"empty vocabulary for {self.category}")
        for identifier in self.vocabulary:
            if not _IDENTIFIER.fullmatch(identifier):
                raise RuleError(f"not a word identifier: {identifier!r}")

    @property
    def pattern(self) -> words:
        return words(self.vocabulary, prefix=r"\b", suffix=r"\b")

    @property
    def regex(self) -> str:
        """The compiled-ready regular expression text of this rule."""
        return self.pattern.get()

    def as_token_rule(self) -> tuple[words, _TokenType]:
        return (self.pattern, self.category)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.vocabulary


def rule(category: _TokenType, *identifiers: str) -> ClassificationRule:
    """Shorthand for ``ClassificationRule(identifiers, category)``."""
    return ClassificationRule(tuple(identifiers), category)


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    # Sized integers
    rule(Keyword.Type, "S8", "S16", "S32", "S64"),
    rule(Keyword.Type, "U8", "U16", "U32", "U64"),
    # Floating point and vector types
    rule(Keyword.Type, "Float", "Double"),
    rule(Keyword.Type, "float2", "float3", "float4"),
    rule(Keyword.Type, "vec2", "vec3", "vec4"),
    # Engine types
    rule(Name.Class, "Flags", "Flag", "Span", "T", "Node", "Type", "Chunk"),
    rule(
        Name.Class,
        "MemoryArenaFlag",
        "MemoryArena",
        "FixedMemoryArena",
        "VirtualMemoryArena",
        "ScopedMemoryArena",
        "MemoryArenaVector",
        "MemoryArenaDeque",
        "MemoryArenaPool",
    ),
    rule(
        Name.Class,
        "Handle",
        "TResourceHandle",
        "ResourceHandle32",
        "ResourceHandle64",
        "ResourceHandleManager",
        "HandleContainer",
        "ResourceContainer",
        "Foo",
        "FooHandle",
    ),
    # Engine functions
    rule(
        Name.Function,
        "init",
        "allocate",
        "beg",
        "end",
        "ptr",
        "rewind",
        "reset",
        "free",
        "growable",
    ),
    rule(
        Name.Function,
        "printf",
        "push_back",
        "pop_back",
        "push_front",
        "pop_front",
        "clear",
    ),
    rule(Name.Function, "createResource", "getResource", "destroyResource"),
    # Assertion macros
    rule(Keyword.Type, "K_ASSERT", "K_ASSERT_CONDITION"),
)


def classify(identifier: str, rules: Iterable[ClassificationRule]) -> _TokenType | None:
    """Return the category of the first rule whose vocabulary holds ``identifier``."""
    for candidate in rules:
        if identifier in candidate:
            return candidate.category
    return None


def resolve_states(lexer_cls: type[RegexLexer]) -> dict[str, list]:
    """Flatten the token states of ``lexer_cls`` along its MRO.

    ``inherit`` markers are replaced by the parent's rules for the same
    state. Returns fresh lists; the classes' own tables are left untouched.
    """
    states: dict[str, list] = {}
    for klass in reversed(lexer_cls.__mro__):
        for state, items in klass.__dict__.get("tokens", {}).items():
            parent_items = states.get(state, [])
            merged: list = []
            for item in items:
                if item is inherit:
                    merged.extend(parent_items)
                else:
                    merged.append(item)
            states[state] = merged
    return states


def prepend_rules(
    lexer_cls: type[RegexLexer],
    rules: Sequence[ClassificationRule],
    states: Sequence[str] = DEFAULT_STATES,
) -> dict[str, list]:
    """Build a complete token table with ``rules`` ahead of the base rules.

    Every state of ``lexer_cls`` is present in the result. The states named
    in ``states`` start with the custom rules in declaration order; the
    first rule matching at a scan position wins.

    Raises:
        RuleError: If a named state is not defined by ``lexer_cls``.
    """
    table = resolve_states(lexer_cls)
    custom = [candidate.as_token_rule() for candidate in rules]
    for state in states:
        if state not in table:
            raise RuleError(f"{lexer_cls.__name__} has no such state", state=state)
        table[state] = [*custom, *table[state]]
    return table
