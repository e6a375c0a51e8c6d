"""Tests for the public package surface."""

import custom_cpp_lexer


def test_all_exports_resolve() -> None:
    for name in custom_cpp_lexer.__all__:
        assert hasattr(custom_cpp_lexer, name), name


def test_version() -> None:
    assert custom_cpp_lexer.__version__ == "0.1.0"


def test_private_pygments_names_not_bound_at_runtime() -> None:
    from custom_cpp_lexer import highlighting, rules

    assert not hasattr(rules, "_TokenType")
    assert not hasattr(highlighting, "_TokenType")
