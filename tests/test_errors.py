"""Tests for exception classes and logging helpers."""

import logging

from custom_cpp_lexer.errors import CustomLexerError, RuleError
from custom_cpp_lexer.logger import get_logger


class TestRuleError:
    def test_message_with_state(self) -> None:
        error = RuleError("no such state", state="statements")
        assert str(error) == "state 'statements': no such state"
        assert error.state == "statements"
        assert error.message == "no such state"

    def test_message_without_state(self) -> None:
        assert str(RuleError("empty vocabulary")) == "empty vocabulary"

    def test_hierarchy(self) -> None:
        assert issubclass(RuleError, CustomLexerError)
        assert issubclass(RuleError, ValueError)


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("rules").name == "custom_cpp_lexer.rules"

    def test_keeps_package_names(self) -> None:
        assert get_logger("custom_cpp_lexer").name == "custom_cpp_lexer"
        assert get_logger("custom_cpp_lexer.lexer").name == "custom_cpp_lexer.lexer"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)
