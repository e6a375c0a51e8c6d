"""Shared fixtures for custom_cpp_lexer tests."""

import pytest

from custom_cpp_lexer.config import reset_highlight_config


@pytest.fixture(autouse=True)
def _default_highlight_config():
    reset_highlight_config()
    yield
    reset_highlight_config()
