"""Minimal logging utilities for custom_cpp_lexer.

Example:
    >>> from custom_cpp_lexer.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Resolved lexer")
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "custom_cpp_lexer"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger under the "custom_cpp_lexer." prefix.

    Example:
        >>> get_logger("highlighting").name
        'custom_cpp_lexer.highlighting'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
