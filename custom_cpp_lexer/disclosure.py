"""Disclosure toggle for rendered pages (runs under PyScript).

Native ``<details>`` toggling can scroll the page to bring the opened body
into view. A single delegated click listener on the document intercepts
clicks on a ``<summary>`` whose parent is a ``<details>``, cancels the
default action and flips the ``open`` attribute itself.

Page usage:
    <script type="py">
    from custom_cpp_lexer.disclosure import install
    install()
    </script>

The functions below only touch the DOM through ``tagName``,
``parentElement`` and the attribute methods, so they accept any object
with that shape.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from custom_cpp_lexer.logger import get_logger

logger = get_logger(__name__)

OPEN_ATTRIBUTE = "open"


def _tag_name(element: Any) -> str:
    # Text nodes and the document itself have no tagName
    return str(getattr(element, "tagName", None) or "").upper()


def is_disclosure_summary(element: Any) -> bool:
    """True if ``element`` is a ``<summary>`` directly inside a ``<details>``."""
    if element is None or _tag_name(element) != "SUMMARY":
        return False
    parent = getattr(element, "parentElement", None)
    return parent is not None and _tag_name(parent) == "DETAILS"


def toggle_open(details: Any) -> bool:
    """Flip the ``open`` attribute of ``details``; returns the new state."""
    if details.hasAttribute(OPEN_ATTRIBUTE):
        details.removeAttribute(OPEN_ATTRIBUTE)
        return False
    details.setAttribute(OPEN_ATTRIBUTE, OPEN_ATTRIBUTE)
    return True


def on_click(event: Any) -> None:
    target = getattr(event, "target", None)
    if not is_disclosure_summary(target):
        return
    event.preventDefault()
    is_open = toggle_open(target.parentElement)
    logger.debug("Disclosure %s", "opened" if is_open else "closed")


def install(
    document: Any = None,
    *,
    proxy: Callable[[Callable[[Any], None]], Any] | None = None,
) -> Any:
    """Attach the delegated click listener.

    Args:
        document: Document or container to listen on (defaults to the page)
        proxy: Wraps the handler for the JavaScript side (defaults to
            ``pyodide.ffi.create_proxy``)

    Returns:
        The listener object, for :func:`uninstall`
    """
    if document is None:
        from pyscript import document
    if proxy is None:
        from pyodide.ffi import create_proxy as proxy

    listener = proxy(on_click)
    document.addEventListener("click", listener)
    return listener


def uninstall(document: Any, listener: Any) -> None:
    document.removeEventListener("click", listener)
