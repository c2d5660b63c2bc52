"""
================================================================================
ElementHandle Extensions
================================================================================

Semantic queries against a single Playwright ElementHandle.

Every coroutine performs exactly one script evaluation in the element's
execution context and raises MissingHandleError when the element is None.
`exists` is the exception: it inspects the reference only and accepts None.

Usage:
    element = await page.query_selector("#submit")
    if await is_visible(element) and not await is_disabled(element):
        await element.click()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional

from playwright.async_api import ElementHandle

from . import scripts
from ._internal import evaluate_element


# =============================================================================
# Attributes
# =============================================================================

async def get_attribute(element: ElementHandle, name: str) -> Optional[str]:
    """
    Value of the named attribute.

    Args:
        element: Element to inspect
        name: Attribute name

    Returns:
        The attribute value, or None if the element has no such attribute
    """
    return await evaluate_element(element, scripts.GET_ATTRIBUTE, name)


async def has_attribute(element: ElementHandle, name: str) -> bool:
    """True if the element carries the named attribute."""
    return await evaluate_element(element, scripts.HAS_ATTRIBUTE, name)


async def get_id(element: ElementHandle) -> Optional[str]:
    """The `id` attribute."""
    return await get_attribute(element, "id")


async def get_name(element: ElementHandle) -> Optional[str]:
    """The `name` attribute."""
    return await get_attribute(element, "name")


async def get_value(element: ElementHandle) -> Optional[str]:
    """The `value` attribute."""
    return await get_attribute(element, "value")


async def get_href(element: ElementHandle) -> Optional[str]:
    """The `href` attribute."""
    return await get_attribute(element, "href")


async def get_src(element: ElementHandle) -> Optional[str]:
    """The `src` attribute."""
    return await get_attribute(element, "src")


# =============================================================================
# Content
# =============================================================================

async def inner_html(element: ElementHandle) -> str:
    return await evaluate_element(element, scripts.INNER_HTML)


async def outer_html(element: ElementHandle) -> str:
    return await evaluate_element(element, scripts.OUTER_HTML)


async def text_content(element: ElementHandle) -> str:
    return await evaluate_element(element, scripts.TEXT_CONTENT)


async def inner_text(element: ElementHandle) -> str:
    return await evaluate_element(element, scripts.INNER_TEXT)


async def has_content(element: ElementHandle, content: str) -> bool:
    """
    True if the element's textContent contains `content` verbatim.

    Case-sensitive. Regex metacharacters have no special meaning here; use
    `has_content_matching` for pattern tests.
    """
    return await evaluate_element(element, scripts.ELEMENT_HAS_CONTENT, content)


async def has_content_matching(
    element: ElementHandle, regex: str, flags: str = ""
) -> bool:
    """
    Test a JavaScript regular expression against the element's textContent.

    Args:
        element: Element to inspect
        regex: JavaScript RegExp source
        flags: RegExp flags, e.g. "i"
    """
    return await evaluate_element(element, scripts.ELEMENT_MATCHES_CONTENT, [regex, flags])


# =============================================================================
# Classes
# =============================================================================

async def class_name(element: ElementHandle) -> str:
    """The raw `className` string."""
    return await evaluate_element(element, scripts.CLASS_NAME)


async def class_list(element: ElementHandle) -> List[str]:
    """Class tokens in attribute order."""
    return await evaluate_element(element, scripts.CLASS_LIST)


async def has_class(element: ElementHandle, class_name: str) -> bool:
    return await evaluate_element(element, scripts.HAS_CLASS, class_name)


# =============================================================================
# State
# =============================================================================

async def is_visible(element: ElementHandle) -> bool:
    """
    True unless the element is effectively hidden.

    An element is hidden when it has no layout box: zero width and height
    and no client rects, as with `display: none` on it or an ancestor.
    """
    return await evaluate_element(element, scripts.IS_VISIBLE)


async def is_hidden(element: ElementHandle) -> bool:
    """Exact negation of `is_visible`."""
    return not await is_visible(element)


async def is_selected(element: ElementHandle) -> bool:
    """True for a selected <option>."""
    return await evaluate_element(element, scripts.IS_SELECTED)


async def is_checked(element: ElementHandle) -> bool:
    return await evaluate_element(element, scripts.IS_CHECKED)


async def is_disabled(element: ElementHandle) -> bool:
    return await evaluate_element(element, scripts.IS_DISABLED)


async def is_enabled(element: ElementHandle) -> bool:
    """Exact negation of `is_disabled`."""
    return not await is_disabled(element)


async def is_read_only(element: ElementHandle) -> bool:
    return await evaluate_element(element, scripts.IS_READ_ONLY)


async def is_required(element: ElementHandle) -> bool:
    return await evaluate_element(element, scripts.IS_REQUIRED)


async def has_focus(element: ElementHandle) -> bool:
    """True if the element is the active element of its document."""
    return await evaluate_element(element, scripts.HAS_FOCUS)


async def is_empty(element: ElementHandle) -> bool:
    """True if the element has no child nodes, text included."""
    return await evaluate_element(element, scripts.IS_EMPTY)


# =============================================================================
# Existence
# =============================================================================

def exists(element: Optional[ElementHandle]) -> bool:
    """True if the reference is not None. Never touches the page."""
    return element is not None


__all__ = [
    "get_attribute",
    "has_attribute",
    "get_id",
    "get_name",
    "get_value",
    "get_href",
    "get_src",
    "inner_html",
    "outer_html",
    "text_content",
    "inner_text",
    "has_content",
    "has_content_matching",
    "class_name",
    "class_list",
    "has_class",
    "is_visible",
    "is_hidden",
    "is_selected",
    "is_checked",
    "is_disabled",
    "is_enabled",
    "is_read_only",
    "is_required",
    "has_focus",
    "is_empty",
    "exists",
]
