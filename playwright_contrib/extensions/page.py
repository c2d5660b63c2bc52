"""
================================================================================
Page Extensions
================================================================================

Page-level predicates and content-based element lookup.

Regular expressions are JavaScript RegExp sources evaluated in the browser,
with optional RegExp flags ("i", "m", ...).

Usage:
    if await has_title(page, "^GitHub"):
        link = await query_selector_with_content(page, "a", "Pull requests")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger
from playwright.async_api import ElementHandle, Page

from . import scripts
from ._internal import evaluate_page, guard_from_null


async def has_content(page: Page, regex: str, flags: str = "") -> bool:
    """Test `regex` against `document.documentElement.textContent`."""
    return await evaluate_page(page, scripts.PAGE_HAS_CONTENT, [regex, flags])


async def has_title(page: Page, regex: str, flags: str = "") -> bool:
    """Test `regex` against `document.title`."""
    return await evaluate_page(page, scripts.PAGE_HAS_TITLE, [regex, flags])


async def has_url(page: Page, regex: str, flags: str = "") -> bool:
    """Test `regex` against `document.location.href`."""
    return await evaluate_page(page, scripts.PAGE_HAS_URL, [regex, flags])


async def query_selector_with_content(
    page: Page,
    selector: str,
    regex: str,
    flags: str = "",
) -> Optional[ElementHandle]:
    """
    First element matching `selector` whose textContent matches `regex`.

    Runs `document.querySelectorAll` within the page and tests a RegExp
    against each element's textContent.

    Args:
        page: Page to query
        selector: CSS selector
        regex: JavaScript RegExp source tested against textContent
        flags: RegExp flags

    Returns:
        The first match, or None if no element matches
    """
    guard_from_null(page, "page")
    handle = await page.evaluate_handle(
        scripts.QUERY_SELECTOR_WITH_CONTENT, [selector, regex, flags]
    )
    element = handle.as_element()
    if element is None:
        await handle.dispose()
    logger.debug(f"query_selector_with_content({selector!r}, /{regex}/{flags}) -> {element is not None}")
    return element


async def query_selector_all_with_content(
    page: Page,
    selector: str,
    regex: str,
    flags: str = "",
) -> List[ElementHandle]:
    """
    All elements matching `selector` whose textContent matches `regex`.

    Returns:
        Matches in document order; an empty list when nothing matches
    """
    guard_from_null(page, "page")
    array_handle = await page.evaluate_handle(
        scripts.QUERY_SELECTOR_ALL_WITH_CONTENT, [selector, regex, flags]
    )
    properties = await array_handle.get_properties()
    await array_handle.dispose()

    indexes = sorted(int(key) for key in properties if key.isdigit())
    elements = [properties[str(i)].as_element() for i in indexes]
    elements = [element for element in elements if element is not None]
    logger.debug(f"query_selector_all_with_content({selector!r}, /{regex}/{flags}) -> {len(elements)}")
    return elements


__all__ = [
    "has_content",
    "has_title",
    "has_url",
    "query_selector_with_content",
    "query_selector_all_with_content",
]
