"""
================================================================================
Page Object Factory
================================================================================

Create page and element objects from Playwright pages and element handles.

Usage:
    home = await goto(page, "https://github.com", HomePage)
    repo = await wait_for_navigation(page, RepoPage, lambda: page.click("a.repo"))
    menu = await wait_for_selector(page, "nav", MenuObject, state="visible")
    items = await query_selector_all(await menu.element, "li", ItemObject)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import warnings
from typing import Any, Awaitable, Callable, List, Optional, Type, TypeVar, Union

import allure
from loguru import logger
from playwright.async_api import ElementHandle, Frame, Page

from ..extensions._internal import guard_from_null
from .objects import ElementObject, PageObject

P = TypeVar("P", bound=PageObject)
E = TypeVar("E", bound=ElementObject)

QueryOwner = Union[Page, Frame, ElementHandle]


async def page_of(owner: QueryOwner) -> Optional[Page]:
    """The Page an element or frame belongs to, or the page itself."""
    if isinstance(owner, Frame):
        return owner.page
    if hasattr(owner, "owner_frame"):
        frame = await owner.owner_frame()
        return frame.page if frame is not None else None
    return owner


async def goto(page: Page, url: str, page_object_type: Type[P], **options: Any) -> P:
    """
    Navigate and wrap the page.

    Args:
        page: Playwright Page
        url: Target URL
        page_object_type: PageObject subclass to create
        **options: Forwarded to page.goto (timeout, wait_until, referer)

    Returns:
        page_object_type(page, response)
    """
    guard_from_null(page, "page")
    with allure.step(f"Navigate to {url}"):
        response = await page.goto(url, **options)
    logger.info(f"Navigated to {url} -> {page_object_type.__name__}")
    return page_object_type(page, response)


async def reload(page: Page, page_object_type: Type[P], **options: Any) -> P:
    """Reload the page and wrap it with the reload response."""
    guard_from_null(page, "page")
    with allure.step(f"Reload {page.url}"):
        response = await page.reload(**options)
    logger.info(f"Reloaded {page.url} -> {page_object_type.__name__}")
    return page_object_type(page, response)


async def wait_for_navigation(
    page: Page,
    page_object_type: Type[P],
    action: Optional[Callable[[], Awaitable[Any]]] = None,
    **options: Any,
) -> P:
    """
    Wait for the next navigation and wrap the page with its response.

    `action` is awaited inside the wait so the navigation it triggers, such
    as a link click or form submit, cannot be missed. Without an action the
    wait covers a navigation started elsewhere.

    Args:
        page: Playwright Page
        page_object_type: PageObject subclass to create
        action: Zero-argument coroutine function that triggers the navigation
        **options: Forwarded to page.expect_navigation (url, wait_until, timeout)

    Returns:
        page_object_type(page, response)
    """
    guard_from_null(page, "page")
    with allure.step(f"Wait for navigation -> {page_object_type.__name__}"):
        async with page.expect_navigation(**options) as navigation:
            if action is not None:
                await action()
        response = await navigation.value
    logger.info(f"Navigated to {page.url} -> {page_object_type.__name__}")
    return page_object_type(page, response)


async def query_selector(owner: QueryOwner, selector: str, element_object_type: Type[E]) -> Optional[E]:
    """First match of `selector` wrapped as `element_object_type`, or None."""
    guard_from_null(owner, "owner")
    handle = await owner.query_selector(selector)
    if handle is None:
        return None
    return element_object_type(await page_of(owner), handle)


async def query_selector_all(owner: QueryOwner, selector: str, element_object_type: Type[E]) -> List[E]:
    """All matches of `selector` in document order, each wrapped."""
    guard_from_null(owner, "owner")
    handles = await owner.query_selector_all(selector)
    if not handles:
        return []
    page = await page_of(owner)
    return [element_object_type(page, handle) for handle in handles]


async def query_xpath(owner: QueryOwner, expression: str, element_object_type: Type[E]) -> List[E]:
    """
    All matches of an XPath expression, each wrapped.

    Deprecated: use query_selector_all with an "xpath=" selector.
    """
    warnings.warn(
        "query_xpath is deprecated, use query_selector_all with an 'xpath=' selector",
        DeprecationWarning,
        stacklevel=2,
    )
    return await query_selector_all(owner, f"xpath={expression}", element_object_type)


async def wait_for_selector(
    owner: QueryOwner,
    selector: str,
    element_object_type: Type[E],
    **options: Any,
) -> Optional[E]:
    """
    Wait for `selector` and wrap the element.

    Returns None when waiting for a hidden or detached state completes
    without an element. Timeouts raise playwright's TimeoutError.
    """
    guard_from_null(owner, "owner")
    handle = await owner.wait_for_selector(selector, **options)
    if handle is None:
        return None
    return element_object_type(await page_of(owner), handle)


__all__ = [
    "goto",
    "reload",
    "wait_for_navigation",
    "page_of",
    "query_selector",
    "query_selector_all",
    "query_xpath",
    "wait_for_selector",
]
