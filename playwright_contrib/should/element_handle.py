"""
================================================================================
ElementHandle Should Assertions
================================================================================

Assert-or-raise wrappers around the element extensions.

Each `should_*` coroutine evaluates its predicate once and raises ShouldError
when the element disagrees with the expectation. `because` is an optional
reason appended to the failure message.

Usage:
    button = await page.query_selector("#submit")
    should_exist(button)
    await should_be_enabled(button, because="the form is complete")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from playwright.async_api import ElementHandle

from ..extensions import element_handle as eh
from ._throw import fail, regex_text


# =============================================================================
# Exist (synchronous: no page round-trip)
# =============================================================================

def should_exist(element: Optional[ElementHandle], because: Optional[str] = None) -> ElementHandle:
    """Assert the reference is not None and return it for chaining."""
    if not eh.exists(element):
        fail("Expected element to exist", "but it did not", because)
    return element


def should_not_exist(element: Optional[ElementHandle], because: Optional[str] = None) -> Optional[ElementHandle]:
    if eh.exists(element):
        fail("Expected element not to exist", "but it did", because)
    return element


# =============================================================================
# Value / Attribute / Content / Class
# =============================================================================

async def should_have_value(element: ElementHandle, value: str, because: Optional[str] = None) -> None:
    actual = await eh.get_value(element)
    if actual != value:
        fail(f'Expected element to have value "{value}"', f'but found "{actual}"', because)


async def should_not_have_value(element: ElementHandle, value: str, because: Optional[str] = None) -> None:
    if await eh.get_value(element) == value:
        fail(f'Expected element not to have value "{value}"', None, because)


async def should_have_attribute(element: ElementHandle, name: str, because: Optional[str] = None) -> None:
    if not await eh.has_attribute(element, name):
        fail(f'Expected element to have attribute "{name}"', None, because)


async def should_not_have_attribute(element: ElementHandle, name: str, because: Optional[str] = None) -> None:
    if await eh.has_attribute(element, name):
        fail(f'Expected element not to have attribute "{name}"', None, because)


async def should_have_content(element: ElementHandle, content: str, because: Optional[str] = None) -> None:
    if not await eh.has_content(element, content):
        fail(f'Expected element to have content "{content}"', "but it did not", because)


async def should_not_have_content(element: ElementHandle, content: str, because: Optional[str] = None) -> None:
    if await eh.has_content(element, content):
        fail(f'Expected element not to have content "{content}"', "but it did", because)


async def should_have_content_matching(
    element: ElementHandle,
    regex: str,
    flags: str = "",
    because: Optional[str] = None,
) -> None:
    if not await eh.has_content_matching(element, regex, flags):
        fail(f"Expected element to have content {regex_text(regex, flags)}", "but it did not", because)


async def should_not_have_content_matching(
    element: ElementHandle,
    regex: str,
    flags: str = "",
    because: Optional[str] = None,
) -> None:
    if await eh.has_content_matching(element, regex, flags):
        fail(f"Expected element not to have content {regex_text(regex, flags)}", "but it did", because)


async def should_have_class(element: ElementHandle, class_name: str, because: Optional[str] = None) -> None:
    if not await eh.has_class(element, class_name):
        fail(f'Expected element to have class "{class_name}"', "but it did not", because)


async def should_not_have_class(element: ElementHandle, class_name: str, because: Optional[str] = None) -> None:
    if await eh.has_class(element, class_name):
        fail(f'Expected element not to have class "{class_name}"', "but it did", because)


# =============================================================================
# State
# =============================================================================

async def should_be_visible(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_hidden(element):
        fail("Expected element to be visible", "but it is not", because)


async def should_be_hidden(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_visible(element):
        fail("Expected element to be hidden", "but it is not", because)


async def should_be_selected(element: ElementHandle, because: Optional[str] = None) -> None:
    if not await eh.is_selected(element):
        fail("Expected element to be selected", "but it is not", because)


async def should_not_be_selected(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_selected(element):
        fail("Expected element not to be selected", "but it is", because)


async def should_be_checked(element: ElementHandle, because: Optional[str] = None) -> None:
    if not await eh.is_checked(element):
        fail("Expected element to be checked", "but it is not", because)


async def should_not_be_checked(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_checked(element):
        fail("Expected element not to be checked", "but it is", because)


async def should_be_disabled(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_enabled(element):
        fail("Expected element to be disabled", "but it is not", because)


async def should_be_enabled(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_disabled(element):
        fail("Expected element to be enabled", "but it is not", because)


async def should_be_read_only(element: ElementHandle, because: Optional[str] = None) -> None:
    if not await eh.is_read_only(element):
        fail("Expected element to be read-only", "but it is not", because)


async def should_not_be_read_only(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_read_only(element):
        fail("Expected element not to be read-only", "but it is", because)


async def should_be_required(element: ElementHandle, because: Optional[str] = None) -> None:
    if not await eh.is_required(element):
        fail("Expected element to be required", "but it is not", because)


async def should_not_be_required(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_required(element):
        fail("Expected element not to be required", "but it is", because)


async def should_have_focus(element: ElementHandle, because: Optional[str] = None) -> None:
    if not await eh.has_focus(element):
        fail("Expected element to have focus", "but it did not", because)


async def should_not_have_focus(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.has_focus(element):
        fail("Expected element not to have focus", "but it did", because)


async def should_be_empty(element: ElementHandle, because: Optional[str] = None) -> None:
    if not await eh.is_empty(element):
        fail("Expected element to be empty", "but it is not", because)


async def should_not_be_empty(element: ElementHandle, because: Optional[str] = None) -> None:
    if await eh.is_empty(element):
        fail("Expected element not to be empty", "but it is", because)


__all__ = [
    "should_exist",
    "should_not_exist",
    "should_have_value",
    "should_not_have_value",
    "should_have_attribute",
    "should_not_have_attribute",
    "should_have_content",
    "should_not_have_content",
    "should_have_content_matching",
    "should_not_have_content_matching",
    "should_have_class",
    "should_not_have_class",
    "should_be_visible",
    "should_be_hidden",
    "should_be_selected",
    "should_not_be_selected",
    "should_be_checked",
    "should_not_be_checked",
    "should_be_disabled",
    "should_be_enabled",
    "should_be_read_only",
    "should_not_be_read_only",
    "should_be_required",
    "should_not_be_required",
    "should_have_focus",
    "should_not_have_focus",
    "should_be_empty",
    "should_not_be_empty",
]
