"""
================================================================================
Page Should Assertions
================================================================================

Assert-or-raise wrappers around the page extensions. Regular expressions are
JavaScript RegExp sources with optional flags.

Usage:
    await should_have_title(page, "^GitHub", because="we navigated there")

================================================================================
"""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Page

from ..extensions import page as pe
from ..extensions._internal import guard_from_null
from ._throw import fail, regex_text


async def should_have_content(page: Page, regex: str, flags: str = "", because: Optional[str] = None) -> None:
    if not await pe.has_content(page, regex, flags):
        fail(f"Expected page to have content {regex_text(regex, flags)}", "but it did not", because)


async def should_not_have_content(page: Page, regex: str, flags: str = "", because: Optional[str] = None) -> None:
    if await pe.has_content(page, regex, flags):
        fail(f"Expected page not to have content {regex_text(regex, flags)}", None, because)


async def should_have_title(page: Page, regex: str, flags: str = "", because: Optional[str] = None) -> None:
    if not await pe.has_title(page, regex, flags):
        actual = await guard_from_null(page, "page").title()
        fail(f"Expected page to have title {regex_text(regex, flags)}", f'but found "{actual}"', because)


async def should_not_have_title(page: Page, regex: str, flags: str = "", because: Optional[str] = None) -> None:
    if await pe.has_title(page, regex, flags):
        fail(f"Expected page not to have title {regex_text(regex, flags)}", None, because)


async def should_have_url(page: Page, regex: str, flags: str = "", because: Optional[str] = None) -> None:
    if not await pe.has_url(page, regex, flags):
        actual = guard_from_null(page, "page").url
        fail(f"Expected page to have URL {regex_text(regex, flags)}", f'but found "{actual}"', because)


async def should_not_have_url(page: Page, regex: str, flags: str = "", because: Optional[str] = None) -> None:
    if await pe.has_url(page, regex, flags):
        fail(f"Expected page not to have URL {regex_text(regex, flags)}", None, because)


__all__ = [
    "should_have_content",
    "should_not_have_content",
    "should_have_title",
    "should_not_have_title",
    "should_have_url",
    "should_not_have_url",
]
