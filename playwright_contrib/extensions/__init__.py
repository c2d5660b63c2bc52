"""
================================================================================
Query / Inspection Extensions
================================================================================

Module-level coroutines that answer semantic questions about Playwright
handles with one script evaluation each.

Modules:
    - element_handle: attributes, content, classes, state, existence
    - page: page predicates and content-based lookup
    - frame: DOM removal wait
    - response: response URL predicate

Usage:
    from playwright_contrib.extensions import element_handle as eh

    button = await page.query_selector("button")
    assert await eh.is_visible(button)

================================================================================
"""

from . import element_handle, frame, page, response
from .element_handle import exists
from .frame import wait_for_elements_removed_from_dom
from .page import query_selector_all_with_content, query_selector_with_content

__all__ = [
    "element_handle",
    "frame",
    "page",
    "response",
    "exists",
    "query_selector_with_content",
    "query_selector_all_with_content",
    "wait_for_elements_removed_from_dom",
]
