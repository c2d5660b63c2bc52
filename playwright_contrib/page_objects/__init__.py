"""
================================================================================
Page Objects
================================================================================

Declarative page objects with lazily resolved members.

Modules:
    - objects: PageObject / ElementObject base classes
    - declarations: @selector / @xpath member declarations
    - resolution: query execution and result shaping
    - factory: goto / reload / navigation and query helpers that build objects

================================================================================
"""

from .declarations import Declaration, QueryKind, Shape, selector, xpath
from .factory import (
    goto,
    query_selector,
    query_selector_all,
    query_xpath,
    reload,
    wait_for_navigation,
    wait_for_selector,
)
from .objects import ElementObject, PageObject

__all__ = [
    "PageObject",
    "ElementObject",
    "Declaration",
    "QueryKind",
    "Shape",
    "selector",
    "xpath",
    "goto",
    "reload",
    "wait_for_navigation",
    "query_selector",
    "query_selector_all",
    "query_xpath",
    "wait_for_selector",
]
