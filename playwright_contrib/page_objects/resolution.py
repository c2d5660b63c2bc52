"""
================================================================================
Member Resolution
================================================================================

Runs the query behind a declared member and shapes the result.

Resolution never raises for a malformed declaration or a missing owner;
it resolves to None (single shapes) or [] (list shapes) instead, so a page
object built without a page can still be inspected.

================================================================================
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from loguru import logger
from playwright.async_api import ElementHandle

from .declarations import ALLOWED_SHAPES, Declared, Shape
from .objects import ElementObject, PageObject


def query_root(owner: Any) -> Optional[Any]:
    """Object the declared query runs against: the page or the root element."""
    if isinstance(owner, PageObject):
        return owner.page
    if isinstance(owner, ElementObject):
        return owner.element
    return None


async def resolve(owner: Any, declared: Declared) -> Union[None, ElementHandle, ElementObject, List[Any]]:
    """
    Resolve a declared member of `owner`.

    Args:
        owner: PageObject or ElementObject instance
        declared: Descriptor of the member being read

    Returns:
        ElementHandle, ElementObject, a list of either, or None
    """
    declaration = declared.declaration
    shape, target = declared.binding

    if shape is None:
        logger.warning(f"{declaration.name} has an unsupported return annotation; resolving to None")
        return None
    if shape not in ALLOWED_SHAPES[declaration.kind]:
        logger.warning(
            f"{declaration.name}: {declaration.kind.value} declarations cannot return {shape.value}; "
            f"resolving to None"
        )
        return None
    if not isinstance(owner, (PageObject, ElementObject)):
        logger.warning(f"{declaration.name} is declared on {type(owner).__name__}, not a page or element object")
        return None

    root = query_root(owner)
    if root is None:
        return [] if shape.is_list else None

    query = declaration.playwright_selector
    logger.debug(f"Resolving {declaration.name} ({shape.value}) with {query!r}")

    if shape is Shape.HANDLE:
        return await root.query_selector(query)

    if shape is Shape.OBJECT:
        handle = await root.query_selector(query)
        if handle is None:
            return None
        return target(owner.page, handle)

    handles = await root.query_selector_all(query)
    if shape is Shape.HANDLE_LIST:
        return list(handles)
    return [target(owner.page, handle) for handle in handles]


__all__ = [
    "query_root",
    "resolve",
]
