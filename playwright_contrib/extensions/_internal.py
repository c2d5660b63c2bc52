"""Null guards and evaluation helpers shared by the extension modules."""

from __future__ import annotations

from typing import Any, TypeVar

from loguru import logger

from ..errors import MissingHandleError


T = TypeVar("T")


def guard_from_null(value: T, name: str) -> T:
    """Return `value`, or raise MissingHandleError when it is None."""
    if value is None:
        raise MissingHandleError(name)
    return value


async def evaluate_element(element: Any, script: str, arg: Any = None) -> Any:
    """Evaluate `script` with the element as its first argument."""
    guard_from_null(element, "element")
    logger.trace(f"Evaluating on element: {script}")
    if arg is None:
        return await element.evaluate(script)
    return await element.evaluate(script, arg)


async def evaluate_page(page: Any, script: str, arg: Any = None) -> Any:
    """Evaluate `script` in the page's main frame."""
    guard_from_null(page, "page")
    logger.trace(f"Evaluating on page: {script}")
    if arg is None:
        return await page.evaluate(script)
    return await page.evaluate(script, arg)
