"""
================================================================================
Frame Extensions
================================================================================

Wait helpers that work on any Playwright Frame (a Page delegates to its
main frame, so a Page is accepted as well).

================================================================================
"""

from __future__ import annotations

from typing import Optional, Union

from loguru import logger
from playwright.async_api import Frame, Page

from ..common.config import get_config
from . import scripts
from ._internal import guard_from_null


async def wait_for_elements_removed_from_dom(
    frame: Union[Frame, Page],
    selector: str,
    timeout: Optional[float] = None,
) -> None:
    """
    Wait until no element in the frame matches `selector`.

    Returns immediately if nothing matches already.

    Args:
        frame: Frame or Page to watch
        selector: CSS selector
        timeout: Maximum time to wait in milliseconds. 0 disables the timeout;
            None uses `timeouts.elements_removed` from config, then
            Playwright's default.

    Raises:
        playwright.async_api.TimeoutError: elements still present at the deadline
    """
    guard_from_null(frame, "frame")
    if timeout is None:
        configured = get_config("timeouts.elements_removed")
        timeout = float(configured) if configured is not None else None

    logger.debug(f"Waiting for '{selector}' to be removed from DOM (timeout={timeout})")
    await frame.wait_for_function(
        scripts.ELEMENTS_REMOVED_FROM_DOM,
        arg=selector,
        polling="raf",
        timeout=timeout,
    )


__all__ = ["wait_for_elements_removed_from_dom"]
