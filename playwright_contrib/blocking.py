"""
================================================================================
Blocking Bridge
================================================================================

Call the async API from synchronous code.

Playwright handles belong to the event loop that created them, so a call
touching a handle must run on that loop:

    loop = ...  # loop running Playwright in a background thread
    title_ok = run_sync(has_title(page, "GitHub"), loop=loop)

    is_visible_sync = blocking(is_visible, loop=loop)
    is_visible_sync(element)

Without a loop the coroutine runs on a fresh event loop in a worker thread,
which suits code that does not touch existing handles.

================================================================================
"""

from __future__ import annotations

import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Awaitable, Callable, Coroutine, Optional, TypeVar

from loguru import logger

from .common.config import get_config
from .errors import SyncBridgeError

T = TypeVar("T")


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _default_timeout() -> Optional[float]:
    value = get_config("timeouts.sync_bridge")
    return float(value) if value is not None else None


async def _await(awaitable: Awaitable[T]) -> T:
    return await awaitable


def _as_coroutine(awaitable: Awaitable[T]) -> Coroutine[Any, Any, T]:
    if asyncio.iscoroutine(awaitable):
        return awaitable
    return _await(awaitable)


def run_sync(
    awaitable: Awaitable[T],
    loop: Optional[asyncio.AbstractEventLoop] = None,
    timeout: Optional[float] = None,
) -> T:
    """
    Block until `awaitable` completes and return its result.

    Args:
        awaitable: Coroutine (or other awaitable) to run
        loop: Event loop that owns the Playwright objects involved
        timeout: Seconds to wait; defaults to `timeouts.sync_bridge`, None waits forever

    Raises:
        SyncBridgeError: When `loop` is the loop running in the calling thread
        concurrent.futures.TimeoutError: When the timeout expires
    """
    coroutine = _as_coroutine(awaitable)
    if timeout is None:
        timeout = _default_timeout()

    if loop is not None:
        if loop is _running_loop():
            coroutine.close()
            raise SyncBridgeError(
                "run_sync() was called from the event loop it would wait on; await the coroutine instead"
            )
        if not loop.is_running():
            coroutine.close()
            raise SyncBridgeError("run_sync() needs the target loop to be running in another thread")
        logger.trace(f"Submitting {coroutine!r} to loop {loop!r}")
        future = asyncio.run_coroutine_threadsafe(coroutine, loop)
        try:
            return future.result(timeout)
        except BaseException:
            future.cancel()
            raise

    logger.trace(f"Running {coroutine!r} on a worker-thread event loop")
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="playwright-contrib-sync")
    try:
        return executor.submit(asyncio.run, coroutine).result(timeout)
    finally:
        executor.shutdown(wait=False)


def blocking(
    func: Callable[..., Awaitable[T]],
    loop: Optional[asyncio.AbstractEventLoop] = None,
    timeout: Optional[float] = None,
) -> Callable[..., T]:
    """
    Wrap an async function into a blocking one using `run_sync`.

    Arguments of the wrapper are passed through unchanged, so a wrapped
    function keeps its own `timeout` parameter; the bridge timeout is fixed
    here.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        return run_sync(func(*args, **kwargs), loop=loop, timeout=timeout)

    return wrapper


__all__ = [
    "run_sync",
    "blocking",
]
