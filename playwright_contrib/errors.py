"""
================================================================================
Error Types
================================================================================

Exceptions raised by playwright_contrib.

Assertion failures live in `playwright_contrib.should` (`ShouldError`), and
timeouts are Playwright's own `TimeoutError`, which is never wrapped.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations


class ContribError(Exception):
    """Base class for all playwright_contrib errors."""
    pass


class MissingHandleError(ContribError, ValueError):
    """Raised when a query is made against an absent page, element or response."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Value cannot be None. (Parameter '{name}')")


class DeclarationError(ContribError):
    """Raised when a page object member carries conflicting declarations."""
    pass


class SyncBridgeError(ContribError, RuntimeError):
    """Raised when a blocking call would wait on the event loop it is running in."""
    pass


class ConfigurationError(ContribError):
    """Raised when the configuration file cannot be read as a YAML mapping."""
    pass


__all__ = [
    "ContribError",
    "MissingHandleError",
    "DeclarationError",
    "SyncBridgeError",
    "ConfigurationError",
]
