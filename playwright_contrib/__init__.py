"""
================================================================================
playwright_contrib
================================================================================

Contributions to Playwright for Python:

    - extensions: semantic queries on elements, pages, frames and responses
    - should: assert-or-raise helpers with readable failure messages
    - page_objects: declarative, lazily resolved page objects
    - blocking: call the async API from synchronous code

Usage:
    from playwright_contrib import ElementObject, PageObject, selector
    from playwright_contrib.extensions import element_handle as eh
    from playwright_contrib.should import element_handle as should

Author: Automation Team
License: MIT
================================================================================
"""

from .blocking import blocking, run_sync
from .errors import (
    ConfigurationError,
    ContribError,
    DeclarationError,
    MissingHandleError,
    SyncBridgeError,
)
from .page_objects import ElementObject, PageObject, selector, xpath
from .should import ShouldError, ShouldMessage

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "ContribError",
    "MissingHandleError",
    "DeclarationError",
    "SyncBridgeError",
    "ConfigurationError",
    "ShouldError",
    "ShouldMessage",
    "PageObject",
    "ElementObject",
    "selector",
    "xpath",
    "run_sync",
    "blocking",
]
