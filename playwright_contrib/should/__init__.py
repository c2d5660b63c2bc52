"""
================================================================================
Should Assertions
================================================================================

Fluent assert-or-raise helpers for elements, pages and responses.

Failures raise ShouldError (an AssertionError) with messages of the form:

    Expected element to be visible because the menu is open, but it is not.

Modules:
    - element_handle: element assertions
    - page: page content / title / URL assertions
    - response: response URL / status assertions
    - message: ShouldMessage formatter

================================================================================
"""

from . import element_handle, page, response
from ._throw import ShouldError
from .message import ShouldMessage

__all__ = [
    "ShouldError",
    "ShouldMessage",
    "element_handle",
    "page",
    "response",
]
