"""
================================================================================
Page Object Base Classes
================================================================================

Foundation classes for the declarative Page Object Model.

    - PageObject: scoped to a whole page (queries run against the document)
    - ElementObject: scoped to one element (queries run against its subtree)

Subclasses declare members with `@selector` / `@xpath`; every read of such
a member runs a fresh query, so nothing on these objects goes stale.

Usage:
    class TweetObject(ElementObject):
        @selector(".like")
        def like(self) -> ElementHandle: ...

    class TimelinePage(PageObject):
        @selector(".tweet")
        def tweets(self) -> List[TweetObject]: ...

    timeline = await goto(page, "https://example.com", TimelinePage)
    for tweet in await timeline.tweets:
        print(await text_content(await tweet.like))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from playwright.async_api import ElementHandle, Page, Response


class PageObject:
    """
    Base class for page-scoped objects.

    A PageObject created without a page is valid: its declared members
    resolve to None or an empty list.
    """

    def __init__(
        self,
        page: Optional[Page] = None,
        response: Optional[Response] = None,
    ):
        """
        Args:
            page: Playwright Page the object reads from
            response: Navigation response that produced the page, if any
        """
        self._page = page
        self._response = response

    @property
    def page(self) -> Optional[Page]:
        return self._page

    @property
    def response(self) -> Optional[Response]:
        return self._response

    def __repr__(self) -> str:
        url = getattr(self._page, "url", None)
        return f"<{type(self).__name__} url={url!r}>"


class ElementObject:
    """
    Base class for element-scoped objects.

    When `element` is None every declared member resolves to None or an
    empty list.
    """

    def __init__(
        self,
        page: Optional[Page] = None,
        element: Optional[ElementHandle] = None,
    ):
        """
        Args:
            page: Page that owns the element
            element: Root element; declared selectors are relative to it
        """
        self._page = page
        self._element = element

    @property
    def page(self) -> Optional[Page]:
        return self._page

    @property
    def element(self) -> Optional[ElementHandle]:
        return self._element

    def __repr__(self) -> str:
        return f"<{type(self).__name__} element={self._element!r}>"


__all__ = [
    "PageObject",
    "ElementObject",
]
