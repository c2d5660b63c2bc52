"""
================================================================================
In-Memory Playwright Fakes
================================================================================

Small stand-ins for Playwright's Page / ElementHandle / JSHandle / Response,
enough to drive playwright_contrib without a browser.

FakeElement.evaluate answers the scripts in playwright_contrib.extensions.scripts
from Python state, and records every script it ran so tests can count
round-trips. Selectors understood by query_selector(_all):

    ".class"        element carrying the class
    "#id"           element with that id attribute
    "tag"           element with that tag name
    "xpath=//tag"   element with that tag name

================================================================================
"""

from __future__ import annotations

import asyncio
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Iterator, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from playwright_contrib.extensions import scripts


def _re_flags(flags: str) -> int:
    value = 0
    if "i" in flags:
        value |= re.IGNORECASE
    if "m" in flags:
        value |= re.MULTILINE
    if "s" in flags:
        value |= re.DOTALL
    return value


def _js_test(arg: List[str], text: str) -> bool:
    regex, flags = arg
    return re.search(regex, text, _re_flags(flags)) is not None


class FakeElement:
    """A DOM node that is also its own element handle."""

    def __init__(
        self,
        tag: str,
        classes: str = "",
        text: str = "",
        attributes: Optional[Dict[str, str]] = None,
        children: Optional[List["FakeElement"]] = None,
        visible: bool = True,
        selected: bool = False,
        checked: bool = False,
        disabled: bool = False,
        read_only: bool = False,
        required: bool = False,
        focused: bool = False,
    ):
        self.tag = tag
        self.classes = classes.split()
        self.text = text
        self.attributes = dict(attributes or {})
        self.children: List[FakeElement] = []
        self.visible = visible
        self.selected = selected
        self.checked = checked
        self.disabled = disabled
        self.read_only = read_only
        self.required = required
        self.focused = focused
        self.page: Optional[FakePage] = None
        self.evaluations: List[str] = []
        for child in children or []:
            self.append(child)

    # ------------------------------------------------------------------ tree

    def append(self, child: "FakeElement") -> "FakeElement":
        self.children.append(child)
        child.attach(self.page)
        return child

    def attach(self, page: Optional["FakePage"]) -> None:
        self.page = page
        for child in self.children:
            child.attach(page)

    def descendants(self) -> Iterator["FakeElement"]:
        for child in self.children:
            yield child
            yield from child.descendants()

    def matches(self, selector: str) -> bool:
        if selector.startswith("xpath=//"):
            return self.tag == selector[len("xpath=//"):]
        if selector.startswith("."):
            return selector[1:] in self.classes
        if selector.startswith("#"):
            return self.attributes.get("id") == selector[1:]
        return self.tag == selector

    @property
    def text_content(self) -> str:
        return self.text + "".join(child.text_content for child in self.children)

    @property
    def outer_html(self) -> str:
        class_attr = f' class="{" ".join(self.classes)}"' if self.classes else ""
        return f"<{self.tag}{class_attr}>{self.inner_html}</{self.tag}>"

    @property
    def inner_html(self) -> str:
        return self.text + "".join(child.outer_html for child in self.children)

    # ------------------------------------------------------- handle surface

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        self.evaluations.append(script)
        answers = {
            scripts.GET_ATTRIBUTE: lambda: self.attributes.get(arg),
            scripts.HAS_ATTRIBUTE: lambda: arg in self.attributes,
            scripts.INNER_HTML: lambda: self.inner_html,
            scripts.OUTER_HTML: lambda: self.outer_html,
            scripts.TEXT_CONTENT: lambda: self.text_content,
            scripts.INNER_TEXT: lambda: self.text_content if self.visible else "",
            scripts.ELEMENT_HAS_CONTENT: lambda: arg in self.text_content,
            scripts.ELEMENT_MATCHES_CONTENT: lambda: _js_test(arg, self.text_content),
            scripts.CLASS_NAME: lambda: " ".join(self.classes),
            scripts.CLASS_LIST: lambda: list(self.classes),
            scripts.HAS_CLASS: lambda: arg in self.classes,
            scripts.IS_VISIBLE: lambda: self.visible,
            scripts.IS_SELECTED: lambda: self.selected,
            scripts.IS_CHECKED: lambda: self.checked,
            scripts.IS_DISABLED: lambda: self.disabled,
            scripts.IS_READ_ONLY: lambda: self.read_only,
            scripts.IS_REQUIRED: lambda: self.required,
            scripts.HAS_FOCUS: lambda: self.focused,
            scripts.IS_EMPTY: lambda: not self.children and not self.text,
        }
        if script not in answers:
            raise NotImplementedError(f"FakeElement cannot evaluate: {script}")
        return answers[script]()

    async def query_selector(self, selector: str) -> Optional["FakeElement"]:
        return next((node for node in self.descendants() if node.matches(selector)), None)

    async def query_selector_all(self, selector: str) -> List["FakeElement"]:
        return [node for node in self.descendants() if node.matches(selector)]

    async def wait_for_selector(self, selector: str, **options: Any) -> Optional["FakeElement"]:
        return await self.query_selector(selector)

    async def owner_frame(self) -> Optional["FakeFrame"]:
        if self.page is None:
            return None
        return self.page.main_frame

    def __repr__(self) -> str:
        return f"<FakeElement {self.tag}{''.join('.' + c for c in self.classes)}>"


class FakeJSHandle:
    """Result of evaluate_handle: an element, null, or an array of those."""

    def __init__(self, value: Any):
        self.value = value
        self.disposed = False

    def as_element(self) -> Optional[FakeElement]:
        return self.value if isinstance(self.value, FakeElement) else None

    async def get_properties(self) -> Dict[str, "FakeJSHandle"]:
        properties = {str(i): FakeJSHandle(item) for i, item in enumerate(self.value)}
        properties["length"] = FakeJSHandle(len(self.value))
        return properties

    async def dispose(self) -> None:
        self.disposed = True


class FakeResponse:
    def __init__(self, url: str, status: int = 200):
        self.url = url
        self.status = status

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299


class FakeFrame:
    def __init__(self, page: "FakePage"):
        self.page = page
        self.wait_calls: List[Dict[str, Any]] = []

    async def wait_for_function(self, expression: str, arg: Any = None, **options: Any) -> None:
        self.wait_calls.append({"expression": expression, "arg": arg, **options})


class FakePage:
    """A page over a FakeElement document."""

    def __init__(self, body: FakeElement, url: str = "https://example.com/", title: str = ""):
        self.document = FakeElement("#document", children=[FakeElement("html", children=[body])])
        self.document.attach(self)
        self.main_frame = FakeFrame(self)
        self.url = url
        self._title = title
        self.handles: List[FakeJSHandle] = []
        self.navigations: List[str] = []
        self.navigation_waits: List[Dict[str, Any]] = []

    async def title(self) -> str:
        return self._title

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        if script == scripts.PAGE_HAS_CONTENT:
            return _js_test(arg, self.document.text_content)
        if script == scripts.PAGE_HAS_TITLE:
            return _js_test(arg, self._title)
        if script == scripts.PAGE_HAS_URL:
            return _js_test(arg, self.url)
        raise NotImplementedError(f"FakePage cannot evaluate: {script}")

    async def evaluate_handle(self, script: str, arg: Any = None) -> FakeJSHandle:
        selector, regex, flags = arg
        matches = [
            node for node in await self.document.query_selector_all(selector)
            if _js_test([regex, flags], node.text_content)
        ]
        if script == scripts.QUERY_SELECTOR_WITH_CONTENT:
            handle = FakeJSHandle(matches[0] if matches else None)
        elif script == scripts.QUERY_SELECTOR_ALL_WITH_CONTENT:
            handle = FakeJSHandle(matches)
        else:
            raise NotImplementedError(f"FakePage cannot evaluate_handle: {script}")
        self.handles.append(handle)
        return handle

    async def query_selector(self, selector: str) -> Optional[FakeElement]:
        return await self.document.query_selector(selector)

    async def query_selector_all(self, selector: str) -> List[FakeElement]:
        return await self.document.query_selector_all(selector)

    async def wait_for_selector(self, selector: str, **options: Any) -> Optional[FakeElement]:
        return await self.document.query_selector(selector)

    async def wait_for_function(self, expression: str, arg: Any = None, **options: Any) -> None:
        await self.main_frame.wait_for_function(expression, arg=arg, **options)

    async def goto(self, url: str, **options: Any) -> FakeResponse:
        self.url = url
        self.navigations.append(url)
        return FakeResponse(url)

    async def reload(self, **options: Any) -> FakeResponse:
        self.navigations.append(self.url)
        return FakeResponse(self.url)

    @asynccontextmanager
    async def expect_navigation(self, **options: Any) -> AsyncIterator[FakeEventInfo]:
        """Resolve with the response of a navigation made inside the block."""
        self.navigation_waits.append(options)
        info = FakeEventInfo()
        started = len(self.navigations)
        yield info
        if len(self.navigations) == started:
            raise PlaywrightTimeoutError("Timeout exceeded while waiting for navigation")
        info.set(FakeResponse(self.url))


class FakeEventInfo:
    def __init__(self):
        self._future = asyncio.get_running_loop().create_future()

    @property
    def value(self) -> "asyncio.Future[FakeResponse]":
        return self._future

    def set(self, response: FakeResponse) -> None:
        self._future.set_result(response)
