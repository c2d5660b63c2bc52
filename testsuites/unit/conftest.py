"""
================================================================================
Unit Test Configuration
================================================================================

Fixtures building in-memory documents for driver-free tests.

================================================================================
"""

from typing import Generator

import pytest

from playwright_contrib.common import ContribConfig
from testsuites.unit.fakes import FakeElement, FakePage


def pytest_collection_modifyitems(config, items):
    """Every test in this directory is a unit test."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None, None, None]:
    """Drop the configuration singleton around every test."""
    ContribConfig.reset()
    yield
    ContribConfig.reset()


@pytest.fixture
def timeline_page() -> FakePage:
    """
    A timeline of two tweets:

        <body>
          <h1 class="title">Timeline</h1>
          <div class="tweet"><div class="like">100</div></div>
          <div class="tweet"><div class="like">200</div></div>
        </body>
    """
    body = FakeElement(
        "body",
        children=[
            FakeElement("h1", classes="title", text="Timeline"),
            FakeElement("div", classes="tweet", children=[FakeElement("div", classes="like", text="100")]),
            FakeElement("div", classes="tweet", children=[FakeElement("div", classes="like", text="200")]),
        ],
    )
    return FakePage(body, url="https://example.com/timeline", title="Timeline | Example")


@pytest.fixture
def form_page() -> FakePage:
    """A form with inputs in assorted states."""
    body = FakeElement(
        "body",
        children=[
            FakeElement(
                "input",
                classes="field primary",
                attributes={"id": "email", "name": "email", "value": "a@b.c", "required": ""},
                required=True,
                focused=True,
            ),
            FakeElement("input", classes="field", attributes={"id": "terms", "type": "checkbox"}, checked=True),
            FakeElement("button", text="Submit", attributes={"id": "submit"}, disabled=True),
            FakeElement("input", attributes={"id": "code", "readonly": ""}, read_only=True, visible=False),
            FakeElement("a", text="Home", attributes={"href": "/home"}),
            FakeElement("img", attributes={"src": "/logo.png"}),
            FakeElement("option", text="One", selected=True),
            FakeElement("div", classes="placeholder"),
        ],
    )
    return FakePage(body, url="https://example.com/form", title="Form")
