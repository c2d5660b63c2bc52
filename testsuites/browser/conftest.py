"""
================================================================================
Browser Test Configuration
================================================================================

Fixtures launching a real headless Chromium through playwright.async_api.
Tests are skipped when no browser is installed (`playwright install chromium`).

Key Features:
- Function-scoped browser / context / page lifecycle
- Screenshot attached to the Allure report on failure

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Browser, BrowserContext, Error as PlaywrightError, Page, async_playwright


def pytest_collection_modifyitems(config, items):
    """Every test in this directory needs a browser."""
    for item in items:
        if "browser" in str(item.fspath):
            item.add_marker(pytest.mark.browser)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser() -> AsyncGenerator[Browser, None]:
    """Headless Chromium, skipped when it cannot be launched."""
    async with async_playwright() as playwright:
        try:
            browser = await playwright.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium is not available: {e}")
        yield browser
        await browser.close()


@pytest.fixture
async def context(browser: Browser) -> AsyncGenerator[BrowserContext, None]:
    """Isolated browser context per test."""
    context = await browser.new_context(viewport={"width": 1280, "height": 720})
    yield context
    await context.close()


@pytest.fixture
async def page(context: BrowserContext, request) -> AsyncGenerator[Page, None]:
    """
    Fresh page per test.

    Attaches a full-page screenshot to the Allure report when the test fails.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            allure.attach(
                await page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
    await page.close()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose the call-phase report to fixtures as `item.rep_call`."""
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        item.rep_call = report
