"""
================================================================================
Response Should Assertions
================================================================================

Synchronous assertions on Playwright responses; URL and status are known
locally, so nothing here awaits. Every assertion returns the response for
chaining:

    response = await page.goto(url)
    should_be_successful(should_have_url(response, r"github\\.com"))

================================================================================
"""

from __future__ import annotations

import re
from http import HTTPStatus
from typing import Optional, Union

from playwright.async_api import Response

from ..extensions import response as response_ext
from ..extensions._internal import guard_from_null
from ._throw import fail


def _status_range(response: Response, low: int, high: int) -> bool:
    return low <= guard_from_null(response, "response").status <= high


def should_have_url(
    response: Response,
    regex: str,
    flags: Union[int, re.RegexFlag] = 0,
    because: Optional[str] = None,
) -> Response:
    if not response_ext.has_url(response, regex, flags):
        fail(f'Expected response to have URL "{regex}"', f'but found "{response.url}"', because)
    return response


def should_not_have_url(
    response: Response,
    regex: str,
    flags: Union[int, re.RegexFlag] = 0,
    because: Optional[str] = None,
) -> Response:
    if response_ext.has_url(response, regex, flags):
        fail(f'Expected response not to have URL "{regex}"', None, because)
    return response


def should_have_status_code(
    response: Response,
    status: Union[int, HTTPStatus],
    because: Optional[str] = None,
) -> Response:
    actual = guard_from_null(response, "response").status
    if actual != status:
        fail(f"Expected response to have status code {int(status)}", f"but found {actual}", because)
    return response


def should_not_have_status_code(
    response: Response,
    status: Union[int, HTTPStatus],
    because: Optional[str] = None,
) -> Response:
    if guard_from_null(response, "response").status == status:
        fail(f"Expected response not to have status code {int(status)}", None, because)
    return response


def should_be_successful(response: Response, because: Optional[str] = None) -> Response:
    """Status in 200-299."""
    if not guard_from_null(response, "response").ok:
        fail("Expected response to be successful", f"but found {response.status}", because)
    return response


def should_be_redirection(response: Response, because: Optional[str] = None) -> Response:
    """Status in 300-399."""
    if not _status_range(response, 300, 399):
        fail("Expected response to be redirection", f"but found {response.status}", because)
    return response


def should_have_client_error(response: Response, because: Optional[str] = None) -> Response:
    """Status in 400-499."""
    if not _status_range(response, 400, 499):
        fail("Expected response to have client error", f"but found {response.status}", because)
    return response


def should_have_server_error(response: Response, because: Optional[str] = None) -> Response:
    """Status in 500-599."""
    if not _status_range(response, 500, 599):
        fail("Expected response to have server error", f"but found {response.status}", because)
    return response


def should_have_error(response: Response, because: Optional[str] = None) -> Response:
    """Status in 400-599."""
    if not _status_range(response, 400, 599):
        fail("Expected response to have error", f"but found {response.status}", because)
    return response


__all__ = [
    "should_have_url",
    "should_not_have_url",
    "should_have_status_code",
    "should_not_have_status_code",
    "should_be_successful",
    "should_be_redirection",
    "should_have_client_error",
    "should_have_server_error",
    "should_have_error",
]
