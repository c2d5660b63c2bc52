"""Response extensions."""

from __future__ import annotations

import re
from typing import Union

from playwright.async_api import Response

from ._internal import guard_from_null


def has_url(response: Response, regex: str, flags: Union[int, re.RegexFlag] = 0) -> bool:
    """
    True if the response URL matches `regex` (Python `re` syntax).

    Args:
        response: Navigation or network response
        regex: Pattern searched for anywhere in `response.url`
        flags: `re` flags, e.g. `re.IGNORECASE`
    """
    return re.search(regex, guard_from_null(response, "response").url, flags) is not None


__all__ = ["has_url"]
