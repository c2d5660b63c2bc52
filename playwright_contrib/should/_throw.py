"""Failure factory shared by the should modules."""

from __future__ import annotations

from typing import NoReturn, Optional

import allure
from loguru import logger

from .message import ShouldMessage


class ShouldError(AssertionError):
    """Raised when a should assertion fails."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def fail(expected: str, actual: Optional[str] = None, because: Optional[str] = None) -> NoReturn:
    """Raise ShouldError with a formatted message, recording it in logs and allure."""
    message = str(ShouldMessage(expected, because, actual))
    logger.warning(f"Assertion failed: {message}")
    with allure.step(f"Assertion failed: {expected}"):
        allure.attach(message, name="Should", attachment_type=allure.attachment_type.TEXT)
    raise ShouldError(message)


def regex_text(regex: str, flags: str) -> str:
    return f'"/{regex}/{flags}"'
