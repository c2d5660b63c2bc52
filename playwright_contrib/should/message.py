"""
================================================================================
Should Message
================================================================================

Formats assertion failure messages:

    "{expected}{ because ...}{, actual}."

    >>> str(ShouldMessage("Expected foo to bar", "it should"))
    'Expected foo to bar because it should.'
    >>> str(ShouldMessage("Expected foo to bar", actual="but it did not"))
    'Expected foo to bar, but it did not.'

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ShouldMessage:
    """
    Assertion failure message.

    Attributes:
        expected: What the assertion expected, e.g. 'Expected element to exist'
        because: Optional reason; "because" is prepended unless already present
        actual: Optional observed state, e.g. 'but found "bar"'
    """
    expected: str
    because: Optional[str] = None
    actual: Optional[str] = None

    @property
    def because_phrase(self) -> str:
        if not self.because:
            return ""
        reason = self.because.strip()
        if reason.lower().startswith("because"):
            return " " + reason
        return " because " + reason

    def __str__(self) -> str:
        actual = f", {self.actual}" if self.actual is not None else ""
        return f"{self.expected}{self.because_phrase}{actual}."


__all__ = ["ShouldMessage"]
