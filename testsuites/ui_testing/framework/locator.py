"""
================================================================================
Element Locators
================================================================================

Immutable strategy + selector descriptors used by page objects.

A Locator is declared once as a page-object class attribute and rendered to a
Playwright selector string only when the gateway needs it. Two locators are
equal when strategy and selector match; the human-readable name is only used
for logging and Allure step titles.

Usage:
    >>> USERNAME = Locator(By.NAME, "username", "username field")
    >>> USERNAME.selector
    '[name="username"]'

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum


class By(str, Enum):
    """Element location strategies."""

    ID = "id"
    NAME = "name"
    CSS = "css"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TEXT = "text"
    TEST_ID = "test id"


def _quote(value: str) -> str:
    return json.dumps(value)


# Strategy -> Playwright selector template
_SELECTOR_BUILDERS = {
    By.ID: lambda v: f"[id={_quote(v)}]",
    By.NAME: lambda v: f"[name={_quote(v)}]",
    By.CSS: lambda v: f"css={v}",
    By.XPATH: lambda v: f"xpath={v}",
    By.LINK_TEXT: lambda v: f"a:text-is({_quote(v)})",
    By.PARTIAL_LINK_TEXT: lambda v: f"a:has-text({_quote(v)})",
    By.TEXT: lambda v: f"text={_quote(v)}",
    By.TEST_ID: lambda v: f"[data-testid={_quote(v)}]",
}


@dataclass(frozen=True)
class Locator:
    """
    Describes how to find one element on a rendered page.

    Attributes:
        by: Location strategy
        value: Strategy-specific selector
        name: Human-readable element name (not part of identity)
    """
    by: By
    value: str
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.by, By):
            object.__setattr__(self, "by", By(self.by))
        if not self.value:
            raise ValueError(f"Locator value must not be empty (strategy: {self.by.value})")

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        return _SELECTOR_BUILDERS[self.by](self.value)

    @property
    def description(self) -> str:
        """Name used in logs; falls back to the raw strategy/selector pair."""
        return self.name or str(self)

    def __str__(self) -> str:
        return f"{self.by.value}={self.value}"


__all__ = [
    "By",
    "Locator",
]
