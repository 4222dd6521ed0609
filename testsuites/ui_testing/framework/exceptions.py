"""
================================================================================
UI Framework Exceptions
================================================================================

Error taxonomy raised by the element gateway, page objects and the session
harness. Playwright errors never leak out of the gateway untranslated except
for failures unrelated to the element being waited on (closed page, broken
browser), which propagate as-is.

Author: Automation Team
License: MIT
================================================================================
"""


class UiAutomationError(Exception):
    """Base class for all UI framework errors."""
    pass


class WaitTimeoutError(UiAutomationError, TimeoutError):
    """A waited-for condition did not become true within the wait bound."""
    pass


class ElementNotFoundError(UiAutomationError):
    """No element matched the locator."""
    pass


class ElementTimeoutError(WaitTimeoutError, ElementNotFoundError):
    """The element never became present before the wait bound expired."""
    pass


class InteractionError(UiAutomationError):
    """The element was found but the browser rejected the action."""
    pass


class SessionStateError(UiAutomationError):
    """The test session was used outside of its active state."""
    pass


__all__ = [
    "UiAutomationError",
    "WaitTimeoutError",
    "ElementNotFoundError",
    "ElementTimeoutError",
    "InteractionError",
    "SessionStateError",
]
