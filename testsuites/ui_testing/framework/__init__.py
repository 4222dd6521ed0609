"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework built on the Page Object Model.

Components:
    - locator: Immutable strategy + selector element descriptors
    - element_actions: Wait-driven element gateway and wait policy
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - session: Per-test session harness
    - settings: Injected run configuration
    - exceptions: Framework error taxonomy

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .element_actions import ElementActions, WaitPolicy
from .exceptions import (
    ElementNotFoundError,
    ElementTimeoutError,
    InteractionError,
    SessionStateError,
    UiAutomationError,
    WaitTimeoutError,
)
from .locator import By, Locator
from .page_base import BasePage
from .session import SessionState, UiTestSession
from .settings import UiSettings

__all__ = [
    "BasePage",
    "BrowserManager",
    "By",
    "ElementActions",
    "ElementNotFoundError",
    "ElementTimeoutError",
    "InteractionError",
    "Locator",
    "SessionState",
    "SessionStateError",
    "UiAutomationError",
    "UiSettings",
    "UiTestSession",
    "WaitPolicy",
    "WaitTimeoutError",
]
