"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Wait-qualified element interactions (via ElementActions)
    - Navigation and URL/title access
    - Page-object transitions
    - Screenshot and failure capture for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Type, TypeVar

import allure
from loguru import logger
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page

from autotest_tools.report_tools.allure_utils import attach_screenshot, attach_text

from .element_actions import ElementActions, WaitPolicy
from .locator import Locator


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

PageT = TypeVar("PageT", bound="BasePage")


class BasePage:
    """
    Base class for all page objects.

    A page object holds a reference to the shared session page (not owned:
    several page objects may wrap the same page during one test) and a fixed
    set of class-level Locators. All element access goes through the
    ElementActions gateway so every interaction waits first.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/web/index.php/auth/login"
            USERNAME_FIELD = Locator(By.NAME, "username", "username field")

            def enter_username(self, username: str) -> None:
                self.type_text(self.USERNAME_FIELD, username)
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        wait_policy: Optional[WaitPolicy] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object of the current session
            base_url: Base URL for the application
            wait_policy: Wait bound for element operations
        """
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.actions = ElementActions(page, wait_policy)

    @property
    def wait_policy(self) -> WaitPolicy:
        return self.actions.policy

    @property
    def url(self) -> str:
        """Full URL of this page."""
        return f"{self.base_url}{self.URL_PATH}"

    def open(self: PageT) -> PageT:
        """Navigate directly to this page."""
        self.navigate_to_url(self.url)
        return self

    def navigate_to_url(self, url: str) -> None:
        with allure.step(f"Navigate to {url}"):
            self.page.goto(url)
            logger.debug(f"Navigated to: {url}")

    def transition_to(self, page_cls: Type[PageT]) -> PageT:
        """
        Build the page object for the screen an action leads to.

        The new object shares this page's session and wait policy.
        """
        return page_cls(self.page, base_url=self.base_url, wait_policy=self.wait_policy)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def find_element(self, locator: Locator, timeout: Optional[float] = None) -> PlaywrightLocator:
        return self.actions.find_element(locator, timeout)

    def click(self, locator: Locator, timeout: Optional[float] = None) -> None:
        self.actions.click(locator, timeout)

    def type_text(self, locator: Locator, text: str, timeout: Optional[float] = None) -> None:
        self.actions.type_text(locator, text, timeout)

    def get_text(self, locator: Locator, timeout: Optional[float] = None) -> str:
        return self.actions.get_text(locator, timeout)

    def get_all_texts(self, locator: Locator, timeout: Optional[float] = None) -> List[str]:
        return self.actions.get_all_texts(locator, timeout)

    def is_displayed(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        return self.actions.is_displayed(locator, timeout)

    def wait_for_url(self, fragment: str, timeout: Optional[float] = None) -> None:
        self.actions.wait_for_url(fragment, timeout)

    # =========================================================================
    # Page State
    # =========================================================================

    def get_page_url(self) -> str:
        """Current page URL."""
        return self.page.url

    def get_page_title(self) -> str:
        """Current page title."""
        return self.page.title()

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        image = self.page.screenshot(path=str(filepath), full_page=full_page)
        if attach_to_allure:
            attach_screenshot(image, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    def capture_failure(self, test_name: str) -> None:
        """Attach a screenshot and the current URL for a failed test."""
        with allure.step("Capture failure details"):
            self.screenshot(f"failure_{test_name}", full_page=True)
            attach_text(self.get_page_url(), name="Current URL")


__all__ = [
    "BasePage",
]
