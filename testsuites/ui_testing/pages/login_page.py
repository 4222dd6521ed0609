"""
================================================================================
Login Page Object
================================================================================

OrangeHRM login screen: credential fields, submit button, the invalid
credentials banner and the inline "Required" validation messages.

`login()` chains into DashboardPage. It does not check the outcome; tests
assert on the returned page (or on this one for negative scenarios).

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import By, Locator
from testsuites.ui_testing.framework.page_base import BasePage

if TYPE_CHECKING:
    from testsuites.ui_testing.pages.dashboard_page import DashboardPage


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/web/index.php/auth/login"

    # Locators
    USERNAME_FIELD = Locator(By.NAME, "username", "username field")
    PASSWORD_FIELD = Locator(By.NAME, "password", "password field")
    LOGIN_BUTTON = Locator(By.CSS, "button[type='submit']", "login button")
    ERROR_MESSAGE = Locator(By.CSS, "p.oxd-alert-content-text", "login error banner")
    REQUIRED_FIELD_MESSAGE = Locator(
        By.CSS, "span.oxd-input-field-error-message", "required field message"
    )

    # =========================================================================
    # Page Actions
    # =========================================================================

    def enter_username(self, username: str) -> None:
        self.type_text(self.USERNAME_FIELD, username)
        logger.info(f"Entered username: {username}")

    def enter_password(self, password: str) -> None:
        self.type_text(self.PASSWORD_FIELD, password)
        logger.info("Entered password")

    def click_login_button(self) -> None:
        self.click(self.LOGIN_BUTTON)

    def login(self, username: str, password: str) -> "DashboardPage":
        """
        Enter both credentials and submit.

        Args:
            username: Username to enter
            password: Password to enter

        Returns:
            DashboardPage for the screen a successful login leads to
        """
        from testsuites.ui_testing.pages.dashboard_page import DashboardPage

        with allure.step(f"Login as {username}"):
            logger.info("Performing login...")
            self.enter_username(username)
            self.enter_password(password)
            self.click_login_button()
        return self.transition_to(DashboardPage)

    # =========================================================================
    # Validation Methods
    # =========================================================================

    def get_error_message(self) -> str:
        """Text of the invalid credentials banner."""
        error_text = self.get_text(self.ERROR_MESSAGE)
        logger.info(f"Error message: {error_text}")
        return error_text

    def is_error_message_displayed(self) -> bool:
        return self.is_displayed(self.ERROR_MESSAGE)

    def get_required_field_error(self) -> str:
        """Text of the first inline validation message (e.g. "Required")."""
        return self.get_text(self.REQUIRED_FIELD_MESSAGE)

    def get_required_field_errors(self) -> List[str]:
        """Text of every inline validation message, one per invalid field."""
        return self.get_all_texts(self.REQUIRED_FIELD_MESSAGE)

    def is_login_page_displayed(self) -> bool:
        """True when the username field is shown, e.g. after a logout redirect."""
        return self.is_displayed(self.USERNAME_FIELD)
