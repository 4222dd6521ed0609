"""
================================================================================
Dashboard Page Object
================================================================================

OrangeHRM landing screen after login: header, main menu and the user
dropdown that holds the Logout link.

`logout()` chains back into LoginPage.

================================================================================
"""

from __future__ import annotations

from typing import Dict

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import By, Locator
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.login_page import LoginPage


def _menu_item(label: str) -> Locator:
    return Locator(By.XPATH, f"//span[text()='{label}']", f"{label} menu")


class DashboardPage(BasePage):
    """Dashboard page object."""

    URL_PATH = "/web/index.php/dashboard/index"
    URL_FRAGMENT = "dashboard"

    # Locators
    DASHBOARD_HEADER = Locator(By.CSS, "h6.oxd-text--h6", "dashboard header")
    USER_DROPDOWN = Locator(By.CSS, "span.oxd-userdropdown-tab", "user dropdown")
    LOGOUT_LINK = Locator(By.LINK_TEXT, "Logout", "logout link")

    MENU_ITEMS: Dict[str, Locator] = {
        label: _menu_item(label)
        for label in ("Admin", "PIM", "Leave", "Time", "Recruitment")
    }

    # =========================================================================
    # Validation Methods
    # =========================================================================

    def is_dashboard_displayed(self) -> bool:
        """
        Wait for the dashboard URL, then report whether the header is visible.

        Raises:
            WaitTimeoutError: If the browser never reaches the dashboard URL
        """
        self.wait_for_url(self.URL_FRAGMENT)
        return self.is_displayed(self.DASHBOARD_HEADER)

    def get_dashboard_header(self) -> str:
        return self.get_text(self.DASHBOARD_HEADER)

    # =========================================================================
    # Navigation
    # =========================================================================

    def click_menu(self, label: str) -> None:
        """
        Click a main-menu entry by its visible label.

        Raises:
            KeyError: For labels without a declared locator
        """
        try:
            locator = self.MENU_ITEMS[label]
        except KeyError:
            raise KeyError(
                f"Unknown menu '{label}'. Known: {', '.join(self.MENU_ITEMS)}"
            ) from None
        self.click(locator)
        logger.info(f"Clicked {label} menu")

    def click_admin_menu(self) -> None:
        self.click_menu("Admin")

    def click_pim_menu(self) -> None:
        self.click_menu("PIM")

    def click_leave_menu(self) -> None:
        self.click_menu("Leave")

    def click_time_menu(self) -> None:
        self.click_menu("Time")

    def click_recruitment_menu(self) -> None:
        self.click_menu("Recruitment")

    # =========================================================================
    # Logout
    # =========================================================================

    @allure.step("Logout")
    def logout(self) -> LoginPage:
        """
        Open the user dropdown and click Logout.

        Returns:
            LoginPage, where the application sends a logged-out user
        """
        logger.info("Performing logout...")
        self.click(self.USER_DROPDOWN)
        self.click(self.LOGOUT_LINK)
        logger.info("Clicked logout link")
        return self.transition_to(LoginPage)
