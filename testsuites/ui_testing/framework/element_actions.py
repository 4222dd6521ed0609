# ================================================================================
# Element Actions Module
# ================================================================================
#
# Wait-qualified element interactions shared by every page object.
#
# Every operation waits for its precondition before touching the page and is
# bounded by a single WaitPolicy timeout. Nothing here retries: a wait that
# expires fails the calling action.
#
# Key Features:
#   - Presence waits before every find/click/type/read
#   - Translation of Playwright errors into the framework error taxonomy
#   - Visibility query that reports absence instead of raising
#   - Allure step integration
#
# ================================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .exceptions import (
    ElementNotFoundError,
    ElementTimeoutError,
    InteractionError,
    WaitTimeoutError,
)
from .locator import Locator


@dataclass(frozen=True)
class WaitPolicy:
    """
    Timeout bound applied uniformly to every element wait.

    Attributes:
        timeout: Maximum wait in seconds
    """
    timeout: float = 15.0

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"Wait timeout must be positive, got {self.timeout}")

    @property
    def timeout_ms(self) -> float:
        return self.timeout * 1000


class ElementActions:
    """
    Wait-driven element gateway over a Playwright page.

    Example:
        actions = ElementActions(page, WaitPolicy(timeout=15))
        actions.type_text(USERNAME_FIELD, "Admin")
        actions.click(LOGIN_BUTTON)
        assert actions.is_displayed(DASHBOARD_HEADER)
    """

    def __init__(self, page: Page, policy: Optional[WaitPolicy] = None):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object (shared with other page objects)
            policy: Wait bound for every operation
        """
        self.page = page
        self.policy = policy or WaitPolicy()

    def _timeout_ms(self, timeout: Optional[float]) -> float:
        if timeout is None:
            return self.policy.timeout_ms
        return timeout * 1000

    def find_element(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> PlaywrightLocator:
        """
        Wait until the first element matching the locator is present.

        Args:
            locator: Element locator
            timeout: Override of the policy bound, in seconds

        Returns:
            Playwright Locator bound to the first match

        Raises:
            ElementTimeoutError: When the element never becomes present
        """
        timeout_ms = self._timeout_ms(timeout)
        element = self.page.locator(locator.selector).first
        try:
            element.wait_for(state="attached", timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise ElementTimeoutError(
                f"Element '{locator.description}' ({locator}) not present "
                f"after {timeout_ms / 1000:g}s"
            ) from exc
        logger.debug(f"Found element: {locator.description}")
        return element

    def find_elements(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> PlaywrightLocator:
        """
        Wait for the first match, then return a locator over all matches.
        """
        self.find_element(locator, timeout)
        return self.page.locator(locator.selector)

    def click(self, locator: Locator, timeout: Optional[float] = None) -> None:
        """
        Click an element once it is present.

        After the presence wait Playwright still waits, within the same bound,
        for the element to be visible, enabled and the hit target of the click.

        Raises:
            ElementTimeoutError: Element never became present
            InteractionError: Element present but the click was rejected or
                intercepted (e.g. by a loading overlay)
        """
        with allure.step(f"Click: {locator.description}"):
            element = self.find_element(locator, timeout)
            timeout_ms = self._timeout_ms(timeout)

            logger.info(f"Clicking: {locator.description}")
            try:
                element.click(timeout=timeout_ms)
            except PlaywrightTimeoutError as exc:
                # Present but never clickable: covered, disabled or hidden
                raise InteractionError(
                    f"Click on '{locator.description}' not accepted "
                    f"after {timeout_ms / 1000:g}s: {exc}"
                ) from exc
            except PlaywrightError as exc:
                raise InteractionError(
                    f"Click on '{locator.description}' rejected: {exc}"
                ) from exc

    def type_text(
        self,
        locator: Locator,
        text: str,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Clear an input field, then enter text.

        Empty text is accepted and leaves the field empty.

        Args:
            locator: Input locator
            text: Text to enter
            timeout: Override of the policy bound, in seconds
        """
        with allure.step(f"Type into: {locator.description}"):
            element = self.find_element(locator, timeout)
            timeout_ms = self._timeout_ms(timeout)

            logger.debug(f"Typing into: {locator.description} ({len(text)} chars)")
            try:
                element.clear(timeout=timeout_ms)
                element.fill(text, timeout=timeout_ms)
            except PlaywrightTimeoutError as exc:
                raise WaitTimeoutError(
                    f"Typing into '{locator.description}' not completed "
                    f"after {timeout_ms / 1000:g}s"
                ) from exc
            except PlaywrightError as exc:
                raise InteractionError(
                    f"Typing into '{locator.description}' rejected: {exc}"
                ) from exc

    def get_text(self, locator: Locator, timeout: Optional[float] = None) -> str:
        """
        Return the rendered text of an element once present.

        Raises:
            ElementTimeoutError: Element never became present
            WaitTimeoutError: Element detached before its text could be read
        """
        element = self.find_element(locator, timeout)
        timeout_ms = self._timeout_ms(timeout)
        try:
            text = element.inner_text(timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(
                f"Text of '{locator.description}' not readable "
                f"after {timeout_ms / 1000:g}s"
            ) from exc
        except PlaywrightError as exc:
            raise InteractionError(
                f"Reading text of '{locator.description}' failed: {exc}"
            ) from exc
        logger.debug(f"Got text from {locator.description}: '{text}'")
        return text

    def get_all_texts(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> List[str]:
        """
        Return the rendered text of every element matching the locator.
        """
        elements = self.find_elements(locator, timeout)
        try:
            return elements.all_inner_texts()
        except PlaywrightError as exc:
            raise InteractionError(
                f"Reading texts of '{locator.description}' failed: {exc}"
            ) from exc

    def is_displayed(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        """
        Check whether an element is present and visible.

        Absence (including a wait that expires) is reported as False.
        Other failures, such as a closed page, still propagate.

        Returns:
            True if visible, False otherwise
        """
        try:
            return self.find_element(locator, timeout).is_visible()
        except (ElementNotFoundError, WaitTimeoutError):
            logger.debug(f"Element not displayed: {locator.description}")
            return False

    @allure.step("Wait for URL containing: {fragment}")
    def wait_for_url(self, fragment: str, timeout: Optional[float] = None) -> None:
        """
        Block until the current URL contains the fragment.

        Raises:
            WaitTimeoutError: When the URL never matches
        """
        timeout_ms = self._timeout_ms(timeout)
        try:
            self.page.wait_for_url(lambda url: fragment in url, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(
                f"URL did not contain '{fragment}' after {timeout_ms / 1000:g}s "
                f"(current: {self.page.url})"
            ) from exc
        logger.debug(f"URL matched '{fragment}': {self.page.url}")


__all__ = [
    "ElementActions",
    "WaitPolicy",
]
