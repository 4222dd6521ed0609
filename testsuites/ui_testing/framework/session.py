"""
================================================================================
UI Test Session
================================================================================

Per-test browser session lifecycle.

State machine:
    UNINITIALIZED --start()--> ACTIVE --close()--> CLOSED

Each test owns exactly one session. A closed session is never restarted;
a fresh one is created for the next test so no cookies or page state leak
between scenarios. `close()` is idempotent and also releases whatever a
partially failed `start()` managed to acquire.

Usage:
    with UiTestSession(UiSettings.from_config()) as session:
        login_page = LoginPage(session.page, session.settings.base_url)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

import allure
from loguru import logger
from playwright.sync_api import Page

from .browser_manager import BrowserManager
from .element_actions import ElementActions
from .exceptions import SessionStateError
from .settings import UiSettings


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"


class UiTestSession:
    """Owns the browser, context and page used by a single test."""

    def __init__(
        self,
        settings: UiSettings,
        manager_factory: Callable[..., BrowserManager] = BrowserManager,
    ):
        """
        Args:
            settings: Injected run configuration
            manager_factory: Builds the BrowserManager (replaceable in unit tests)
        """
        self.settings = settings
        self._manager_factory = manager_factory
        self._manager: Optional[BrowserManager] = None
        self._page: Optional[Page] = None
        self._actions: Optional[ElementActions] = None
        self.state = SessionState.UNINITIALIZED

    def __enter__(self) -> "UiTestSession":
        try:
            self.start()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @allure.step("Start browser session")
    def start(self) -> Page:
        """
        Launch the browser, apply timeouts and open the application.

        Returns:
            The session's Page

        Raises:
            SessionStateError: If the session was already started or closed
        """
        if self.state is not SessionState.UNINITIALIZED:
            raise SessionStateError(
                f"Cannot start a session in state '{self.state.value}'"
            )

        settings = self.settings
        logger.info("=" * 60)
        logger.info(f"Starting {settings.browser} session (headless={settings.headless})")

        self._manager = self._manager_factory(
            headless=settings.headless,
            browser_type=settings.browser,
            launch_args=settings.launch_args,
        )
        self._manager.start()

        context = self._manager.new_context(viewport=dict(settings.viewport))
        context.set_default_timeout(settings.implicit_wait * 1000)
        context.set_default_navigation_timeout(settings.page_load_timeout * 1000)

        page = context.new_page()
        self._page = page
        self._actions = ElementActions(page, settings.wait_policy())

        page.goto(settings.base_url)
        logger.info(f"Navigated to: {settings.base_url}")

        self.state = SessionState.ACTIVE
        return page

    def close(self) -> None:
        """Release the browser. Safe to call in any state, any number of times."""
        if self.state is SessionState.CLOSED:
            return

        manager, self._manager = self._manager, None
        self._page = None
        self._actions = None
        self.state = SessionState.CLOSED

        if manager is not None:
            manager.close()
            logger.info("Browser session closed")
            logger.info("=" * 60)

    def _require_active(self) -> None:
        if self.state is not SessionState.ACTIVE:
            raise SessionStateError(
                f"Session is not active (state: '{self.state.value}')"
            )

    @property
    def page(self) -> Page:
        self._require_active()
        return self._page

    @property
    def actions(self) -> ElementActions:
        self._require_active()
        return self._actions

    @property
    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def navigate(self, url: str) -> None:
        """Navigate the session's page directly to a URL."""
        with allure.step(f"Navigate to {url}"):
            self.page.goto(url)
            logger.info(f"Navigated to: {url}")


__all__ = [
    "SessionState",
    "UiTestSession",
]
