"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Browser type selection (chromium, firefox, webkit)
    - Launch argument presets
    - Context isolation per test
    - Idempotent shutdown

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Playwright,
    sync_playwright,
)


class BrowserManager:
    """
    Manages one browser instance and its contexts.

    Usage:
        with BrowserManager(browser_type="chromium") as manager:
            page = manager.new_context().new_page()
            page.goto("https://example.com")
    """

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        launch_args: Sequence[str] = (),
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            launch_args: Extra command-line arguments for the browser
        """
        self.headless = headless
        self.browser_type = browser_type
        self.launch_args = list(launch_args)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    def __enter__(self) -> "BrowserManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = sync_playwright().start()

        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        # Chromium-style switches are only understood by chromium
        args = self.launch_args if self.browser_type == "chromium" else []

        self._browser = browser_launcher.launch(headless=self.headless, args=args)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, args={args})"
        )

    def close(self) -> None:
        """Close all contexts, the browser and Playwright. Safe to call repeatedly."""
        for context in self._contexts:
            try:
                context.close()
            except PlaywrightError as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        try:
            if self._browser:
                self._browser.close()
        finally:
            self._browser = None
            if self._playwright:
                self._playwright.stop()
                self._playwright = None

        logger.debug("Browser closed")

    def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = self._browser.new_context(**context_options)
        self._contexts.append(context)

        return context


__all__ = [
    "BrowserManager",
]
