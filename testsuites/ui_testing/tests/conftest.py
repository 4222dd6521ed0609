"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live UI scenarios: run settings, one browser session per test,
page objects bound to that session, and failure capture for Allure.

Key Features:
- Settings injected from config + command-line overrides
- Function-scoped session, always closed (also when setup fails)
- Page Object fixtures
- Screenshot capture on failure

================================================================================
"""

from dataclasses import asdict
from typing import Generator

import pytest
from loguru import logger

from autotest_tools.report_tools.allure_utils import attach_settings
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.session import UiTestSession
from testsuites.ui_testing.framework.settings import UiSettings
from testsuites.ui_testing.pages.dashboard_page import DashboardPage
from testsuites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Settings & Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings(pytestconfig) -> UiSettings:
    """
    Session-scoped run settings.

    Loaded once from configuration; `--browser` and `--headed` win over it.
    """
    settings = UiSettings.from_config().with_overrides(
        browser=pytestconfig.getoption("--browser"),
        headless=False if pytestconfig.getoption("--headed") else None,
    )
    logger.info(f"UI target: {settings.base_url} ({settings.browser})")
    return settings


@pytest.fixture(scope="function")
def ui_session(ui_settings: UiSettings) -> Generator[UiTestSession, None, None]:
    """
    Function-scoped browser session.

    Each test gets a fresh browser context already on the base URL.
    The session is released on every path.
    """
    session = UiTestSession(ui_settings)
    try:
        session.start()
        attach_settings(asdict(ui_settings))
        yield session
    finally:
        session.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(ui_session: UiTestSession) -> LoginPage:
    """LoginPage bound to the current session."""
    return LoginPage(
        ui_session.page,
        base_url=ui_session.settings.base_url,
        wait_policy=ui_session.settings.wait_policy(),
    )


@pytest.fixture
def dashboard_page(login_page: LoginPage, ui_settings: UiSettings) -> DashboardPage:
    """
    DashboardPage for an authenticated user.

    Logs in with the configured credentials before the test body runs.
    """
    return login_page.login(ui_settings.username, ui_settings.password)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture a screenshot and the current URL when a UI test fails.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return

    session = getattr(item, "funcargs", {}).get("ui_session")
    if session is None or not session.is_active:
        return
    if not session.settings.screenshot_on_failure:
        return

    page = BasePage(session.page, base_url=session.settings.base_url)
    try:
        page.capture_failure(item.name)
    except Exception as e:
        # Log but don't fail if screenshot capture fails
        logger.warning(f"Failed to capture screenshot on failure: {e}")
