"""
Repository-level pytest configuration.

Why this exists:
  - Register command-line options shared by every suite
  - Keep live browser runs opt-in so unit tests work without a browser
  - Expose the repo root to tests

Live UI scenarios drive a real browser against the OrangeHRM demo site.
Enable them with `--run-live` or `UI_RUN_LIVE=1`.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_addoption(parser):
    group = parser.getgroup("ui", "OrangeHRM UI suite")
    group.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run live UI scenarios against the configured application",
    )
    group.addoption(
        "--browser",
        action="store",
        default=None,
        choices=["chromium", "firefox", "webkit"],
        help="Browser for UI tests (default: ui.browser from config)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
