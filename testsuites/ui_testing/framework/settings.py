"""
================================================================================
UI Settings
================================================================================

Immutable configuration value injected into the test session harness.

Values come from `autotest_tools.common.get_config` (config/config.yaml,
optional environment overlay, `UI__*` environment overrides). Command-line
options are layered on top with `with_overrides()`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from autotest_tools.common import ConfigurationError, get_config

from .element_actions import WaitPolicy


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

DEFAULT_LAUNCH_ARGS: Tuple[str, ...] = (
    "--start-maximized",
    "--disable-notifications",
    "--disable-popup-blocking",
)


@dataclass(frozen=True)
class UiSettings:
    """
    Settings for one UI test run.

    Timeouts are in seconds.
    """
    base_url: str = "https://opensource-demo.orangehrmlive.com/"
    username: str = "Admin"
    password: str = "admin123"
    browser: str = "chromium"
    headless: bool = True
    launch_args: Tuple[str, ...] = DEFAULT_LAUNCH_ARGS
    viewport: Dict[str, int] = field(default_factory=lambda: {"width": 1920, "height": 1080})
    implicit_wait: float = 10
    explicit_wait: float = 15
    page_load_timeout: float = 30
    screenshot_on_failure: bool = True

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("ui.base_url must not be empty")
        if self.browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser '{self.browser}'. "
                f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        for name in ("implicit_wait", "explicit_wait", "page_load_timeout"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"ui timeout '{name}' must be positive")
        object.__setattr__(self, "launch_args", tuple(self.launch_args))

    @classmethod
    def from_config(cls) -> "UiSettings":
        """Build settings from the global configuration."""
        defaults = cls()
        return cls(
            base_url=get_config("ui.base_url", defaults.base_url),
            username=get_config("ui.username", defaults.username),
            password=get_config("ui.password", defaults.password),
            browser=get_config("ui.browser", defaults.browser),
            headless=get_config("ui.headless", defaults.headless),
            launch_args=tuple(get_config("ui.launch_args", list(defaults.launch_args))),
            viewport={
                "width": get_config("ui.viewport.width", defaults.viewport["width"]),
                "height": get_config("ui.viewport.height", defaults.viewport["height"]),
            },
            implicit_wait=get_config("ui.timeouts.implicit_wait", float(defaults.implicit_wait)),
            explicit_wait=get_config("ui.timeouts.explicit_wait", float(defaults.explicit_wait)),
            page_load_timeout=get_config("ui.timeouts.page_load", float(defaults.page_load_timeout)),
            screenshot_on_failure=get_config(
                "ui.screenshot_on_failure", defaults.screenshot_on_failure
            ),
        )

    def with_overrides(self, **overrides: Any) -> "UiSettings":
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def wait_policy(self) -> WaitPolicy:
        return WaitPolicy(timeout=self.explicit_wait)


__all__ = [
    "UiSettings",
    "SUPPORTED_BROWSERS",
]
