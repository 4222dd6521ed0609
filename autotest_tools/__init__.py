"""
================================================================================
Autotest Tools
================================================================================

Support utilities for the OrangeHRM UI suite.

Modules:
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment helpers

Example:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
