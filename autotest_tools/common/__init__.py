"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config: Dot-path configuration lookup
    - set_config: Runtime configuration override
    - reload_config: Reload configuration files and environment
    - init_logger: Initialize loguru with standard settings
    - get_logger: Return the initialized loguru logger
    - ConfigurationError: Raised on invalid configuration

Usage:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    get_logger,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "set_config",
]
