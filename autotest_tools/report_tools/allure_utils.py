"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by page objects and the UI failure hook.

================================================================================
"""

import json
from typing import Any, Dict

import allure


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_screenshot(image: bytes, name: str = "Screenshot"):
    """
    Attach a PNG screenshot to Allure report.

    Args:
        image: PNG bytes as returned by Playwright
        name: Attachment name
    """
    allure.attach(
        image,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def attach_settings(settings: Dict[str, Any], name: str = "UI Settings"):
    """
    Attach run settings with credentials masked.

    Args:
        settings: Settings mapping (e.g. dataclasses.asdict(UiSettings))
        name: Attachment name
    """
    safe = {
        k: "***MASKED***" if "password" in k.lower() else v
        for k, v in settings.items()
    }
    attach_json(safe, name=name)
