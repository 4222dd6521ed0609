"""
In-memory stand-ins for the Playwright objects the framework touches.

They implement only the calls made by ElementActions, BasePage,
UiTestSession and BrowserManager, so framework behavior can be checked
without launching a browser.
"""

from typing import Any, Callable, Dict, List, Optional

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.locator import Locator


BASE_URL = "https://hrm.test"
LOGIN_URL = f"{BASE_URL}/web/index.php/auth/login"


class FakeElement:
    def __init__(
        self,
        text: str = "",
        value: str = "",
        visible: bool = True,
        on_click: Optional[Callable[["FakePage"], None]] = None,
        click_error: Optional[Exception] = None,
        read_error: Optional[Exception] = None,
    ):
        self.text = text
        self.value = value
        self.visible = visible
        self.on_click = on_click
        self.click_error = click_error
        self.read_error = read_error
        self.clicks = 0
        self.cleared = 0


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self._page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    def _elements(self) -> List[FakeElement]:
        self._page.check_open()
        return self._page.elements.get(self.selector, [])

    def _element(self) -> FakeElement:
        elements = self._elements()
        if not elements:
            raise PlaywrightTimeoutError(f"Timeout waiting for locator('{self.selector}')")
        return elements[0]

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self._page.waits.append((self.selector, state, timeout))
        if not self._elements():
            raise PlaywrightTimeoutError(
                f"Locator.wait_for: Timeout {timeout}ms exceeded."
            )

    def click(self, timeout: Optional[float] = None) -> None:
        element = self._element()
        self._page.clicks.append((self.selector, timeout))
        if element.click_error is not None:
            raise element.click_error
        element.clicks += 1
        if element.on_click is not None:
            element.on_click(self._page)

    def clear(self, timeout: Optional[float] = None) -> None:
        element = self._element()
        element.value = ""
        element.cleared += 1

    def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self._element().value = value

    def inner_text(self, timeout: Optional[float] = None) -> str:
        element = self._element()
        if element.read_error is not None:
            raise element.read_error
        return element.text

    def all_inner_texts(self) -> List[str]:
        elements = self._elements()
        for element in elements:
            if element.read_error is not None:
                raise element.read_error
        return [element.text for element in elements]

    def is_visible(self) -> bool:
        elements = self._elements()
        return bool(elements) and elements[0].visible


class FakePage:
    def __init__(self, url: str = LOGIN_URL):
        self.url = url
        self.page_title = "OrangeHRM"
        self.elements: Dict[str, List[FakeElement]] = {}
        self.waits: List[tuple] = []
        self.clicks: List[tuple] = []
        self.visits: List[str] = []
        self.closed = False

    def check_open(self) -> None:
        if self.closed:
            raise PlaywrightError("Target page, context or browser has been closed")

    def add(self, locator: Locator, **element_kwargs: Any) -> FakeElement:
        element = FakeElement(**element_kwargs)
        self.elements.setdefault(locator.selector, []).append(element)
        return element

    def remove(self, locator: Locator) -> None:
        self.elements.pop(locator.selector, None)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def wait_for_url(self, predicate: Callable[[str], bool], timeout: Optional[float] = None) -> None:
        self.check_open()
        self.waits.append(("url", None, timeout))
        if not predicate(self.url):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for URL")

    def goto(self, url: str) -> None:
        self.check_open()
        self.visits.append(url)
        self.url = url

    def title(self) -> str:
        return self.page_title

    def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        return b"\x89PNG\r\n"


class FakeContext:
    def __init__(self, options: Dict[str, Any]):
        self.options = options
        self.default_timeout: Optional[float] = None
        self.navigation_timeout: Optional[float] = None
        self.pages: List[FakePage] = []

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.navigation_timeout = timeout

    def new_page(self) -> FakePage:
        page = FakePage(url="about:blank")
        self.pages.append(page)
        return page


class FakeBrowserManager:
    """Records lifecycle calls instead of launching a browser."""

    def __init__(self, headless: bool = True, browser_type: str = "chromium", launch_args=()):
        self.headless = headless
        self.browser_type = browser_type
        self.launch_args = list(launch_args)
        self.started = False
        self.close_calls = 0
        self.contexts: List[FakeContext] = []
        self.fail_on_start: Optional[Exception] = None
        self.fail_on_context: Optional[Exception] = None

    def start(self) -> None:
        if self.fail_on_start is not None:
            raise self.fail_on_start
        self.started = True

    def new_context(self, **options: Any) -> FakeContext:
        if self.fail_on_context is not None:
            raise self.fail_on_context
        context = FakeContext(options)
        self.contexts.append(context)
        return context

    def close(self) -> None:
        self.close_calls += 1
        self.started = False


class ManagerFactory:
    """Callable handed to UiTestSession; keeps every manager it built."""

    def __init__(self):
        self.created: List[FakeBrowserManager] = []
        self.fail_on_start: Optional[Exception] = None
        self.fail_on_context: Optional[Exception] = None

    def __call__(self, **kwargs: Any) -> FakeBrowserManager:
        manager = FakeBrowserManager(**kwargs)
        manager.fail_on_start = self.fail_on_start
        manager.fail_on_context = self.fail_on_context
        self.created.append(manager)
        return manager

    @property
    def last(self) -> FakeBrowserManager:
        return self.created[-1]


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def manager_factory() -> ManagerFactory:
    return ManagerFactory()


@pytest.fixture
def base_url() -> str:
    return BASE_URL
