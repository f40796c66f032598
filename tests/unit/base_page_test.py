import pytest

from pages.base_page import BasePage
from utils.retry_utils import RetryConfig
from fakes import FakeLocator


class FakePage:
    def __init__(self):
        self.gotos = []

    def goto(self, url, wait_until=None, timeout=None):
        self.gotos.append((url, wait_until, timeout))


@pytest.mark.unit
class TestBasePage:

    def test_explicit_timeouts(self):
        page = FakePage()
        base_page = BasePage(page, timeout_ms=1234)
        base_page.open("https://www.saucedemo.com/")
        assert page.gotos == [("https://www.saucedemo.com/", "load", 1234)]

    def test_fill(self):
        locator = FakeLocator()
        BasePage(FakePage(), timeout_ms=500).fill(locator, "standard_user")
        assert locator.calls == [("fill", "standard_user", 500)]

    def test_fill_with_typing_delay(self):
        locator = FakeLocator()
        BasePage(FakePage(), timeout_ms=500).fill(locator, "standard_user", delay_ms=50)
        assert locator.calls == [("fill", "", 500), ("press_sequentially", "standard_user", 50, 500)]

    def test_retry_click_returns_outcome(self):
        outcome = BasePage(FakePage()).retry_click(FakeLocator(), RetryConfig(max_attempts=2))
        assert (outcome.success, outcome.attempts) == (True, 1)

    def test_image_diagnostic_missing_element(self):
        diagnostic = BasePage(FakePage()).image_diagnostic(FakeLocator(count=0), "backpack")
        assert (diagnostic.exists, diagnostic.loaded) == (False, False)
