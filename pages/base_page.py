import json
import logging
import re

import allure
from playwright.sync_api import Page, expect

from config.settings import SETTINGS
from utils.image_utils import ImageDiagnostic, check_image_loaded
from utils.retry_utils import RetryConfig, RetryOutcome, retry_click

logger = logging.getLogger(__name__)


class BasePage:
    """所有页面动作都显式带超时，不依赖 Playwright 的隐式等待默认值"""

    def __init__(self, page: Page, timeout_ms: int = None):
        self.page = page
        self.timeout_ms = timeout_ms or SETTINGS.default_timeout_ms

    # ========= 基础动作 =========
    def open(self, url: str, wait_until: str = "load"):
        self.page.goto(url, wait_until=wait_until, timeout=self.timeout_ms)

    def click(self, locator):
        locator.scroll_into_view_if_needed(timeout=self.timeout_ms)
        locator.click(timeout=self.timeout_ms)

    def fill(self, locator, value: str, delay_ms: int = None):
        """delay_ms 不为空时逐字输入（模拟真实键入），否则直接 fill"""
        if delay_ms:
            locator.fill("", timeout=self.timeout_ms)
            locator.press_sequentially(value, delay=delay_ms, timeout=self.timeout_ms)
        else:
            locator.fill(value, timeout=self.timeout_ms)

    def text(self, locator) -> str:
        return locator.inner_text(timeout=self.timeout_ms)

    def get_texts(self, locator) -> list[str]:
        return [locator.nth(i).inner_text(timeout=self.timeout_ms) for i in range(locator.count())]

    def get_attrs(self, locator, attr: str) -> list[str]:
        return [locator.nth(i).get_attribute(attr, timeout=self.timeout_ms) for i in range(locator.count())]

    def get_count(self, locator) -> int:
        return locator.count()

    def is_visible(self, locator) -> bool:
        return locator.is_visible()

    # ========= 等待 =========
    def wait_visible(self, locator, timeout_ms: int = None):
        # expect 严格模式：定位到多个元素时需要调用方先取 .first
        expect(locator).to_be_visible(timeout=timeout_ms or self.timeout_ms)

    def wait_hidden(self, locator, timeout_ms: int = None):
        expect(locator).to_be_hidden(timeout=timeout_ms or self.timeout_ms)

    def wait_url(self, pattern: str, timeout_ms: int = None):
        expect(self.page).to_have_url(re.compile(pattern), timeout=timeout_ms or self.timeout_ms)

    # ========= 稳定性 =========
    def retry_click(self, locator, config: RetryConfig = None) -> RetryOutcome:
        """指数退避点击，结果附加到 allure 报告，由调用方决定是否断言"""
        outcome = retry_click(locator, config or SETTINGS.click_retry)
        logger.info("retry click %s -> %s", locator, outcome)
        allure.attach(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False),
                      name="Retry-Click-Outcome", attachment_type=allure.attachment_type.JSON)
        return outcome

    def image_diagnostic(self, locator, name: str = "image") -> ImageDiagnostic:
        diagnostic = check_image_loaded(locator, timeout_ms=self.timeout_ms)
        allure.attach(json.dumps(diagnostic.to_dict(), indent=2, ensure_ascii=False),
                      name=f"Image-Diagnostic-{name}", attachment_type=allure.attachment_type.JSON)
        return diagnostic
