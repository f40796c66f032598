from playwright.sync_api import Page

from assertions.login_assert import LoginAssert
from config.locators import LOGIN_LOCATORS, INVENTORY_LOCATORS, LoginLocators
from pages.base_page import BasePage


class LoginPage(BasePage):
    def __init__(self, page: Page, locators: LoginLocators = LOGIN_LOCATORS, timeout_ms: int = None):
        super().__init__(page, timeout_ms)
        self.username_input = page.locator(locators.username_input)  # 用户名输入框
        self.password_input = page.locator(locators.password_input)  # 密码输入框
        self.login_button = page.locator(locators.login_button)  # 登录按钮
        self.error_message = page.locator(locators.error_msg)  # 登录校验错误提示信息
        self.error_close_button = page.locator(locators.error_close_button)  # 错误提示关闭按钮
        self.shopping_cart_visible = page.locator(locators.shopping_cart_visible)  # 登录成功后显示购物车icon
        self.page_title = page.locator(INVENTORY_LOCATORS.page_title)

    # ================= 页面行为 =================
    def open_login(self, login_url: str):
        self.open(login_url)
        self.wait_visible(self.username_input)

    def login(self, username, password, delay_ms: int = None):
        self.fill(self.username_input, username, delay_ms)
        self.fill(self.password_input, password, delay_ms)
        self.click(self.login_button)

    def close_error(self):
        self.click(self.error_close_button)
        self.wait_hidden(self.error_message)

    # ================= 数据获取 =================
    def get_login_failure_message(self):
        self.wait_visible(self.error_message)
        return self.text(self.error_message)

    def get_page_title(self) -> str:
        return self.text(self.page_title)

    # ========== 登录校验 ==========
    def verify_login_success(self, pattern: str, expect_title: str = None):
        self.wait_url(pattern)
        self.wait_visible(self.shopping_cart_visible)
        if expect_title:
            LoginAssert.page_title(self.get_page_title(), expect_title)

    def verify_login_fail(self, expect_msg: str, mode: str = None):
        LoginAssert.error_message(self.get_login_failure_message(), expect_msg, mode)

    def verify_error_visible(self):
        LoginAssert.error_visible(self.is_visible(self.error_message))

    def verify_error_closed(self):
        LoginAssert.error_visible(self.is_visible(self.error_message), expect_visible=False)
