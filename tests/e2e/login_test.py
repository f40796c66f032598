import pytest

from pages.login_page import LoginPage
from config.pages import URLS, ENV
from data.login_data import LOGIN_USERS, LOGIN_SUCCESS_URL, LOGIN_SUCCESS_TITLE


@pytest.fixture(scope="function")
def login_page(page):
    login_page = LoginPage(page)
    login_page.open_login(URLS[ENV]["login"])
    return login_page


@pytest.mark.ui
class TestLogin:

    def test_login_success(self, login_page):
        login_page.login(LOGIN_USERS["success_login"]["username"], LOGIN_USERS["success_login"]["password"])
        login_page.verify_login_success(LOGIN_SUCCESS_URL, LOGIN_SUCCESS_TITLE)

    def test_login_success_typing_with_delay(self, login_page):
        """逐字输入账号密码"""
        login_page.login(LOGIN_USERS["success_login"]["username"], LOGIN_USERS["success_login"]["password"],
                         delay_ms=50)
        login_page.verify_login_success(LOGIN_SUCCESS_URL)

    # 测试登录失败（场景参数化）
    @pytest.mark.parametrize(
        "case_key", [
            "wrong_username",
            "wrong_password",
            "empty_username_password",
            "empty_password",
            "inexistence_username",
            "locked_out"
        ]
    )
    def test_login_fail(self, login_page, case_key):
        data = LOGIN_USERS[case_key]
        login_page.login(data["username"], data["password"])
        login_page.verify_login_fail(data["error_msg"])

    def test_login_fail_keeps_error_visible(self, login_page):
        data = LOGIN_USERS["wrong_password"]
        login_page.login(data["username"], data["password"])
        login_page.verify_error_visible()

    def test_close_login_error(self, login_page):
        """点击错误提示的关闭按钮后提示消失"""
        data = LOGIN_USERS["locked_out"]
        login_page.login(data["username"], data["password"])
        login_page.verify_error_visible()
        login_page.close_error()
        login_page.verify_error_closed()
