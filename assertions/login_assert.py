from utils.text_utils import messages_match


class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str, mode: str = None):
        assert messages_match(actual_msg, expect_msg, mode), \
            f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def error_visible(visible: bool, expect_visible: bool = True):
        if expect_visible:
            assert visible, "登录错误提示信息未显示"
        else:
            assert not visible, "点击关闭后登录错误提示信息仍显示"

    @staticmethod
    def page_title(actual: str, expect: str):
        assert actual == expect, f"登录成功页面标题：{actual}!={expect}"
