import logging
from pathlib import Path

from playwright.sync_api import sync_playwright

from config.pages import URLS, ENV
from config.settings import SETTINGS
from data.login_data import LOGIN_USERS, LOGIN_SUCCESS_URL
from pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def save_login_state(storage_state_path: str = SETTINGS.storage_state_path, headless: bool = SETTINGS.headless):
    """生成登录态
        单独执行该脚本命令：python -m scripts.save_login_state
    """
    login_path = Path(storage_state_path)
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        context = browser.new_context()
        try:
            page = context.new_page()

            # 使用 Page Object 登录
            login_page = LoginPage(page)
            login_page.open_login(URLS[ENV]["login"])
            login_page.login(LOGIN_USERS["success_login"]["username"], LOGIN_USERS["success_login"]["password"])
            login_page.verify_login_success(LOGIN_SUCCESS_URL)

            login_path.parent.mkdir(parents=True, exist_ok=True)  # 确保storage目录一直存在
            context.storage_state(path=str(login_path))
        finally:
            context.close()
            browser.close()

    # 再次校验文件
    if not login_path.exists() or login_path.stat().st_size == 0:
        raise RuntimeError(f"‼️ {login_path}生成失败，请检查浏览器或账号")
    logger.info("✅ 登录态已生成 -> %s", login_path)
    return login_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    save_login_state()
