import json
import logging
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.settings import SETTINGS
from scripts.save_login_state import save_login_state

logger = logging.getLogger(__name__)

ARTIFACT_DIRS = ["artifacts", "videos", "tracing"]


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = playwright_instance.chromium.launch(headless=SETTINGS.headless)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing"""
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)  # 删除目录 p 及其包含的所有文件和子目录。
        p.mkdir()


@pytest.fixture(scope="session")
def login_state():
    """确保 login.json 存在且有效，只在需要登录态的用例里触发"""
    login_file = Path(SETTINGS.storage_state_path)

    if not login_file.exists() or login_file.stat().st_size == 0:
        logger.info("🔐 %s不存在或无效，重新生成", login_file)
        save_login_state(str(login_file))
    else:
        logger.info("✅ %s已存在且有效，跳过生成", login_file)
    return str(login_file)


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法一个全新 context
    - need_login 用例基于 login.json 复用登录态
    - 视频 + tracing 每个 attempt 单独目录，只保留失败的
    """
    attempt = getattr(request.node, "execution_count", 1)  # pytest-rerunfailures
    attempt_dir = f"attempt_{attempt}"
    record_video_dir = Path("videos") / request.node.name / attempt_dir
    record_tracing_dir = Path("tracing") / request.node.name / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    need_login = request.node.get_closest_marker("need_login") is not None
    storage_state = request.getfixturevalue("login_state") if need_login else None

    context = browser.new_context(
        storage_state=storage_state,
        record_video_dir=str(record_video_dir),
        record_video_size={"width": 1280, "height": 720})
    context.set_default_timeout(SETTINGS.default_timeout_ms)

    # Playwright 不会自动管理 tracing 文件：start → stop → 指定 zip 路径
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    # ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 先close：释放video文件句柄、video真正写入磁盘

    if not getattr(request.node, "_failed", False):
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        return

    # 失败用例：video、trace 移到 artifacts 并 attach 到 allure
    # makereport hook 触发早于 context teardown，hook 阶段 video/trace 尚未生成，所以放在这里
    target_dir = artifact_dir(request.node, attempt)
    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
        allure.attach.file(target_dir / video_file.name, name="📎 Video",
                           attachment_type=allure.attachment_type.WEBM)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")
        allure.attach.file(target_dir / "trace.zip", name="📎 Playwright-Trace.zip")


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page"""
    page = context.new_page()
    console_errors = []  # 所有console.error都会被收集

    # page.on("console") 是浏览器级别监听，不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors  # 挂到page上，方便hook里取
    yield page
    page.close()


def artifact_dir(item, attempt: int) -> Path:
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    base_dir = Path("artifacts") / module_name / class_name / item.name / f"attempt_{attempt}"
    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    测试失败时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    # 只处理 call 阶段失败
    if rep.when != "call" or not rep.failed:
        return

    # 标记失败（跨fixture通信，告诉 context 这是一次失败执行）
    item._failed = True

    page = item.funcargs.get("page")
    if not page:
        return

    base_dir = artifact_dir(item, getattr(item, "execution_count", 1))
    screenshot = base_dir / "failure.png"
    page.screenshot(path=screenshot, full_page=True)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console = base_dir / "console_errors.json"
    console.write_text(json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False),
                       encoding="utf-8")

    allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach.file(console, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
