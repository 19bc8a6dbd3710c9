import json
import logging
import shutil
from pathlib import Path
from unittest.mock import MagicMock

import allure
import pytest
from playwright.sync_api import sync_playwright, expect
from playwright.sync_api import Error as PlaywrightError

from config.pages import BROWSER, HEADLESS, VIEWPORT, get_base_url, build_urls
from config.timeouts import ACTION_TIMEOUT, NAVIGATION_TIMEOUT, DEFAULT_TIMEOUT
from utils.data_helper import load_guest_profile

logger = logging.getLogger(__name__)

ARTIFACT_DIRS = ["artifacts", "videos", "tracing"]

expect.set_options(timeout=DEFAULT_TIMEOUT)


def _attempt_dir(item) -> str:
    return f"attempt_{getattr(item, 'execution_count', 1)}"


def _artifact_dir(item) -> Path:
    """artifacts/<module>/<class>/<test>/attempt_<n>"""
    module = item.module.__name__.split(".")[-1]
    cls = item.cls.__name__ if item.cls else "no_class"
    return Path("artifacts") / module / cls / item.name / _attempt_dir(item)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def base_url():
    """BASE_URL 缺失时在启动浏览器前直接失败"""
    return get_base_url()


@pytest.fixture(scope="session")
def urls(base_url):
    return build_urls(base_url)


@pytest.fixture(scope="session")
def guest_profile():
    return load_guest_profile()


@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(base_url, playwright_instance):
    """浏览器只启动一次；先解析 base_url，配置缺失时不启动浏览器"""
    browser = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing"""
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)
        p.mkdir()


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def fake_page():
    """单元测试用：page.locator(selector) 对同一个 selector 总是返回同一个 MagicMock"""
    locators = {}
    fake = MagicMock(name="page")
    fake.locator.side_effect = lambda selector: locators.setdefault(selector, MagicMock(name=selector))
    return fake


@pytest.fixture(scope="function")
def context(browser, base_url, request):
    """
    每个测试方法一个全新 context
    - 视频 + tracing 每个 attempt 单独目录
    - 用例成功删除，失败移动到 artifacts 并 attach 到 allure
    """
    attempt_dir = _attempt_dir(request.node)
    record_video_dir = Path("videos") / attempt_dir
    record_tracing_dir = Path("tracing") / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    context = browser.new_context(
        base_url=base_url,
        viewport=VIEWPORT,
        record_video_dir=str(record_video_dir),
        record_video_size={"width": 1280, "height": 720})
    context.set_default_timeout(ACTION_TIMEOUT)
    context.set_default_navigation_timeout(NAVIGATION_TIMEOUT)
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    # video 只有在 context.close() 后才会真正写入磁盘
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)
    finally:
        context.close()

    if not getattr(request.node, "_failed", False):
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        return

    target_dir = _artifact_dir(request.node)
    target_dir.mkdir(parents=True, exist_ok=True)
    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
        allure.attach.file(target_dir / video_file.name, name="Video", attachment_type=allure.attachment_type.WEBM)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")
        allure.attach.file(target_dir / "trace.zip", name="Playwright-Trace.zip")


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page；结束时无条件关闭，页面已关闭的错误忽略"""
    page = context.new_page()
    console_errors = []
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
    try:
        page.close()
    except PlaywrightError as e:
        logger.debug(f"page already closed: {e}")


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

    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page")
    if not page:
        return

    # 跨fixture通信：告诉 context 这是一次失败执行
    item._failed = True
    logger.error(f"{item.nodeid} failed after {rep.duration:.2f}s at {page.url}")

    base_dir = _artifact_dir(item)
    base_dir.mkdir(parents=True, exist_ok=True)

    try:
        page.screenshot(path=base_dir / "failure.png", full_page=True)
        allure.attach.file(base_dir / "failure.png", name="Failure-Screenshot",
                           attachment_type=allure.attachment_type.PNG)
    except PlaywrightError as e:
        logger.warning(f"failure screenshot not captured: {e}")

    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console = json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False)
    (base_dir / "console_errors.json").write_text(console, encoding="utf-8")
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach(console, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
