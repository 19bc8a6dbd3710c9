import logging
import re

from playwright.sync_api import Page, Locator, expect
from playwright.sync_api import Error as PlaywrightError

from config.timeouts import CLICK_TIMEOUT
from utils.errors import InteractionTimeout

logger = logging.getLogger(__name__)


class BasePage:

    def __init__(self, page: Page):
        self.page = page

    # ========= 基础动作 =========
    def open(self, url: str):
        self.page.goto(url)
        self.wait_for_navigation()

    def wait_for_navigation(self):
        self.page.wait_for_load_state("networkidle")

    def text(self, locator: Locator) -> str:
        return locator.inner_text()

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    def get_page_title(self) -> str:
        return self.page.title()

    # ========= 带步骤名的动作：失败时抛出 "Failed to ..." =========
    def click_button(self, locator: Locator, button_name: str, timeout: int = CLICK_TIMEOUT):
        try:
            locator.wait_for(state="visible", timeout=timeout)
            locator.click(timeout=timeout)
        except PlaywrightError as e:
            message = f"Failed to click {button_name}"
            self.log(f"{message}: {e}", level=logging.ERROR)
            raise InteractionTimeout(message, e) from e

    def fill_input(self, locator: Locator, value: str, field_name: str, timeout: int = CLICK_TIMEOUT):
        try:
            locator.wait_for(state="visible", timeout=timeout)
            locator.fill(value)
        except PlaywrightError as e:
            message = f"Failed to fill {field_name}"
            self.log(f"{message}: {e}", level=logging.ERROR)
            raise InteractionTimeout(message, e) from e

    def select_dropdown(self, locator: Locator, label: str, field_name: str, timeout: int = CLICK_TIMEOUT):
        try:
            locator.wait_for(state="visible", timeout=timeout)
            locator.select_option(label=label)
        except PlaywrightError as e:
            message = f"Failed to select {field_name}"
            self.log(f"{message}: {e}", level=logging.ERROR)
            raise InteractionTimeout(message, e) from e

    def check_box(self, locator: Locator, box_name: str, timeout: int = CLICK_TIMEOUT):
        try:
            locator.wait_for(state="visible", timeout=timeout)
            locator.check(timeout=timeout)
        except PlaywrightError as e:
            message = f"Failed to check {box_name}"
            self.log(f"{message}: {e}", level=logging.ERROR)
            raise InteractionTimeout(message, e) from e

    def hover_menu(self, locator: Locator, menu_name: str, timeout: int = CLICK_TIMEOUT):
        try:
            locator.hover(timeout=timeout)
        except PlaywrightError as e:
            message = f"Failed to hover {menu_name}"
            self.log(f"{message}: {e}", level=logging.ERROR)
            raise InteractionTimeout(message, e) from e

    # ========= 等待 =========
    def wait_for_element(self, locator: Locator, element_name: str, timeout: int = CLICK_TIMEOUT):
        """必须出现的元素，超时抛 InteractionTimeout"""
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightError as e:
            message = f"Failed to find {element_name}"
            self.log(f"{message}: {e}", level=logging.ERROR)
            raise InteractionTimeout(message, e) from e

    def is_visible_within(self, locator: Locator, timeout: int) -> bool:
        """在 timeout 内出现返回 True，超时返回 False（不抛异常）"""
        try:
            locator.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightError:
            return False

    def wait_url(self, pattern: str):
        expect(self.page).to_have_url(re.compile(pattern))

    def settle(self, ms: int):
        """固定等待，只用于页面没有可观察状态的异步刷新"""
        self.page.wait_for_timeout(ms)

    # ========= 辅助 =========
    def log(self, msg: str, level: int = logging.INFO):
        logger.log(level, f"[{self.__class__.__name__}] {msg}")
