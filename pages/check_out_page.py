from playwright.sync_api import Page

from config.locators import CHECKOUT_LOCATORS
from config.timeouts import GUEST_CHECKOUT_PROBE_TIMEOUT
from pages.base_page import BasePage


class CheckOutPage(BasePage):
    """购物车点击 Checkout 后的登录/游客选择页"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.checkout_as_guest_button = page.locator(CHECKOUT_LOCATORS["checkout_as_guest"])  # 游客结算按钮

    # ================= 页面行为 =================
    def checkout_as_guest_if_prompted(self, timeout: int = GUEST_CHECKOUT_PROBE_TIMEOUT) -> bool:
        """出现游客结算提示才点击；没出现返回 False"""
        if not self.is_visible_within(self.checkout_as_guest_button, timeout):
            self.log("Guest checkout prompt not shown, continuing")
            return False
        self.click_button(self.checkout_as_guest_button, "Checkout as Guest")
        self.wait_for_navigation()
        return True
