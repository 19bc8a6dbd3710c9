from playwright.sync_api import Page, expect
from playwright.sync_api import Error as PlaywrightError

from config.locators import CHECKOUT_LOCATORS, PICKUP_TOGGLE_SCRIPT
from config.timeouts import CLICK_TIMEOUT, PICKUP_TOGGLE_TIMEOUT
from pages.base_page import BasePage
from utils.errors import InteractionTimeout


class ShippingAddressPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.in_store_pickup_checkbox = page.locator(CHECKOUT_LOCATORS["in_store_pickup"])  # 到店自提
        self.continue_button = page.locator(CHECKOUT_LOCATORS["shipping_continue"])

    # ================= 数据获取 =================
    def is_in_store_pickup_selected(self) -> bool:
        return self.in_store_pickup_checkbox.is_checked()

    def _wait_checked(self, timeout: int) -> bool:
        try:
            expect(self.in_store_pickup_checkbox).to_be_checked(timeout=timeout)
            return True
        except AssertionError:
            return False

    # ================= 页面行为 =================
    def select_in_store_pickup(self):
        """
        勾选到店自提（已勾选则不操作）
        先走正常点击；若页面脚本没有把状态改过来，再直接改 DOM 并调用 Shipping.togglePickUpInStore
        """
        try:
            self.in_store_pickup_checkbox.wait_for(state="attached", timeout=CLICK_TIMEOUT)
        except PlaywrightError as e:
            raise InteractionTimeout("Failed to find In-Store Pickup checkbox on Shipping Address", e) from e

        if self.is_in_store_pickup_selected():
            self.log("In-Store Pickup already selected")
            return

        try:
            self.in_store_pickup_checkbox.scroll_into_view_if_needed(timeout=CLICK_TIMEOUT)
            self.in_store_pickup_checkbox.click(timeout=CLICK_TIMEOUT)
        except PlaywrightError as e:
            self.log(f"Native click on In-Store Pickup failed: {e}")

        if self._wait_checked(PICKUP_TOGGLE_TIMEOUT):
            return

        self.log("In-Store Pickup not checked after click, toggling through page script")
        self.page.evaluate(PICKUP_TOGGLE_SCRIPT)
        if not self._wait_checked(PICKUP_TOGGLE_TIMEOUT):
            raise InteractionTimeout("Failed to select In-Store Pickup on Shipping Address")

    def click_continue(self):
        self.click_button(self.continue_button, "Continue on Shipping Address")
        self.wait_for_navigation()
