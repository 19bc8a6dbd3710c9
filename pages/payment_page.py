from playwright.sync_api import Page
from playwright.sync_api import Error as PlaywrightError

from config.locators import CHECKOUT_LOCATORS, PAYMENT_METHODS
from config.timeouts import PAYMENT_CLICK_TIMEOUT
from pages.base_page import BasePage
from utils.errors import InteractionTimeout


class PaymentPage(BasePage):
    """支付方式 + 支付信息两个步骤"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.payment_method_continue_button = page.locator(CHECKOUT_LOCATORS["payment_method_continue"])
        self.payment_info_continue_button = page.locator(CHECKOUT_LOCATORS["payment_info_continue"])

    def payment_method_radio(self, method: str):
        if method not in PAYMENT_METHODS:
            raise ValueError(f"Unknown payment method: {method}")
        return self.page.locator(CHECKOUT_LOCATORS["payment_method_radio"].format(method=PAYMENT_METHODS[method]))

    # ================= 页面行为 =================
    def select_payment_method(self, method: str):
        radio = self.payment_method_radio(method)
        try:
            radio.wait_for(state="visible", timeout=PAYMENT_CLICK_TIMEOUT)
            radio.check()
        except PlaywrightError as e:
            raise InteractionTimeout(f"Failed to select payment method {method}", e) from e

    def continue_payment_method(self):
        self.click_button(self.payment_method_continue_button, "Continue on Payment Method", PAYMENT_CLICK_TIMEOUT)
        self.wait_for_navigation()

    def continue_payment_information(self):
        """货到付款不需要额外信息，直接继续"""
        self.click_button(self.payment_info_continue_button, "Continue on Payment Information",
                          PAYMENT_CLICK_TIMEOUT)
        self.wait_for_navigation()
