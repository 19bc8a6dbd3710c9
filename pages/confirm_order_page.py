import logging
from decimal import Decimal

from playwright.sync_api import Page
from playwright.sync_api import Error as PlaywrightError

from config.locators import CHECKOUT_LOCATORS, ORDER_LOCATORS
from config.timeouts import CLICK_TIMEOUT, GUEST_CHECKOUT_PROBE_TIMEOUT
from pages.base_page import BasePage
from utils.common_utils import require_number, extract_order_number, order_number_from_href


class ConfirmOrderPage(BasePage):
    """确认订单步骤 + 下单成功页的订单号/金额读取"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.confirm_button = page.locator(CHECKOUT_LOCATORS["confirm_order"])

        # 下单成功页
        self.order_number_text = page.locator(ORDER_LOCATORS["order_number_text"]).first
        self.order_details_link = page.locator(ORDER_LOCATORS["order_details_link"]).first
        self.page_body = page.locator(ORDER_LOCATORS["page_body"])
        self.order_total_section = page.locator(ORDER_LOCATORS["order_total_section"])

    # ================= 页面行为 =================
    def click_confirm_order(self):
        """真正下单的动作，只点一次，不做重试"""
        self.click_button(self.confirm_button, "Confirm Order")
        self.wait_for_navigation()

    def click_order_details(self):
        """下单成功页进入订单详情"""
        self.click_button(self.order_details_link, "order details link", GUEST_CHECKOUT_PROBE_TIMEOUT)
        self.wait_for_navigation()

    # ================= 数据获取 =================
    def _safe_text(self, locator, timeout: int = CLICK_TIMEOUT) -> str | None:
        try:
            return locator.text_content(timeout=timeout)
        except PlaywrightError:
            return None

    def get_page_text(self) -> str:
        return self._safe_text(self.page_body) or ""

    def get_order_number(self) -> str | None:
        """
        按顺序尝试：
        1. 'Order number:' 所在元素文本
        2. 整个页面文本 / 页面 html
        3. 订单详情链接 href 末尾的数字
        都找不到返回 None（调用方按失败处理）
        """
        order_number = extract_order_number(self._safe_text(self.order_number_text))
        if order_number:
            return order_number

        order_number = (extract_order_number(self._safe_text(self.page_body))
                        or extract_order_number(self.page.content()))
        if order_number:
            return order_number

        try:
            href = self.order_details_link.get_attribute("href", timeout=GUEST_CHECKOUT_PROBE_TIMEOUT)
        except PlaywrightError:
            href = None
        order_number = order_number_from_href(href)
        if not order_number:
            self.log("Could not extract order number from page", level=logging.WARNING)
        return order_number

    def get_order_total(self) -> Decimal:
        """订单金额区域最后一个 value 单元格；区域存在但读不出金额时抛 ExtractionMiss"""
        if self.get_count(self.order_total_section) == 0:
            return Decimal("0")
        value = self.order_total_section.locator(ORDER_LOCATORS["order_total_value"]).last
        return require_number(self._safe_text(value), "order total")
