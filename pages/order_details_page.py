from playwright.sync_api import Page

from config.locators import ORDER_LOCATORS
from pages.base_page import BasePage
from utils.common_utils import order_number_from_href


class OrderDetailsPage(BasePage):
    """下单成功页点击 order details 后的订单详情页 /orderdetails/<id>"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.product_rows = page.locator(ORDER_LOCATORS["order_details_products"])

    def wait_loaded(self):
        self.wait_for_element(self.product_rows.first, "products on Order Details")

    # ================= 数据获取 =================
    def get_order_number(self) -> str | None:
        return order_number_from_href(self.page.url)

    def get_product_names(self) -> list[str]:
        names = []
        for i in range(self.get_count(self.product_rows)):
            cell = self.product_rows.nth(i).locator(ORDER_LOCATORS["order_details_product_name"])
            names.append(self.text(cell).strip())
        return names
