import logging
import random
from decimal import Decimal

from playwright.sync_api import Page, Locator
from playwright.sync_api import Error as PlaywrightError

from config.locators import CATEGORY_LOCATORS
from config.timeouts import (ADD_TO_CART_VISIBLE_TIMEOUT, ADD_TO_CART_SETTLE, ADD_TO_CART_RETRY_DELAY,
                             ADD_TO_CART_MAX_FAILURES, CLICK_TIMEOUT)
from pages.base_page import BasePage
from utils.common_utils import extract_number
from utils.errors import InteractionTimeout


class ProductCategoryPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.product_items = page.locator(CATEGORY_LOCATORS["product_item"])  # 商品列表
        self.catalog_add_buttons = page.locator(CATEGORY_LOCATORS["catalog_add_to_cart"])  # 列表页加购按钮

        # 商品详情页
        self.details_add_button = page.locator(CATEGORY_LOCATORS["details_add_to_cart"])
        self.details_qty_input = page.locator(CATEGORY_LOCATORS["details_qty_input"])
        self.success_notification = page.locator(CATEGORY_LOCATORS["success_notification"])
        self.notification_close = page.locator(CATEGORY_LOCATORS["notification_close"])

    def get_product_by_name(self, product_name: str) -> Locator:
        return self.product_items.filter(has_text=product_name)

    # ================= 页面行为 =================
    def open_category(self, category_url: str):
        self.open(category_url)

    def add_products_until_minimum(self, category_url: str, min_items: int = 4,
                                   max_failures: int = ADD_TO_CART_MAX_FAILURES) -> int:
        """
        在分类列表页随机加购，直到成功 min_items 次：
        - 成功：计数 +1，等待购物车/提示条刷新
        - 失败：短暂等待后重试（不刷新页面），累计失败 max_failures 次后抛 InteractionTimeout
        - 列表页没有可加购商品：记录 warning 并提前结束
        返回成功加购次数
        """
        self.log(f"Starting to add {min_items} products to cart")
        self.open_category(category_url)

        added = 0
        failures = 0
        while added < min_items:
            button_count = self.get_count(self.catalog_add_buttons)
            if button_count == 0:
                self.log("No products available to add", level=logging.WARNING)
                break

            button = self.catalog_add_buttons.nth(random.randrange(button_count))
            try:
                button.wait_for(state="visible", timeout=ADD_TO_CART_VISIBLE_TIMEOUT)
                button.click()
            except PlaywrightError as e:
                failures += 1
                if failures >= max_failures:
                    raise InteractionTimeout(
                        f"Failed to add products to cart after {failures} failed attempts", e) from e
                self.log(f"Failed to add product, retrying ({failures}/{max_failures})", level=logging.WARNING)
                self.settle(ADD_TO_CART_RETRY_DELAY)
                continue

            added += 1
            self.log(f"Added product {added}/{min_items}")
            # 加购是 ajax 请求，列表页上没有稳定的完成标志
            self.settle(ADD_TO_CART_SETTLE)

        self.log(f"Completed: {added} products added to cart")
        return added

    def add_product_to_cart(self, product_name: str, quantity: int = 1):
        """进入商品详情页加购指定数量，然后返回列表页"""
        title_link = self.get_product_by_name(product_name).locator(CATEGORY_LOCATORS["product_title_link"]).first
        self.click_button(title_link, f"{product_name} in product list")
        self.wait_for_navigation()

        if quantity > 1:
            self.fill_input(self.details_qty_input.first, str(quantity), f"quantity of {product_name}")
        self.click_button(self.details_add_button.first, f"Add to cart on {product_name}")
        self.wait_for_element(self.success_notification, f"add-to-cart notification for {product_name}",
                              CLICK_TIMEOUT * 2)
        if self.notification_close.is_visible():
            self.click_button(self.notification_close, "close on add-to-cart notification")

        self.page.go_back()
        self.wait_for_navigation()

    # ================= 数据获取 =================
    def get_product_price(self, product_name: str) -> Decimal:
        price = self.get_product_by_name(product_name).locator(CATEGORY_LOCATORS["product_price"]).first
        return extract_number(price.text_content())
