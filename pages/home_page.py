import re

from playwright.sync_api import Page

from config.locators import HOME_LOCATORS
from pages.base_page import BasePage
from utils.common_utils import extract_cart_badge_count


class HomePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.shopping_cart_link = page.locator(HOME_LOCATORS["shopping_cart_link"]).first  # 顶部购物车
        self.top_menu = page.locator(HOME_LOCATORS["top_menu"])

        self.computers_menu = self.top_menu.locator("a").filter(
            has_text=re.compile(f"^{HOME_LOCATORS['computers_menu_text']}$"))
        self.notebooks_sub_menu = self.top_menu.locator("a").filter(
            has_text=re.compile(f"^{HOME_LOCATORS['notebooks_menu_text']}$"))

    # ================= 页面行为 =================
    def go_to_home(self, home_url: str):
        self.open(home_url)

    def go_to_notebooks(self):
        self.hover_menu(self.computers_menu.first, "Computers in top menu")
        self.click_button(self.notebooks_sub_menu.first, "Notebooks in top menu")
        self.wait_for_navigation()

    def go_to_shopping_cart(self):
        self.click_button(self.shopping_cart_link, "Shopping cart link")
        self.wait_for_navigation()

    # ================= 数据获取 =================
    def get_cart_item_count(self) -> int:
        """顶部 Shopping cart (N) 中的数字"""
        return extract_cart_badge_count(self.shopping_cart_link.text_content())
