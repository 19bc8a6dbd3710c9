from decimal import Decimal

from playwright.sync_api import Page, Locator
from playwright.sync_api import Error as PlaywrightError

from config.locators import CART_LOCATORS
from data.models import CartLine, CartTotals
from pages.base_page import BasePage
from utils.common_utils import extract_number


class ShoppingCartPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        # 购物车商品
        self.cart_table = page.locator(CART_LOCATORS["cart_table"])
        self.cart_rows = page.locator(CART_LOCATORS["cart_rows"])  # 商品行

        # 结算区
        self.terms_of_service_checkbox = page.locator(CART_LOCATORS["terms_of_service"]).first  # 服务条款
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮

        # 金额
        self.subtotal_label = page.locator(CART_LOCATORS["subtotal"]).first
        self.shipping_label = page.locator(CART_LOCATORS["shipping"]).first
        self.tax_label = page.locator(CART_LOCATORS["tax"]).first
        self.total_label = page.locator(CART_LOCATORS["total"]).last

    # ================= 页面行为 =================
    def go_to_cart(self, cart_url: str):
        self.open(cart_url)

    def accept_terms_of_service(self):
        """购物车为空时页面上没有服务条款，这里会抛 InteractionTimeout"""
        self.check_box(self.terms_of_service_checkbox, "Terms of Service on Shopping Cart")

    def proceed_to_checkout(self):
        """需先勾选服务条款"""
        self.click_button(self.checkout_button, "Checkout on Shopping Cart")
        self.wait_for_navigation()

    # ================= 数据获取 =================
    def get_product_row(self, product_name: str) -> Locator:
        return self.cart_rows.filter(has_text=product_name)

    def _row_quantity(self, row: Locator) -> int:
        """读不到数量时按 1 计"""
        try:
            value = row.locator(CART_LOCATORS["qty_input"]).input_value(timeout=2000)
            return int(value) if value.strip() else 1
        except (PlaywrightError, ValueError):
            return 1

    def get_cart_item_count(self) -> int:
        """各行数量之和，与行数取较大值"""
        rows = self.get_count(self.cart_rows)
        if rows == 0:
            return 0
        total_quantity = sum(self._row_quantity(self.cart_rows.nth(i)) for i in range(rows))
        return max(total_quantity, rows)

    def get_product_quantity(self, product_name: str) -> int:
        row = self.get_product_row(product_name)
        if row.count() == 0:
            return 0
        value = row.first.locator(CART_LOCATORS["qty_input"]).get_attribute("value")
        try:
            return int(value) if value else 0
        except ValueError:
            return 0

    def get_product_quantities(self, product_names: list[str]) -> dict[str, int]:
        """商品名 → 购物车中的数量，不在购物车中为 0"""
        return {name: self.get_product_quantity(name) for name in product_names}

    def _row_price(self, product_name: str, cell: str) -> Decimal:
        row = self.get_product_row(product_name)
        if row.count() == 0:
            return Decimal("0")
        return extract_number(row.first.locator(cell).text_content())

    def get_product_unit_price(self, product_name: str) -> Decimal:
        return self._row_price(product_name, CART_LOCATORS["unit_price"])

    def get_product_total_price(self, product_name: str) -> Decimal:
        return self._row_price(product_name, CART_LOCATORS["line_subtotal"])

    def get_cart_lines(self) -> list[CartLine]:
        lines = []
        for i in range(self.cart_rows.count()):
            row = self.cart_rows.nth(i)
            lines.append(CartLine(
                name=self.text(row.locator(CART_LOCATORS["product_name"])).strip(),
                unit_price=extract_number(row.locator(CART_LOCATORS["unit_price"]).text_content()),
                quantity=self._row_quantity(row),
                subtotal=extract_number(row.locator(CART_LOCATORS["line_subtotal"]).text_content())))
        return lines

    def get_subtotal(self) -> Decimal:
        return extract_number(self.subtotal_label.text_content())

    def get_shipping_cost(self) -> Decimal:
        return extract_number(self.shipping_label.text_content())

    def get_tax(self) -> Decimal:
        return extract_number(self.tax_label.text_content())

    def get_total(self) -> Decimal:
        return extract_number(self.total_label.text_content())

    def get_cart_totals(self) -> CartTotals:
        return CartTotals(subtotal=self.get_subtotal(), shipping=self.get_shipping_cost(),
                          tax=self.get_tax(), total=self.get_total())

    # ================= 手动计算 =================
    def calculate_expected_total(self, lines: list[CartLine]) -> Decimal:
        """按购物车当前单价 × 数量计算"""
        return sum((self.get_product_unit_price(line.name) * line.quantity for line in lines), Decimal("0"))
