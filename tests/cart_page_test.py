from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config.locators import CART_LOCATORS
from pages.cart_page import ShoppingCartPage
from utils.errors import InteractionTimeout


def make_row(quantity=None, error=None, name="", unit_price="", subtotal=""):
    """购物车行：qty 输入框返回 quantity，或抛出 error"""
    row = MagicMock(name=f"row {name}")
    cells = {
        CART_LOCATORS["qty_input"]: MagicMock(),
        CART_LOCATORS["product_name"]: MagicMock(),
        CART_LOCATORS["unit_price"]: MagicMock(),
        CART_LOCATORS["line_subtotal"]: MagicMock(),
    }
    if error:
        cells[CART_LOCATORS["qty_input"]].input_value.side_effect = error
    else:
        cells[CART_LOCATORS["qty_input"]].input_value.return_value = quantity
    cells[CART_LOCATORS["product_name"]].inner_text.return_value = name
    cells[CART_LOCATORS["unit_price"]].text_content.return_value = unit_price
    cells[CART_LOCATORS["line_subtotal"]].text_content.return_value = subtotal
    row.locator.side_effect = lambda selector: cells[selector]
    return row


@pytest.fixture(scope="function")
def cart_rows(fake_page):
    return fake_page.locator(CART_LOCATORS["cart_rows"])


def set_rows(cart_rows, rows):
    cart_rows.count.return_value = len(rows)
    cart_rows.nth.side_effect = lambda i: rows[i]


@pytest.mark.unit
class TestCartItemCount:

    def test_sums_quantities(self, fake_page, cart_rows):
        set_rows(cart_rows, [make_row("2"), make_row("3")])
        assert ShoppingCartPage(fake_page).get_cart_item_count() == 5

    def test_unreadable_quantity_counts_as_one(self, fake_page, cart_rows):
        set_rows(cart_rows, [make_row("2"), make_row("abc"), make_row(error=PlaywrightError("detached")),
                             make_row("")])
        assert ShoppingCartPage(fake_page).get_cart_item_count() == 5

    def test_falls_back_to_row_count(self, fake_page, cart_rows):
        set_rows(cart_rows, [make_row("0"), make_row("0"), make_row("0")])
        assert ShoppingCartPage(fake_page).get_cart_item_count() == 3

    def test_empty_cart(self, fake_page, cart_rows):
        set_rows(cart_rows, [])
        assert ShoppingCartPage(fake_page).get_cart_item_count() == 0


@pytest.mark.unit
class TestCartPrices:

    def test_cart_lines(self, fake_page, cart_rows):
        set_rows(cart_rows, [make_row("2", name="14.1-inch Laptop ", unit_price="1590.00", subtotal="3,180.00")])
        lines = ShoppingCartPage(fake_page).get_cart_lines()
        assert len(lines) == 1
        assert lines[0].name == "14.1-inch Laptop"
        assert lines[0].subtotal == Decimal("3180.00")
        assert lines[0].is_consistent()

    def test_unit_price_missing_row(self, fake_page, cart_rows):
        cart_rows.filter.return_value.count.return_value = 0
        cart_page = ShoppingCartPage(fake_page)
        assert cart_page.get_product_unit_price("Unknown") == Decimal("0")
        assert cart_page.get_product_quantity("Unknown") == 0

    def test_product_quantity(self, fake_page, cart_rows):
        row = cart_rows.filter.return_value
        row.count.return_value = 1
        row.first.locator.return_value.get_attribute.return_value = "3"
        assert ShoppingCartPage(fake_page).get_product_quantity("14.1-inch Laptop") == 3

    def test_totals(self, fake_page):
        fake_page.locator(CART_LOCATORS["subtotal"]).first.text_content.return_value = "3,180.00"
        fake_page.locator(CART_LOCATORS["shipping"]).first.text_content.return_value = "0.00"
        fake_page.locator(CART_LOCATORS["tax"]).first.text_content.return_value = "0.00"
        fake_page.locator(CART_LOCATORS["total"]).last.text_content.return_value = "3,180.00"

        totals = ShoppingCartPage(fake_page).get_cart_totals()
        assert totals.subtotal == Decimal("3180.00")
        assert totals.is_consistent()


@pytest.mark.unit
class TestCartActions:

    def test_accept_terms_of_service(self, fake_page):
        ShoppingCartPage(fake_page).accept_terms_of_service()
        fake_page.locator(CART_LOCATORS["terms_of_service"]).first.check.assert_called_once()

    def test_terms_missing_on_empty_cart(self, fake_page):
        checkbox = fake_page.locator(CART_LOCATORS["terms_of_service"]).first
        checkbox.wait_for.side_effect = PlaywrightTimeoutError("Timeout 5000ms exceeded")

        with pytest.raises(InteractionTimeout, match="Failed to check Terms of Service on Shopping Cart"):
            ShoppingCartPage(fake_page).accept_terms_of_service()
        checkbox.check.assert_not_called()

    def test_proceed_to_checkout_names_the_button(self, fake_page):
        fake_page.locator(CART_LOCATORS["checkout_button"]).wait_for.side_effect = PlaywrightTimeoutError("Timeout")

        with pytest.raises(InteractionTimeout, match="Failed to click Checkout on Shopping Cart"):
            ShoppingCartPage(fake_page).proceed_to_checkout()


@pytest.mark.unit
class TestCartProducts:

    def test_product_quantities(self, fake_page):
        cart_page = ShoppingCartPage(fake_page)
        quantities = {"14.1-inch Laptop": 2, "Unknown": 0}
        with patch.object(ShoppingCartPage, "get_product_quantity", side_effect=lambda name: quantities[name]):
            assert cart_page.get_product_quantities(["14.1-inch Laptop", "Unknown"]) == quantities
