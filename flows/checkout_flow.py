import logging
from decimal import Decimal

import allure
from playwright.sync_api import Page
from playwright.sync_api import Error as PlaywrightError

from config.locators import PAYMENT_METHODS
from data.checkout_data import PAYMENT_METHOD, PRODUCTS_TO_ADD
from data.models import GuestUserProfile, OrderConfirmation
from pages.billing_address_page import BillingAddressPage
from pages.cart_page import ShoppingCartPage
from pages.category_page import ProductCategoryPage
from pages.check_out_page import CheckOutPage
from pages.confirm_order_page import ConfirmOrderPage
from pages.home_page import HomePage
from pages.payment_page import PaymentPage
from pages.shipping_address_page import ShippingAddressPage
from utils.errors import CheckoutAborted, CheckoutError, ExtractionMiss

logger = logging.getLogger(__name__)

# 结算步骤名称（用于日志、allure step、失败信息）
STEP_GUEST_CHECKOUT = "Checkout as Guest"
STEP_BILLING_ADDRESS = "Billing Address"
STEP_SHIPPING_METHOD = "Shipping Method"
STEP_PAYMENT_METHOD = "Payment Method"
STEP_PAYMENT_INFORMATION = "Payment Information"
STEP_CONFIRM_ORDER = "Confirm Order"
STEP_ORDER_NUMBER = "Order Number"

CHECKOUT_STEPS = (STEP_GUEST_CHECKOUT, STEP_BILLING_ADDRESS, STEP_SHIPPING_METHOD, STEP_PAYMENT_METHOD,
                  STEP_PAYMENT_INFORMATION, STEP_CONFIRM_ORDER, STEP_ORDER_NUMBER)


class CheckoutFlow:
    """
    游客结算流程编排：
    Checkout as Guest → Billing → Shipping → Payment Method → Payment Info → Confirm → Order Number
    每一步失败都会以 CheckoutAborted(step) 结束整个流程，后续步骤不再执行
    """

    def __init__(self, page: Page,
                 check_out_page: CheckOutPage | None = None,
                 billing_page: BillingAddressPage | None = None,
                 shipping_page: ShippingAddressPage | None = None,
                 payment_page: PaymentPage | None = None,
                 confirm_page: ConfirmOrderPage | None = None):
        self.page = page
        self.check_out_page = check_out_page or CheckOutPage(page)
        self.billing_page = billing_page or BillingAddressPage(page)
        self.shipping_page = shipping_page or ShippingAddressPage(page)
        self.payment_page = payment_page or PaymentPage(page)
        self.confirm_page = confirm_page or ConfirmOrderPage(page)
        self.completed_steps: list[str] = []

    def _run_step(self, name: str, action):
        logger.info(f"Checkout step started: {name}")
        with allure.step(name):
            try:
                result = action()
            except (CheckoutError, PlaywrightError) as e:
                logger.error(f"Checkout step failed: {name}: {e}")
                raise CheckoutAborted(name, e) from e
        self.completed_steps.append(name)
        return result

    # ========== 单个步骤 ==========
    def _submit_billing_address(self, profile: GuestUserProfile):
        self.billing_page.fill_billing_address(profile)
        self.billing_page.click_continue()

    def _select_shipping_method(self):
        self.shipping_page.select_in_store_pickup()
        self.shipping_page.click_continue()

    def _select_payment_method(self, payment_method: str):
        self.payment_page.select_payment_method(payment_method)
        self.payment_page.continue_payment_method()

    def _confirm_order(self) -> Decimal:
        # 下单前确认页上还显示订单金额，下单成功页上没有
        order_total = self.confirm_page.get_order_total()
        self.confirm_page.click_confirm_order()
        return order_total

    def _read_order_number(self) -> str:
        order_number = self.confirm_page.get_order_number()
        if not order_number:
            raise ExtractionMiss("order number", self.confirm_page.get_page_text())
        return order_number

    # ========== 完整流程 ==========
    def complete_checkout(self, profile: GuestUserProfile, payment_method: str = PAYMENT_METHOD) -> OrderConfirmation:
        if payment_method not in PAYMENT_METHODS:
            raise ValueError(f"Unknown payment method: {payment_method}")
        self.completed_steps = []
        self._run_step(STEP_GUEST_CHECKOUT, self.check_out_page.checkout_as_guest_if_prompted)
        self._run_step(STEP_BILLING_ADDRESS, lambda: self._submit_billing_address(profile))
        self._run_step(STEP_SHIPPING_METHOD, self._select_shipping_method)
        self._run_step(STEP_PAYMENT_METHOD, lambda: self._select_payment_method(payment_method))
        self._run_step(STEP_PAYMENT_INFORMATION, self.payment_page.continue_payment_information)
        order_total = self._run_step(STEP_CONFIRM_ORDER, self._confirm_order)
        order_number = self._run_step(STEP_ORDER_NUMBER, self._read_order_number)

        logger.info(f"Order placed: number={order_number}, total={order_total}")
        return OrderConfirmation(order_number=order_number, order_total=order_total)


def fill_cart(page: Page, urls: dict, min_items: int = PRODUCTS_TO_ADD) -> ShoppingCartPage:
    """首页 → notebooks 列表随机加购 min_items 件 → 停在购物车页"""
    HomePage(page).go_to_home(urls["home"])
    ProductCategoryPage(page).add_products_until_minimum(urls["notebooks"], min_items)

    cart_page = ShoppingCartPage(page)
    cart_page.go_to_cart(urls["cart"])
    return cart_page


def prepare_cart(page: Page, urls: dict, min_items: int = PRODUCTS_TO_ADD) -> ShoppingCartPage:
    """
    结算前置条件：
    - 加购 min_items 件并进入购物车
    - 勾选服务条款并点击 Checkout
    """
    cart_page = fill_cart(page, urls, min_items)
    cart_page.accept_terms_of_service()
    cart_page.proceed_to_checkout()
    return cart_page


def run_guest_checkout(page: Page, urls: dict, profile: GuestUserProfile,
                       min_items: int = PRODUCTS_TO_ADD) -> OrderConfirmation:
    """加购 + 游客结算，一次调用完成整个下单场景"""
    prepare_cart(page, urls, min_items)
    return CheckoutFlow(page).complete_checkout(profile)
