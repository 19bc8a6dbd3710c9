from playwright.sync_api import Page
from playwright.sync_api import Error as PlaywrightError

from config.locators import CHECKOUT_LOCATORS
from config.timeouts import DEPENDENT_DROPDOWN_TIMEOUT
from data.models import GuestUserProfile
from pages.base_page import BasePage
from utils.errors import InteractionTimeout


class BillingAddressPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.first_name_input = page.locator(CHECKOUT_LOCATORS["first_name"])
        self.last_name_input = page.locator(CHECKOUT_LOCATORS["last_name"])
        self.email_input = page.locator(CHECKOUT_LOCATORS["email"])
        self.company_input = page.locator(CHECKOUT_LOCATORS["company"])
        self.country_dropdown = page.locator(CHECKOUT_LOCATORS["country"])  # 国家
        self.state_dropdown = page.locator(CHECKOUT_LOCATORS["state"])  # 州/省，随国家刷新
        self.city_input = page.locator(CHECKOUT_LOCATORS["city"])
        self.address1_input = page.locator(CHECKOUT_LOCATORS["address1"])
        self.address2_input = page.locator(CHECKOUT_LOCATORS["address2"])
        self.zip_code_input = page.locator(CHECKOUT_LOCATORS["zip_code"])
        self.phone_number_input = page.locator(CHECKOUT_LOCATORS["phone_number"])
        self.fax_number_input = page.locator(CHECKOUT_LOCATORS["fax_number"])
        self.continue_button = page.locator(CHECKOUT_LOCATORS["billing_continue"])

    # ================= 页面行为 =================
    def fill_billing_address(self, profile: GuestUserProfile):
        self.fill_input(self.first_name_input, profile.first_name, "First name")
        self.fill_input(self.last_name_input, profile.last_name, "Last name")
        self.fill_input(self.email_input, profile.email, "Email")
        if profile.company:
            self.fill_input(self.company_input, profile.company, "Company")

        self.select_dropdown(self.country_dropdown, profile.country, "Country")
        if profile.state:
            self.wait_for_state_option(profile.state)
            self.select_dropdown(self.state_dropdown, profile.state, "State / province")

        self.fill_input(self.city_input, profile.city, "City")
        self.fill_input(self.address1_input, profile.address1, "Address 1")
        if profile.address2:
            self.fill_input(self.address2_input, profile.address2, "Address 2")
        self.fill_input(self.zip_code_input, profile.zip_code, "Zip / postal code")
        self.fill_input(self.phone_number_input, profile.phone_number, "Phone number")
        if profile.fax_number:
            self.fill_input(self.fax_number_input, profile.fax_number, "Fax number")

    def wait_for_state_option(self, state: str, timeout: int = DEPENDENT_DROPDOWN_TIMEOUT):
        """选择国家后州/省列表通过 ajax 重新加载，等目标选项出现"""
        option = self.state_dropdown.locator("option").filter(has_text=state).first
        try:
            option.wait_for(state="attached", timeout=timeout)
        except PlaywrightError as e:
            raise InteractionTimeout(f"Failed to load state option {state!r} after selecting country", e) from e

    def click_continue(self):
        self.click_button(self.continue_button, "Continue on Billing Address")
        self.wait_for_navigation()
