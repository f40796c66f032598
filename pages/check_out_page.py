from decimal import Decimal

from playwright.sync_api import Page, expect

from assertions.check_out_assert import CheckOutAssert
from config.locators import CHECKOUT_LOCATORS, CheckoutLocators
from pages.base_page import BasePage
from pages.cart_page import CartPage
from pages.inventory_page import InventoryPage
from utils.cart_totals import LineItem, ObservedTotals, TotalsComparison
from utils.price_utils import parse_money, parse_price


class CheckOutPage(BasePage):
    def __init__(self, page: Page, locators: CheckoutLocators = CHECKOUT_LOCATORS, timeout_ms: int = None):
        super().__init__(page, timeout_ms)
        self.locators = locators
        #  step one 收货人信息
        self.firstName_input = page.locator(locators.firstName_input)  # firstName输入框
        self.lastName_input = page.locator(locators.lastName_input)  # lastName输入框
        self.postalCode_input = page.locator(locators.postalCode_input)  # postalCode输入框
        self.container_empty_error_msg = page.locator(locators.container_error_msg)  # 收货人未填写点击下一步错误提示文案
        self.step_one_cancel_button = page.locator(locators.step_one_cancel_button)  # 取消按钮
        self.continue_button = page.locator(locators.continue_button)  # 继续按钮

        #  step two 商品信息
        self.item_product = page.locator(locators.item_list)
        self.item_product_name = page.locator(locators.item_product_name)
        self.item_product_price = page.locator(locators.item_product_price)
        self.item_product_desc = page.locator(locators.item_product_desc)
        # 订单价格
        self.payment_information = page.locator(locators.payment_information)  # 支付信息value
        self.shipping_information = page.locator(locators.shipping_information)  # 运费信息value
        self.item_total = page.locator(locators.products_price)  # 商品总价格
        self.tax = page.locator(locators.tax_price)  # 税费
        self.total = page.locator(locators.order_price)  # 订单价格
        # 操作步骤
        self.step_two_cancel_button = page.locator(locators.step_two_cancel_button)  # 取消按钮
        self.finish_button = page.locator(locators.finish_button)  # 完成按钮
        self.finish_message = page.locator(locators.finish_page_message)
        self.back_home_button = page.locator(locators.back_home_button)

        self.added_products: list[dict] = []  # 存储加购的商品

    # ========== 前提条件准备 ==========
    def prepare(self, inventory_url: str, add_count: int, cart_url: str, step_one_url: str):
        """
               checkout 模块前置条件：
               - inventory 加购
               - 进入 cart
               - 进入 checkout step one
               """
        InventoryPage(self.page, timeout_ms=self.timeout_ms).open_inventory(inventory_url)
        cart_page = CartPage(self.page, timeout_ms=self.timeout_ms)
        self.added_products = cart_page.add_product(add_count)
        cart_page.go_to_cart(cart_url)
        cart_page.click_checkout(step_one_url)

    def prepare_with_products(self, inventory_url: str, names: list[str], cart_url: str, step_one_url: str):
        """按商品名加购后进入 checkout step one"""
        inventory_page = InventoryPage(self.page, timeout_ms=self.timeout_ms)
        inventory_page.open_inventory(inventory_url)
        inventory_page.add_products(names)
        cart_page = CartPage(self.page, timeout_ms=self.timeout_ms)
        cart_page.go_to_cart(cart_url)
        cart_page.click_checkout(step_one_url)

    # ========== 页面行为 ==========
    def fill_container(self, first_name: str, last_name: str, postal_code: str, delay_ms: int = None):
        # 传 None 表示该字段保持不填
        for locator, value in ((self.firstName_input, first_name),
                               (self.lastName_input, last_name),
                               (self.postalCode_input, postal_code)):
            if value is not None:
                self.fill(locator, value, delay_ms)

    def step_one_continue(self, pattern: str):
        """点击Checkout-step-one页面continue按钮"""
        self.click(self.continue_button)
        self.wait_url(pattern)

    def step_one_cancel(self, pattern: str):
        """点击Checkout-step-one页面cancel按钮"""
        self.click(self.step_one_cancel_button)
        self.wait_url(pattern)

    def step_two_cancel(self, pattern: str):
        self.click(self.step_two_cancel_button)
        self.wait_url(pattern)

    def step_two_submit(self, pattern: str):
        self.click(self.finish_button)
        self.wait_url(pattern)

    def back_home(self, pattern: str):
        self.click(self.back_home_button)
        self.wait_url(pattern)

    # ================= 数据获取 =================
    def get_step_two_products_info(self) -> list:
        expect(self.item_product).not_to_have_count(0, timeout=self.timeout_ms)
        products = []
        for i in range(self.item_product.count()):
            item_product = self.item_product.nth(i)
            products.append({"product_name": self.text(item_product.locator(self.item_product_name)),
                             "product_price": parse_price(
                                 self.text(item_product.locator(self.item_product_price))),
                             "product_desc": self.text(item_product.locator(self.item_product_desc))})
        return products

    def get_step_two_line_items(self) -> list[LineItem]:
        expect(self.item_product).not_to_have_count(0, timeout=self.timeout_ms)
        items = []
        for i in range(self.item_product.count()):
            item = self.item_product.nth(i)
            items.append(LineItem(name=self.text(item.locator(self.item_product_name)),
                                  quantity=int(self.text(item.locator(self.locators.item_quantity))),
                                  unit_price=parse_price(self.text(item.locator(self.item_product_price)))))
        return items

    def get_error_message(self) -> str:
        self.wait_visible(self.container_empty_error_msg)
        return self.text(self.container_empty_error_msg)

    def get_payment_information(self) -> str:
        return self.text(self.payment_information)

    def get_shipping_information(self) -> str:
        return self.text(self.shipping_information)

    def get_item_total_price(self) -> str:
        return self.text(self.item_total)

    def get_tax_price(self) -> str:
        return self.text(self.tax)

    def get_total_price(self) -> str:
        return self.text(self.total)

    def get_observed_totals(self) -> ObservedTotals:
        return ObservedTotals(subtotal_text=self.get_item_total_price(),
                              tax_text=self.get_tax_price(),
                              total_text=self.get_total_price())

    # ================= 手动计算 =================
    def sum_products_price(self) -> Decimal:
        # 显式指定 sum 初始值="0"
        return sum((p["product_price"] for p in self.get_step_two_products_info()), Decimal("0"))

    # ========== checkout-step-one 基本验证 ==========
    def verify_container_empty(self, expect_error_msg: str, mode: str = None):
        CheckOutAssert.tips_message(self.get_error_message(), expect_error_msg, mode)

    # ========== checkout-step-two 基本验证 ==========
    def verify_order_products_match_added(self):
        order_products = self.get_step_two_products_info()

        CheckOutAssert.product_count(self.added_products, order_products)
        CheckOutAssert.product_detail_match(self.added_products, order_products)

    def verify_order_base_info(self):
        CheckOutAssert.not_empty(self.get_payment_information())
        CheckOutAssert.not_empty(self.get_shipping_information())
        # 验证item total
        CheckOutAssert.price_format(self.get_item_total_price())
        # 验证tax
        CheckOutAssert.price_format(self.get_tax_price())
        # 验证total
        CheckOutAssert.price_format(self.get_total_price())

        # 验证商品总价格
        CheckOutAssert.price_equal(self.sum_products_price(), parse_money(self.get_item_total_price()))

    def verify_order_totals(self, items: list[LineItem] = None) -> TotalsComparison:
        """按加购商品计算 subtotal/tax/total 并与页面比对；items 为空时取结算页商品"""
        return CheckOutAssert.order_totals(items or self.get_step_two_line_items(), self.get_observed_totals())

    # ========== 提交订单页面 ==========
    def verify_submit_order(self, finish_message: str, mode: str = None):
        CheckOutAssert.tips_message(self.text(self.finish_message), finish_message, mode)
