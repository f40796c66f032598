from playwright.sync_api import Page

from assertions.cart_assert import CartAssert
from config.locators import (CART_LOCATORS, INVENTORY_LOCATORS, LOGIN_LOCATORS, CartLocators,
                             InventoryLocators)
from pages.base_page import BasePage
from utils.cart_totals import LineItem
from utils.price_utils import parse_price
from utils.retry_utils import retry_call, wait_for_condition


class CartPage(BasePage):
    def __init__(self, page: Page, locators: CartLocators = CART_LOCATORS,
                 inventory_locators: InventoryLocators = INVENTORY_LOCATORS, timeout_ms: int = None):
        super().__init__(page, timeout_ms)
        self.locators = locators

        # inventory 页
        self.products_list = page.locator(inventory_locators.item_product)  # 商品列表
        self.add_product_button = page.locator(locators.add_product_button)  # add商品按钮
        self.remove_product_button = page.locator(locators.remove_product_button)  # remove商品按钮
        self.shopping_cart_visible_count = page.locator(locators.shopping_cart_visible_count)  # 购物车显示商品数
        self.shopping_cart_button = page.locator(LOGIN_LOCATORS.shopping_cart_visible)  # 购物车icon

        self.item_product_name = page.locator(inventory_locators.item_product_name)  # 单商品名称
        self.item_product_price = page.locator(inventory_locators.item_product_price)  # 单商品价格
        self.item_product_desc = page.locator(inventory_locators.item_product_desc)  # 商品描述

        # cart 页
        self.cart_list = page.locator(locators.cart_list)
        self.cart_items = self.cart_list.locator(locators.cart_item)
        self.continue_shopping_button = page.locator(locators.continue_button)  # continue-shopping按钮
        self.checkout_button = page.locator(locators.checkout_button)  # 结算按钮

    # ================= 页面行为 =================
    def add_product(self, add_product_num: int) -> list:
        added_products = []  # 存储加购商品信息
        # 只添加当前仍可加购的商品（Add to cart 状态）
        assert self.get_count(self.add_product_button) >= add_product_num, "可加购商品不足"
        for _ in range(add_product_num):
            add = self.add_product_button.first
            # 从按钮反向定位商品容器
            product_item = add.locator("xpath=ancestor::div[@data-test='inventory-item']")
            added_products.append(
                {"product_name": self.text(product_item.locator(self.item_product_name)),
                 "product_price": parse_price(self.text(product_item.locator(self.item_product_price))),
                 "product_desc": self.text(product_item.locator(self.item_product_desc))})
            self.click(add)
        return added_products

    def remove_product(self, count: int):
        # 点击后按钮变回 Add to cart，始终点第一个 Remove
        for _ in range(count):
            self.click(self.remove_product_button.first)

    def remove_products_by_name(self, names: list[str]):
        for name in names:
            item = self.cart_items.filter(has_text=name)
            self.click(item.locator(self.locators.remove_product_button))

    def go_to_cart(self, pattern: str):
        self.click(self.shopping_cart_button)
        self.wait_url(pattern)

    def continue_shopping(self, pattern: str):
        self.click(self.continue_shopping_button)
        self.wait_url(pattern)

    def click_checkout(self, pattern: str):
        """点击购物车页面的Checkout按钮"""
        self.click(self.checkout_button)
        self.wait_url(pattern)

    # ================= 数据获取 =================
    def get_cart_badge_count(self) -> int:
        # 获取购物车显示的商品数字
        if self.shopping_cart_visible_count.count() == 0:
            return 0
        return int(self.text(self.shopping_cart_visible_count))

    def get_remove_count(self):
        return self.get_count(self.remove_product_button)

    def wait_badge_count(self, expect_count: int) -> bool:
        """等待购物车角标刷新到 expect_count，超时返回 False"""
        return wait_for_condition(lambda: self.get_cart_badge_count() == expect_count, timeout_ms=self.timeout_ms)

    def get_cart_products_info(self) -> list:
        """ 保存购物车页面商品信息list"""
        products = []
        for i in range(self.products_list.count()):
            product = self.products_list.nth(i)
            products.append({"product_name": self.text(product.locator(self.item_product_name)),
                             "product_price": parse_price(
                                 self.text(product.locator(self.item_product_price))),
                             "product_desc": self.text(product.locator(self.item_product_desc))})
        return products

    def _read_line_item(self, item) -> LineItem:
        return LineItem(name=self.text(item.locator(self.item_product_name)),
                        quantity=int(self.text(item.locator(self.locators.item_quantity))),
                        unit_price=parse_price(self.text(item.locator(self.item_product_price))))

    def get_cart_line_items(self) -> list[LineItem]:
        """逐行读取购物车商品；删除商品后列表会重渲染，单行读取失败时重试"""
        self.wait_visible(self.cart_list)
        items = []
        for i in range(self.cart_items.count()):
            item = self.cart_items.nth(i)
            items.append(retry_call(lambda: self._read_line_item(item), max_attempts=3, interval_ms=200))
        return items

    def get_cart_product_names(self) -> list[str]:
        return [item.name for item in self.get_cart_line_items()]

    # ================= 基础验证 =================
    def verify_add_product(self, add_count: int):
        self.wait_badge_count(add_count)
        CartAssert.cart_badge_count(self.get_cart_badge_count(), add_count)
        CartAssert.remove_count(self.get_remove_count(), add_count)

    def verify_delete(self, add_count: int, delete_count: int):
        self.wait_badge_count(add_count - delete_count)
        CartAssert.cart_badge_count(self.get_cart_badge_count(), add_count - delete_count)
        CartAssert.remove_count(self.get_remove_count(), add_count - delete_count)

    def verify_continue_shopping(self, first_add_count: int, second_add_count: int):
        self.wait_badge_count(first_add_count + second_add_count)
        CartAssert.cart_badge_count(self.get_cart_badge_count(), first_add_count + second_add_count)
        CartAssert.remove_count(self.get_remove_count(), first_add_count + second_add_count)

    def verify_cart_product_info_match_inventory(self, added_products: list):
        cart_products = self.get_cart_products_info()
        CartAssert.added_product_count(added_products, cart_products)
        CartAssert.product_detail_info(added_products, cart_products)

    def verify_cart_line_items(self, expect_items: list[LineItem]):
        CartAssert.line_items_match(expect_items, self.get_cart_line_items())

    def verify_products_in_cart(self, names: list[str]):
        CartAssert.products_in_cart(names, self.get_cart_product_names())

    def verify_cart_empty(self):
        self.wait_hidden(self.shopping_cart_visible_count)
        CartAssert.cart_badge_count(self.get_cart_badge_count(), 0)
