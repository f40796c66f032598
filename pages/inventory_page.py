import time
from decimal import Decimal

from playwright.sync_api import Page

from assertions.inventory_assert import InventoryAssert
from config.locators import INVENTORY_LOCATORS, InventoryLocators
from data.inventory_data import find_product, product_slug
from pages.base_page import BasePage
from utils.price_utils import format_price, parse_price
from utils.retry_utils import RetryConfig, RetryOutcome


class InventoryPage(BasePage):
    def __init__(self, page: Page, locators: InventoryLocators = INVENTORY_LOCATORS, timeout_ms: int = None):
        super().__init__(page, timeout_ms)
        self.locators = locators
        self.inventory_container = page.locator(locators.inventory_container)
        # 商品列表
        self.item_product = page.locator(locators.item_product)

        # 商品明细
        self.item_product_name = page.locator(locators.item_product_name)
        self.item_product_price = page.locator(locators.item_product_price)
        self.item_product_desc = page.locator(locators.item_product_desc)
        self.item_product_img = page.locator(locators.item_product_img)

        # 排序下拉框
        self.product_sort_type = page.locator(locators.product_sort_type)

    # ================= 页面行为 =================
    def open_inventory(self, inventory_url: str, wait_until: str = "load"):
        self.open(inventory_url, wait_until)
        self.wait_visible(self.item_product.first)

    def measure_load(self, inventory_url: str, timeout_ms: int, wait_network_idle: bool = True) -> int:
        """打开inventory页面并等待首个商品图片可见，返回耗时ms"""
        start = time.monotonic()
        self.open(inventory_url, "domcontentloaded")
        if wait_network_idle:
            self.page.wait_for_load_state("networkidle", timeout=timeout_ms)
        self.wait_visible(self.inventory_container, timeout_ms)
        self.product_image(find_product("Sauce Labs Backpack")["id"]).wait_for(state="visible", timeout=timeout_ms)
        return int((time.monotonic() - start) * 1000)

    # 选择排序方式
    def sort_by(self, label: str):
        self.product_sort_type.select_option(label=label, timeout=self.timeout_ms)

    def add_to_cart_button(self, name: str):
        return self.page.locator(self.locators.add_to_cart(product_slug(name)))

    def remove_button(self, name: str):
        return self.page.locator(self.locators.remove(product_slug(name)))

    def product_image(self, product_id: str):
        return self.page.locator(self.locators.product_img(product_id))

    def add_products(self, names: list[str]):
        """按商品名加购"""
        self.wait_visible(self.inventory_container)
        for name in names:
            find_product(name)  # 商品不在目录中直接报错
            button = self.add_to_cart_button(name)
            self.wait_visible(button)
            self.click(button)

    def retry_add_to_cart(self, name: str, config: RetryConfig = None) -> RetryOutcome:
        return self.retry_click(self.add_to_cart_button(name), config)

    # ================= 数据获取 =================
    def get_product_count(self) -> int:
        return self.get_count(self.item_product)

    def get_product_names(self) -> list[str]:
        return self.get_texts(self.item_product_name)

    def get_product_description(self) -> list[str]:
        return self.get_texts(self.item_product_desc)

    def get_product_imgs(self) -> list[str]:
        return self.get_attrs(self.item_product_img, "src")

    def get_product_prices(self) -> list[str]:
        return self.get_texts(self.item_product_price)

    def get_product_prices_as_number(self) -> list[Decimal]:
        return [parse_price(p) for p in self.get_product_prices()]

    def get_product_info_by_index(self, index: int):
        """保存单商品基本信息"""
        item = self.item_product.nth(index)
        return {
            "product_name": self.text(item.locator(self.item_product_name)),
            "product_price": self.text(item.locator(self.item_product_price)),
            "product_desc": self.text(item.locator(self.item_product_desc))
        }

    def get_product_info_by_name(self, name: str) -> dict:
        item = self.item_product.filter(has=self.page.locator(self.locators.product_title(find_product(name)["id"])))
        return {
            "product_name": self.text(item.locator(self.item_product_name)),
            "product_price": self.text(item.locator(self.item_product_price)),
        }

    # ========== 基础校验 ==========
    def verify_base_info(self, expect_count: int):
        InventoryAssert.product_count(self.get_product_count(), expect_count)  # 商品数量一致
        InventoryAssert.column_not_empty(self.get_product_names(), "商品名称")
        InventoryAssert.column_not_empty(self.get_product_description(), "商品描述")
        InventoryAssert.column_not_empty(self.get_product_imgs(), "商品图片")
        InventoryAssert.product_price_format(self.get_product_prices())  # 商品价格格式
        InventoryAssert.product_price_is_decimal(self.get_product_prices_as_number())  # 商品价格是Decimal

    def verify_product_display(self, name: str):
        product = find_product(name)
        info = self.get_product_info_by_name(name)
        InventoryAssert.text_equal(info["product_name"], product["name"])
        InventoryAssert.text_equal(info["product_price"], format_price(product["price"]))

    def verify_first_product(self, name: str):
        info = self.get_product_info_by_index(0)
        InventoryAssert.text_equal(info["product_name"], name)
        InventoryAssert.text_equal(info["product_price"], format_price(find_product(name)["price"]))

    def verify_name_asc(self):
        InventoryAssert.sort_asc(self.get_product_names(), "商品名称")

    def verify_name_desc(self):
        InventoryAssert.sort_desc(self.get_product_names(), "商品名称")

    def verify_price_asc(self):
        InventoryAssert.sort_asc(self.get_product_prices_as_number(), "商品价格")

    def verify_price_desc(self):
        InventoryAssert.sort_desc(self.get_product_prices_as_number(), "商品价格")
