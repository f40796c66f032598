import pytest

from config.pages import URLS, ENV
from data.cart_data import (ADD_PRODUCT_COUNT,
                            DELETE_PRODUCT_COUNT,
                            FIRST_PRODUCT_COUNT,
                            SECOND_PRODUCT_COUNT,
                            MULTIPLE_PRODUCTS)
from data.inventory_data import find_product
from pages.cart_page import CartPage
from pages.inventory_page import InventoryPage
from utils.cart_totals import LineItem


@pytest.fixture(scope="function")
def inventory_page(page):
    inventory_page = InventoryPage(page)
    inventory_page.open_inventory(URLS[ENV]["inventory"])
    return inventory_page


@pytest.fixture(scope="function")
def cart_page(page, inventory_page):
    """每个测试方法提供新的 CartPage 实例，已停留在 inventory 页"""
    return CartPage(page)


@pytest.mark.ui
@pytest.mark.need_login
class TestCart:

    def test_add_product(self, cart_page):
        """验证从inventory页面添加商品"""
        cart_page.add_product(ADD_PRODUCT_COUNT)
        cart_page.verify_add_product(ADD_PRODUCT_COUNT)

    def test_delete_product_from_inventory(self, cart_page):
        """验证从inventory页面删除商品"""
        cart_page.add_product(ADD_PRODUCT_COUNT)
        cart_page.remove_product(DELETE_PRODUCT_COUNT)
        cart_page.verify_delete(ADD_PRODUCT_COUNT, DELETE_PRODUCT_COUNT)

    def test_delete_product_from_cart(self, cart_page):
        """验证从cart页面删除商品"""
        cart_page.add_product(ADD_PRODUCT_COUNT)
        cart_page.go_to_cart("cart.html")
        cart_page.remove_product(DELETE_PRODUCT_COUNT)
        cart_page.verify_delete(ADD_PRODUCT_COUNT, DELETE_PRODUCT_COUNT)

    def test_continue_shopping(self, cart_page):
        """验证继续购物"""
        cart_page.add_product(FIRST_PRODUCT_COUNT)
        cart_page.go_to_cart("cart.html")
        cart_page.continue_shopping("/inventory.html")
        cart_page.add_product(SECOND_PRODUCT_COUNT)
        cart_page.go_to_cart("cart.html")
        cart_page.verify_continue_shopping(FIRST_PRODUCT_COUNT, SECOND_PRODUCT_COUNT)

    def test_verify_cart_page_products_info(self, cart_page):
        """验证列表页加购的商品信息=购物车页面显示的商品信息"""
        added = cart_page.add_product(ADD_PRODUCT_COUNT)
        cart_page.go_to_cart("cart.html")
        cart_page.verify_cart_product_info_match_inventory(added)

    def test_add_multiple_products_by_name(self, inventory_page, cart_page):
        """按商品名加购，购物车数量、单价与商品目录一致"""
        inventory_page.add_products(MULTIPLE_PRODUCTS)
        cart_page.go_to_cart("cart.html")
        cart_page.verify_cart_line_items(
            [LineItem(name, 1, find_product(name)["price"]) for name in MULTIPLE_PRODUCTS])

    def test_remove_product_by_name(self, inventory_page, cart_page):
        inventory_page.add_products(MULTIPLE_PRODUCTS[:1])
        cart_page.go_to_cart("cart.html")
        cart_page.remove_products_by_name(MULTIPLE_PRODUCTS[:1])
        cart_page.verify_cart_empty()
