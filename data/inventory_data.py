"""商品列表测试数据：SauceDemo 固定商品目录"""
from decimal import Decimal

PRODUCTS = {
    "backpack": {"id": "4", "name": "Sauce Labs Backpack", "price": Decimal("29.99")},
    "bike_light": {"id": "0", "name": "Sauce Labs Bike Light", "price": Decimal("9.99")},
    "bolt_t_shirt": {"id": "1", "name": "Sauce Labs Bolt T-Shirt", "price": Decimal("15.99")},
    "fleece_jacket": {"id": "5", "name": "Sauce Labs Fleece Jacket", "price": Decimal("49.99")},
    "onesie": {"id": "2", "name": "Sauce Labs Onesie", "price": Decimal("7.99")},
    "red_t_shirt": {"id": "3", "name": "Test.allTheThings() T-Shirt (Red)", "price": Decimal("15.99")},
}

PRODUCT_COUNT = len(PRODUCTS)

# 下拉框 label
PRODUCT_SORT = {
    "name_asc": "Name (A to Z)",
    "name_desc": "Name (Z to A)",
    "price_asc": "Price (low to high)",
    "price_desc": "Price (high to low)",
}


def product_slug(name: str) -> str:
    """'Sauce Labs Bike Light' -> 'sauce-labs-bike-light'，用于 add-to-cart/remove 按钮 data-test"""
    return "-".join(name.lower().split())


def find_product(name: str) -> dict:
    for product in PRODUCTS.values():
        if product["name"] == name:
            return product
    raise KeyError(f"商品目录中不存在：{name}")
