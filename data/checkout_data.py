"""checkout功能测试数据"""

ADD_PRODUCT_NUM = 2

CONTAINER_INFO = {"first_name": "Test", "last_name": "User", "postal": "1337"}

CONTAINER_EMPTY_ERROR_MSG = "Error: First Name is required"
POSTAL_CODE_REQUIRED_MSG = "Error: Postal Code is required"
FINISH_PAGE_MESSAGE = "Thank you for your order!"

# 取消结算后购物车商品应保留
CANCEL_KEEP_PRODUCTS = [
    "Sauce Labs Backpack",
    "Sauce Labs Bike Light",
    "Test.allTheThings() T-Shirt (Red)",
    "Sauce Labs Onesie",
    "Sauce Labs Bolt T-Shirt",
    "Sauce Labs Fleece Jacket",
]
