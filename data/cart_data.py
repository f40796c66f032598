"""cart功能测试数据"""

ADD_PRODUCT_COUNT = 3  # inventory页面加购商品数
DELETE_PRODUCT_COUNT = 1  # 删除商品数
FIRST_PRODUCT_COUNT = 1  # 继续购物：第一次加购数
SECOND_PRODUCT_COUNT = 2  # 继续购物：第二次加购数

MULTIPLE_PRODUCTS = ["Sauce Labs Backpack", "Sauce Labs Bike Light"]
