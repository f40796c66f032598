def _describe(product: dict) -> str:
    return f"{product.get('product_name')}（单价 {product.get('product_price')}）"


class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车角标数字 = 加购商品数"""
        assert actual == expect, f"购物车角标数量：期望 {expect}，实际 {actual}"

    @staticmethod
    def remove_count(actual: int, expect: int):
        """已加购商品的按钮应切换为 Remove"""
        assert actual == expect, f"Remove 按钮数量：期望 {expect}，实际 {actual}"

    @staticmethod
    def added_product_count(added_products: list, cart_products: list):
        assert len(added_products) == len(cart_products), \
            f"购物车商品行数：期望 {len(added_products)}（已加购），实际 {len(cart_products)}"

    @staticmethod
    def product_detail_info(added_products: list, cart_products: list):
        """加购时记录的名称/单价/描述与购物车页逐项一致（双向比对）"""
        missing = [_describe(p) for p in added_products if p not in cart_products]
        assert not missing, f"已加购但购物车中不存在或信息不一致：{missing}"
        extra = [_describe(p) for p in cart_products if p not in added_products]
        assert not extra, f"购物车中多出未加购的商品：{extra}"

    @staticmethod
    def line_items_match(expect_items: list, cart_items: list):
        """按商品名比较数量、单价（LineItem）"""
        actual = {item.name: item for item in cart_items}
        for item in expect_items:
            assert item.name in actual, f"购物车中缺少商品：{item.name}"
            assert actual[item.name].quantity == item.quantity, \
                f"{item.name} 数量：期望 {item.quantity}，实际 {actual[item.name].quantity}"
            assert actual[item.name].unit_price == item.unit_price, \
                f"{item.name} 单价：期望 {item.unit_price}，实际 {actual[item.name].unit_price}"

    @staticmethod
    def products_in_cart(expect_names: list, cart_names: list):
        missing = [name for name in expect_names if name not in cart_names]
        assert not missing, f"以下商品不在购物车中：{missing}，购物车现有：{cart_names}"
