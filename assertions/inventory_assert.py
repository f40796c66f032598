from decimal import Decimal
import re

from utils.image_utils import ImageDiagnostic

_PRICE_TEXT = re.compile(r"^\$\d+\.\d{2}$")


class InventoryAssert:

    @staticmethod
    def product_count(actual_count: int, expect_count: int):
        assert actual_count == expect_count, f"商品列表数量：期望 {expect_count}，实际 {actual_count}"

    @staticmethod
    def column_not_empty(values: list, column: str = "商品信息"):
        assert values, f"{column}列表为空"
        blank = [i for i, value in enumerate(values) if not (value and value.strip())]
        assert not blank, f"{column}存在空值，位置：{blank}"

    @staticmethod
    def product_price_format(prices: list[str]):
        """页面价格文本形如 $29.99"""
        assert prices, "商品价格列表为空"
        invalid = [price for price in prices if not _PRICE_TEXT.match(price)]
        assert not invalid, f"商品价格格式错误（应为 $x.xx）：{invalid}"

    @staticmethod
    def product_price_is_decimal(prices: list[Decimal]):
        for price in prices:
            assert isinstance(price, Decimal), f"单价未解析为 Decimal：{price!r}"
            assert price > 0, f"单价必须大于 0：{price}"

    @staticmethod
    def sort_asc(values: list, field: str = "字段"):
        assert values == sorted(values), f"{field}未按正序排列：{values}"

    @staticmethod
    def sort_desc(values: list, field: str = "字段"):
        assert values == sorted(values, reverse=True), f"{field}未按倒序排列：{values}"

    @staticmethod
    def text_equal(actual: str, expect: str):
        assert actual == expect, f"预期：{expect}，实际：{actual}"

    @staticmethod
    def image_loaded(name: str, diagnostic: ImageDiagnostic):
        assert diagnostic.loaded, f"商品图片未正常加载：{name}，{diagnostic.error_info}，dimensions={diagnostic.dimensions}"
