from decimal import Decimal

import pytest
from playwright.sync_api import Error as PlaywrightError

from config.locators import CART_LOCATORS, INVENTORY_LOCATORS
from pages.cart_page import CartPage
from utils.cart_totals import LineItem


class FakeRow:
    """购物车单行，texts 按选择器取值；前 detached_reads 次读取模拟行被重渲染"""

    def __init__(self, texts: dict, detached_reads: int = 0):
        self.texts = texts
        self.detached_reads = detached_reads

    def locator(self, selector):
        return FakeCell(self, getattr(selector, "selector", selector))


class FakeCell:
    def __init__(self, row: FakeRow, selector: str):
        self.row = row
        self.selector = selector

    def inner_text(self, timeout=None):
        if self.row.detached_reads:
            self.row.detached_reads -= 1
            raise PlaywrightError("Element is not attached to the DOM")
        return self.row.texts[self.selector]


class FakeList:
    def __init__(self, selector: str, rows: list):
        self.selector = selector
        self.rows = rows

    def locator(self, selector):
        return FakeList(selector, self.rows)

    def count(self) -> int:
        return len(self.rows)

    def nth(self, i: int):
        return self.rows[i]


class FakeCartBrowserPage:
    def __init__(self, rows: list):
        self.rows = rows

    def locator(self, selector):
        return FakeList(selector, self.rows)


def row(name: str, quantity: str, price: str, detached_reads: int = 0) -> FakeRow:
    return FakeRow({INVENTORY_LOCATORS.item_product_name: name,
                    CART_LOCATORS.item_quantity: quantity,
                    INVENTORY_LOCATORS.item_product_price: price}, detached_reads)


@pytest.fixture
def cart_page(monkeypatch):
    def build(rows):
        page = CartPage(FakeCartBrowserPage(rows), timeout_ms=300)
        monkeypatch.setattr(page, "wait_visible", lambda locator, timeout_ms=None: None)
        return page

    return build


@pytest.mark.unit
class TestCartPage:

    def test_line_items(self, cart_page):
        items = cart_page([row("Sauce Labs Backpack", "1", "$29.99"),
                           row("Sauce Labs Bike Light", "2", "$9.99")]).get_cart_line_items()

        assert items == [LineItem("Sauce Labs Backpack", 1, Decimal("29.99")),
                         LineItem("Sauce Labs Bike Light", 2, Decimal("9.99"))]

    def test_line_item_read_retried_after_detach(self, cart_page):
        items = cart_page([row("Sauce Labs Onesie", "1", "$7.99", detached_reads=1)]).get_cart_line_items()
        assert items == [LineItem("Sauce Labs Onesie", 1, Decimal("7.99"))]

    def test_line_item_read_gives_up(self, cart_page):
        with pytest.raises(PlaywrightError, match="not attached"):
            cart_page([row("Sauce Labs Onesie", "1", "$7.99", detached_reads=99)]).get_cart_line_items()

    def test_wait_badge_count(self, cart_page, monkeypatch):
        page = cart_page([])
        counts = iter([0, 1, 2])
        monkeypatch.setattr(page, "get_cart_badge_count", lambda: next(counts))
        assert page.wait_badge_count(2) is True

    def test_wait_badge_count_timeout(self, cart_page, monkeypatch):
        page = cart_page([])
        monkeypatch.setattr(page, "get_cart_badge_count", lambda: 0)
        assert page.wait_badge_count(2) is False
