from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from utils.price_utils import (calculate_tax, calculate_total, format_price, parse_amount, round2,
                               to_decimal)

"""购物车/结算页金额：预期值计算 + 页面值比对"""

TAX_TOLERANCE = Decimal("0.01")  # 税费允许误差，吸收两端独立四舍五入


@dataclass(frozen=True)
class LineItem:
    name: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("商品名称不能为空")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError(f"{self.name} 数量必须是 >= 1 的整数：{self.quantity}")
        try:
            price = to_decimal(self.unit_price)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ValueError(f"{self.name} 单价不是数字：{self.unit_price!r}") from e
        # NaN 参与比较会抛 InvalidOperation，先排除 NaN/Infinity
        if not price.is_finite():
            raise ValueError(f"{self.name} 单价必须是有限数值：{self.unit_price!r}")
        if price < 0:
            raise ValueError(f"{self.name} 单价不能为负：{price}")
        object.__setattr__(self, "unit_price", price)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class ObservedTotals:
    """页面读取到的金额文本，可以是 '$29.99' 也可以是 'Item total: $29.99'"""
    subtotal_text: str
    tax_text: str
    total_text: str


@dataclass(frozen=True)
class FieldMismatch:
    field: str
    expected: Decimal
    actual: Decimal
    tolerance: Decimal = Decimal("0")

    def __str__(self):
        rule = "exact" if not self.tolerance else f"±{self.tolerance}"
        return f"{self.field}: expected {format_price(self.expected)}, actual {format_price(self.actual)} ({rule})"


@dataclass(frozen=True)
class TotalsComparison:
    expected: CartTotals
    actual: CartTotals
    mismatches: tuple = ()

    @property
    def passed(self) -> bool:
        return not self.mismatches

    @property
    def mismatched_fields(self) -> list[str]:
        return [m.field for m in self.mismatches]

    def report(self) -> str:
        if self.passed:
            return "subtotal/tax/total 全部匹配"
        return "金额不一致：\n" + "\n".join(f"  - {m}" for m in self.mismatches)


class TotalsMismatchError(AssertionError):
    def __init__(self, comparison: TotalsComparison):
        super().__init__(comparison.report())
        self.comparison = comparison


def build_cart(items) -> tuple:
    """按顺序组成购物车，不允许重复商品名（同一商品再加一次是调用方错误）"""
    cart = tuple(items)
    seen = set()
    for item in cart:
        if item.name in seen:
            raise ValueError(f"购物车中商品重复：{item.name}")
        seen.add(item.name)
    return cart


def calculate_cart_totals(items) -> CartTotals:
    cart = build_cart(items)
    # 显式指定 sum 初始值=Decimal("0")
    subtotal = sum((item.line_total for item in cart), Decimal("0"))
    tax = round2(calculate_tax(subtotal))
    return CartTotals(subtotal=subtotal, tax=tax, total=calculate_total(subtotal, tax))


def compare_totals(items, observed: ObservedTotals) -> TotalsComparison:
    """subtotal、total 精确比较，tax 允许 TAX_TOLERANCE 误差；价格文本无法解析时直接抛 PriceParseError"""
    expected = calculate_cart_totals(items)
    actual = CartTotals(subtotal=parse_amount(observed.subtotal_text),
                        tax=parse_amount(observed.tax_text),
                        total=parse_amount(observed.total_text))

    mismatches = []
    if actual.subtotal != expected.subtotal:
        mismatches.append(FieldMismatch("subtotal", expected.subtotal, actual.subtotal))
    if abs(actual.tax - expected.tax) > TAX_TOLERANCE:
        mismatches.append(FieldMismatch("tax", expected.tax, actual.tax, TAX_TOLERANCE))
    if actual.total != expected.total:
        mismatches.append(FieldMismatch("total", expected.total, actual.total))
    return TotalsComparison(expected=expected, actual=actual, mismatches=tuple(mismatches))


def verify_totals(items, observed: ObservedTotals) -> TotalsComparison:
    comparison = compare_totals(items, observed)
    if not comparison.passed:
        raise TotalsMismatchError(comparison)
    return comparison
