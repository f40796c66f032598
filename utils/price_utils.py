from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

"""价格相关：格式化、解析、税费与总价计算"""

CURRENCY = "$"
TAX_RATE = Decimal("0.08")  # 8% 税率
CENT = Decimal("0.01")

_MONEY_PATTERN = re.compile(r"\$\s*(-?[\d,]*\.?\d+)")


class PriceParseError(ValueError):
    """页面价格文本不符合预期格式"""


def to_decimal(value) -> Decimal:
    # float 先转 str，避免 Decimal(29.99) 带出二进制误差
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round2(amount) -> Decimal:
    """保留两位小数，四舍五入（远离0方向）"""
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_price(amount) -> str:
    """29.99 -> '$29.99'"""
    return f"{CURRENCY}{round2(amount)}"


def parse_price(text: str) -> Decimal:
    """
        '$29.99' / '29.99' -> Decimal('29.99')
        去掉货币符号后没有数字内容时抛 PriceParseError
        """
    if text is None:
        raise PriceParseError("价格文本为空：None")
    raw = text.strip()
    if raw.startswith(CURRENCY):
        raw = raw[len(CURRENCY):].strip()
    raw = raw.replace(",", "")
    if not re.fullmatch(r"-?\d*\.?\d+", raw):
        raise PriceParseError(f"无法从文本中解析金额：{text!r}")
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise PriceParseError(f"无法从文本中解析金额：{text!r}") from e


def parse_money(text: str) -> Decimal:
    """
        从 'Item total: $39.98' 提取 Decimal('39.98')
        """
    match = _MONEY_PATTERN.search(text or "")
    if not match:
        raise PriceParseError(f"无法从文本中解析金额：{text!r}")
    return parse_price(match.group(1))


def parse_amount(text: str) -> Decimal:
    """纯价格文本走 parse_price，带 label 的文案（'Tax: $2.40'）走 parse_money"""
    stripped = (text or "").strip()
    if stripped.startswith(CURRENCY) or not stripped or stripped[0].isdigit():
        return parse_price(stripped)
    return parse_money(stripped)


def calculate_tax(subtotal) -> Decimal:
    return to_decimal(subtotal) * TAX_RATE


def calculate_total(subtotal, tax) -> Decimal:
    return to_decimal(subtotal) + to_decimal(tax)
