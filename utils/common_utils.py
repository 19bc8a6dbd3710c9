import re
from decimal import Decimal

from utils.errors import ExtractionMiss

"""从页面文本中提取金额、订单号、数量"""

NUMBER_PATTERN = re.compile(r"\d[\d,]*(?:\.\d+)?")
ORDER_NUMBER_PATTERN = re.compile(r"Order number[:\s]+(\d+)", re.IGNORECASE)
ORDER_DETAILS_HREF_PATTERN = re.compile(r"/orderdetails/(\d+)/?$")
CART_BADGE_PATTERN = re.compile(r"\((\d+)\)")


def _match_number(text: str | None):
    if not text:
        return None
    return NUMBER_PATTERN.search(text)


def extract_number(text: str | None) -> Decimal:
    """
    所有读价格的地方共用这一条规则：
    '$2,207.50' / '2207.50' / 'USD 2207.50 ' -> Decimal('2207.50')，找不到数字返回 Decimal('0')
    """
    match = _match_number(text)
    if not match:
        return Decimal("0")
    return Decimal(match.group(0).replace(",", ""))


def require_number(text: str | None, what: str) -> Decimal:
    """同 extract_number，但找不到时抛 ExtractionMiss"""
    match = _match_number(text)
    if not match:
        raise ExtractionMiss(what, text)
    return Decimal(match.group(0).replace(",", ""))


def extract_order_number(text: str | None) -> str | None:
    """'...Order number: 2207822 ...' -> '2207822'"""
    if not text:
        return None
    match = ORDER_NUMBER_PATTERN.search(text)
    return match.group(1) if match else None


def order_number_from_href(href: str | None) -> str | None:
    """'/orderdetails/2207822' -> '2207822'"""
    if not href:
        return None
    match = ORDER_DETAILS_HREF_PATTERN.search(href.strip())
    return match.group(1) if match else None


def extract_cart_badge_count(text: str | None) -> int:
    """'Shopping cart (4)' -> 4"""
    if not text:
        return 0
    match = CART_BADGE_PATTERN.search(text)
    return int(match.group(1)) if match else 0
