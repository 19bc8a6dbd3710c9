from dataclasses import dataclass, fields
from decimal import Decimal

TOLERANCE = Decimal("0.01")


@dataclass(frozen=True)
class GuestUserProfile:
    """游客结算用的一次性用户资料，由 billing 步骤消费"""
    first_name: str
    last_name: str
    email: str
    country: str
    city: str
    address1: str
    zip_code: str
    phone_number: str
    company: str = ""
    state: str = ""
    address2: str = ""
    fax_number: str = ""

    REQUIRED = ("first_name", "last_name", "email", "address1", "city", "country", "zip_code", "phone_number")

    # users.json 中使用的 camelCase 字段名
    JSON_KEYS = {
        "firstName": "first_name",
        "lastName": "last_name",
        "zipCode": "zip_code",
        "phoneNumber": "phone_number",
        "faxNumber": "fax_number",
    }

    def __post_init__(self):
        missing = [name for name in self.REQUIRED if not str(getattr(self, name) or "").strip()]
        if missing:
            raise ValueError(f"Guest profile is missing required fields: {', '.join(missing)}")

    @classmethod
    def from_dict(cls, data: dict) -> "GuestUserProfile":
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = cls.JSON_KEYS.get(key, key)
            if name in known:
                values[name] = "" if value is None else str(value)
        for name in cls.REQUIRED:
            values.setdefault(name, "")
        return cls(**values)


@dataclass(frozen=True)
class CartLine:
    name: str
    unit_price: Decimal
    quantity: int
    subtotal: Decimal

    def is_consistent(self) -> bool:
        """行小计 ≈ 单价 × 数量"""
        return abs(self.unit_price * self.quantity - self.subtotal) <= TOLERANCE


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    def is_consistent(self) -> bool:
        """订单总价 ≈ 商品小计 + 运费 + 税"""
        return abs(self.subtotal + self.shipping + self.tax - self.total) <= TOLERANCE


@dataclass(frozen=True)
class OrderConfirmation:
    order_number: str | None
    order_total: Decimal = Decimal("0")

    @property
    def succeeded(self) -> bool:
        return bool(self.order_number)
