# checkout_api/pricing/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime

from ..utils.money import Money, ZERO, money_out
from .discounts import Discount, NoDiscount
from .errors import InputValidation

UnitKey = tuple[str, str | None]


def _opt_str(v) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def opt_text(name: str, v) -> str | None:
    """Optional scalar request field: absent or a string."""
    if v is not None and not isinstance(v, str):
        raise InputValidation(f"{name} must be a string")
    return v


def _parse_quantity(v, product_id: str) -> int:
    if isinstance(v, bool):
        raise InputValidation(f"quantity for {product_id} must be a positive integer")
    if isinstance(v, int):
        qty = v
    elif isinstance(v, float) and v.is_integer():
        qty = int(v)
    elif isinstance(v, str) and v.strip().lstrip("-").isdigit():
        try:
            qty = int(v.strip())
        except ValueError:
            raise InputValidation(f"quantity for {product_id} must be a positive integer") from None
    else:
        raise InputValidation(f"quantity for {product_id} must be a positive integer")
    if qty <= 0:
        raise InputValidation(f"quantity for {product_id} must be >= 1")
    return qty


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int
    variant_id: str | None = None

    @property
    def key(self) -> UnitKey:
        return (self.product_id, self.variant_id)

    @classmethod
    def from_payload(cls, data) -> "CartLine":
        """
        Body: { "product_id" | "productId": str, "variant_id" | "variantId"?: str,
                "quantity" | "qty": int, "price"?: ignored }
        """
        if isinstance(data, CartLine):
            return data
        if not isinstance(data, dict):
            raise InputValidation("each cart item must be an object")
        product_id = _opt_str(data.get("product_id", data.get("productId")))
        if not product_id:
            raise InputValidation("product_id is required for every cart item")
        variant_id = _opt_str(data.get("variant_id", data.get("variantId")))
        raw_qty = data.get("quantity", data.get("qty"))
        return cls(product_id=product_id, quantity=_parse_quantity(raw_qty, product_id), variant_id=variant_id)


def parse_cart(items) -> list[CartLine]:
    if items is None or (isinstance(items, (list, tuple)) and not items):
        raise InputValidation("cart is empty")
    if not isinstance(items, (list, tuple)):
        raise InputValidation("items must be a list")
    return [CartLine.from_payload(it) for it in items]


@dataclass(frozen=True)
class InventoryRecord:
    product_id: str
    variant_id: str | None
    sale_price: Money
    discount: Discount
    quantity_available: int
    name: str | None = None
    weight_grams: int = 0
    is_active: bool = True

    @property
    def key(self) -> UnitKey:
        return (self.product_id, self.variant_id)


@dataclass(frozen=True)
class DeliveryOptionRecord:
    id: str
    label: str
    amount: Money
    regions: frozenset[str] = frozenset()
    min_weight_grams: int | None = None
    max_weight_grams: int | None = None
    is_default: bool = False

    def as_api(self):
        return {
            "id": self.id,
            "label": self.label,
            "amount": money_out(self.amount),
            "is_default": self.is_default,
        }


@dataclass(frozen=True)
class CouponRecord:
    code: str
    discount: Discount
    active: bool = True
    min_order_amount: Money | None = None
    usage_limit: int | None = None
    valid_from: datetime | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True)
class ResolvedLine:
    product_id: str
    variant_id: str | None
    name: str | None
    quantity: int
    unit_price: Money          # sale price before item discount
    discount: Discount
    unit_final_price: Money
    line_subtotal: Money       # unit_final_price * quantity
    line_discount: Money       # (unit_price - unit_final_price) * quantity
    weight_grams: int = 0

    def as_api(self):
        return {
            "product_id": self.product_id,
            "variant_id": self.variant_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit_price": money_out(self.unit_price),
            "discount": {
                "type": self.discount.kind,
                "value": float(self.discount.value),
            },
            "unit_final_price": money_out(self.unit_final_price),
            "line_subtotal": money_out(self.line_subtotal),
            "line_discount": money_out(self.line_discount),
        }


@dataclass(frozen=True)
class CouponDecision:
    accepted: bool
    code: str
    discount_amount: Money = ZERO
    reason: str | None = None
    discount: Discount = field(default_factory=NoDiscount)

    @classmethod
    def reject(cls, code: str, reason: str) -> "CouponDecision":
        return cls(accepted=False, code=code, reason=reason)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Money
    item_discount_total: Money
    delivery_fee: Money
    coupon_discount: Money
    grand_total: Money
    lines: tuple[ResolvedLine, ...]
    delivery: DeliveryOptionRecord | None = None
    coupon: CouponDecision | None = None
    warning: str | None = None

    def as_api(self):
        coupon = None
        if self.coupon is not None and self.coupon.accepted:
            coupon = {
                "code": self.coupon.code,
                "type": self.coupon.discount.kind,
                "value": float(self.coupon.discount.value),
                "amount": money_out(self.coupon.discount_amount),
            }
        return {
            "lines": [ln.as_api() for ln in self.lines],
            "subtotal": money_out(self.subtotal),
            "item_discount_total": money_out(self.item_discount_total),
            "delivery_fee": money_out(self.delivery_fee),
            "coupon_discount": money_out(self.coupon_discount),
            "grand_total": money_out(self.grand_total),
            "delivery": self.delivery.as_api() if self.delivery else None,
            "coupon": coupon,
            "warning": self.warning,
        }
