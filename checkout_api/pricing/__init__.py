from .coupons import CouponValidator
from .delivery import CartProfile, DeliveryOptionResolver
from .discounts import Amount, Discount, NoDiscount, Percent, parse_discount
from .errors import (
    CheckoutError,
    DeliveryOptionNotFound,
    InputValidation,
    InsufficientStock,
    InternalDataError,
    ItemUnavailable,
)
from .price_resolver import PriceResolver
from .repository import CheckoutRepository, SqlCheckoutRepository
from .totals import OrderTotalAggregator
from .types import (
    CartLine,
    CouponDecision,
    CouponRecord,
    DeliveryOptionRecord,
    InventoryRecord,
    OrderTotals,
    ResolvedLine,
)

__all__ = [
    "Amount",
    "CartLine",
    "CartProfile",
    "CheckoutError",
    "CheckoutRepository",
    "CouponDecision",
    "CouponRecord",
    "CouponValidator",
    "DeliveryOptionNotFound",
    "DeliveryOptionRecord",
    "DeliveryOptionResolver",
    "Discount",
    "InputValidation",
    "InsufficientStock",
    "InternalDataError",
    "InventoryRecord",
    "ItemUnavailable",
    "NoDiscount",
    "OrderTotalAggregator",
    "OrderTotals",
    "Percent",
    "PriceResolver",
    "ResolvedLine",
    "SqlCheckoutRepository",
    "parse_discount",
]
