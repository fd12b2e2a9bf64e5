# ------ checkout_api/model/__init__.py ------

from .category import Category
from .product import Product
from .inventory import InventoryItem
from .coupon import Coupon, CouponRedemption
from .delivery import DeliveryOption

__all__ = [
    "Category",
    "Product",
    "InventoryItem",
    "Coupon",
    "CouponRedemption",
    "DeliveryOption",
]
