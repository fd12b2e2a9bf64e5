# checkout_api/pricing/errors.py
"""
Hard failures of a checkout calculation.

Each carries a short ``kind`` tag used by the request boundary to build the
tagged error result, and a message that names the offending item or option.
A rejected coupon is not in this hierarchy: it is returned as data.
"""
from __future__ import annotations


class CheckoutError(Exception):
    kind = "checkout_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidation(CheckoutError):
    kind = "input_validation"


class ItemUnavailable(CheckoutError):
    kind = "item_unavailable"

    def __init__(self, product_id: str, variant_id: str | None = None):
        label = product_id if not variant_id else f"{product_id} (variant {variant_id})"
        super().__init__(f"item {label} is unavailable")
        self.product_id = product_id
        self.variant_id = variant_id


class InsufficientStock(CheckoutError):
    kind = "insufficient_stock"

    def __init__(self, product_id: str, available: int, requested: int | None = None):
        msg = f"insufficient stock for {product_id}: only {available} available"
        if requested is not None:
            msg += f", {requested} requested"
        super().__init__(msg)
        self.product_id = product_id
        self.available = available
        self.requested = requested


class DeliveryOptionNotFound(CheckoutError):
    kind = "delivery_option_not_found"

    def __init__(self, delivery_id: str):
        super().__init__(f"delivery option '{delivery_id}' is not available for this cart")
        self.delivery_id = delivery_id


class InternalDataError(CheckoutError):
    kind = "internal"
