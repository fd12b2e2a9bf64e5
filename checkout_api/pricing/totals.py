# checkout_api/pricing/totals.py
from __future__ import annotations
import logging

from ..utils.money import ZERO, round_money
from .coupons import CouponValidator, utcnow
from .delivery import CartProfile, DeliveryOptionResolver
from .price_resolver import PriceResolver
from .types import OrderTotals, opt_text, parse_cart

logger = logging.getLogger(__name__)


class OrderTotalAggregator:
    """
    Order of application:
      1) authoritative item prices and item-level discounts
      2) delivery fee for the selected option (flat)
      3) coupon on the item-discounted subtotal
      4) clamp at zero, round half-up once
    Holds no state between calls.
    """

    def __init__(self, repo, clock=utcnow):
        self.prices = PriceResolver(repo)
        self.delivery = DeliveryOptionResolver(repo)
        self.coupons = CouponValidator(repo, clock=clock)

    def calculate(self, items, delivery_id: str | None = None,
                  coupon_code: str | None = None, region: str | None = None) -> OrderTotals:
        delivery_id = opt_text("delivery_id", delivery_id)
        coupon_code = opt_text("coupon_code", coupon_code)
        region = opt_text("region", region)
        lines = self.prices.resolve(parse_cart(items))

        # gross of item discounts: line_subtotal is already net of them
        subtotal = sum((ln.line_subtotal + ln.line_discount for ln in lines), ZERO)
        item_discount_total = sum((ln.line_discount for ln in lines), ZERO)

        delivery = None
        delivery_fee = ZERO
        if delivery_id:
            profile = CartProfile(
                total_weight_grams=sum(ln.weight_grams for ln in lines),
                region=region,
            )
            delivery = self.delivery.get_by_id(delivery_id, profile)
            delivery_fee = delivery.amount

        coupon = None
        coupon_discount = ZERO
        warning = None
        code = (coupon_code or "").strip()
        if code:
            coupon = self.coupons.validate(code, subtotal - item_discount_total)
            if coupon.accepted:
                coupon_discount = coupon.discount_amount
            else:
                warning = f"coupon '{coupon.code}' not applied: {coupon.reason}"

        grand = subtotal - item_discount_total - coupon_discount + delivery_fee
        grand_total = round_money(max(ZERO, grand))

        logger.debug("totals: lines=%d subtotal=%s grand_total=%s", len(lines), subtotal, grand_total)
        return OrderTotals(
            subtotal=subtotal,
            item_discount_total=item_discount_total,
            delivery_fee=delivery_fee,
            coupon_discount=coupon_discount,
            grand_total=grand_total,
            lines=tuple(lines),
            delivery=delivery,
            coupon=coupon,
            warning=warning,
        )
