# checkout_api/pricing/coupons.py
from __future__ import annotations
import logging
from datetime import datetime, timezone

from ..utils.money import D, Money, ZERO
from .discounts import discount_amount
from .repository import normalize_code
from .types import CouponDecision

logger = logging.getLogger(__name__)

NOT_FOUND = "not found"
INACTIVE = "inactive"
NOT_STARTED = "not yet active"
EXPIRED = "expired"
BELOW_MINIMUM = "below minimum order amount"
USAGE_LIMIT = "usage limit reached"


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _naive_utc(dt: datetime) -> datetime:
    if dt.tzinfo:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


class CouponValidator:
    """
    Checks run in a fixed order and stop at the first failure. A rejection is
    a CouponDecision with ``accepted=False``, never an exception.
    """

    def __init__(self, repo, clock=utcnow):
        self.repo = repo
        self.clock = clock

    def validate(self, code: str, subtotal: Money) -> CouponDecision:
        code = normalize_code(code)
        subtotal = max(ZERO, D(subtotal))

        coupon = self.repo.lookup_coupon(code) if code else None
        if coupon is None:
            return self._reject(code, NOT_FOUND)
        if not coupon.active:
            return self._reject(code, INACTIVE)

        now = _naive_utc(self.clock())
        if coupon.valid_from and now < _naive_utc(coupon.valid_from):
            return self._reject(code, NOT_STARTED)
        if coupon.expires_at and now > _naive_utc(coupon.expires_at):
            return self._reject(code, EXPIRED)

        if coupon.min_order_amount is not None and subtotal < D(coupon.min_order_amount):
            return self._reject(code, BELOW_MINIMUM)

        if coupon.usage_limit is not None:
            # read-only: redemptions are recorded when the order commits
            used = self.repo.coupon_usage_count(code)
            if used >= coupon.usage_limit:
                return self._reject(code, USAGE_LIMIT)

        amount = min(discount_amount(subtotal, coupon.discount), subtotal)
        return CouponDecision(
            accepted=True,
            code=coupon.code,
            discount_amount=amount,
            discount=coupon.discount,
        )

    def _reject(self, code: str, reason: str) -> CouponDecision:
        logger.info("coupon %r rejected: %s", code, reason)
        return CouponDecision.reject(code, reason)
