# checkout_api/services/checkout_service.py
"""
Request boundary for checkout pricing.

Both entry points always return a tagged result:
    {"success": True, "data": ...}
    {"success": False, "error": "<message>", "kind": "<error kind>"}
Nothing raised by the engine or the database escapes from here.
"""
from __future__ import annotations
import logging

from ..extensions import db
from ..pricing import (
    CartLine,
    CartProfile,
    CheckoutError,
    DeliveryOptionResolver,
    OrderTotalAggregator,
    SqlCheckoutRepository,
)
from ..pricing.coupons import utcnow
from ..pricing.types import opt_text
from ..utils.api import result_error, result_ok

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Checkout calculation failed."


def _repo(repo):
    return repo if repo is not None else SqlCheckoutRepository(db.session)


def _cart_weight(repo, lines: list[CartLine]) -> int:
    records = repo.lookup_inventory({ln.key for ln in lines})
    # unknown units weigh nothing here; pricing reports them as unavailable
    return sum(records[ln.key].weight_grams * ln.quantity for ln in lines if ln.key in records)


def get_delivery_options(items=None, region: str | None = None, *, repo=None):
    """Without items or region the whole active catalog is returned."""
    try:
        region = opt_text("region", region)
        repo = _repo(repo)
        resolver = DeliveryOptionResolver(repo)
        if items is None and not region:
            options = resolver.list()
        else:
            weight = None
            if items:
                if not isinstance(items, (list, tuple)):
                    return result_error("items must be a list", "input_validation")
                lines = [CartLine.from_payload(it) for it in items]
                weight = _cart_weight(repo, lines)
            options = resolver.list(CartProfile(total_weight_grams=weight, region=region))
        return result_ok([o.as_api() for o in options])
    except CheckoutError as e:
        logger.info("delivery options failed (%s): %s", e.kind, e.message)
        return result_error(e.message, e.kind)
    except Exception:
        logger.exception("delivery options failed")
        return result_error("Could not load delivery options.", "internal")


def calculate_order_totals(items, delivery_id: str | None = None, coupon_code: str | None = None,
                           region: str | None = None, *, repo=None, clock=utcnow):
    try:
        engine = OrderTotalAggregator(_repo(repo), clock=clock)
        totals = engine.calculate(items, delivery_id=delivery_id, coupon_code=coupon_code, region=region)
        return result_ok(totals.as_api())
    except CheckoutError as e:
        logger.info("checkout calculation aborted (%s): %s", e.kind, e.message)
        return result_error(e.message, e.kind)
    except Exception:
        logger.exception("checkout calculation failed")
        return result_error(GENERIC_ERROR, "internal")
