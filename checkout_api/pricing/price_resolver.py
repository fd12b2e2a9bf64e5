# checkout_api/pricing/price_resolver.py
from __future__ import annotations
import logging
from collections.abc import Sequence

from ..utils.money import D
from .discounts import discounted_price
from .errors import InsufficientStock, InternalDataError, ItemUnavailable
from .types import CartLine, ResolvedLine

logger = logging.getLogger(__name__)


class PriceResolver:
    """
    Authoritative per-line pricing from inventory.

    Client prices are never consulted. Lines referencing the same sellable
    unit share its stock, so availability is checked against the running
    total requested so far.
    """

    def __init__(self, repo):
        self.repo = repo

    def resolve(self, lines: Sequence[CartLine]) -> list[ResolvedLine]:
        records = self.repo.lookup_inventory({ln.key for ln in lines})

        requested: dict = {}
        resolved = []
        for ln in lines:
            rec = records.get(ln.key)
            if rec is None or not rec.is_active:
                logger.info("item unavailable: %s/%s", ln.product_id, ln.variant_id)
                raise ItemUnavailable(ln.product_id, ln.variant_id)

            wanted = requested.get(ln.key, 0) + ln.quantity
            if wanted > rec.quantity_available:
                logger.info("insufficient stock: %s wanted=%d available=%d",
                            ln.product_id, wanted, rec.quantity_available)
                raise InsufficientStock(ln.product_id, rec.quantity_available, wanted)
            requested[ln.key] = wanted

            unit = D(rec.sale_price)
            if unit < 0:
                raise InternalDataError(f"negative sale price for {ln.product_id}")
            final_ = discounted_price(unit, rec.discount)
            qty = D(ln.quantity)

            resolved.append(ResolvedLine(
                product_id=ln.product_id,
                variant_id=ln.variant_id,
                name=rec.name,
                quantity=ln.quantity,
                unit_price=unit,
                discount=rec.discount,
                unit_final_price=final_,
                line_subtotal=final_ * qty,
                line_discount=(unit - final_) * qty,
                weight_grams=rec.weight_grams * ln.quantity,
            ))
        return resolved
