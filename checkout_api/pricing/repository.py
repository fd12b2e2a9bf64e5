# checkout_api/pricing/repository.py
"""
Data access for the pricing engine.

The engine never reaches for a global session; it is handed an object that
satisfies ``CheckoutRepository``. ``SqlCheckoutRepository`` is the production
implementation over the Flask-SQLAlchemy session. Every method is a single
read; database errors surface as ``InternalDataError`` and are not retried.
"""
from __future__ import annotations
import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from ..model import Category, Coupon, CouponRedemption, DeliveryOption, InventoryItem, Product
from ..utils.money import D
from .discounts import parse_discount
from .errors import InternalDataError
from .types import CouponRecord, DeliveryOptionRecord, InventoryRecord, UnitKey

logger = logging.getLogger(__name__)


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


def _csv_to_set(s: str | None) -> frozenset[str]:
    if not s:
        return frozenset()
    return frozenset(x.strip().upper() for x in s.split(",") if x.strip())


def _sellable(product: Product, category: Category | None) -> bool:
    if not product.is_active or product.is_deleted:
        return False
    return category is None or category.available


class CheckoutRepository(Protocol):
    def lookup_inventory(self, keys: Iterable[UnitKey]) -> Mapping[UnitKey, InventoryRecord]: ...

    def list_delivery_options(self) -> list[DeliveryOptionRecord]: ...

    def lookup_coupon(self, code: str) -> CouponRecord | None: ...

    def coupon_usage_count(self, code: str) -> int: ...


class SqlCheckoutRepository:
    def __init__(self, session):
        self.session = session

    def _read(self, what: str, stmt):
        try:
            return self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("%s lookup failed: %s", what, e)
            raise InternalDataError(f"{what} lookup failed") from e

    # ---- inventory ---------------------------------------------------------

    def lookup_inventory(self, keys):
        keys = set(keys)
        if not keys:
            return {}
        pids = {pid for pid, _ in keys}
        # one query for every line; variant matching happens in memory
        stmt = (
            select(InventoryItem, Product, Category)
            .join(Product, InventoryItem.product_id == Product.id)
            .outerjoin(Category, Product.category_id == Category.id)
            .where(InventoryItem.product_id.in_(pids))
        )
        rows = self._read("inventory", stmt).all()

        found = {}
        for inv, product, category in rows:
            key = (inv.product_id, inv.variant_id or None)
            if key not in keys:
                continue
            found[key] = InventoryRecord(
                product_id=inv.product_id,
                variant_id=inv.variant_id or None,
                sale_price=D(inv.sale_price),
                discount=parse_discount(inv.discount_type, inv.discount_value),
                quantity_available=int(inv.quantity or 0),
                name=product.name,
                weight_grams=int(product.weight_grams or 0),
                is_active=_sellable(product, category),
            )
        logger.debug("inventory lookup: %d keys, %d found", len(keys), len(found))
        return found

    # ---- delivery ----------------------------------------------------------

    def list_delivery_options(self):
        stmt = (
            select(DeliveryOption)
            .where(DeliveryOption.is_active.is_(True))
            .order_by(DeliveryOption.sort_order.asc(), DeliveryOption.id.asc())
        )
        return [
            DeliveryOptionRecord(
                id=d.id,
                label=d.label,
                amount=D(d.amount),
                regions=_csv_to_set(d.regions),
                min_weight_grams=d.min_weight_grams,
                max_weight_grams=d.max_weight_grams,
                is_default=bool(d.is_default),
            )
            for d in self._read("delivery options", stmt).scalars()
        ]

    # ---- coupons -----------------------------------------------------------

    def lookup_coupon(self, code):
        stmt = select(Coupon).where(func.upper(Coupon.code) == normalize_code(code))
        c = self._read("coupon", stmt).scalars().first()
        if c is None:
            return None
        return CouponRecord(
            code=c.code,
            discount=parse_discount(c.ctype, c.value),
            active=bool(c.active),
            min_order_amount=D(c.min_order_amount) if c.min_order_amount is not None else None,
            usage_limit=c.usage_limit,
            valid_from=c.valid_from,
            expires_at=c.expires_at,
        )

    def coupon_usage_count(self, code):
        stmt = (
            select(func.count(CouponRedemption.id))
            .join(Coupon, CouponRedemption.coupon_id == Coupon.id)
            .where(func.upper(Coupon.code) == normalize_code(code))
        )
        return int(self._read("coupon usage", stmt).scalar_one() or 0)
