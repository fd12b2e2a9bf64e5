from datetime import datetime
from decimal import Decimal

import pytest

from checkout_api import create_app
from checkout_api.config import TestingConfig
from checkout_api.extensions import db
from checkout_api.model import (
    Category,
    Coupon,
    CouponRedemption,
    DeliveryOption,
    InventoryItem,
    Product,
)
from checkout_api.pricing import (
    CouponRecord,
    DeliveryOptionRecord,
    InventoryRecord,
    parse_discount,
)

NOW = datetime(2026, 6, 1, 12, 0, 0)


def fixed_clock():
    return NOW


# ---- in-memory repository --------------------------------------------------

class MemoryRepo:
    def __init__(self, inventory=(), options=(), coupons=(), usage=None):
        self.inventory = {rec.key: rec for rec in inventory}
        self.options = list(options)
        self.coupons = {c.code.upper(): c for c in coupons}
        self.usage = dict(usage or {})
        self.calls = []

    def lookup_inventory(self, keys):
        keys = set(keys)
        self.calls.append(("inventory", keys))
        return {k: self.inventory[k] for k in keys if k in self.inventory}

    def list_delivery_options(self):
        self.calls.append(("delivery", None))
        return list(self.options)

    def lookup_coupon(self, code):
        self.calls.append(("coupon", code))
        return self.coupons.get(code.upper())

    def coupon_usage_count(self, code):
        self.calls.append(("usage", code))
        return self.usage.get(code.upper(), 0)


def inv(product_id, price, kind="none", value=0, available=10, variant_id=None,
        weight=0, active=True, name=None):
    return InventoryRecord(
        product_id=product_id,
        variant_id=variant_id,
        sale_price=Decimal(str(price)),
        discount=parse_discount(kind, value),
        quantity_available=available,
        name=name or product_id,
        weight_grams=weight,
        is_active=active,
    )


def option(id, amount, regions=(), min_w=None, max_w=None, default=False):
    return DeliveryOptionRecord(
        id=id,
        label=id.title(),
        amount=Decimal(str(amount)),
        regions=frozenset(regions),
        min_weight_grams=min_w,
        max_weight_grams=max_w,
        is_default=default,
    )


def coupon(code, kind, value, **kw):
    return CouponRecord(code=code, discount=parse_discount(kind, value), **kw)


@pytest.fixture
def memory_repo():
    return MemoryRepo(
        inventory=[
            inv("P1", 50, "percent", 10, available=10, weight=400),
            inv("P2", 100, "amount", 15, available=5, variant_id="M", weight=250),
            inv("P2", 100, available=3, variant_id="L", weight=250),
            inv("P3", 100, "amount", 150, available=2),
            inv("P9", 20, available=4, active=False),
        ],
        options=[
            option("standard", 5, default=True),
            option("express", 12, max_w=1000),
            option("local", 2, regions={"KH"}),
        ],
        coupons=[
            coupon("SAVE10", "percent", 10, min_order_amount=Decimal("50")),
            coupon("FLAT20", "amount", 20),
            coupon("BIG", "amount", 1000),
            coupon("OFF", "percent", 5, active=False),
            coupon("OLD", "percent", 5, expires_at=datetime(2020, 1, 1)),
            coupon("SOON", "percent", 5, valid_from=datetime(2030, 1, 1)),
            coupon("LIMITED", "amount", 5, usage_limit=2),
        ],
        usage={"LIMITED": 2},
    )


# ---- flask app with a seeded database --------------------------------------

@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    db.session.add_all([
        Category(id="general", name="General"),
        Category(id="retired", name="Retired", is_active=False),
    ])
    db.session.add_all([
        Product(id="P1", name="Iced latte", weight_grams=400, category_id="general"),
        Product(id="P2", name="T-shirt", weight_grams=250, category_id="general"),
        Product(id="P3", name="Sticker", weight_grams=10, category_id="general"),
        Product(id="P4", name="Old mug", weight_grams=300, category_id="retired"),
        Product(id="P5", name="Hidden", weight_grams=100, is_active=False),
    ])
    db.session.add_all([
        InventoryItem(product_id="P1", sale_price=50, discount_type="percent", discount_value=10, quantity=10),
        InventoryItem(product_id="P2", variant_id="M", sale_price=100, discount_type="amount", discount_value=15, quantity=5),
        InventoryItem(product_id="P2", variant_id="L", sale_price=100, quantity=3),
        InventoryItem(product_id="P3", sale_price=100, discount_type="amount", discount_value=150, quantity=2),
        InventoryItem(product_id="P4", sale_price=30, quantity=5),
        InventoryItem(product_id="P5", sale_price=30, quantity=5),
    ])
    db.session.add_all([
        DeliveryOption(id="standard", label="Standard", amount=5, is_default=True, sort_order=1),
        DeliveryOption(id="express", label="Express", amount=12, sort_order=2, max_weight_grams=1000),
        DeliveryOption(id="local", label="Local pickup", amount=2, sort_order=3, regions="KH,TH"),
        DeliveryOption(id="legacy", label="Legacy", amount=1, sort_order=0, is_active=False),
    ])
    limited = Coupon(code="LIMITED", ctype="amount", value=5, usage_limit=1)
    db.session.add_all([
        Coupon(code="SAVE10", ctype="percent", value=10, min_order_amount=50),
        Coupon(code="OLD", ctype="percent", value=10, expires_at=datetime(2020, 1, 1)),
        Coupon(code="OFF", ctype="amount", value=5, active=False),
        limited,
    ])
    db.session.flush()
    db.session.add(CouponRedemption(coupon_id=limited.id, order_ref="ORD-1"))
    db.session.commit()
    return app
