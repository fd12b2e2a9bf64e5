# checkout_api/cli.py
import json
import click
from flask.cli import with_appcontext
from .extensions import db
from .model import Category, Coupon, DeliveryOption, InventoryItem, Product
from .services.checkout_service import calculate_order_totals

def _parse_item(token: str) -> dict:
    """PRODUCT[/VARIANT]:QTY"""
    unit, _, qty = token.rpartition(":")
    if not unit:
        raise click.BadParameter(f"expected PRODUCT[/VARIANT]:QTY, got {token!r}")
    product_id, _, variant_id = unit.partition("/")
    return {"product_id": product_id, "variant_id": variant_id or None, "quantity": qty}

@click.command("quote")
@click.argument("items", nargs=-1, required=True)
@click.option("--delivery", "delivery_id", default=None, help="delivery option id")
@click.option("--coupon", "coupon_code", default=None, help="coupon code")
@click.option("--region", default=None)
@with_appcontext
def quote(items, delivery_id, coupon_code, region):
    """Print checkout totals for ITEMS given as PRODUCT[/VARIANT]:QTY."""
    result = calculate_order_totals(
        [_parse_item(s) for s in items],
        delivery_id=delivery_id, coupon_code=coupon_code, region=region,
    )
    click.echo(json.dumps(result, indent=2))
    if not result["success"]:
        raise SystemExit(1)

@click.command("seed-demo")
@with_appcontext
def seed_demo():
    """Load a small demo catalog (skipped if products already exist)."""
    if db.session.get(Product, "P1"):
        click.echo("demo data already present"); return
    db.session.add(Category(id="general", name="General"))
    db.session.add_all([
        Product(id="P1", name="Iced latte", weight_grams=400, category_id="general"),
        Product(id="P2", name="T-shirt", weight_grams=250, category_id="general"),
    ])
    db.session.add_all([
        InventoryItem(product_id="P1", sale_price=50, discount_type="percent", discount_value=10, quantity=10),
        InventoryItem(product_id="P2", variant_id="M", sale_price=100, discount_type="amount", discount_value=15, quantity=5),
        InventoryItem(product_id="P2", variant_id="L", sale_price=100, quantity=3),
    ])
    db.session.add_all([
        DeliveryOption(id="standard", label="Standard", amount=5, is_default=True, sort_order=1),
        DeliveryOption(id="express", label="Express", amount=12, sort_order=2, max_weight_grams=5000),
    ])
    db.session.add(Coupon(code="SAVE10", ctype="percent", value=10, min_order_amount=50))
    db.session.commit()
    click.echo("demo data loaded")

def register_cli(app):
    app.cli.add_command(quote)
    app.cli.add_command(seed_demo)
