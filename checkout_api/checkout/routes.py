# checkout_api/checkout/routes.py
from __future__ import annotations
from flask import request, jsonify

from ..services.checkout_service import calculate_order_totals, get_delivery_options
from . import bp

STATUS_BY_KIND = {
    "input_validation": 422,
    "item_unavailable": 409,
    "insufficient_stock": 409,
    "delivery_option_not_found": 404,
    "internal": 500,
}

def _respond(result):
    status = 200 if result["success"] else STATUS_BY_KIND.get(result.get("kind"), 400)
    r = jsonify(result); r.status_code = status; return r

def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def _pick(data: dict, *names):
    for n in names:
        if data.get(n) is not None:
            return data[n]
    return None

# ---- endpoints -------------------------------------------------------------

@bp.get("/delivery-options")
def list_delivery_options():
    """Full active catalog, used before the cart is known."""
    return _respond(get_delivery_options(region=request.args.get("region")))

@bp.post("/delivery-options")
def delivery_options_for_cart():
    """
    Body: { "items"?: [{ "product_id", "variant_id"?, "quantity" }], "region"?: str }
    """
    data = _body()
    return _respond(get_delivery_options(data.get("items"), region=data.get("region")))

@bp.post("/totals")
def totals():
    """
    Body: {
      "items": [{ "product_id" | "productId", "variant_id" | "variantId"?, "quantity" }],
      "delivery_id" | "deliveryId"?: str,
      "coupon_code" | "couponCode"?: str,
      "region"?: str
    }
    Any "price" on an item is ignored; prices come from inventory.
    """
    data = _body()
    result = calculate_order_totals(
        data.get("items"),
        delivery_id=_pick(data, "delivery_id", "deliveryId"),
        coupon_code=_pick(data, "coupon_code", "couponCode"),
        region=data.get("region"),
    )
    return _respond(result)
