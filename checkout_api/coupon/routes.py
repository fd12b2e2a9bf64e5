# checkout_api/coupon/routes.py
from __future__ import annotations
from flask import request, jsonify
from ..services.coupon_service import create_coupon_from_payload, list_coupons as _list_coupons
from ..utils.api import api_ok
from ..utils.decorators import require_json
from . import bp

@bp.post("")
@require_json
def create_coupon():
    """
    Body: { "code": str, "ctype": "percent" | "amount", "value": number,
            "active"?: bool, "min_order_amount"?: number, "usage_limit"?: int,
            "valid_from"?: ISO8601, "expires_at"?: ISO8601 }
    """
    payload, status = create_coupon_from_payload(request.get_json(silent=True) or {})
    return jsonify(payload), status

@bp.get("")
def list_coupons():
    items = _list_coupons(request.args.get("active"))
    return jsonify(api_ok("ok", items)), 200
