# checkout_api/services/coupon_service.py
from __future__ import annotations
from datetime import datetime, timezone
from decimal import InvalidOperation
from sqlalchemy import func
from ..extensions import db
from ..utils.api import api_ok, api_error
from ..utils.money import D
from ..model import Coupon
from ..pricing.repository import normalize_code

COUPON_TYPES = ("percent", "amount")

def _parse_iso8601(s):
    if not s: return None
    s = str(s).strip()
    # support trailing 'Z' (UTC)
    if s.endswith("Z"): s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    if dt.tzinfo:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)  # store naive UTC
    return dt

def _opt_money(v):
    if v is None or v == "":
        return None
    return D(v)

def _opt_int(v):
    if v is None or v == "":
        return None
    return int(v)

def create_coupon_from_payload(data: dict):
    code = normalize_code(data.get("code"))
    ctype = (data.get("ctype") or data.get("type") or "percent").lower().strip()
    if ctype == "fixed":
        ctype = "amount"
    try:
        value = D(data.get("value"))
        min_order_amount = _opt_money(data.get("min_order_amount"))
    except (InvalidOperation, ValueError):
        return api_error("value and min_order_amount must be numeric"), 400
    if not value.is_finite() or (min_order_amount is not None and not min_order_amount.is_finite()):
        return api_error("value and min_order_amount must be numeric"), 400
    try:
        usage_limit = _opt_int(data.get("usage_limit"))
    except (TypeError, ValueError):
        return api_error("usage_limit must be an integer"), 400

    if not code:
        return api_error("code is required"), 400
    if ctype not in COUPON_TYPES:
        return api_error("ctype must be 'percent' or 'amount'"), 400
    if value <= 0:
        return api_error("value must be > 0"), 400
    if ctype == "percent" and value > 100:
        return api_error("percent coupon must be <= 100"), 400
    if min_order_amount is not None and min_order_amount < 0:
        return api_error("min_order_amount must be >= 0"), 400
    if usage_limit is not None and usage_limit < 0:
        return api_error("usage_limit must be >= 0"), 400

    existing = Coupon.query.filter(func.upper(Coupon.code) == code).first()
    if existing:
        return api_error("Coupon code already exists"), 400

    valid_from = _parse_iso8601(data.get("valid_from"))
    expires_at = _parse_iso8601(data.get("expires_at"))
    if data.get("valid_from") and not valid_from:
        return api_error("Invalid datetime format for valid_from"), 400
    if data.get("expires_at") and not expires_at:
        return api_error("Invalid datetime format for expires_at"), 400
    if valid_from and expires_at and expires_at < valid_from:
        return api_error("expires_at must be after valid_from"), 400

    c = Coupon(
        code=code, ctype=ctype, value=value, active=bool(data.get("active", True)),
        min_order_amount=min_order_amount, usage_limit=usage_limit,
        valid_from=valid_from, expires_at=expires_at,
    )
    db.session.add(c)
    db.session.commit()

    return api_ok("Coupon created", c.as_api()), 201

def list_coupons(active: str | None = None):
    q = Coupon.query
    if active is not None:
        q = q.filter(Coupon.active == (active.lower() == "true"))
    return [c.as_api() for c in q.order_by(Coupon.id.desc()).all()]
