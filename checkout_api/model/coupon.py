# --- checkout_api/model/coupon.py ---

from ..extensions import db
from sqlalchemy.sql import func

class Coupon(db.Model):
    __tablename__ = "coupon"

    id = db.Column(db.Integer, primary_key=True)
    # stored upper-case; lookups normalize the same way
    code = db.Column(db.String(64), unique=True, nullable=False, index=True)

    # "percent" or "amount"
    ctype = db.Column(db.String(16), nullable=False, default="percent")
    value = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    active = db.Column(db.Boolean, default=True, index=True)

    # Optional constraints
    min_order_amount = db.Column(db.Numeric(12, 2), nullable=True)
    usage_limit = db.Column(db.Integer, nullable=True)
    valid_from = db.Column(db.DateTime, nullable=True)     # naive UTC
    expires_at = db.Column(db.DateTime, nullable=True)     # naive UTC

    created_at = db.Column(db.DateTime, server_default=func.now())
    updated_at = db.Column(db.DateTime, onupdate=func.now(), server_default=func.now())

    redemptions = db.relationship("CouponRedemption", back_populates="coupon", lazy="dynamic")

    def as_api(self):
        return {
            "id": self.id,
            "code": self.code,
            "ctype": self.ctype,
            "value": float(self.value or 0),
            "active": self.active,
            "min_order_amount": float(self.min_order_amount) if self.min_order_amount is not None else None,
            "usage_limit": self.usage_limit,
            "valid_from": self.valid_from.isoformat() if self.valid_from else None,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        }

class CouponRedemption(db.Model):
    """Usage counter rows; written at order commit, only counted here."""
    __tablename__ = "coupon_redemption"
    id = db.Column(db.Integer, primary_key=True)
    coupon_id = db.Column(db.Integer, db.ForeignKey("coupon.id", ondelete="CASCADE"), index=True, nullable=False)
    order_ref = db.Column(db.String(64), nullable=True)
    created_at = db.Column(db.DateTime, server_default=func.now())
    coupon = db.relationship("Coupon", back_populates="redemptions")
