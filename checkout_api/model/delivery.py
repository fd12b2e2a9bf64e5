# checkout_api/model/delivery.py
from ..extensions import db
from sqlalchemy.sql import func

class DeliveryOption(db.Model):
    __tablename__ = "delivery_option"

    id = db.Column(db.String(64), primary_key=True)      # e.g. "standard"
    label = db.Column(db.String(120), nullable=False)
    amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    # eligibility; empty/None means unrestricted
    regions = db.Column(db.String(255), nullable=True)   # comma separated, e.g. "KH,TH"
    min_weight_grams = db.Column(db.Integer, nullable=True)
    max_weight_grams = db.Column(db.Integer, nullable=True)

    is_default = db.Column(db.Boolean, nullable=False, default=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, server_default=func.now())
