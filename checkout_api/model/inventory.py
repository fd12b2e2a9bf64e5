# checkout_api/model/inventory.py
from ..extensions import db
from sqlalchemy.sql import func

class InventoryItem(db.Model):
    """One sellable unit: a product, optionally narrowed to a variant."""
    __tablename__ = "inventory"
    __table_args__ = (
        db.UniqueConstraint("product_id", "variant_id", name="uq_inventory_unit"),
    )

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.String(64), db.ForeignKey("product.id"), nullable=False, index=True)
    variant_id = db.Column(db.String(64), nullable=True, index=True)

    sale_price = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    # "none" | "percent" | "amount"
    discount_type = db.Column(db.String(16), nullable=False, default="none")
    discount_value = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    quantity = db.Column(db.Integer, nullable=False, default=0)

    updated_at = db.Column(db.DateTime, onupdate=func.now(), server_default=func.now())
