# --- model/category.py ---
from ..extensions import db

class Category(db.Model):
    __tablename__ = "category"
    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(120), nullable=False, unique=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    is_deleted = db.Column(db.Boolean, nullable=False, default=False)
    products = db.relationship("Product", backref="category", lazy=True)

    @property
    def available(self) -> bool:
        return bool(self.is_active) and not self.is_deleted
