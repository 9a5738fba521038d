# pantry/model/product.py
from ..extensions import db
from sqlalchemy.sql import func

class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    price = db.Column(db.Float, nullable=False, default=0.0)
    image = db.Column(db.String(512), default="")   # relative path served by the frontend
    description = db.Column(db.Text, default="")
    created_at = db.Column(db.DateTime, server_default=func.now())

    def as_api(self):
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "image": self.image or "",
            "description": self.description or "",
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
