# pantry/model/customer.py
from ..extensions import db
from sqlalchemy.sql import func

class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(180), nullable=False)
    mobile = db.Column(db.String(32), nullable=False, unique=True, index=True)  # natural key for upserts
    email = db.Column(db.String(255), nullable=False)
    address = db.Column(db.Text, nullable=False)

    created_at = db.Column(db.DateTime, server_default=func.now(), index=True)
    updated_at = db.Column(db.DateTime, server_default=func.now(), onupdate=func.now())

    orders = db.relationship("Order", back_populates="customer")

    def as_api(self):
        return {
            "id": self.id,
            "name": self.name,
            "mobile": self.mobile,
            "email": self.email,
            "address": self.address,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
