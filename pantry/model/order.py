from ..extensions import db
from ..utils.money import to_float
from .types import ItemSnapshot
from sqlalchemy.sql import func

PAYMENT_METHODS = ("cash", "card", "upi")
ORDER_STATUSES = ("pending", "completed", "cancelled")

class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    customer_id = db.Column(
        db.Integer,
        db.ForeignKey("customers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    order_date = db.Column(db.Date, nullable=False, index=True)
    order_time = db.Column(db.Time, nullable=False)
    payment_method = db.Column(db.String(20), nullable=False)
    total_amount = db.Column(db.Numeric(12, 2), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="pending", index=True)

    # frozen copy of the cart at checkout; never updated afterwards
    items = db.Column(ItemSnapshot, nullable=False)

    created_at = db.Column(db.DateTime, server_default=func.now(), index=True)

    customer = db.relationship("Customer", back_populates="orders")

    def as_api(self, customer=None):
        """Order fields plus the joined customer columns (None when unset or deleted)."""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "order_date": self.order_date.isoformat() if self.order_date else None,
            "order_time": self.order_time.strftime("%H:%M:%S") if self.order_time else None,
            "payment_method": self.payment_method,
            "total_amount": to_float(self.total_amount),
            "status": self.status,
            "items": self.items or [],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "customer_name": customer.name if customer else None,
            "mobile": customer.mobile if customer else None,
            "email": customer.email if customer else None,
            "address": customer.address if customer else None,
        }
