# pantry/services/checkout_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError, ValidationError
from ..extensions import db
from .customer_service import upsert_customer
from .order_service import create_order, get_order

log = logging.getLogger(__name__)


def checkout(customer: dict, payment_method, items, *, status=None,
             order_date=None, order_time=None, total_amount=None) -> dict:
    """Upsert the customer and record the order in one transaction."""
    if not isinstance(customer, dict):
        raise ValidationError("customer is required", {"customer": "required"})
    try:
        customer_id = upsert_customer(
            customer.get("name"), customer.get("mobile"),
            customer.get("email"), customer.get("address"),
            commit=False,
        )
        order_id = create_order(
            customer_id, payment_method, items, status,
            order_date=order_date, order_time=order_time,
            total_amount=total_amount, commit=False,
        )
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("checkout commit failed")
        raise StorageError("Checkout failed") from e
    except Exception:
        db.session.rollback()
        raise

    log.info("checkout complete: customer=%s order=%s", customer_id, order_id)
    return get_order(order_id)
