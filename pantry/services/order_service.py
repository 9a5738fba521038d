# pantry/services/order_service.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, time

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from ..errors import NotFoundError, StorageError, ValidationError
from ..extensions import db
from ..model import Customer, Order, ORDER_STATUSES, PAYMENT_METHODS
from ..utils.money import D, Money, parse_money, round_money

log = logging.getLogger(__name__)


# ---- validation helpers ----------------------------------------------------

def _normalize_choice(value, allowed, field):
    v = (value or "").strip().lower() if isinstance(value, str) else value
    if v not in allowed:
        raise ValidationError(
            f"{field} must be one of: {', '.join(allowed)}",
            {field: "invalid"},
        )
    return v

def normalize_payment_method(value) -> str:
    if not value:
        raise ValidationError("payment_method is required", {"payment_method": "required"})
    return _normalize_choice(value, PAYMENT_METHODS, "payment_method")

def normalize_status(value) -> str:
    return _normalize_choice(value, ORDER_STATUSES, "status")

def _first_present(row: Mapping, *keys):
    for k in keys:
        if row.get(k) not in (None, ""):
            return row[k]
    return None

def _valid_product_id(v) -> bool:
    if isinstance(v, bool):
        return False
    if isinstance(v, int):
        return True
    return isinstance(v, str) and bool(v.strip())

def _parse_quantity(v):
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    return None

def build_item_snapshot(items) -> list[dict]:
    """Validate cart lines and return them in snapshot shape.

    Accepts the frontend cart shape too (``id``/``price`` instead of
    ``product_id``/``unit_price``); extra keys such as ``image`` are dropped.
    """
    if not isinstance(items, (list, tuple)) or not items:
        raise ValidationError("items must be a non-empty list", {"items": "required"})

    snapshot = []
    problems = {}
    for idx, row in enumerate(items):
        if not isinstance(row, Mapping):
            problems[str(idx)] = "must be an object"
            continue

        product_id = _first_present(row, "product_id", "productId", "id")
        name = _first_present(row, "name")
        unit_price = parse_money(_first_present(row, "unit_price", "unitPrice", "price"))
        quantity = _parse_quantity(row.get("quantity"))

        bad = []
        if not _valid_product_id(product_id):
            bad.append("product_id")
        if not isinstance(name, str) or not name.strip():
            bad.append("name")
        # prices are whole cents so the snapshot sums to the stored total exactly
        if unit_price is None or unit_price < 0 or unit_price != round_money(unit_price):
            bad.append("unit_price")
        if quantity is None or quantity < 1:
            bad.append("quantity")
        if bad:
            problems[str(idx)] = f"invalid {', '.join(bad)}"
            continue

        snapshot.append({
            "product_id": product_id.strip() if isinstance(product_id, str) else product_id,
            "name": name.strip(),
            "unit_price": float(unit_price),
            "quantity": quantity,
        })

    if problems:
        raise ValidationError("Invalid order items", problems)
    return snapshot

def snapshot_total(snapshot) -> Money:
    total = D(0)
    for it in snapshot:
        total += D(it["unit_price"]) * it["quantity"]
    return round_money(total)

def _parse_order_date(v) -> date:
    if v is None or v == "":
        return date.today()
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    try:
        return date.fromisoformat(str(v).strip())
    except ValueError:
        raise ValidationError("order_date must be YYYY-MM-DD", {"order_date": "invalid"})

def _parse_order_time(v) -> time:
    if v is None or v == "":
        return datetime.now().time().replace(microsecond=0)
    if isinstance(v, time):
        return v
    try:
        return time.fromisoformat(str(v).strip())
    except ValueError:
        raise ValidationError("order_time must be HH:MM[:SS]", {"order_time": "invalid"})

def _parse_customer_id(v):
    if v is None or v == "":
        return None
    try:
        cid = int(v)
    except (TypeError, ValueError):
        raise ValidationError("customer_id must be an integer", {"customer_id": "invalid"})
    if not db.session.get(Customer, cid):
        raise NotFoundError("Customer not found")
    return cid


# ---- operations ------------------------------------------------------------

def create_order(customer_id, payment_method, items, status=None, *,
                 order_date=None, order_time=None, total_amount=None,
                 commit=True) -> int:
    """Persist a checkout as a new order and return its id.

    The stored total is always recomputed from the item snapshot. A
    ``total_amount`` sent by the client is only compared against it.
    """
    snapshot = build_item_snapshot(items)
    method = normalize_payment_method(payment_method)
    status = normalize_status(status) if status else "pending"
    odate = _parse_order_date(order_date)
    otime = _parse_order_time(order_time)
    cid = _parse_customer_id(customer_id)

    total = snapshot_total(snapshot)
    if total_amount not in (None, ""):
        claimed = parse_money(total_amount)
        if claimed is None or round_money(claimed) != total:
            log.warning("client total %r differs from computed %s; using computed", total_amount, total)

    order = Order(
        customer_id=cid,
        order_date=odate,
        order_time=otime,
        payment_method=method,
        total_amount=total,
        status=status,
        items=snapshot,
    )
    try:
        db.session.add(order)
        db.session.flush()
        order_id = order.id
        if commit:
            db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("order insert failed")
        raise StorageError("Failed to create order") from e

    log.info("order %s created: customer=%s total=%s method=%s", order_id, cid, total, method)
    return order_id


def update_order_status(order_id: int, status=None, payment_method=None) -> None:
    values = {}
    if status:
        values["status"] = normalize_status(status)
    if payment_method:
        values["payment_method"] = normalize_payment_method(payment_method)
    if not values:
        raise ValidationError("No fields to update")

    try:
        res = db.session.execute(update(Order).where(Order.id == order_id).values(**values))
        if res.rowcount == 0:
            db.session.rollback()
            raise NotFoundError("Order not found")
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("order %s update failed", order_id)
        raise StorageError("Failed to update order") from e
    log.info("order %s updated: %s", order_id, values)


def _joined_query():
    return (db.session.query(Order, Customer)
            .outerjoin(Customer, Order.customer_id == Customer.id))


def list_orders() -> list[dict]:
    """All orders with their customer's contact fields, newest first."""
    rows = (_joined_query()
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all())
    return [o.as_api(c) for o, c in rows]


def get_order(order_id: int) -> dict:
    row = _joined_query().filter(Order.id == order_id).first()
    if not row:
        raise NotFoundError("Order not found")
    o, c = row
    return o.as_api(c)


def delete_order(order_id: int) -> None:
    o = db.session.get(Order, order_id)
    if not o:
        raise NotFoundError("Order not found")
    try:
        db.session.delete(o)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("order %s delete failed", order_id)
        raise StorageError("Failed to delete order") from e
    log.info("order %s deleted", order_id)
