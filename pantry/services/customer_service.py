# pantry/services/customer_service.py
import logging

from sqlalchemy import func, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import NotFoundError, StorageError, ValidationError
from ..extensions import db
from ..model import Customer

log = logging.getLogger(__name__)

CUSTOMER_FIELDS = ("name", "mobile", "email", "address")

# dialects with INSERT ... ON CONFLICT DO UPDATE ... RETURNING
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def clean_customer_fields(name, mobile, email, address) -> dict:
    values = {
        "name": name,
        "mobile": mobile,
        "email": email,
        "address": address,
    }
    values = {k: (v.strip() if isinstance(v, str) else v) for k, v in values.items()}
    missing = [k for k in CUSTOMER_FIELDS if not values[k] or not isinstance(values[k], str)]
    if missing:
        raise ValidationError("All fields are required", {f: "required" for f in missing})
    return values


def _upsert_on_conflict(insert, values: dict) -> int:
    stmt = insert(Customer).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Customer.mobile],
        set_={
            "name": stmt.excluded.name,
            "email": stmt.excluded.email,
            "address": stmt.excluded.address,
            "updated_at": func.now(),
        },
    ).returning(Customer.id)
    return db.session.execute(stmt).scalar_one()


def _upsert_conflict_then_update(values: dict) -> int:
    try:
        with db.session.begin_nested():
            c = Customer(**values)
            db.session.add(c)
        return c.id
    except IntegrityError:
        log.debug("mobile %s already registered, updating", values["mobile"])

    db.session.execute(
        update(Customer)
        .where(Customer.mobile == values["mobile"])
        .values(name=values["name"], email=values["email"],
                address=values["address"], updated_at=func.now())
    )
    return db.session.query(Customer.id).filter(Customer.mobile == values["mobile"]).scalar()


def upsert_customer(name, mobile, email, address, *, commit=True) -> int:
    """Create or update the customer keyed by ``mobile`` and return its id.

    A single atomic statement where the dialect supports it, otherwise an
    insert that falls back to an update when the unique index on ``mobile``
    rejects it. Never a lookup followed by a separate insert.
    """
    values = clean_customer_fields(name, mobile, email, address)
    insert = _UPSERT_INSERTS.get(db.engine.dialect.name)
    try:
        if insert is not None:
            customer_id = _upsert_on_conflict(insert, values)
        else:
            customer_id = _upsert_conflict_then_update(values)
        if commit:
            db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("customer upsert failed for mobile %s", values["mobile"])
        raise StorageError("Failed to save customer") from e

    log.info("customer %s upserted (mobile=%s)", customer_id, values["mobile"])
    return customer_id


def list_customers():
    return Customer.query.order_by(Customer.created_at.desc(), Customer.id.desc()).all()


def get_customer(customer_id: int) -> Customer:
    c = db.session.get(Customer, customer_id)
    if not c:
        raise NotFoundError("Customer not found")
    return c


def update_customer(customer_id: int, name, mobile, email, address) -> Customer:
    values = clean_customer_fields(name, mobile, email, address)
    c = get_customer(customer_id)
    for k, v in values.items():
        setattr(c, k, v)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise ValidationError("Mobile already registered to another customer",
                              {"mobile": "duplicate"}) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("customer %s update failed", customer_id)
        raise StorageError("Failed to update customer") from e
    log.info("customer %s updated", customer_id)
    return c


def delete_customer(customer_id: int) -> None:
    c = get_customer(customer_id)
    try:
        # orders keep their rows; customer_id is nulled by the relationship
        db.session.delete(c)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("customer %s delete failed", customer_id)
        raise StorageError("Failed to delete customer") from e
    log.info("customer %s deleted", customer_id)
