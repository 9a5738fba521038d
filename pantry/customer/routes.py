# pantry/customer/routes.py
from flask import request, jsonify

from ..services import customer_service
from ..utils.api import api_ok
from . import bp

def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r

def _fields(data):
    return (data.get("name"), data.get("mobile"), data.get("email"), data.get("address"))

@bp.get("")
def list_customers():
    return ok("customers", {"items": [c.as_api() for c in customer_service.list_customers()]})

@bp.get("/<int:customer_id>")
def get_customer(customer_id: int):
    return ok("customer", customer_service.get_customer(customer_id).as_api())

@bp.post("")
def upsert_customer():
    """Create the customer, or update the one that already has this mobile."""
    data = request.get_json(silent=True) or {}
    customer_id = customer_service.upsert_customer(*_fields(data))
    return ok("Customer saved", customer_service.get_customer(customer_id).as_api())

@bp.put("/<int:customer_id>")
def update_customer(customer_id: int):
    data = request.get_json(silent=True) or {}
    c = customer_service.update_customer(customer_id, *_fields(data))
    return ok("Customer updated successfully", c.as_api())

@bp.delete("/<int:customer_id>")
def delete_customer(customer_id: int):
    customer_service.delete_customer(customer_id)
    return ok("Customer deleted successfully", {"id": customer_id})
