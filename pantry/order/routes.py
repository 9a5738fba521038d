# pantry/order/routes.py
from flask import request, jsonify

from ..services import order_service
from ..utils.api import api_ok
from . import bp

def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r

@bp.get("")
def list_orders():
    return ok("orders", {"items": order_service.list_orders()})

@bp.get("/<int:order_id>")
def get_order(order_id: int):
    return ok("order", order_service.get_order(order_id))

@bp.post("")
def create_order():
    """
    Body:
      - customer_id (optional)
      - payment_method: cash|card|upi
      - items: [{product_id, name, unit_price, quantity}, ...]
      - status, order_date (YYYY-MM-DD), order_time (HH:MM:SS), total_amount (optional)
    """
    data = request.get_json(silent=True) or {}
    order_id = order_service.create_order(
        data.get("customer_id"),
        data.get("payment_method"),
        data.get("items"),
        data.get("status"),
        order_date=data.get("order_date"),
        order_time=data.get("order_time"),
        total_amount=data.get("total_amount"),
    )
    resp = ok("Order created successfully", order_service.get_order(order_id), status=201)
    resp.headers["X-Order-Id"] = str(order_id)
    return resp

@bp.put("/<int:order_id>")
def update_order(order_id: int):
    data = request.get_json(silent=True) or {}
    order_service.update_order_status(order_id, data.get("status"), data.get("payment_method"))
    return ok("Order updated successfully", order_service.get_order(order_id))

@bp.delete("/<int:order_id>")
def delete_order(order_id: int):
    order_service.delete_order(order_id)
    return ok("Order deleted successfully", {"id": order_id})
