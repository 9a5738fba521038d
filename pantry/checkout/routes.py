# pantry/checkout/routes.py
from flask import request, jsonify

from ..services.checkout_service import checkout as run_checkout
from ..utils.api import api_ok
from . import bp

def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r

@bp.post("")
def checkout():
    data = request.get_json(silent=True) or {}
    order = run_checkout(
        data.get("customer"),
        data.get("payment_method"),
        data.get("items"),
        status=data.get("status"),
        order_date=data.get("order_date"),
        order_time=data.get("order_time"),
        total_amount=data.get("total_amount"),
    )
    resp = ok("order created", {"order": order}, status=201)
    resp.headers["X-Order-Id"] = str(order["id"])
    return resp
