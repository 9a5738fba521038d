# pantry/product/routes.py
from flask import request, jsonify

from ..services import catalog_service
from ..utils.api import api_ok
from . import bp

def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r

@bp.get("")
def list_products():
    return ok("products", {"items": [p.as_api() for p in catalog_service.list_products()]})

@bp.get("/<int:product_id>")
def get_product(product_id: int):
    return ok("product", catalog_service.get_product(product_id).as_api())

@bp.post("")
def create_product():
    data = request.get_json(silent=True) or {}
    p = catalog_service.create_product(data)
    return ok("Product created", p.as_api(), status=201)

@bp.put("/<int:product_id>")
def update_product(product_id: int):
    data = request.get_json(silent=True) or {}
    p = catalog_service.update_product(product_id, data)
    return ok("Product updated successfully", p.as_api())

@bp.delete("/<int:product_id>")
def delete_product(product_id: int):
    catalog_service.delete_product(product_id)
    return ok("Product deleted successfully", {"id": product_id})
