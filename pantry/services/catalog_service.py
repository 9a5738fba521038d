# pantry/services/catalog_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from ..errors import NotFoundError, StorageError, ValidationError
from ..extensions import db
from ..model import Product
from ..utils.money import parse_money

log = logging.getLogger(__name__)

DEFAULT_PRODUCTS = [
    {"name": "Organic Health Mix", "price": 299, "image": "product.jpg", "description": "Premium organic health mix"},
    {"name": "Organic Snacks Pack 1", "price": 199, "image": "product 1.jpg", "description": "Delicious organic snacks"},
    {"name": "Organic Snacks Pack 2", "price": 249, "image": "product 2.jpg", "description": "Premium organic snacks"},
]


def _commit(action):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        log.exception("product %s failed", action)
        raise StorageError(f"Failed to {action} product") from e


def _clean_product(data: dict) -> dict:
    name = (data.get("name") or "").strip() if isinstance(data.get("name"), str) else ""
    price = parse_money(data.get("price"))
    errors = {}
    if not name:
        errors["name"] = "required"
    if price is None or price < 0:
        errors["price"] = "required, must be >= 0"
    if errors:
        raise ValidationError("Name and price are required", errors)
    return {
        "name": name,
        "price": float(price),
        "image": data.get("image") or "",
        "description": data.get("description") or "",
    }


def list_products():
    return Product.query.order_by(Product.id).all()


def get_product(product_id: int) -> Product:
    p = db.session.get(Product, product_id)
    if not p:
        raise NotFoundError("Product not found")
    return p


def create_product(data: dict) -> Product:
    p = Product(**_clean_product(data))
    db.session.add(p)
    _commit("create")
    log.info("product %s created: %s", p.id, p.name)
    return p


def update_product(product_id: int, data: dict) -> Product:
    p = get_product(product_id)
    for k, v in _clean_product(data).items():
        setattr(p, k, v)
    _commit("update")
    return p


def delete_product(product_id: int) -> None:
    # orders hold their own copy of the product, nothing else references it
    p = get_product(product_id)
    db.session.delete(p)
    _commit("delete")


def seed_default_products() -> int:
    """Insert the default catalog when the products table is empty."""
    if db.session.query(Product.id).first() is not None:
        return 0
    for row in DEFAULT_PRODUCTS:
        db.session.add(Product(**row))
    _commit("seed")
    log.info("default products inserted")
    return len(DEFAULT_PRODUCTS)
