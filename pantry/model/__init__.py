# ------ pantry/model/__init__.py ------

from .product import Product
from .customer import Customer
from .order import Order, PAYMENT_METHODS, ORDER_STATUSES
from .types import ItemSnapshot

__all__ = [
    "Product",
    "Customer",
    "Order",
    "PAYMENT_METHODS",
    "ORDER_STATUSES",
    "ItemSnapshot",
]
