from .user import User
from .category import Category
from .product import Product
from .order import Order, OrderItem

__all__ = [
    "User",
    "Category",
    "Product",
    "Order",
    "OrderItem",
]
