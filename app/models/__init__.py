# Import all models to register them with SQLModel
from app.models.category import Category
from app.models.product import Product
from app.models.user import User
from app.models.review import Review
from app.models.cart import CartItem

__all__ = [
    "Category",
    "Product",
    "User",
    "Review",
    "CartItem",
]
