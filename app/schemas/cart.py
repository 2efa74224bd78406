"""
Plain records exchanged between the cart store, the cart service and the routers.

The store converts ORM rows into these before returning, so nothing above
app.db sees a SQLModel instance.
"""

from typing import List, Optional

from app.schemas.base import BaseSchema


class ProductSnapshot(BaseSchema):
    """Current product row as seen by the cart"""
    id: int
    name: str
    price: float
    image_url: Optional[str] = None
    stock_count: int
    is_available: bool


class UserRecord(BaseSchema):
    id: int
    username: str
    email: str


class CartLine(BaseSchema):
    """One cart row joined with its product snapshot"""
    user_id: int
    product_id: int
    quantity: int
    product: ProductSnapshot


class Cart(BaseSchema):
    user_id: int
    items: List[CartLine]
    total_items: int
    total_price: float
