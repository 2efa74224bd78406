"""Response schemas for users and reviews"""

from datetime import datetime
from typing import Optional

from app.schemas.base import BaseSchema


class UserRead(BaseSchema):
    """User without the password hash"""
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime


class ReviewRead(BaseSchema):
    id: int
    product_id: int
    user_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    username: Optional[str] = None
    product_name: Optional[str] = None


class ProductRead(BaseSchema):
    id: int
    name: str
    category: str
    description: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    price: float
    stock_count: int
    is_available: bool
    category_id: Optional[int] = None
    created_at: datetime
