from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class Product(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Basic Info
    name: str = Field(index=True)
    category: str
    description: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None

    # Pricing
    price: float = Field(ge=0)

    # Inventory
    stock_count: int = Field(default=0, ge=0)
    is_available: bool = Field(default=True)

    # Catalog
    category_id: Optional[int] = Field(default=None, foreign_key="category.id", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
