from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class CartItem(SQLModel, table=True):
    # One row per (user, product); the pair is the primary key
    user_id: int = Field(foreign_key="user.id", primary_key=True)
    product_id: int = Field(foreign_key="product.id", primary_key=True, index=True)

    # Cart Details
    quantity: int = Field(default=1, ge=1)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
