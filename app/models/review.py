from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class Review(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # References
    product_id: int = Field(foreign_key="product.id", index=True)
    user_id: int = Field(foreign_key="user.id", index=True)

    # Review Content
    rating: int = Field(ge=1, le=5)  # 1-5 stars
    comment: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
