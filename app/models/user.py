from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Basic Info
    username: str = Field(unique=True, index=True)
    email: str = Field(unique=True, index=True)
    password_hash: str

    # Profile
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
