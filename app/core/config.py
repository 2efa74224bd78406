from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    PROJECT_NAME: str = "TechMarket API"
    API_V1_STR: str = "/api/v1"
    DATABASE_URL: str = "sqlite:///./techmarket.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Users
    MIN_PASSWORD_LENGTH: int = 8

    @field_validator("DATABASE_URL")
    @classmethod
    def fix_postgres_scheme(cls, value: str) -> str:
        # SQLAlchemy only understands the postgresql:// scheme
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql://", 1)
        return value

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
