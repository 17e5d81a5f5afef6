from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Loyalty Cards"
    APP_PORT: int = 9210
    DEBUG: bool = False

    # Document store
    MONGODB_URI: str
    MONGODB_DB: str = "loyalty-app"
    MONGODB_COLLECTION: str = "clients"

    # Loyalty
    REWARD_THRESHOLD: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    LOGS_PATH: str = ""

    @field_validator("MONGODB_URI")
    @classmethod
    def uri_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("MONGODB_URI must be set to the document store connection string")
        return value

    @field_validator("REWARD_THRESHOLD")
    @classmethod
    def threshold_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("REWARD_THRESHOLD must be at least 1")
        return value

    class Config:
        env_file = ".env"
        extra = "ignore"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
