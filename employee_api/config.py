# employee_api/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str
    MONGODB_DB_NAME: str
    MONGODB_COLLECTION_NAME: str
    MONGODB_PING_TIMEOUT: float = 10.0

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False

    # API settings
    API_PREFIX: str = "/api"

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
