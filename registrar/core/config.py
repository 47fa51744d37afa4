from typing import Final, List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration settings with automatic environment variable injection"""

    PROJECT_NAME: str = "Registrar"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URI: str = "sqlite+aiosqlite:///./registrar.db"
    SQL_ECHO: bool = False

    # Password hashing cost; 4 is the bcrypt minimum and only meant for tests
    BCRYPT_ROUNDS: int = 12

    # Signup field rules
    EMAIL_MIN_LENGTH: int = 4
    EMAIL_MAX_LENGTH: int = 30
    PASSWORD_MIN_LENGTH: int = 8
    PASSWORD_MAX_LENGTH: int = 255

    # Serve GET /users; off by default so /users only accepts POST
    USERS_INDEX_ENABLED: bool = False

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings: Final[Settings] = Settings()
