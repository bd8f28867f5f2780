from typing import List

from pydantic.v1 import BaseSettings


class Settings(BaseSettings):

    DATABASE_URL: str
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440
    PASSWORD_HASH_ITERATIONS: int = 260_000

    FEED_DEFAULT_LIMIT: int = 10
    FEED_MAX_LIMIT: int = 50

    CORS_ORIGINS: str = "http://localhost:5173"
    COOKIE_SECURE: bool = False
    DEBUG: bool = False

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings object, imported everywhere
settings = Settings()
